"""
Quality service for post-processing generated ideas.
Sanitizes free text, re-asserts length and range bounds, and flags near-duplicate ideas.
"""

import math
import re
from typing import Any, Dict, List, Optional

from sidehustle.utils.logger import logger
from sidehustle.utils.constants import (
    ALT_SUFFIX,
    BANNED_PATTERNS,
    EMOJI_PATTERN,
    FEASIBILITY_MAX,
    INSIGHT_ITEM_MAX,
    INSIGHT_LIST_COUNT,
    KPI_MAX,
    MAX_SENTENCES,
    MAX_TOOLS,
    MONEY_FIELDS,
    PRODUCT_SECTION_INDEX,
    SCORE_MAX,
    SCORE_MIN,
    SECTION_BODY_MAX,
    SECTION_COUNT,
    SIMILARITY_THRESHOLD,
    STEP_COUNT,
    STEP_MAX,
    TAGLINE_MAX,
    TITLE_MAX,
    TOOL_NAME_MAX,
    TOOL_USE_MAX,
)

EMOJI_RE = re.compile(EMOJI_PATTERN)
WHITESPACE_RE = re.compile(r"\s+")
BANNED_RES = [re.compile(pattern, re.IGNORECASE) for pattern in BANNED_PATTERNS]
SENTENCE_BREAK_RE = re.compile(r"(?<=\.)\s+")
TOKEN_SPLIT_RE = re.compile(r"\W+")


def _as_text(value: Any) -> str:
    if value is None or value is False:
        return ""
    return str(value)


def _to_number(value: Any) -> Optional[float]:
    """Coerce numbers, booleans and numeric strings; anything else is None."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        try:
            number = float(stripped)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def _is_finite_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


class QualityService:
    """Service for output-quality operations on generated ideas."""

    def sanitize_text(self, text: str) -> str:
        """
        Clean model text for display.

        Strips emoji, collapses whitespace, removes hype phrases and keeps
        at most three sentences.

        Args:
            text: Raw text

        Returns:
            Sanitized text
        """
        if not text:
            return text
        text = EMOJI_RE.sub("", text)
        text = WHITESPACE_RE.sub(" ", text).strip()
        for banned in BANNED_RES:
            text = banned.sub("", text)
        text = WHITESPACE_RE.sub(" ", text).strip()
        sentences = SENTENCE_BREAK_RE.split(text)[:MAX_SENTENCES]
        return " ".join(sentences).strip()

    def clean(self, value: Any, max_length: int) -> str:
        return self.sanitize_text(_as_text(value))[:max_length]

    def clamp_score(self, value: Any) -> int:
        """Force a score into [1, 10]; non-numeric and zero values become 1."""
        number = _to_number(value) or SCORE_MIN
        return int(round(min(SCORE_MAX, max(SCORE_MIN, number))))

    def clamp_idea(self, idea: Any) -> Dict[str, Any]:
        """
        Re-assert the length caps and numeric bounds on a single idea.

        Args:
            idea: Idea as decoded from the model output

        Returns:
            The clamped idea
        """
        if not isinstance(idea, dict):
            idea = {}

        idea["title"] = self.clean(idea.get("title"), TITLE_MAX)
        idea["tagline"] = self.clean(idea.get("tagline"), TAGLINE_MAX)
        idea["difficulty"] = self.clamp_score(idea.get("difficulty"))
        idea["worthiness"] = self.clamp_score(idea.get("worthiness"))

        sections = idea.get("sections")
        if isinstance(sections, list):
            idea["sections"] = [self._clamp_section(section) for section in sections[:SECTION_COUNT]]

        steps = idea.get("firstThreeSteps")
        if isinstance(steps, list):
            idea["firstThreeSteps"] = [self.clean(step, STEP_MAX) for step in steps[:STEP_COUNT]]

        insights = idea.get("insights")
        if isinstance(insights, dict):
            self._clamp_insights(insights)

        return idea

    def _clamp_section(self, section: Any) -> Dict[str, str]:
        if not isinstance(section, dict):
            section = {}
        return {
            "heading": self.sanitize_text(_as_text(section.get("heading"))),
            "body": self.clean(section.get("body"), SECTION_BODY_MAX),
        }

    def _clamp_insights(self, insights: Dict[str, Any]):
        insights["feasibility"] = self.clean(insights.get("feasibility"), FEASIBILITY_MAX)

        numbers = insights.get("numbers")
        if isinstance(numbers, dict):
            for key in MONEY_FIELDS:
                if _is_finite_number(numbers.get(key)):
                    numbers[key] = round(float(numbers[key]), 2)
            if _is_finite_number(numbers.get("breakEvenCustomers")):
                numbers["breakEvenCustomers"] = max(0, math.floor(numbers["breakEvenCustomers"] + 0.5))

        for key in ("validation", "risks"):
            if isinstance(insights.get(key), list):
                insights[key] = [
                    self.clean(item, INSIGHT_ITEM_MAX) for item in insights[key][:INSIGHT_LIST_COUNT]
                ]

        tooling = insights.get("tooling")
        if isinstance(tooling, list):
            insights["tooling"] = [self._clamp_tool(tool) for tool in tooling[:MAX_TOOLS]]

        kpis = insights.get("kpis")
        if isinstance(kpis, dict):
            for key, max_length in KPI_MAX.items():
                kpis[key] = self.clean(kpis.get(key), max_length)

    def _clamp_tool(self, tool: Any) -> Dict[str, Any]:
        if not isinstance(tool, dict):
            tool = {}
        est_monthly = tool.get("estMonthly")
        return {
            "name": self.clean(tool.get("name"), TOOL_NAME_MAX),
            "use": self.clean(tool.get("use"), TOOL_USE_MAX),
            "estMonthly": round(float(est_monthly), 2) if _is_finite_number(est_monthly) else 0,
        }

    def is_too_similar(self, first: str, second: str) -> bool:
        """
        Token-set overlap check relative to the smaller set.

        Args:
            first: Text to compare
            second: Text to compare

        Returns:
            True when more than 60% of the smaller token set is shared
        """
        tokens_first = {token for token in TOKEN_SPLIT_RE.split(_as_text(first).lower()) if token}
        tokens_second = {token for token in TOKEN_SPLIT_RE.split(_as_text(second).lower()) if token}
        overlap = len(tokens_first & tokens_second)
        denominator = max(1, min(len(tokens_first), len(tokens_second)))
        return overlap / denominator > SIMILARITY_THRESHOLD

    def ensure_distinct(self, ideas: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Mark near-duplicate ideas by renaming the later one.
        Ideas are never dropped.

        Args:
            ideas: Clamped ideas

        Returns:
            The same list, with colliding titles suffixed
        """
        for i in range(len(ideas)):
            for j in range(i + 1, len(ideas)):
                if self.is_too_similar(ideas[i].get("title"), ideas[j].get("title")) or self.is_too_similar(
                    self._product_body(ideas[i]), self._product_body(ideas[j])
                ):
                    title = _as_text(ideas[j].get("title")) or "Idea"
                    ideas[j]["title"] = title[: TITLE_MAX - len(ALT_SUFFIX)] + ALT_SUFFIX
                    logger.info(f"Idea {j + 1} overlaps idea {i + 1}; renamed to '{ideas[j]['title']}'")
        return ideas

    def _product_body(self, idea: Dict[str, Any]) -> str:
        sections = idea.get("sections")
        if isinstance(sections, list) and len(sections) > PRODUCT_SECTION_INDEX:
            section = sections[PRODUCT_SECTION_INDEX]
            if isinstance(section, dict):
                return _as_text(section.get("body"))
        return ""

    def process(self, ideas: List[Any]) -> List[Dict[str, Any]]:
        """Clamp every idea, then flag duplicates."""
        return self.ensure_distinct([self.clamp_idea(idea) for idea in ideas])

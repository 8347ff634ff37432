"""
Prompt assembly for idea generation.
Templates are stored as text files under sidehustle/prompts.
"""

import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from sidehustle.models.profile import UserProfile
from sidehustle.utils.constants import EU_LOCATION_TOKENS, SECTION_HEADINGS

PROMPTS_DIR = Path(__file__).parent / "prompts"

EU_LOCATION_PATTERN = re.compile(
    r"\b(" + "|".join(EU_LOCATION_TOKENS) + r")\b", re.IGNORECASE
)

EU_LOCALE_HINT = "Use euros (€) and EU/GDPR-friendly examples where relevant."
DEFAULT_LOCALE_HINT = "Use local currency if obvious; otherwise USD."
EU_LOCALE_RULE = "prefer € and EU-friendly examples"
DEFAULT_LOCALE_RULE = "use local currency if obvious; else USD"


@lru_cache(maxsize=None)
def load_prompt(name: str) -> str:
    """Read a prompt template from the prompts directory."""
    with open(PROMPTS_DIR / f"{name}.txt", "r", encoding="utf-8") as prompt_file:
        return prompt_file.read().strip()


def is_eu_location(location) -> bool:
    """Whether the location mentions an EU country name or code."""
    return bool(EU_LOCATION_PATTERN.search(str(location)))


def build_quality_rubric(is_eu: bool) -> str:
    locale_rule = EU_LOCALE_RULE if is_eu else DEFAULT_LOCALE_RULE
    return load_prompt("quality_rubric").format(locale_rule=locale_rule)


def build_idea_request(profile: UserProfile, is_eu: bool) -> str:
    """
    Build the user prompt that embeds the profile and describes the task.

    Args:
        profile: Validated user profile
        is_eu: Whether the EU locale hint applies

    Returns:
        Prompt text
    """
    headings = "\n".join(
        f"{position}) {heading}" for position, heading in enumerate(SECTION_HEADINGS, start=1)
    )
    return load_prompt("idea_request").format(
        locale_hint=EU_LOCALE_HINT if is_eu else DEFAULT_LOCALE_HINT,
        profile_json=json.dumps(profile.model_dump(), indent=2, ensure_ascii=False),
        headings=headings,
    )


def build_messages(profile: UserProfile) -> List[Dict[str, str]]:
    """
    Assemble the system, rubric and request messages for one generation call.

    Args:
        profile: Validated user profile

    Returns:
        List of role-tagged messages
    """
    is_eu = is_eu_location(profile.location)
    return [
        {"role": "system", "content": load_prompt("system")},
        {"role": "user", "content": build_quality_rubric(is_eu)},
        {"role": "user", "content": build_idea_request(profile, is_eu)},
    ]

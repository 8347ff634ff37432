"""
JSON schema contract for the generated idea set.
"""

from typing import Any, Dict

from sidehustle.utils.constants import (
    FEASIBILITY_MAX,
    IDEA_COUNT,
    INSIGHT_ITEM_MAX,
    INSIGHT_LIST_COUNT,
    KPI_MAX,
    MAX_TOOLS,
    MIN_TOOLS,
    SCHEMA_NAME,
    SCORE_MAX,
    SCORE_MIN,
    SECTION_BODY_MAX,
    SECTION_COUNT,
    STEP_COUNT,
    STEP_MAX,
    TAGLINE_MAX,
    TITLE_MAX,
    TOOL_NAME_MAX,
    TOOL_USE_MAX,
)


def _string_list(count: int, max_length: int) -> Dict[str, Any]:
    return {
        "type": "array",
        "minItems": count,
        "maxItems": count,
        "items": {"type": "string", "maxLength": max_length},
    }


def _closed_object(properties: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "type": "object",
        "additionalProperties": False,
        "required": list(properties),
        "properties": properties,
    }


SECTION_SCHEMA = _closed_object({
    "heading": {"type": "string"},
    "body": {"type": "string", "maxLength": SECTION_BODY_MAX},
})

NUMBERS_SCHEMA = _closed_object({
    "price": {"type": "number"},
    "cogs": {"type": "number"},
    "marginPct": {"type": "number"},
    "breakEvenCustomers": {"type": "integer"},
    "startupCost": {"type": "number"},
    "monthlyCost": {"type": "number"},
})

TOOL_SCHEMA = _closed_object({
    "name": {"type": "string", "maxLength": TOOL_NAME_MAX},
    "use": {"type": "string", "maxLength": TOOL_USE_MAX},
    "estMonthly": {"type": "number"},
})

KPIS_SCHEMA = _closed_object({
    key: {"type": "string", "maxLength": max_length} for key, max_length in KPI_MAX.items()
})

INSIGHTS_SCHEMA = _closed_object({
    "feasibility": {"type": "string", "maxLength": FEASIBILITY_MAX},
    "numbers": NUMBERS_SCHEMA,
    "validation": _string_list(INSIGHT_LIST_COUNT, INSIGHT_ITEM_MAX),
    "risks": _string_list(INSIGHT_LIST_COUNT, INSIGHT_ITEM_MAX),
    "tooling": {
        "type": "array",
        "minItems": MIN_TOOLS,
        "maxItems": MAX_TOOLS,
        "items": TOOL_SCHEMA,
    },
    "kpis": KPIS_SCHEMA,
})

IDEA_SCHEMA = _closed_object({
    "title": {"type": "string", "maxLength": TITLE_MAX},
    "tagline": {"type": "string", "maxLength": TAGLINE_MAX},
    "sections": {
        "type": "array",
        "minItems": SECTION_COUNT,
        "maxItems": SECTION_COUNT,
        "items": SECTION_SCHEMA,
    },
    "difficulty": {"type": "integer", "minimum": SCORE_MIN, "maximum": SCORE_MAX},
    "worthiness": {"type": "integer", "minimum": SCORE_MIN, "maximum": SCORE_MAX},
    "firstThreeSteps": _string_list(STEP_COUNT, STEP_MAX),
    "insights": INSIGHTS_SCHEMA,
})

IDEA_SET_SCHEMA = _closed_object({
    "ideas": {
        "type": "array",
        "minItems": IDEA_COUNT,
        "maxItems": IDEA_COUNT,
        "items": IDEA_SCHEMA,
    },
})


def build_response_format(strict: bool = True) -> Dict[str, Any]:
    """
    Build the `text.format` block for the Responses API.

    Args:
        strict: Use the strict JSON schema; otherwise ask for any JSON object

    Returns:
        Format dictionary
    """
    if not strict:
        return {"type": "json_object"}
    return {
        "type": "json_schema",
        "name": SCHEMA_NAME,
        "strict": True,
        "schema": IDEA_SET_SCHEMA,
    }

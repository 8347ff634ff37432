"""
Request profile model and validation.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from sidehustle.errors import MissingFieldsError
from sidehustle.utils.constants import REQUIRED_NUMERIC_FIELDS, REQUIRED_TEXT_FIELDS


class UserProfile(BaseModel):
    """Demographics and resource constraints supplied by the caller.

    Values are kept as sent; numeric fields are only checked for presence.
    """

    age: Any = Field(..., description="Age of the user")
    location: Any = Field(..., description="City, region or country the user lives in")
    strengths: Any = Field(..., description="What the user is good at")
    enjoys: Any = Field(..., description="What the user likes doing")
    skillset: Any = Field(..., description="Concrete skills the user can sell")
    hoursPerWeek: Any = Field(..., description="Hours per week available for the side hustle")
    seedBudget: Any = Field(..., description="Money available to start")


def validate_profile(payload: Dict[str, Any]) -> UserProfile:
    """
    Check that every required field is present and build the profile.

    Args:
        payload: Decoded request body

    Returns:
        UserProfile with the seven profile fields

    Raises:
        MissingFieldsError: if a numeric field is null/absent or a text field is empty
    """
    if not isinstance(payload, dict):
        payload = {}

    missing_numeric = any(payload.get(field) is None for field in REQUIRED_NUMERIC_FIELDS)
    missing_text = any(not payload.get(field) for field in REQUIRED_TEXT_FIELDS)
    if missing_numeric or missing_text:
        raise MissingFieldsError()

    return UserProfile(**{name: payload[name] for name in UserProfile.model_fields})

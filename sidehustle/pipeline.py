"""
Idea generation pipeline for SideHustle.
"""

import json
from typing import Any, Dict

from sidehustle.errors import ModelOutputNotJSONError, ModelOutputShapeError
from sidehustle.models.profile import validate_profile
from sidehustle.prompt_builder import build_messages
from sidehustle.services.ai_service import AIService
from sidehustle.services.quality_service import QualityService
from sidehustle.utils.constants import IDEA_COUNT, RAW_SNIPPET_MAX
from sidehustle.utils.logger import logger


def _reject_constant(name: str):
    # NaN and Infinity are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class IdeaGenerationPipeline:
    """Pipeline turning a user profile into three post-processed ideas."""

    def __init__(self, ai_service: AIService, quality_service: QualityService):
        """
        Initialize the idea generation pipeline.

        Args:
            ai_service: Generation capability to call once per request
            quality_service: Post-processing applied to the model output
        """
        self.ai_service = ai_service
        self.quality_service = quality_service

    def run(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate the request, generate ideas and post-process them.

        Args:
            payload: Decoded request body

        Returns:
            Idea set with exactly three ideas

        Raises:
            MissingFieldsError: if the profile is incomplete
            ModelOutputNotJSONError: if the model output does not parse
            ModelOutputShapeError: if the model output lacks three ideas
        """
        profile = validate_profile(payload)
        logger.info(f"Generating ideas for location '{profile.location}'")

        messages = build_messages(profile)
        raw_text = self.ai_service.generate(messages)

        data = self.parse_output(raw_text)
        data["ideas"] = self.quality_service.process(data["ideas"])
        logger.info(f"Returning {len(data['ideas'])} ideas")
        return data

    def parse_output(self, raw_text: str) -> Dict[str, Any]:
        """
        Parse and shape-check the raw model output.

        Args:
            raw_text: Text returned by the model

        Returns:
            Decoded idea set
        """
        try:
            data = json.loads(raw_text, parse_constant=_reject_constant)
        except (TypeError, ValueError) as e:
            logger.error(f"Model output is not JSON: {e}")
            raise ModelOutputNotJSONError((raw_text or "")[:RAW_SNIPPET_MAX]) from e

        ideas = data.get("ideas") if isinstance(data, dict) else None
        if not isinstance(ideas, list) or len(ideas) != IDEA_COUNT:
            logger.error(f"Model output has unexpected shape: {str(raw_text)[:200]}")
            raise ModelOutputShapeError()
        return data

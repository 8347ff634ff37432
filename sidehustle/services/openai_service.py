"""
OpenAI service implementation for SideHustle.
Generates idea sets through the Responses API with a JSON schema output constraint.
"""

from typing import List, Dict
from openai import OpenAI

from sidehustle.services.ai_service import AIService
from sidehustle.schema import build_response_format
from sidehustle.utils.logger import logger
from sidehustle.utils.constants import TEMPERATURE, TOP_P

class OpenAIService(AIService):
    """OpenAI service implementation."""

    def __init__(self, api_key: str, model: str, strict_schema: bool = True):
        """
        Initialize the OpenAI service.

        Args:
            api_key: OpenAI API key
            model: OpenAI model to use
            strict_schema: Constrain output with the strict JSON schema instead of a plain JSON object
        """
        self.api_key = api_key
        self.model = model
        self.strict_schema = strict_schema
        self.client = OpenAI(api_key=api_key)

    def generate(self, messages: List[Dict[str, str]]) -> str:
        """
        Make a single Responses API call and return its text output.
        Failures are not retried; the caller decides how to report them.

        Args:
            messages: Role-tagged messages

        Returns:
            The model's output text, or an empty string when there is none
        """
        logger.info(f"Requesting ideas from {self.model} (strict schema: {self.strict_schema})")
        response = self.client.responses.create(
            model=self.model,
            temperature=TEMPERATURE,
            top_p=TOP_P,
            text={"format": build_response_format(self.strict_schema)},
            input=messages,
        )
        text = response.output_text or ""
        logger.debug(f"Received {len(text)} characters from {self.model}")
        return text

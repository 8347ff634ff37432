"""
Factory for creating service instances and pipelines.
"""

from functools import lru_cache

from sidehustle.services.openai_service import OpenAIService
from sidehustle.services.quality_service import QualityService
from sidehustle.pipeline import IdeaGenerationPipeline
from sidehustle.utils.config import config
from sidehustle.utils.constants import OPENAI_MODEL

def create_pipeline():
    """
    Build an idea generation pipeline from the environment configuration.

    Returns:
        IdeaGenerationPipeline instance
    """
    ai_service = OpenAIService(config.openai_api_key, OPENAI_MODEL, strict_schema=config.strict_schema)
    return IdeaGenerationPipeline(
        ai_service=ai_service,
        quality_service=QualityService(),
    )


@lru_cache(maxsize=1)
def get_pipeline():
    """Process-wide pipeline; the OpenAI client is reused across requests."""
    return create_pipeline()

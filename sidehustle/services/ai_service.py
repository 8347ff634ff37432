"""
Abstract base class for the text-generation capability used by SideHustle.
This provides a common interface for different AI models.
"""

from abc import ABC, abstractmethod
from typing import List, Dict

class AIService(ABC):
    """Abstract base class for AI services."""

    @abstractmethod
    def generate(self, messages: List[Dict[str, str]]) -> str:
        """
        Generate JSON text for the given conversation.

        Args:
            messages: Role-tagged messages (system, rubric, request)

        Returns:
            Raw text returned by the model, expected to parse as JSON
        """
        pass

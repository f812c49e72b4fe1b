"""LLM-specific interfaces."""

from abc import ABC, abstractmethod
from typing import List, Dict, Union


class LLMClient(ABC):
    """Abstract interface for LLM clients."""

    @abstractmethod
    async def complete(self, messages: Union[str, List[Dict[str, str]]]) -> str:
        """
        Send messages to LLM and return response.

        Args:
            messages: Either a plain string prompt or a list of message dicts.
                     Each message dict has 'role' ('system', 'user' or
                     'assistant') and 'content' keys.

        Returns:
            str: The LLM response text

        Raises:
            LLMClientError: If the provider call fails or returns no content.
        """
        pass

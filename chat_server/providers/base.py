"""Abstract base class for LLM providers and shared exception."""

from abc import ABC, abstractmethod

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1024


class LLMProviderError(Exception):
    """Raised when an LLM provider call fails."""


class BaseLLMProvider(ABC):
    """Abstract base class for all LLM providers."""

    name: str = "base"

    @abstractmethod
    async def generate(
        self,
        messages: list[dict],
        system_prompt: str,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        """Send messages to the LLM and return the first completion's text.

        Args:
            messages: List of {"role": "user"|"assistant", "content": "..."} dicts
            system_prompt: The system message, prepended for this call only
            temperature: Sampling temperature
            max_tokens: Maximum response length

        Returns:
            The response text, or an empty string when the provider
            returned no content

        Raises:
            LLMProviderError: On connection failure, timeout, auth or API error
        """
        ...

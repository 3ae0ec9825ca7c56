"""Anthropic LLM provider using the anthropic SDK."""

import logging

from chat_server.config import Settings
from chat_server.providers.base import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    BaseLLMProvider,
    LLMProviderError,
)

logger = logging.getLogger(__name__)

TIMEOUT = 30.0


class AnthropicProvider(BaseLLMProvider):
    """LLM provider for Anthropic Claude API."""

    name = "anthropic"

    def __init__(self, settings: Settings) -> None:
        try:
            import anthropic
        except ImportError as exc:
            raise LLMProviderError(
                "anthropic package not installed. Install with: pip install anthropic"
            ) from exc

        self.model = settings.llm_model
        self.client = anthropic.AsyncAnthropic(
            api_key=settings.llm_api_key,
            timeout=TIMEOUT,
        )
        self._anthropic = anthropic

    async def generate(
        self,
        messages: list[dict],
        system_prompt: str,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        # The system prompt is a top-level parameter in the Messages API
        try:
            response = await self.client.messages.create(
                model=self.model,
                system=system_prompt,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except self._anthropic.APIError as exc:
            raise LLMProviderError(f"Anthropic API error: {exc}") from exc

        texts = [block.text for block in response.content if block.type == "text"]
        return texts[0] if texts else ""

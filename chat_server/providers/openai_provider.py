"""OpenAI-compatible LLM providers using the openai SDK.

Groq and xAI expose OpenAI-compatible chat completion endpoints, so they
share one implementation and differ only in base URL and label.
"""

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
GROQ_BASE_URL = "https://api.groq.com/openai/v1"
XAI_BASE_URL = "https://api.x.ai/v1"


class OpenAICompatibleProvider(BaseLLMProvider):
    """LLM provider for any OpenAI-compatible chat completions API."""

    name = "openai"
    label = "OpenAI"
    base_url: str | None = None

    def __init__(self, settings: Settings) -> None:
        try:
            import openai
        except ImportError as exc:
            raise LLMProviderError(
                "openai package not installed. Install with: pip install openai"
            ) from exc

        self.model = settings.llm_model
        client_kwargs = {"api_key": settings.llm_api_key, "timeout": TIMEOUT}
        if self.base_url:
            client_kwargs["base_url"] = self.base_url
        self.client = openai.AsyncOpenAI(**client_kwargs)
        self._openai = openai

    async def generate(
        self,
        messages: list[dict],
        system_prompt: str,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        full_messages = [{"role": "system", "content": system_prompt}, *messages]
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=full_messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except self._openai.APIError as exc:
            raise LLMProviderError(f"{self.label} API error: {exc}") from exc

        if not response.choices:
            logger.warning("%s returned no choices for model %s", self.label, self.model)
            return ""
        return getattr(response.choices[0].message, "content", None) or ""


class OpenAIProvider(OpenAICompatibleProvider):
    """LLM provider for OpenAI API."""


class GroqProvider(OpenAICompatibleProvider):
    """LLM provider for Groq's OpenAI-compatible endpoint."""

    name = "groq"
    label = "Groq"
    base_url = GROQ_BASE_URL


class XAIProvider(OpenAICompatibleProvider):
    """LLM provider for xAI (OpenAI-compatible API)."""

    name = "xai"
    label = "xAI"
    base_url = XAI_BASE_URL

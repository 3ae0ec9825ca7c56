"""Ollama LLM provider using httpx for HTTP calls."""

import logging

import httpx

from chat_server.config import Settings
from chat_server.providers.base import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    BaseLLMProvider,
    LLMProviderError,
)

logger = logging.getLogger(__name__)

TIMEOUT = 30.0


class OllamaProvider(BaseLLMProvider):
    """LLM provider for Ollama local inference."""

    name = "ollama"

    def __init__(self, settings: Settings) -> None:
        self.base_url = settings.ollama_url.rstrip("/")
        self.model = settings.llm_model

    async def generate(
        self,
        messages: list[dict],
        system_prompt: str,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> str:
        full_messages = [{"role": "system", "content": system_prompt}, *messages]
        payload = {
            "model": self.model,
            "messages": full_messages,
            "stream": False,
            "options": {"temperature": temperature, "num_predict": max_tokens},
        }

        try:
            async with httpx.AsyncClient(timeout=TIMEOUT) as client:
                response = await client.post(f"{self.base_url}/api/chat", json=payload)
                response.raise_for_status()
                data = response.json()
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LLMProviderError(f"Ollama connection failed: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise LLMProviderError(f"Ollama API error: {exc.response.status_code}") from exc
        except ValueError as exc:
            raise LLMProviderError(f"Ollama returned invalid JSON: {exc}") from exc

        try:
            return data["message"]["content"] or ""
        except (KeyError, TypeError) as exc:
            raise LLMProviderError(f"Unexpected Ollama response format: {exc}") from exc

"""Completion gateway between conversation history and the LLM provider."""

import logging

from chat_server.providers.base import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    BaseLLMProvider,
    LLMProviderError,
)

logger = logging.getLogger(__name__)

FALLBACK_RESPONSE = "Maaf, saya tidak bisa memproses permintaan saat ini."


class CompletionError(Exception):
    """Raised when the completion provider could not produce a reply."""


class CompletionGateway:
    """Single call-and-response wrapper around an LLM provider. No retries."""

    def __init__(
        self,
        provider: BaseLLMProvider,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        fallback_response: str = FALLBACK_RESPONSE,
    ) -> None:
        if not fallback_response:
            raise ValueError("fallback_response must be non-empty")
        self._provider = provider
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._fallback_response = fallback_response

    async def complete(self, system_prompt: str, history: list[dict]) -> str:
        """Return the assistant reply for history under system_prompt.

        Empty provider output is replaced by the fallback response, so the
        returned text is never empty.

        Raises:
            CompletionError: On any provider failure
        """
        if not system_prompt:
            raise ValueError("system_prompt must be non-empty")

        try:
            text = await self._provider.generate(
                messages=history,
                system_prompt=system_prompt,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except LLMProviderError as exc:
            raise CompletionError(str(exc)) from exc
        except Exception as exc:
            # Malformed payloads surface as arbitrary SDK exceptions
            raise CompletionError(f"Unexpected provider failure: {exc!r}") from exc

        if not isinstance(text, str) or not text:
            logger.warning("Provider returned empty completion, using fallback response")
            return self._fallback_response
        return text

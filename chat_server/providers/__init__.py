"""LLM provider factory and public interface."""

from chat_server.config import Settings
from chat_server.providers.base import BaseLLMProvider, LLMProviderError

__all__ = ["BaseLLMProvider", "LLMProviderError", "get_provider", "PROVIDER_NAMES"]

PROVIDER_NAMES = ("groq", "openai", "xai", "anthropic", "ollama")


def get_provider(settings: Settings) -> BaseLLMProvider:
    """Create and return the provider named by settings.llm_provider.

    Raises:
        ValueError: If llm_provider is not recognized
    """
    provider = settings.llm_provider.lower()

    if provider == "groq":
        from chat_server.providers.openai_provider import GroqProvider

        return GroqProvider(settings)
    elif provider == "openai":
        from chat_server.providers.openai_provider import OpenAIProvider

        return OpenAIProvider(settings)
    elif provider == "xai":
        from chat_server.providers.openai_provider import XAIProvider

        return XAIProvider(settings)
    elif provider == "anthropic":
        from chat_server.providers.anthropic import AnthropicProvider

        return AnthropicProvider(settings)
    elif provider == "ollama":
        from chat_server.providers.ollama import OllamaProvider

        return OllamaProvider(settings)
    else:
        raise ValueError(
            f"Unknown LLM provider: {settings.llm_provider} "
            f"(expected one of: {', '.join(PROVIDER_NAMES)})"
        )

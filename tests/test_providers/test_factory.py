"""Tests for the get_provider() factory function."""

import pytest

from chat_server.providers import get_provider
from chat_server.providers.anthropic import AnthropicProvider
from chat_server.providers.ollama import OllamaProvider
from chat_server.providers.openai_provider import GroqProvider, OpenAIProvider, XAIProvider


@pytest.mark.parametrize(
    "name, expected",
    [
        ("groq", GroqProvider),
        ("openai", OpenAIProvider),
        ("xai", XAIProvider),
        ("anthropic", AnthropicProvider),
        ("ollama", OllamaProvider),
    ],
)
def test_get_provider_by_name(make_settings, name, expected):
    provider = get_provider(make_settings(llm_provider=name))
    assert isinstance(provider, expected)
    assert provider.name == name


def test_get_provider_case_insensitive(make_settings):
    """get_provider handles case-insensitive provider names."""
    provider = get_provider(make_settings(llm_provider="Groq"))
    assert isinstance(provider, GroqProvider)


def test_get_provider_unknown_raises_value_error(make_settings):
    with pytest.raises(ValueError, match="Unknown LLM provider"):
        get_provider(make_settings(llm_provider="gemini"))

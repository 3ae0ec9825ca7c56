"""Tests for chat_server.config module."""

import json
import os
from pathlib import Path

import pytest

from chat_server.config import get_settings, setup_logging


def test_get_settings_valid(mock_env):
    """All env vars set, settings loads correctly."""
    settings = get_settings()
    assert settings.llm_provider == "groq"
    assert settings.llm_model == "llama-3.3-70b-versatile"
    assert settings.llm_api_key == "test-groq-key"
    assert settings.port == 3001
    assert settings.max_history == 20
    assert settings.is_development is False


def test_get_settings_defaults(clean_env, monkeypatch):
    """Optional fields get correct defaults when not set."""
    monkeypatch.setenv("LLM_API_KEY", "key")

    settings = get_settings()
    assert settings.llm_provider == "groq"
    assert settings.llm_model == "llama-3.3-70b-versatile"
    assert settings.ollama_url == "http://localhost:11434"
    assert settings.log_level == "INFO"
    assert settings.host == "0.0.0.0"
    assert settings.port == 3001
    assert settings.cors_origins == ["http://localhost:5173", "http://localhost:3001"]
    assert settings.environment == "production"
    assert settings.max_history == 20
    assert settings.static_dir == ""


def test_missing_api_key_for_cloud_provider(clean_env):
    """A cloud provider without LLM_API_KEY raises ValueError."""
    with pytest.raises(ValueError, match="LLM_API_KEY"):
        get_settings()


def test_groq_api_key_fallback(clean_env, monkeypatch):
    """GROQ_API_KEY is used when LLM_API_KEY is not set."""
    monkeypatch.setenv("GROQ_API_KEY", "gsk-abc")
    settings = get_settings()
    assert settings.llm_api_key == "gsk-abc"


def test_ollama_needs_no_api_key(clean_env, monkeypatch):
    """Local Ollama provider loads without an API key."""
    monkeypatch.setenv("LLM_PROVIDER", "ollama")
    monkeypatch.setenv("LLM_MODEL", "llama3.1:8b")
    settings = get_settings()
    assert settings.llm_provider == "ollama"
    assert settings.llm_api_key == ""


def test_cors_origins_parsing(mock_env):
    """Comma-separated CORS_ORIGINS parses to a list."""
    settings = get_settings()
    assert settings.cors_origins == ["http://localhost:5173", "http://localhost:3001"]


def test_invalid_port_raises(mock_env, monkeypatch):
    """Non-integer PORT raises ValueError."""
    monkeypatch.setenv("PORT", "eighty")
    with pytest.raises(ValueError, match="PORT"):
        get_settings()


def test_non_positive_max_history_raises(mock_env, monkeypatch):
    """MAX_HISTORY must be at least 1."""
    monkeypatch.setenv("MAX_HISTORY", "0")
    with pytest.raises(ValueError, match="MAX_HISTORY"):
        get_settings()


def test_node_env_sets_environment(mock_env, monkeypatch):
    """NODE_ENV is honored when ENVIRONMENT is unset."""
    monkeypatch.delenv("ENVIRONMENT")
    monkeypatch.setenv("NODE_ENV", "development")
    settings = get_settings()
    assert settings.environment == "development"
    assert settings.is_development is True


def test_setup_logging_creates_log_dir(settings, tmp_path, monkeypatch):
    """Logging setup creates logs/ directory."""
    monkeypatch.chdir(tmp_path)
    setup_logging(settings)
    assert (tmp_path / "logs").is_dir()
    assert (tmp_path / "logs" / "chat_server.log").exists()


def test_assistant_config_valid():
    """The shipped assistant.json parses and defines the generation settings."""
    config_path = Path(__file__).parent.parent / "chat_server" / "config" / "assistant.json"
    with open(config_path) as f:
        data = json.load(f)
    assert data["system_prompt"]
    assert data["fallback_response"]
    assert data["temperature"] == 0.7
    assert data["max_tokens"] == 1024


def test_config_dir_points_to_config(settings):
    """config_dir should be the absolute chat_server/config/ directory."""
    assert os.path.isabs(settings.config_dir)
    assert settings.config_dir.endswith(os.path.join("chat_server", "config"))

"""Shared test fixtures for chat widget server tests."""

import json
import os
import shutil
import tempfile

import pytest

from chat_server.config import Settings, get_settings

ENV_KEYS = [
    "LLM_PROVIDER",
    "LLM_MODEL",
    "LLM_API_KEY",
    "GROQ_API_KEY",
    "OLLAMA_URL",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "CORS_ORIGINS",
    "ENVIRONMENT",
    "NODE_ENV",
    "MAX_HISTORY",
    "STATIC_DIR",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable get_settings() reads."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keep a developer's local .env out of the tests
    monkeypatch.setattr("chat_server.config.load_dotenv", lambda: False)


@pytest.fixture
def mock_env(clean_env, monkeypatch):
    """Set a complete valid environment for get_settings()."""
    env_vars = {
        "LLM_PROVIDER": "groq",
        "LLM_MODEL": "llama-3.3-70b-versatile",
        "LLM_API_KEY": "test-groq-key",
        "OLLAMA_URL": "http://localhost:11434",
        "LOG_LEVEL": "INFO",
        "PORT": "3001",
        "CORS_ORIGINS": "http://localhost:5173, http://localhost:3001",
        "ENVIRONMENT": "production",
        "MAX_HISTORY": "20",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def settings(mock_env) -> Settings:
    """Return a valid Settings instance using mock environment."""
    return get_settings()


@pytest.fixture
def make_settings():
    """Factory for Settings with defaults, applying overrides."""

    def _make(**overrides) -> Settings:
        defaults = {
            "llm_provider": "groq",
            "llm_model": "llama-3.3-70b-versatile",
            "ollama_url": "http://localhost:11434",
            "llm_api_key": "test-key",
            "log_level": "INFO",
            "host": "127.0.0.1",
            "port": 3001,
            "cors_origins": ["http://localhost:5173"],
            "environment": "production",
            "max_history": 20,
            "static_dir": "",
            "config_dir": "/tmp/config",
        }
        defaults.update(overrides)
        return Settings(**defaults)

    return _make


@pytest.fixture
def config_dir():
    """Provide a temp directory with assistant.json for testing."""
    tmpdir = tempfile.mkdtemp()

    assistant = {
        "name": "Test Assistant",
        "system_prompt": "You are a test assistant.",
        "fallback_response": "Sorry, I cannot help right now.",
        "temperature": 0.7,
        "max_tokens": 1024,
    }
    with open(os.path.join(tmpdir, "assistant.json"), "w") as f:
        json.dump(assistant, f, indent=2)

    yield tmpdir
    shutil.rmtree(tmpdir)

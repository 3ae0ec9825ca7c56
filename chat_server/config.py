"""Configuration loader, validation, and logging setup for the chat widget server."""

import logging
import os
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_PROVIDER = "groq"
DEFAULT_MODEL = "llama-3.3-70b-versatile"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3001"
LOCAL_PROVIDERS = {"ollama"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    llm_provider: str
    llm_model: str
    ollama_url: str
    llm_api_key: str
    log_level: str
    host: str
    port: int
    cors_origins: list[str]
    environment: str
    max_history: int
    static_dir: str
    config_dir: str

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def get_settings() -> Settings:
    """Load settings from .env file and environment variables.

    Raises ValueError if a cloud provider is selected without an API key,
    or if a numeric setting cannot be parsed.
    """
    load_dotenv()

    llm_provider = os.environ.get("LLM_PROVIDER", "").strip() or DEFAULT_PROVIDER
    llm_api_key = os.environ.get("LLM_API_KEY", "") or os.environ.get("GROQ_API_KEY", "")

    if llm_provider.lower() not in LOCAL_PROVIDERS and not llm_api_key:
        raise ValueError("Missing required environment variables: LLM_API_KEY")

    max_history = _int_env("MAX_HISTORY", 20)
    if max_history < 1:
        raise ValueError(f"MAX_HISTORY must be positive, got {max_history}")

    cors_raw = os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    cors_origins = [o.strip() for o in cors_raw.split(",") if o.strip()]

    environment = os.environ.get("ENVIRONMENT") or os.environ.get("NODE_ENV") or "production"

    config_dir = str(Path(__file__).parent / "config")

    return Settings(
        llm_provider=llm_provider,
        llm_model=os.environ.get("LLM_MODEL", "").strip() or DEFAULT_MODEL,
        ollama_url=os.environ.get("OLLAMA_URL", "http://localhost:11434"),
        llm_api_key=llm_api_key,
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=_int_env("PORT", 3001),
        cors_origins=cors_origins,
        environment=environment,
        max_history=max_history,
        static_dir=os.environ.get("STATIC_DIR", ""),
        config_dir=config_dir,
    )


def setup_logging(settings: Settings) -> None:
    """Configure logging with console and rotating file handlers."""
    log_format = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    formatter = logging.Formatter(log_format)

    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    # Clear existing handlers to avoid duplicates on repeated calls
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_handler = RotatingFileHandler(
        log_dir / "chat_server.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

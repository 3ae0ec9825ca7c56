"""Launcher for the chat widget server.

1. Load settings from .env and the environment
2. Print a startup summary
3. Launch uvicorn with the chat_server.app:create_app factory
"""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def check_env_file() -> bool:
    """Report whether a .env file is present. Environment variables alone also work."""
    if Path(".env").exists():
        return True
    print("Note: .env file not found, using environment variables only.")
    return False


def load_settings():
    """Load and return application settings, exiting on configuration errors."""
    from chat_server.config import get_settings

    try:
        return get_settings()
    except ValueError as exc:
        print(f"Configuration error: {exc}")
        print("Set the variable in your environment or .env file and try again.")
        sys.exit(1)


def print_summary(settings) -> None:
    """Display where the server will listen and what it talks to."""
    print()
    print("=" * 60)
    print("  Chat widget server is starting")
    print("=" * 60)
    print(f"  Provider:    {settings.llm_provider}")
    print(f"  Model:       {settings.llm_model}")
    print(f"  API key:     {'loaded' if settings.llm_api_key else 'not set'}")
    print(f"  Environment: {settings.environment}")
    print(f"  Health:      http://localhost:{settings.port}/api/health")
    print()
    print("  Press Ctrl+C to stop the server.")
    print()


def launch_server(settings) -> None:
    """Run uvicorn with the app factory."""
    import uvicorn

    uvicorn.run(
        "chat_server.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


def main() -> None:
    """Run the server launcher."""
    try:
        check_env_file()
        settings = load_settings()
        print_summary(settings)
        launch_server(settings)
    except KeyboardInterrupt:
        print("\n\nServer stopped. Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()

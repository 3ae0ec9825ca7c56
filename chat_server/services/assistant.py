"""Assistant profile loading.

Reads the system prompt, fallback reply and generation parameters from
assistant.json in the config directory.
"""

import json
import logging
from pathlib import Path

from chat_server.providers.base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from chat_server.services.gateway import FALLBACK_RESPONSE

logger = logging.getLogger(__name__)

PROFILE_FILENAME = "assistant.json"


class AssistantProfile:
    """The assistant's persona and generation settings."""

    def __init__(self, config_dir: str) -> None:
        """Load assistant.json from config_dir."""
        self._path = Path(config_dir) / PROFILE_FILENAME
        self._data: dict = {}
        self._load()

    def _load(self) -> None:
        with open(self._path) as f:
            data = json.load(f)

        if not data.get("system_prompt"):
            raise ValueError(f"{self._path} must define a non-empty system_prompt")

        self._data = data
        logger.info("Loaded assistant profile %r", self.name)

    @property
    def name(self) -> str:
        return self._data.get("name", "Assistant")

    @property
    def system_prompt(self) -> str:
        return self._data["system_prompt"]

    @property
    def fallback_response(self) -> str:
        return self._data.get("fallback_response") or FALLBACK_RESPONSE

    @property
    def temperature(self) -> float:
        return float(self._data.get("temperature", DEFAULT_TEMPERATURE))

    @property
    def max_tokens(self) -> int:
        return int(self._data.get("max_tokens", DEFAULT_MAX_TOKENS))

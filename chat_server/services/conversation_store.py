"""Conversation history store.

Keeps a trailing window of turns per conversation id. All data is
in-memory and lost on restart; histories are never evicted.
"""

import logging

logger = logging.getLogger(__name__)

STORED_ROLES = ("user", "assistant")


class ConversationStore:
    """Trailing-window conversation history per conversation id."""

    def __init__(self, max_turns: int = 20) -> None:
        """Initialize with empty in-memory store."""
        if max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {max_turns}")
        self._max_turns = max_turns
        self._store: dict[str, list[dict]] = {}

    @property
    def max_turns(self) -> int:
        return self._max_turns

    def get_or_create(self, conversation_id: str) -> list[dict]:
        """Return a copy of the history for conversation_id, creating it if unseen."""
        history = self._store.setdefault(conversation_id, [])
        return [turn.copy() for turn in history]

    def append(self, conversation_id: str, role: str, content: str) -> None:
        """Append a turn, then keep only the most recent max_turns turns.

        The cap counts raw turns, not user/assistant pairs, so trimming can
        leave an assistant turn at the head of the history.
        """
        if role not in STORED_ROLES:
            raise ValueError(f"Cannot store turn with role {role!r}")

        history = self._store.setdefault(conversation_id, [])
        history.append({"role": role, "content": content})

        if len(history) > self._max_turns:
            dropped = len(history) - self._max_turns
            self._store[conversation_id] = history[-self._max_turns :]
            logger.debug("Trimmed %d turn(s) from conversation %s", dropped, conversation_id)

    def stats(self) -> dict:
        """Return conversation_count, message_count and average_messages."""
        conversation_count = len(self._store)
        message_count = sum(len(history) for history in self._store.values())
        if conversation_count == 0:
            average = 0
        else:
            average = round(message_count / conversation_count, 1)
        return {
            "conversation_count": conversation_count,
            "message_count": message_count,
            "average_messages": average,
        }

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, conversation_id: object) -> bool:
        return conversation_id in self._store

"""Chat request orchestration.

Validates the incoming message, resolves the conversation, records the
user turn, asks the gateway for a reply and records it.
"""

import logging
import uuid
from typing import Callable

from chat_server.services.conversation_store import ConversationStore
from chat_server.services.gateway import CompletionError, CompletionGateway
from chat_server.services.locks import KeyedLocks

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a chat request is missing its message."""


def new_conversation_id() -> str:
    """Mint a random conversation id."""
    return f"conv_{uuid.uuid4().hex}"


class ChatService:
    """Runs one user message through the store and the completion gateway."""

    def __init__(
        self,
        store: ConversationStore,
        gateway: CompletionGateway,
        system_prompt: str,
        locks=None,
        id_factory: Callable[[], str] = new_conversation_id,
    ) -> None:
        self._store = store
        self._gateway = gateway
        self._system_prompt = system_prompt
        self._locks = locks if locks is not None else KeyedLocks()
        self._id_factory = id_factory

    @property
    def store(self) -> ConversationStore:
        return self._store

    async def handle(self, message, conversation_id: str | None = None) -> dict:
        """Process a user message and return the assistant reply.

        Returns:
            dict with keys: response, conversation_id, message_count

        Raises:
            ValidationError: If message is missing or empty
            CompletionError: If the provider call failed; the user turn
                stays in the history
        """
        if not isinstance(message, str) or not message:
            raise ValidationError("message required")

        conv_id = conversation_id or self._id_factory()

        async with self._locks.hold(conv_id):
            self._store.get_or_create(conv_id)
            self._store.append(conv_id, "user", message)

            try:
                reply = await self._gateway.complete(
                    self._system_prompt, self._store.get_or_create(conv_id)
                )
            except CompletionError as e:
                logger.error("Completion failed for conversation %s: %s", conv_id, e)
                raise

            self._store.append(conv_id, "assistant", reply)
            history = self._store.get_or_create(conv_id)

        logger.debug("Replied in conversation %s (%d turns)", conv_id, len(history))
        return {
            "response": reply,
            "conversation_id": conv_id,
            "message_count": len(history) // 2,
        }

"""Core service classes for the chat widget server."""

from chat_server.services.assistant import AssistantProfile
from chat_server.services.chat import ChatService, ValidationError
from chat_server.services.conversation_store import ConversationStore
from chat_server.services.gateway import CompletionError, CompletionGateway
from chat_server.services.locks import KeyedLocks, NullLocks

__all__ = [
    "AssistantProfile",
    "ChatService",
    "CompletionError",
    "CompletionGateway",
    "ConversationStore",
    "KeyedLocks",
    "NullLocks",
    "ValidationError",
]

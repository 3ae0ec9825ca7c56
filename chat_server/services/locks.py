"""Per-conversation serialization strategies for the chat service.

KeyedLocks hands out one asyncio.Lock per conversation id so requests on
the same conversation run one at a time while different conversations
proceed in parallel. NullLocks performs no serialization.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class KeyedLocks:
    """Reference-counted asyncio locks keyed by conversation id."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                # Nobody holds or waits on this key any more
                del self._users[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)


class NullLocks:
    """No-op strategy: concurrent requests may interleave on one conversation."""

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        yield

# =============================================================================
# lib/session_backends.py - Pluggable Session Storage
# =============================================================================
# Session payloads are stored by id behind a small async interface so the
# storage can be swapped without touching the comment store or the routers:
#
#   InMemorySessionBackend - process-local dict, for development and tests
#   RedisSessionBackend    - shared storage with TTL, via redis.asyncio
#
# Usage:
#   backend = create_session_backend(settings)
#   data = await backend.get(session_id)       # SessionData | None
#   await backend.set(session_id, data)
# =============================================================================

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable

from pydantic import ValidationError as PydanticValidationError

from core.models.session import SessionData

logger = logging.getLogger(__name__)


class SessionBackend(ABC):
    """Storage interface for session payloads, keyed by session id."""

    name: str = "abstract"

    def __init__(self, max_age: int):
        self.max_age = max_age

    @abstractmethod
    async def get(self, session_id: str) -> SessionData | None:
        """Return the stored session, or None if absent or expired."""

    @abstractmethod
    async def set(self, session_id: str, data: SessionData) -> None:
        """Store (or replace) the session payload."""

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Forget the session. Missing ids are ignored."""

    async def ping(self) -> bool:
        """Return True if the backend is reachable."""
        return True

    async def close(self) -> None:
        """Release any connections held by the backend."""


# =============================================================================
# In-memory Backend
# =============================================================================

class InMemorySessionBackend(SessionBackend):
    """
    Keeps serialized payloads in a dict.

    Payloads are stored as JSON, so every get() returns a fresh object and
    no two requests ever share a SessionData instance. Expired entries are
    dropped on every write, so abandoned sessions don't accumulate.
    """

    name = "memory"

    def __init__(self, max_age: int, clock: Callable[[], float] = time.monotonic):
        super().__init__(max_age)
        self.clock = clock
        # session_id -> (expires_at, payload)
        self._entries: dict[str, tuple[float, str]] = {}

    async def get(self, session_id: str) -> SessionData | None:
        entry = self._entries.get(session_id)
        if entry is None:
            return None

        expires_at, payload = entry
        if expires_at <= self.clock():
            del self._entries[session_id]
            logger.debug(f"Session {session_id} expired")
            return None

        return SessionData.load(payload)

    def _purge_expired(self, now: float) -> None:
        expired = [sid for sid, (expires_at, _) in self._entries.items() if expires_at <= now]
        for sid in expired:
            del self._entries[sid]
        if expired:
            logger.debug(f"Purged {len(expired)} expired sessions")

    async def set(self, session_id: str, data: SessionData) -> None:
        now = self.clock()
        self._purge_expired(now)
        self._entries[session_id] = (now + self.max_age, data.dump())

    async def delete(self, session_id: str) -> None:
        self._entries.pop(session_id, None)


# =============================================================================
# Redis Backend
# =============================================================================

class RedisSessionBackend(SessionBackend):
    """
    Stores payloads in Redis under `<prefix><session_id>` with a TTL.

    Args:
        client: A redis.asyncio.Redis instance
        max_age: TTL in seconds, refreshed on every write
        key_prefix: Namespace for session keys
    """

    name = "redis"

    def __init__(self, client, max_age: int, key_prefix: str = "session:"):
        super().__init__(max_age)
        self.client = client
        self.key_prefix = key_prefix

    def _key(self, session_id: str) -> str:
        return f"{self.key_prefix}{session_id}"

    async def get(self, session_id: str) -> SessionData | None:
        raw = await self.client.get(self._key(session_id))
        if raw is None:
            return None

        try:
            return SessionData.load(raw)
        except PydanticValidationError as e:
            logger.warning(f"Discarding unreadable session {session_id}: {e}")
            return None

    async def set(self, session_id: str, data: SessionData) -> None:
        await self.client.set(self._key(session_id), data.dump(), ex=self.max_age)

    async def delete(self, session_id: str) -> None:
        await self.client.delete(self._key(session_id))

    async def ping(self) -> bool:
        try:
            return bool(await self.client.ping())
        except Exception as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()


# =============================================================================
# Factory
# =============================================================================

def create_session_backend(settings) -> SessionBackend:
    """
    Build the backend selected by settings.SESSION_BACKEND.

    The Redis client connects lazily, so this never does I/O.
    """
    if settings.SESSION_BACKEND == "redis":
        import redis.asyncio as aioredis

        client = aioredis.from_url(settings.REDIS_URL)
        logger.info("Using Redis session backend")
        return RedisSessionBackend(
            client,
            max_age=settings.SESSION_MAX_AGE,
            key_prefix=settings.REDIS_KEY_PREFIX,
        )

    logger.info("Using in-memory session backend")
    return InMemorySessionBackend(max_age=settings.SESSION_MAX_AGE)

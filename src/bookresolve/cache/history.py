"""Recent keyword query history."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

from bookresolve.core.exceptions import CacheError

if TYPE_CHECKING:
    from bookresolve.cache.client import AsyncRedisClient

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class HistoryStore(Protocol):
    """Where the query list lives between calls (and, ideally, restarts)."""

    async def load(self) -> list[str]: ...

    async def save(self, queries: list[str]) -> None: ...

    async def clear(self) -> None: ...


class MemoryHistoryStore:
    """Process-local store; lost on restart."""

    def __init__(self) -> None:
        self._queries: list[str] = []

    async def load(self) -> list[str]:
        return list(self._queries)

    async def save(self, queries: list[str]) -> None:
        self._queries = list(queries)

    async def clear(self) -> None:
        self._queries = []


class RedisHistoryStore:
    """Stores the list as one JSON value in Redis; survives restarts."""

    def __init__(self, client: "AsyncRedisClient", key: str) -> None:
        self._client = client
        self._key = key

    async def load(self) -> list[str]:
        try:
            value = await self._client.get(self._key)
        except Exception as e:
            raise CacheError(f"Failed to load recent queries: {e}") from e
        if not isinstance(value, list):
            return []
        return [q for q in value if isinstance(q, str)]

    async def save(self, queries: list[str]) -> None:
        try:
            await self._client.set(self._key, queries)
        except Exception as e:
            raise CacheError(f"Failed to save recent queries: {e}") from e

    async def clear(self) -> None:
        try:
            await self._client.delete(self._key)
        except Exception as e:
            raise CacheError(f"Failed to clear recent queries: {e}") from e


class RecentQueryHistory:
    """
    Most-recent-first list of distinct keyword queries.

    Adding a query that is already present (compared case-insensitively) moves
    it to the front with its new spelling. The list is capped at ``limit``.
    Store failures are logged and never surface to search callers.
    """

    def __init__(self, store: HistoryStore | None = None, limit: int = DEFAULT_LIMIT) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self._store = store or MemoryHistoryStore()
        self.limit = limit
        self._lock = asyncio.Lock()

    async def add(self, query: str) -> list[str]:
        """Record a query; returns the updated list."""
        query = query.strip()
        if not query:
            return await self.recent()

        async with self._lock:
            try:
                queries = await self._store.load()
                queries = [q for q in queries if q.lower() != query.lower()]
                queries.insert(0, query)
                queries = queries[: self.limit]
                await self._store.save(queries)
            except CacheError as e:
                logger.warning(f"Recent query history unavailable: {e}")
                return []
            return queries

    async def recent(self) -> list[str]:
        try:
            return (await self._store.load())[: self.limit]
        except CacheError as e:
            logger.warning(f"Recent query history unavailable: {e}")
            return []

    async def clear(self) -> None:
        async with self._lock:
            try:
                await self._store.clear()
            except CacheError as e:
                logger.warning(f"Failed to clear recent query history: {e}")

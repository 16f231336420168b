"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from bookresolve.cache.client import AsyncRedisClient
from bookresolve.cache.history import (
    HistoryStore,
    MemoryHistoryStore,
    RecentQueryHistory,
    RedisHistoryStore,
)
from bookresolve.cache.memory import ResultCache
from bookresolve.config import BookResolveSettings
from bookresolve.core.models import BookRecord
from bookresolve.providers.factory import ProviderSet
from bookresolve.resolution.orchestrator import ResolutionOrchestrator
from bookresolve.services.aggregator import UnifiedSearchService
from bookresolve.services.search import BookSearchService

logger = logging.getLogger(__name__)


class BookResolveClient:
    """
    Main client for the bookresolve library.

    Wires providers, the orchestrator, result caches and the recent query
    history from settings, without requiring the web server.

    Usage:
        async with BookResolveClient() as client:
            # Look up a book by ISBN
            books = await client.search_by_isbn("978-4-16-715805-7")

            # Keyword search with commerce → generic index fallback
            books = await client.search_by_query("kitchen")

            # Query every provider at once
            books = await client.unified_search("kitchen")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: BookResolveSettings | None = None,
        *,
        providers: ProviderSet | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            providers: Pre-built providers, mainly for tests. Built from settings
                if not provided.
        """
        self._settings = settings or BookResolveSettings()
        self._providers = providers
        self._redis: AsyncRedisClient | None = None
        self._search: BookSearchService | None = None
        self._unified: UnifiedSearchService | None = None

    async def __aenter__(self) -> BookResolveClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    def _new_cache(self) -> ResultCache:
        return ResultCache(
            ttl=self._settings.cache_ttl,
            max_entries=self._settings.cache_max_entries,
            max_bytes=self._settings.cache_max_bytes,
        )

    async def _initialize(self) -> None:
        """Initialize client resources."""
        if self._providers is None:
            self._providers = ProviderSet.from_settings(self._settings)

        store: HistoryStore = MemoryHistoryStore()
        if self._settings.redis_url:
            try:
                self._redis = AsyncRedisClient(str(self._settings.redis_url))
                await self._redis.connect()
                store = RedisHistoryStore(self._redis, self._settings.history_key)
                logger.info("Recent query history backed by Redis")
            except Exception as e:
                logger.warning(f"Failed to initialize Redis history, using memory: {e}")
                self._redis = None
        history = RecentQueryHistory(store, limit=self._settings.recent_query_limit)

        orchestrator = ResolutionOrchestrator(
            registry=self._providers.registry,
            generic_index=self._providers.generic_index,
            commerce=self._providers.commerce,
        )
        self._search = BookSearchService(orchestrator, self._new_cache(), history)
        self._unified = UnifiedSearchService(self._providers, self._new_cache(), history)

        if self._providers.commerce is None:
            logger.info("Commerce provider not configured; using registry and generic index")

    async def close(self) -> None:
        """Close all resources."""
        if self._providers:
            await self._providers.close_all()

        if self._redis:
            await self._redis.close()
            self._redis = None

        self._search = None
        self._unified = None

    @property
    def redis(self) -> AsyncRedisClient | None:
        return self._redis

    @property
    def search_service(self) -> BookSearchService:
        self._ensure_initialized()
        return self._search

    @property
    def unified_service(self) -> UnifiedSearchService:
        self._ensure_initialized()
        return self._unified

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if self._search is None or self._unified is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with BookResolveClient() as client:'"
            )

    async def search_by_isbn(self, isbn: str) -> list[BookRecord]:
        """
        Look up a book by ISBN.

        Raises:
            InvalidArgumentError: if the ISBN is malformed
        """
        return await self.search_service.search_by_isbn(isbn)

    async def search_by_query(self, text: str) -> list[BookRecord]:
        """Search by keyword."""
        return await self.search_service.search_by_query(text)

    async def fetch_book_details(self, isbn: str) -> BookRecord | None:
        """Most complete record for an ISBN."""
        return await self.search_service.fetch_book_details(isbn)

    async def unified_search(self, query: str) -> list[BookRecord]:
        """Search every provider concurrently."""
        return await self.unified_service.search(query)

    async def recent_searches(self) -> list[str]:
        return await self.unified_service.recent_searches()

    async def clear_recent_searches(self) -> None:
        await self.unified_service.clear_recent_searches()


# Convenience functions for one-off lookups
async def search_by_isbn(
    isbn: str,
    *,
    settings: BookResolveSettings | None = None,
) -> list[BookRecord]:
    """
    Look up a book by ISBN (convenience function).

    For multiple lookups, use BookResolveClient so the cache is shared.
    """
    async with BookResolveClient(settings) as client:
        return await client.search_by_isbn(isbn)


async def search_by_query(
    text: str,
    *,
    settings: BookResolveSettings | None = None,
) -> list[BookRecord]:
    """
    Search by keyword (convenience function).

    For multiple searches, use BookResolveClient so the cache is shared.
    """
    async with BookResolveClient(settings) as client:
        return await client.search_by_query(text)

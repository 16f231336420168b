"""Concurrent, non-short-circuiting search across every provider."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from bookresolve.cache.keys import CacheKeys
from bookresolve.core.isbn import looks_like_isbn
from bookresolve.core.models import BookRecord
from bookresolve.core.types import InputType
from bookresolve.resolution.dedup import deduplicate

if TYPE_CHECKING:
    from bookresolve.cache.history import RecentQueryHistory
    from bookresolve.cache.memory import ResultCache
    from bookresolve.providers.base import BookProvider, ProviderResult
    from bookresolve.providers.factory import ProviderSet

logger = logging.getLogger(__name__)


class UnifiedSearchService:
    """
    Queries every provider that supports the query kind at once.

    Unlike :class:`~bookresolve.services.search.BookSearchService`, nothing is
    skipped: all providers are awaited together and their records merged in
    priority order, so a higher-priority provider's record wins a duplicate.
    """

    def __init__(
        self,
        providers: "ProviderSet",
        cache: "ResultCache",
        history: "RecentQueryHistory | None" = None,
    ) -> None:
        self._providers = providers
        self._cache = cache
        self._history = history

    async def search(self, query: str) -> list[BookRecord]:
        """
        Search all providers concurrently.

        Queries that look like an ISBN (10 or 13 digits once hyphens are
        removed) use each provider's ISBN lookup; anything else is a keyword
        search and is remembered in the recent query history.
        """
        query = query.strip()
        if not query:
            return []

        is_isbn = looks_like_isbn(query)
        if not is_isbn and self._history is not None:
            await self._history.add(query)

        isbn = query.replace("-", "") if is_isbn else None
        key = CacheKeys.isbn(isbn) if isbn else CacheKeys.keyword(query)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for unified search: {key}")
            return cached

        start = time.monotonic()
        if isbn:
            results = await self._gather(
                InputType.ISBN, lambda p: p.search_by_isbn(isbn)
            )
        else:
            results = await self._gather(
                InputType.KEYWORD, lambda p: p.search_by_query(query)
            )

        records = deduplicate(*(r.records for r in results))

        duration = time.monotonic() - start
        logger.info(
            f"Unified search completed in {duration:.2f}s: {key} "
            f"({len(records)} records from {len(results)} providers)"
        )

        if records:
            self._cache.put(key, records)
        return records

    async def _gather(
        self,
        input_type: InputType,
        call: Callable[["BookProvider"], Awaitable["ProviderResult"]],
    ) -> list["ProviderResult"]:
        providers: list[BookProvider] = [
            p for p in self._providers.all if p.is_enabled and p.supports(input_type)
        ]
        outcomes = await asyncio.gather(
            *(call(p) for p in providers),
            return_exceptions=True,
        )

        results: list[ProviderResult] = []
        for provider, outcome in zip(providers, outcomes):
            if isinstance(outcome, BaseException):
                logger.warning(f"Provider {provider.name} failed: {outcome}")
                continue
            results.append(outcome)
        return results

    async def recent_searches(self) -> list[str]:
        if self._history is None:
            return []
        return await self._history.recent()

    async def clear_recent_searches(self) -> None:
        if self._history is not None:
            await self._history.clear()

"""Search service: cache → orchestrator → selector → cache."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from bookresolve.cache.keys import CacheKeys
from bookresolve.core.isbn import parse_isbn
from bookresolve.core.models import BookRecord
from bookresolve.resolution.selection import select_best

if TYPE_CHECKING:
    from bookresolve.cache.history import RecentQueryHistory
    from bookresolve.cache.memory import ResultCache
    from bookresolve.resolution.orchestrator import ResolutionOrchestrator

logger = logging.getLogger(__name__)


class BookSearchService:
    """
    Inbound search interface.

    Flow for every call:
    1. Check the result cache
    2. Resolve through the orchestrator's fallback chain
    3. For ISBN lookups, keep only the most complete record
    4. Cache non-empty results

    An empty list means "not found"; only malformed ISBNs raise.
    """

    def __init__(
        self,
        orchestrator: "ResolutionOrchestrator",
        cache: "ResultCache",
        history: "RecentQueryHistory | None" = None,
    ) -> None:
        """
        Initialize the search service.

        Args:
            orchestrator: Sequential provider fallback chain
            cache: Result cache shared by ISBN and keyword lookups
            history: Optional recent query history for keyword searches
        """
        self._orchestrator = orchestrator
        self._cache = cache
        self._history = history

    async def search_by_isbn(self, isbn: str) -> list[BookRecord]:
        """
        Look up a book by ISBN.

        Returns:
            ``[best]`` for the most complete record found, or ``[]``

        Raises:
            InvalidArgumentError: if the ISBN is malformed
        """
        normalized = parse_isbn(isbn)
        key = CacheKeys.isbn(normalized)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for ISBN lookup: {normalized}")
            return cached

        start = time.monotonic()
        result = await self._orchestrator.resolve_by_isbn(normalized)
        best = select_best(result.all_records)

        duration = time.monotonic() - start
        logger.info(
            f"ISBN lookup completed in {duration:.2f}s: {normalized} "
            f"(sources: {', '.join(result.sources_tried) or 'none'})"
        )

        if best is None:
            return []
        self._cache.put(key, [best])
        return [best]

    async def search_by_query(self, text: str) -> list[BookRecord]:
        """Search by free-text keyword; blank text returns ``[]``."""
        key = CacheKeys.keyword(text)
        if not key:
            return []

        if self._history is not None:
            await self._history.add(text)

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for keyword search: {key}")
            return cached

        start = time.monotonic()
        result = await self._orchestrator.resolve_by_keyword(text.strip())
        records = result.all_records

        duration = time.monotonic() - start
        logger.info(
            f"Keyword search completed in {duration:.2f}s: {key} "
            f"({len(records)} records)"
        )

        if records:
            self._cache.put(key, records)
        return records

    async def fetch_book_details(self, isbn: str) -> BookRecord | None:
        """Most complete record for an ISBN, or None."""
        records = await self.search_by_isbn(isbn)
        return records[0] if records else None

"""Sequential, short-circuiting resolution across providers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from bookresolve.core.isbn import parse_isbn
from bookresolve.core.models import BookRecord
from bookresolve.core.types import ResolutionStatus
from bookresolve.providers.base import BookProvider, ProviderResult
from bookresolve.resolution.dedup import deduplicate

logger = logging.getLogger(__name__)


@dataclass
class AggregatedResult:
    """Results of one resolution, in the order providers were tried."""

    results: list[ProviderResult] = field(default_factory=list)
    all_records: list[BookRecord] = field(default_factory=list)

    @property
    def sources_tried(self) -> list[str]:
        return [r.source.value for r in self.results]

    @property
    def success(self) -> bool:
        """Whether any provider produced records."""
        return any(r.success for r in self.results)

    @property
    def best_result(self) -> ProviderResult | None:
        """First successful provider result."""
        return next((r for r in self.results if r.success), None)


class ResolutionOrchestrator:
    """
    Runs providers one at a time following a fixed fallback policy.

    ISBN lookups: commerce (if configured) → registry → generic index, where
    the generic index is only asked when the registry found nothing. Keyword
    searches: commerce (if configured) → generic index. A non-empty commerce
    answer ends either chain so later providers are never called.
    """

    def __init__(
        self,
        registry: BookProvider,
        generic_index: BookProvider,
        commerce: BookProvider | None = None,
    ) -> None:
        self._registry = registry
        self._generic_index = generic_index
        self._commerce = commerce

    @property
    def has_commerce(self) -> bool:
        return self._commerce is not None and self._commerce.is_enabled

    async def resolve_by_isbn(self, isbn: str) -> AggregatedResult:
        """
        Resolve an ISBN.

        Raises:
            InvalidArgumentError: before any network call, for malformed ISBNs.
        """
        normalized = parse_isbn(isbn)
        result = AggregatedResult()

        if self.has_commerce:
            commerce = await self._try_provider(
                self._commerce, lambda p: p.search_by_isbn(normalized)
            )
            result.results.append(commerce)
            if commerce.success:
                return self._finish(result)

        registry = await self._try_provider(
            self._registry, lambda p: p.search_by_isbn(normalized)
        )
        result.results.append(registry)

        if not registry.success:
            generic = await self._try_provider(
                self._generic_index, lambda p: p.search_by_query(f"isbn:{normalized}")
            )
            result.results.append(generic)

        return self._finish(result)

    async def resolve_by_keyword(self, query: str) -> AggregatedResult:
        """Resolve a free-text keyword query."""
        result = AggregatedResult()

        if self.has_commerce:
            commerce = await self._try_provider(
                self._commerce, lambda p: p.search_by_query(query)
            )
            result.results.append(commerce)
            if commerce.success:
                return self._finish(result)

        generic = await self._try_provider(
            self._generic_index, lambda p: p.search_by_query(query)
        )
        result.results.append(generic)

        return self._finish(result)

    async def _try_provider(
        self,
        provider: BookProvider,
        call: Callable[[BookProvider], Awaitable[ProviderResult]],
    ) -> ProviderResult:
        """Try a single provider with error handling."""
        try:
            return await call(provider)
        except Exception as e:
            logger.exception(f"Provider {provider.name} failed: {e}")
            return ProviderResult(
                status=ResolutionStatus.ERROR,
                source=provider.source,
                error_message=str(e),
            )

    @staticmethod
    def _finish(result: AggregatedResult) -> AggregatedResult:
        result.all_records = deduplicate(*(r.records for r in result.results))
        return result

    async def close(self) -> None:
        """Close all providers."""
        for provider in (self._commerce, self._registry, self._generic_index):
            if provider is not None:
                await provider.close()

    async def __aenter__(self) -> "ResolutionOrchestrator":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

"""Service layer for orchestrating lookups, caching and history."""

from bookresolve.services.aggregator import UnifiedSearchService
from bookresolve.services.search import BookSearchService

__all__ = [
    "BookSearchService",
    "UnifiedSearchService",
]

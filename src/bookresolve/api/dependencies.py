"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from bookresolve.client import BookResolveClient
from bookresolve.services.aggregator import UnifiedSearchService
from bookresolve.services.search import BookSearchService


async def get_client(request: Request) -> BookResolveClient:
    """Get the library client from app state."""
    return request.app.state.client


async def get_search_service(
    client: BookResolveClient = Depends(get_client),
) -> BookSearchService:
    """Get the sequential fallback search service."""
    return client.search_service


async def get_unified_service(
    client: BookResolveClient = Depends(get_client),
) -> UnifiedSearchService:
    """Get the concurrent search service."""
    return client.unified_service


# Type aliases for cleaner dependency injection
SearchSvc = Annotated[BookSearchService, Depends(get_search_service)]
UnifiedSvc = Annotated[UnifiedSearchService, Depends(get_unified_service)]

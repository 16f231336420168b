"""Book search endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from bookresolve.api.dependencies import SearchSvc, UnifiedSvc
from bookresolve.api.schemas import BookResponse, BooksResponse, RecentSearchesResponse
from bookresolve.core.exceptions import NotFoundError

router = APIRouter(prefix="/books", tags=["books"])


@router.get(
    "/search/isbn/{isbn}",
    response_model=BooksResponse,
    operation_id="searchBookByIsbn",
    summary="Look up a book by ISBN",
    description="Resolve an ISBN-10 or ISBN-13 (hyphens allowed) to its most complete record.",
)
async def search_book_by_isbn(isbn: str, search_service: SearchSvc) -> BooksResponse:
    """Look up a book by ISBN; 404 when no provider knows it."""
    records = await search_service.search_by_isbn(isbn)
    if not records:
        raise NotFoundError("No book found for this ISBN", details={"isbn": isbn})
    return BooksResponse.from_records(records)


@router.get(
    "/search",
    response_model=BooksResponse,
    operation_id="searchBooks",
    summary="Search books by keyword",
    description="Keyword search with commerce → generic index fallback.",
)
async def search_books(
    search_service: SearchSvc,
    q: str = Query(..., min_length=1, max_length=500, description="Search query"),
) -> BooksResponse:
    """Search books by keyword. An empty list is a valid answer."""
    records = await search_service.search_by_query(q)
    return BooksResponse.from_records(records)


@router.get(
    "/details/{isbn}",
    response_model=BookResponse,
    operation_id="getBookDetails",
    summary="Book details",
    description="Most complete record known for an ISBN.",
)
async def get_book_details(isbn: str, search_service: SearchSvc) -> BookResponse:
    """Get book details by ISBN."""
    record = await search_service.fetch_book_details(isbn)
    if record is None:
        raise NotFoundError("No book found for this ISBN", details={"isbn": isbn})
    return BookResponse.from_record(record)


@router.get(
    "/unified",
    response_model=BooksResponse,
    operation_id="unifiedSearch",
    summary="Search all providers",
    description="Query every provider concurrently and merge the deduplicated results.",
)
async def unified_search(
    unified_service: UnifiedSvc,
    q: str = Query(..., min_length=1, max_length=500, description="ISBN or keyword"),
) -> BooksResponse:
    """Search all providers at once."""
    records = await unified_service.search(q)
    return BooksResponse.from_records(records)


@router.get(
    "/recent-searches",
    response_model=RecentSearchesResponse,
    operation_id="getRecentSearches",
    summary="Recent searches",
)
async def get_recent_searches(unified_service: UnifiedSvc) -> RecentSearchesResponse:
    """Recent keyword queries, most recent first."""
    return RecentSearchesResponse(queries=await unified_service.recent_searches())


@router.delete(
    "/recent-searches",
    status_code=status.HTTP_204_NO_CONTENT,
    operation_id="clearRecentSearches",
    summary="Clear recent searches",
)
async def clear_recent_searches(unified_service: UnifiedSvc) -> None:
    """Forget all recent keyword queries."""
    await unified_service.clear_recent_searches()

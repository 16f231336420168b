"""API schema definitions."""

from bookresolve.api.schemas.base import (
    APIBaseSchema,
    APIError,
    ErrorDetail,
)
from bookresolve.api.schemas.responses import (
    BookResponse,
    BooksResponse,
    HealthResponse,
    RecentSearchesResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Responses
    "BookResponse",
    "BooksResponse",
    "HealthResponse",
    "RecentSearchesResponse",
]

"""Core types, models, and utilities."""

from .dates import parse_japanese_date, parse_partial_date
from .exceptions import (
    BookResolveError,
    CacheError,
    InvalidArgumentError,
    NotFoundError,
    ProviderError,
    ProviderTimeoutError,
)
from .isbn import ISBN_PATTERN, is_valid_isbn, looks_like_isbn, normalize_isbn, parse_isbn
from .models import UNKNOWN_AUTHOR, UNKNOWN_TITLE, BookRecord
from .normalization import normalize_query, normalize_text
from .types import DataSource, InputType, ResolutionStatus

__all__ = [
    # Types
    "DataSource",
    "InputType",
    "ResolutionStatus",
    # Models
    "BookRecord",
    "UNKNOWN_AUTHOR",
    "UNKNOWN_TITLE",
    # ISBN
    "ISBN_PATTERN",
    "is_valid_isbn",
    "looks_like_isbn",
    "normalize_isbn",
    "parse_isbn",
    # Normalization
    "normalize_query",
    "normalize_text",
    "parse_japanese_date",
    "parse_partial_date",
    # Exceptions
    "BookResolveError",
    "CacheError",
    "InvalidArgumentError",
    "NotFoundError",
    "ProviderError",
    "ProviderTimeoutError",
]

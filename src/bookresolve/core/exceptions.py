"""Custom exception hierarchy for bookresolve."""

from typing import Any, ClassVar


class BookResolveError(Exception):
    """Base exception for all bookresolve errors."""

    code: ClassVar[str] = "INTERNAL"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgumentError(BookResolveError):
    """Caller input failed validation (e.g. a malformed ISBN)."""

    code: ClassVar[str] = "INVALID_ARGUMENT"


class ProviderError(BookResolveError):
    """An external catalog provider failed or returned an unusable response."""

    code: ClassVar[str] = "PROVIDER_ERROR"

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.source = source
        self.status_code = status_code


class ProviderTimeoutError(ProviderError):
    """A provider call exceeded its timeout."""

    code: ClassVar[str] = "PROVIDER_TIMEOUT"


class NotFoundError(BookResolveError):
    """Resource not found."""

    code: ClassVar[str] = "NOT_FOUND"


class CacheError(BookResolveError):
    """Cache or history store operation failed."""

    code: ClassVar[str] = "CACHE_ERROR"

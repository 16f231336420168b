"""Cache key builders for consistent key formatting."""

from bookresolve.core.isbn import normalize_isbn
from bookresolve.core.normalization import normalize_query


class CacheKeys:
    """
    Cache key builders.

    The key space is partitioned: ISBN lookups live under ``isbn_<isbn>``,
    keyword searches under their normalized query text.
    """

    ISBN_PREFIX = "isbn_"

    @classmethod
    def isbn(cls, isbn: str) -> str:
        """Key for an ISBN lookup; hyphenated and plain forms share it."""
        return f"{cls.ISBN_PREFIX}{normalize_isbn(isbn) or ''}"

    @classmethod
    def keyword(cls, query: str) -> str:
        """Key for a keyword search: lower-cased, whitespace collapsed."""
        return normalize_query(query)

    @classmethod
    def is_isbn_key(cls, key: str) -> bool:
        return key.startswith(cls.ISBN_PREFIX)

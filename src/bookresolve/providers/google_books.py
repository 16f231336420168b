"""Google Books provider implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource, InputType
from bookresolve.normalizers import google_books
from bookresolve.providers.base import BookProvider, ProviderConfig


class GoogleBooksProvider(BookProvider):
    """
    Google Books API provider (generic volume index, fallback source).

    API Documentation: https://developers.google.com/books/docs/v1/using

    Works without API key but rate limits apply.
    With API key, higher quotas are available.
    """

    SOURCE: ClassVar[DataSource] = DataSource.GENERIC_INDEX
    NAME: ClassVar[str] = "google_books"
    BASE_URL: ClassVar[str] = "https://www.googleapis.com/books/v1"
    SUPPORTED_INPUT_TYPES: ClassVar[frozenset[InputType]] = frozenset(
        {
            InputType.ISBN,
            InputType.KEYWORD,
        }
    )
    PRIORITY: ClassVar[int] = 30
    MAX_RESULTS: ClassVar[int] = 20

    def __init__(self, config: ProviderConfig | None = None) -> None:
        super().__init__(config)
        # API key is optional for Google Books
        self._api_key = config.api_key if config else None

    async def _fetch_isbn(self, isbn: str) -> list[BookRecord]:
        return await self._fetch_query(f"isbn:{isbn}")

    async def _fetch_query(self, query: str) -> list[BookRecord]:
        params: dict[str, Any] = {
            "q": query,
            "maxResults": self.MAX_RESULTS,
            "printType": "books",
        }
        if self._api_key:
            params["key"] = self._api_key

        data = await self._get_json("/volumes", params=params)
        return google_books.normalize_response(data)

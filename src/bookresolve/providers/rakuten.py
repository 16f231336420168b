"""Rakuten Books provider implementation."""

from __future__ import annotations

from typing import Any, ClassVar

from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource, InputType
from bookresolve.normalizers import rakuten
from bookresolve.providers.base import BookProvider, ProviderConfig


class RakutenBooksProvider(BookProvider):
    """
    Rakuten Books API provider (commerce catalog, primary source).

    API Documentation: https://webservice.rakuten.co.jp/documentation/books-book-search

    Requires an application ID. An optional affiliate ID turns item links into
    affiliate links.
    """

    SOURCE: ClassVar[DataSource] = DataSource.COMMERCE
    NAME: ClassVar[str] = "rakuten_books"
    BASE_URL: ClassVar[str] = "https://app.rakuten.co.jp/services/api"
    SEARCH_PATH: ClassVar[str] = "/BooksBook/Search/20170404"
    SUPPORTED_INPUT_TYPES: ClassVar[frozenset[InputType]] = frozenset(
        {
            InputType.ISBN,
            InputType.KEYWORD,
        }
    )
    PRIORITY: ClassVar[int] = 10
    MAX_HITS: ClassVar[int] = 20

    def __init__(self, config: ProviderConfig | None = None) -> None:
        super().__init__(config)
        if not config or not config.api_key:
            raise ValueError("Rakuten Books requires an application ID")
        self._application_id = config.api_key
        self._affiliate_id = config.affiliate_id

    def _base_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {
            "applicationId": self._application_id,
            "format": "json",
            "hits": self.MAX_HITS,
        }
        if self._affiliate_id:
            params["affiliateId"] = self._affiliate_id
        return params

    async def _fetch_isbn(self, isbn: str) -> list[BookRecord]:
        params = self._base_params()
        params["isbn"] = isbn
        data = await self._get_json(self.SEARCH_PATH, params=params)
        return rakuten.normalize_response(data)

    async def _fetch_query(self, query: str) -> list[BookRecord]:
        params = self._base_params()
        params["title"] = query
        data = await self._get_json(self.SEARCH_PATH, params=params)
        return rakuten.normalize_response(data)

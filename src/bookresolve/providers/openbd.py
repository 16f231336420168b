"""openBD provider implementation."""

from __future__ import annotations

from typing import ClassVar

from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource, InputType
from bookresolve.normalizers import openbd
from bookresolve.providers.base import BookProvider


class OpenBDProvider(BookProvider):
    """
    openBD API provider (national bibliographic registry).

    API Documentation: https://openbd.jp/

    ISBN lookups only; no API key needed. Unknown ISBNs come back as ``[null]``.
    """

    SOURCE: ClassVar[DataSource] = DataSource.REGISTRY
    NAME: ClassVar[str] = "openbd"
    BASE_URL: ClassVar[str] = "https://api.openbd.jp/v1"
    SUPPORTED_INPUT_TYPES: ClassVar[frozenset[InputType]] = frozenset({InputType.ISBN})
    PRIORITY: ClassVar[int] = 20

    async def _fetch_isbn(self, isbn: str) -> list[BookRecord]:
        data = await self._get_json("/get", params={"isbn": isbn})
        # One ISBN in, at most one record out.
        return openbd.normalize_response(data)[:1]

    async def _fetch_query(self, query: str) -> list[BookRecord]:
        # openBD has no search endpoint.
        return []

"""Abstract base provider with HTTP client management and failure isolation."""

from __future__ import annotations

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar

import httpx
from pydantic import BaseModel, Field

from bookresolve.core.exceptions import ProviderError, ProviderTimeoutError
from bookresolve.core.models import BookRecord
from bookresolve.core.types import DataSource, InputType, ResolutionStatus

logger = logging.getLogger(__name__)


class ProviderConfig(BaseModel):
    """Configuration for a provider."""

    api_key: str | None = None
    affiliate_id: str | None = None
    base_url: str | None = None
    timeout: float = 15.0
    enabled: bool = True


class ProviderResult(BaseModel):
    """Outcome of one provider call."""

    status: ResolutionStatus
    records: list[BookRecord] = Field(default_factory=list)
    error_message: str | None = None
    source: DataSource
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == ResolutionStatus.SUCCESS and len(self.records) > 0


class BookProvider(ABC):
    """
    Abstract base class for catalog providers.

    Provides:
    - HTTP client management with connection pooling
    - A per-call timeout
    - Failure isolation: every public search method returns a ProviderResult
      and never raises
    """

    # Class-level configuration (to be overridden by subclasses)
    SOURCE: ClassVar[DataSource]
    NAME: ClassVar[str]
    BASE_URL: ClassVar[str]
    SUPPORTED_INPUT_TYPES: ClassVar[frozenset[InputType]]
    PRIORITY: ClassVar[int] = 100

    def __init__(self, config: ProviderConfig | None = None) -> None:
        self.config = config or ProviderConfig()
        self._client: httpx.AsyncClient | None = None

    @property
    def source(self) -> DataSource:
        """Provenance tag stamped on this provider's records."""
        return self.SOURCE

    @property
    def name(self) -> str:
        return self.NAME

    @property
    def priority(self) -> int:
        """Priority for ordering (lower = higher priority)."""
        return self.PRIORITY

    @property
    def is_enabled(self) -> bool:
        return self.config.enabled

    def supports(self, input_type: InputType) -> bool:
        """Check if this provider supports the given input type."""
        return input_type in self.SUPPORTED_INPUT_TYPES

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url or self.BASE_URL,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.TimeoutException as e:
            raise ProviderTimeoutError(
                message=f"Request timed out: {e}",
                source=self.name,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(
                message=f"HTTP error: {e}",
                source=self.name,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests. Override to add auth."""
        return {
            "User-Agent": "bookresolve/1.0",
            "Accept": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET a JSON document, raising ProviderError on any non-2xx status."""
        async with self._get_client() as client:
            response = await client.get(url, params=params)
            if not response.is_success:
                raise ProviderError(
                    message=f"Unexpected status {response.status_code}",
                    source=self.name,
                    status_code=response.status_code,
                )
            try:
                return response.json()
            except ValueError as e:
                raise ProviderError(
                    message=f"Malformed JSON response: {e}",
                    source=self.name,
                    status_code=response.status_code,
                ) from e

    async def _guarded(
        self,
        operation: str,
        call: Callable[[], Awaitable[list[BookRecord]]],
    ) -> ProviderResult:
        """
        Run one provider call under the timeout and convert every failure into
        a ProviderResult.
        """
        start = time.monotonic()
        try:
            async with asyncio.timeout(self.config.timeout):
                records = await call()
        except (TimeoutError, ProviderTimeoutError) as e:
            logger.warning(f"Provider {self.name} timed out during {operation}: {e}")
            return ProviderResult(
                status=ResolutionStatus.TIMEOUT,
                source=self.source,
                error_message=str(e) or "timeout",
                duration_ms=(time.monotonic() - start) * 1000,
            )
        except Exception as e:
            logger.warning(f"Provider {self.name} failed during {operation}: {e}")
            return ProviderResult(
                status=ResolutionStatus.ERROR,
                source=self.source,
                error_message=str(e),
                duration_ms=(time.monotonic() - start) * 1000,
            )

        return ProviderResult(
            status=ResolutionStatus.SUCCESS if records else ResolutionStatus.NOT_FOUND,
            records=records,
            source=self.source,
            duration_ms=(time.monotonic() - start) * 1000,
        )

    async def search_by_isbn(self, isbn: str) -> ProviderResult:
        """Look up a normalized ISBN."""
        if not self.supports(InputType.ISBN):
            return self._unsupported(InputType.ISBN)
        return await self._guarded(f"isbn lookup {isbn}", lambda: self._fetch_isbn(isbn))

    async def search_by_query(self, query: str) -> ProviderResult:
        """Run a keyword search."""
        if not self.supports(InputType.KEYWORD):
            return self._unsupported(InputType.KEYWORD)
        return await self._guarded(f"keyword search {query!r}", lambda: self._fetch_query(query))

    def _unsupported(self, input_type: InputType) -> ProviderResult:
        return ProviderResult(
            status=ResolutionStatus.NOT_FOUND,
            source=self.source,
            error_message=f"Unsupported input type: {input_type}",
        )

    # Abstract methods
    @abstractmethod
    async def _fetch_isbn(self, isbn: str) -> list[BookRecord]:
        """
        Fetch and normalize records for an ISBN.

        May raise; :meth:`search_by_isbn` converts failures into results.
        """
        ...

    @abstractmethod
    async def _fetch_query(self, query: str) -> list[BookRecord]:
        """
        Fetch and normalize records for a keyword query.

        Only called when the provider supports keyword input.
        """
        ...

    async def __aenter__(self) -> "BookProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

"""In-process result cache with TTL and capacity bounds."""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from bookresolve.core.models import BookRecord

logger = logging.getLogger(__name__)

DEFAULT_TTL = 15 * 60
DEFAULT_MAX_ENTRIES = 100
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class CacheEntry:
    """A cached resolution. Never mutated; replaced as a whole."""

    key: str
    records: tuple[BookRecord, ...]
    created_at: float
    size: int


def record_size(records: Sequence[BookRecord]) -> int:
    """Serialized size of a record list in bytes."""
    return sum(len(r.model_dump_json().encode("utf-8")) for r in records)


class ResultCache:
    """
    Bounded map from query key to resolved records.

    - Entries expire ``ttl`` seconds after creation; expiry is checked lazily
      on lookup (or explicitly via :meth:`evict_expired`).
    - ``max_entries`` and ``max_bytes`` bound the cache; the least recently
      used entries are evicted first when either bound is exceeded.
    - Writes replace whole entries under a single lock, so concurrent readers
      only ever see complete entries.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        max_bytes: int = DEFAULT_MAX_BYTES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl <= 0 or max_entries <= 0 or max_bytes <= 0:
            raise ValueError("ttl, max_entries and max_bytes must be positive")
        self.ttl = ttl
        self.max_entries = max_entries
        self.max_bytes = max_bytes
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._total_size = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @property
    def total_size(self) -> int:
        return self._total_size

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at >= self.ttl

    def _remove(self, key: str) -> CacheEntry | None:
        entry = self._entries.pop(key, None)
        if entry is not None:
            self._total_size -= entry.size
        return entry

    def entry(self, key: str) -> CacheEntry | None:
        """Return the live entry for ``key`` without touching recency."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or self._is_expired(entry, self._clock()):
                return None
            return entry

    def get(self, key: str) -> list[BookRecord] | None:
        """Return cached records, or None on a miss or an expired entry."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry, self._clock()):
                self._remove(key)
                logger.debug(f"Cache entry expired: {key}")
                return None
            self._entries.move_to_end(key)
            return list(entry.records)

    def put(self, key: str, records: Sequence[BookRecord]) -> CacheEntry | None:
        """
        Store records under ``key``, replacing any previous entry.

        Returns the new entry, or None when the records alone exceed
        ``max_bytes`` and were therefore not stored.
        """
        size = record_size(records)
        with self._lock:
            self._remove(key)
            if size > self.max_bytes:
                logger.warning(f"Not caching {key}: {size} bytes exceeds {self.max_bytes}")
                return None
            entry = CacheEntry(
                key=key,
                records=tuple(records),
                created_at=self._clock(),
                size=size,
            )
            self._entries[key] = entry
            self._total_size += size
            self._evict_over_capacity()
            return entry

    def _evict_over_capacity(self) -> None:
        while self._entries and (
            len(self._entries) > self.max_entries or self._total_size > self.max_bytes
        ):
            key, _ = next(iter(self._entries.items()))
            self._remove(key)
            logger.debug(f"Evicted least recently used cache entry: {key}")

    def evict_expired(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if self._is_expired(e, now)]
            for key in expired:
                self._remove(key)
            return len(expired)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._remove(key) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._total_size = 0

"""Result cache and recent query history."""

from .client import AsyncRedisClient
from .history import HistoryStore, MemoryHistoryStore, RecentQueryHistory, RedisHistoryStore
from .keys import CacheKeys
from .memory import CacheEntry, ResultCache

__all__ = [
    "AsyncRedisClient",
    "CacheEntry",
    "CacheKeys",
    "HistoryStore",
    "MemoryHistoryStore",
    "RecentQueryHistory",
    "RedisHistoryStore",
    "ResultCache",
]

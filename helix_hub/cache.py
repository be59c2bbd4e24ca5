"""
In-memory TTL cache for SQL-backed data.

Azure Functions keeps a worker process warm between invocations, so
team and leave data are held here for a short TTL instead of hitting
SQL on every dashboard load. Each function instance keeps its own copy.
"""

import logging
import time
from threading import Lock
from typing import Awaitable, Callable, Generic, Hashable, Optional, TypeVar

from cachetools import TTLCache as _Entries

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TTLCache(Generic[T]):
    """
    Thread-safe cache with TTL expiry and LRU eviction.

    Entries live in a ``cachetools.TTLCache``; this wrapper adds locking,
    hit/miss counters and an async loader.

    Attributes:
        max_size: Maximum number of entries
        default_ttl: Time-to-live in seconds
    """

    def __init__(
        self,
        max_size: int = 256,
        default_ttl: float = 300.0,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_size = max_size
        self.default_ttl = default_ttl
        self._entries: _Entries = _Entries(maxsize=max_size, ttl=default_ttl, timer=timer)
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            self._entries.expire()
            return len(self._entries)

    def get(self, key: Hashable) -> Optional[T]:
        """
        Get a value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value, or None if missing or expired
        """
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
                logger.debug(f"Cache miss: {key!r}")
                return None
            self.hits += 1
            return value

    def set(self, key: Hashable, value: T) -> None:
        with self._lock:
            self._entries[key] = value

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    async def get_or_set(self, key: Hashable, loader: Callable[[], Awaitable[T]]) -> T:
        """
        Return the cached value for ``key``, loading and caching it on a miss.

        Failures from ``loader`` propagate and nothing is cached.
        """
        value = self.get(key)
        if value is not None:
            return value
        value = await loader()
        self.set(key, value)
        return value

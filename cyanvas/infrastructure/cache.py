"""In-Process Cache — TTL-bounded get-or-compute store backing the discovery feed.

Invariants:
    - A value is served until its TTL elapses, then recomputed on next access
    - No locking: concurrent misses may each compute; last writer wins
    - Exceptions from compute propagate unchanged and nothing is stored
    - Once closed, every access raises CacheUnavailableError

Design Decisions:
    - Module-level singleton like db_manager: single-process deployment, the
      cached data is a freshness-relaxed view and losing it on restart is fine
    - Clock injectable so tests can advance time without sleeping
"""

import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

from cyanvas.core.errors import CacheUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MemoryCache:
    """Dict-backed cache with per-key expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self._closed = False

    async def get_or_compute(
        self, key: str, ttl_seconds: float,
        compute: Callable[[], Awaitable[T]],
    ) -> T:
        """Return the cached value for key, computing and storing it on miss/expiry."""
        self._ensure_open(key)
        entry = self._entries.get(key)
        now = self._clock()
        if entry is not None and entry[0] > now:
            return entry[1]

        logger.debug("Cache miss", extra={"cache_key": key})
        value = await compute()
        self._ensure_open(key)
        self._entries[key] = (self._clock() + ttl_seconds, value)
        return value

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def close(self) -> None:
        self._entries.clear()
        self._closed = True

    def _ensure_open(self, key: str) -> None:
        if self._closed:
            raise CacheUnavailableError("cache has been closed", cache_key=key)


# Singleton (initialized on startup)
cache: MemoryCache | None = None


def init_cache(**kwargs) -> MemoryCache:
    global cache
    cache = MemoryCache(**kwargs)
    return cache


def get_cache() -> MemoryCache:
    """FastAPI dependency for the shared cache."""
    if not cache:
        raise RuntimeError("Cache not initialized")
    return cache

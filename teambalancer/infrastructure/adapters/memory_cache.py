"""Volatile in-process TTL cache."""

import logging
import threading
import time
from typing import Callable, Dict, Tuple

from ...application.ports.cache_store import CacheStorePort

logger = logging.getLogger(__name__)


class MemoryCacheStore(CacheStorePort):
    """Dictionary-backed cache with per-entry expiry.

    Entries are dropped lazily on read and when ``max_entries`` is reached.
    """

    def __init__(self, max_entries: int = 10000, clock: Callable[[], float] = time.monotonic):
        self._entries: Dict[str, Tuple[float, bytes]] = {}
        self._max_entries = max_entries
        self._clock = clock
        self._lock = threading.Lock()

    def get(self, key: str) -> bytes | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at <= self._clock():
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_entries:
                self._evict()
            self._entries[key] = (self._clock() + ttl_seconds, value)

    def _evict(self) -> None:
        now = self._clock()
        expired = [k for k, (expires_at, _) in self._entries.items() if expires_at <= now]
        for k in expired:
            del self._entries[k]
        if len(self._entries) >= self._max_entries:
            # dicts keep insertion order, so this drops the oldest write
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug("Cache full, evicted %s", oldest)

    def __len__(self) -> int:
        return len(self._entries)

"""Port (interface) for the advisory key/value cache."""

from abc import ABC, abstractmethod


class CacheStorePort(ABC):
    """Key/value store with per-entry TTL.

    Implementations should degrade internal errors to a miss on ``get`` and
    to a no-op on ``set``. Callers still guard both calls.
    """

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        ...

    @abstractmethod
    def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        ...

    def ping(self) -> bool:
        return True

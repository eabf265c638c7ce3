"""Infrastructure adapters."""

from .http_optimizer import HttpOptimizerClient
from .memory_cache import MemoryCacheStore
from .redis_cache import RedisCacheStore
from .riot_data_provider import RiotDataProvider

__all__ = [
    "HttpOptimizerClient",
    "MemoryCacheStore",
    "RedisCacheStore",
    "RiotDataProvider",
]

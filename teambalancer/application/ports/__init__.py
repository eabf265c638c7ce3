"""Application ports (interfaces)."""

from .cache_store import CacheStorePort
from .data_provider import DataProviderPort
from .optimizer import OptimizerPort

__all__ = [
    "CacheStorePort",
    "DataProviderPort",
    "OptimizerPort",
]

"""Wiring of adapters into use cases."""

import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from riftdata.config import riot_config_from_env
from riftdata.riot_client import RiotApiClient

from ..application.ports.cache_store import CacheStorePort
from ..application.ports.optimizer import OptimizerPort
from ..application.use_cases.balance_teams import TeamPartitioner
from ..application.use_cases.get_profile import ProfileAggregator
from ..config import (
    ServiceConfig,
    cache_config_from_env,
    optimizer_config_from_env,
    redis_config_from_env,
)
from .adapters.http_optimizer import HttpOptimizerClient
from .adapters.memory_cache import MemoryCacheStore
from .adapters.redis_cache import RedisCacheStore
from .adapters.riot_data_provider import RiotDataProvider

logger = logging.getLogger(__name__)


@dataclass
class BalancerServices:
    """Explicitly constructed collaborators held for the app's lifetime."""

    profiles: ProfileAggregator
    partitioner: TeamPartitioner
    cache: CacheStorePort
    optimizer: OptimizerPort
    provider: Any = None
    executor: Executor | None = None

    def close(self) -> None:
        for resource in (self.optimizer, self.cache, self.provider):
            close = getattr(resource, "close", None)
            if close is not None:
                close()
        if self.executor is not None:
            self.executor.shutdown(wait=False)


def build_cache() -> CacheStorePort:
    redis_config = redis_config_from_env()
    if redis_config is None:
        logger.info("REDIS_HOST not set, using in-process cache")
        return MemoryCacheStore()
    return RedisCacheStore.from_config(redis_config)


def build_services(service_config: ServiceConfig) -> BalancerServices:
    """Build every collaborator from the environment.

    Raises:
        ValueError: RIOT_API_KEY is not configured
    """
    riot_config = riot_config_from_env()
    if not riot_config.api_key:
        raise ValueError("RIOT_API_KEY not configured")

    executor = ThreadPoolExecutor(
        max_workers=service_config.max_workers,
        thread_name_prefix="balancer-io",
    )
    cache = build_cache()
    provider = RiotDataProvider(RiotApiClient(riot_config))
    optimizer = HttpOptimizerClient(optimizer_config_from_env())

    profiles = ProfileAggregator(provider, cache, cache_config_from_env(), executor)
    partitioner = TeamPartitioner(profiles, optimizer, optimizer_config_from_env(), executor)
    return BalancerServices(
        profiles=profiles,
        partitioner=partitioner,
        cache=cache,
        optimizer=optimizer,
        provider=provider,
        executor=executor,
    )

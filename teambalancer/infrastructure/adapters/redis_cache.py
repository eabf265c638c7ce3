"""Redis-backed cache shared between service instances."""

import logging

import redis

from ...application.ports.cache_store import CacheStorePort
from ...config import RedisConfig

logger = logging.getLogger(__name__)


class RedisCacheStore(CacheStorePort):
    """Cache store on top of a redis-py client.

    Connection and command errors never reach the caller: reads become a
    miss, writes become a no-op and ``ping`` reports False.
    """

    def __init__(self, client: redis.Redis):
        self._client = client

    @classmethod
    def from_config(cls, config: RedisConfig) -> "RedisCacheStore":
        client = redis.Redis(
            host=config.host,
            port=config.port,
            password=config.password,
            socket_timeout=config.socket_timeout_s,
            socket_connect_timeout=config.socket_timeout_s,
        )
        logger.info("Using Redis cache at %s:%s", config.host, config.port)
        return cls(client)

    def get(self, key: str) -> bytes | None:
        try:
            return self._client.get(key)
        except redis.RedisError as e:
            logger.warning("Redis get failed for %s: %s", key, e)
            return None

    def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            return
        try:
            self._client.setex(key, ttl_seconds, value)
        except redis.RedisError as e:
            logger.warning("Redis setex failed for %s: %s", key, e)

    def ping(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis ping failed: %s", e)
            return False

    def close(self) -> None:
        self._client.close()

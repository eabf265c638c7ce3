from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List


DEFAULT_OPTIMIZER_URL = "http://localhost:8000"
DEFAULT_OPTIMIZER_TIMEOUT_MS = 30000
ONE_HOUR_S = 3600


@dataclass(frozen=True)
class CacheConfig:
    profile_ttl_s: int = ONE_HOUR_S
    stats_ttl_s: int = ONE_HOUR_S


@dataclass(frozen=True)
class OptimizerConfig:
    base_url: str = DEFAULT_OPTIMIZER_URL
    timeout_s: float = DEFAULT_OPTIMIZER_TIMEOUT_MS / 1000


@dataclass(frozen=True)
class ServiceConfig:
    log_level: str = "INFO"
    allowed_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    max_workers: int = 32


def cache_config_from_env() -> CacheConfig:
    return CacheConfig(
        profile_ttl_s=int(os.environ.get("CACHE_PROFILE_TTL", ONE_HOUR_S)),
        stats_ttl_s=int(os.environ.get("CACHE_STATS_TTL", ONE_HOUR_S)),
    )


def optimizer_config_from_env() -> OptimizerConfig:
    timeout_ms = int(os.environ.get("AI_ENGINE_TIMEOUT", DEFAULT_OPTIMIZER_TIMEOUT_MS))
    return OptimizerConfig(
        base_url=os.environ.get("AI_ENGINE_URL", DEFAULT_OPTIMIZER_URL).rstrip("/"),
        timeout_s=timeout_ms / 1000,
    )


def service_config_from_env() -> ServiceConfig:
    origins = os.environ.get("ALLOWED_ORIGINS")
    return ServiceConfig(
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        allowed_origins=[o.strip() for o in origins.split(",") if o.strip()]
        if origins
        else ["http://localhost:3000"],
        max_workers=int(os.environ.get("BALANCER_MAX_WORKERS", 32)),
    )


@dataclass(frozen=True)
class RedisConfig:
    host: str = "localhost"
    port: int = 6379
    password: str | None = None
    socket_timeout_s: float = 2.0


def redis_config_from_env() -> RedisConfig | None:
    """Redis settings, or None when ``REDIS_HOST`` is unset and the in-process cache is used."""
    host = os.environ.get("REDIS_HOST", "").strip()
    if not host:
        return None
    return RedisConfig(
        host=host,
        port=int(os.environ.get("REDIS_PORT", 6379)),
        password=os.environ.get("REDIS_PASSWORD") or None,
    )

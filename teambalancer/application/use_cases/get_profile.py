"""Use case for building a summoner profile."""

import asyncio
import json
import logging
from concurrent.futures import Executor
from typing import Any, Dict, List, Tuple

from ..ports.cache_store import CacheStorePort
from ..ports.data_provider import DataProviderPort
from .executor import default_executor, run_blocking
from ...config import CacheConfig
from ...domain.entities.player import PlayerProfile, PlayerStats, RankEntry
from ...domain.errors import UpstreamError
from ...domain.services.stats import aggregate_stats
from ...domain.value_objects.types import MATCH_WINDOW, SOLO_QUEUE_ID, SOLO_QUEUE_TYPE, Puuid

logger = logging.getLogger(__name__)


def profile_cache_key(summoner_name: str) -> str:
    return f"profile:{summoner_name.lower()}"


def stats_cache_key(puuid: str) -> str:
    return f"stats:{puuid}"


def select_solo_entry(entries: List[RankEntry]) -> RankEntry | None:
    return next((e for e in entries if e.queue_type == SOLO_QUEUE_TYPE), None)


class ProfileAggregator:
    """Use case for building a player's profile.

    This orchestrates:
    1. A cache-aside read keyed by the lower-cased summoner name
    2. Identity and ranked standing lookups (required)
    3. Recent solo queue match stats (best effort, cached per puuid)
    4. A best-effort write-through of the assembled profile
    """

    def __init__(
        self,
        data_provider: DataProviderPort,
        cache: CacheStorePort,
        cache_config: CacheConfig | None = None,
        executor: Executor | None = None,
    ):
        self._provider = data_provider
        self._cache = cache
        self._cache_config = cache_config or CacheConfig()
        self._executor = executor or default_executor

    async def get_profile(self, summoner_name: str) -> PlayerProfile:
        """Build or fetch the cached profile of one player.

        Args:
            summoner_name: Display name as typed by the caller

        Returns:
            Player profile; ``stats`` is None without recent solo queue data

        Raises:
            UpstreamError: identity or rank lookup failed
        """
        key = profile_cache_key(summoner_name)
        cached = self._cache_get(key)
        if cached is not None:
            try:
                return PlayerProfile.from_dict(cached)
            except (KeyError, TypeError, ValueError):
                logger.warning("Discarding malformed cache entry %s", key)

        identity = await run_blocking(self._executor, self._provider.get_identity, summoner_name)
        entries = await run_blocking(
            self._executor, self._provider.get_rank_entries, identity.summoner_id
        )
        solo = select_solo_entry(entries)
        stats, degraded = await self._load_stats(identity.puuid, solo)

        profile = PlayerProfile(identity=identity, rank=solo, stats=stats)
        # Profiles missing stats after an upstream fault are rebuilt on the next request.
        if not degraded:
            self._cache_set(key, profile.to_dict(), self._cache_config.profile_ttl_s)
        return profile

    async def get_stats(self, puuid: Puuid, rank: RankEntry | None) -> PlayerStats | None:
        """Aggregate the recent solo queue window, or None if there is none.

        Provider failures here are logged and reported as missing stats.
        """
        stats, _ = await self._load_stats(puuid, rank)
        return stats

    async def _load_stats(
        self, puuid: Puuid, rank: RankEntry | None
    ) -> Tuple[PlayerStats | None, bool]:
        """Return the stats and whether they are missing because of a provider fault."""
        key = stats_cache_key(puuid)
        cached = self._cache_get(key)
        if cached is not None:
            try:
                return PlayerStats.from_dict(cached), False
            except (KeyError, TypeError, ValueError):
                logger.warning("Discarding malformed cache entry %s", key)

        try:
            match_ids = await run_blocking(
                self._executor,
                self._provider.get_recent_match_ids,
                puuid,
                MATCH_WINDOW,
                SOLO_QUEUE_ID,
            )
            participations = await asyncio.gather(
                *(
                    run_blocking(self._executor, self._provider.get_match_participant, match_id, puuid)
                    for match_id in match_ids[:MATCH_WINDOW]
                )
            )
        except UpstreamError as exc:
            logger.warning(
                "Match history unavailable for %s (%s %s); continuing without stats",
                puuid,
                exc.status_code,
                exc.failure.value,
            )
            return None, True

        stats = aggregate_stats(puuid, [p for p in participations if p is not None], rank)
        if stats is not None:
            self._cache_set(key, stats.to_dict(), self._cache_config.stats_ttl_s)
        return stats, False

    def _cache_get(self, key: str) -> Dict[str, Any] | None:
        try:
            raw = self._cache.get(key)
        except Exception as exc:
            logger.warning("Cache read failed for %s: %s", key, exc)
            return None
        if raw is None:
            logger.debug("Cache miss %s", key)
            return None
        try:
            value = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            logger.warning("Discarding undecodable cache entry %s", key)
            return None
        if not isinstance(value, dict):
            logger.warning("Discarding malformed cache entry %s", key)
            return None
        logger.debug("Cache hit %s", key)
        return value

    def _cache_set(self, key: str, value: Dict[str, Any], ttl_seconds: int) -> None:
        try:
            self._cache.set(key, json.dumps(value).encode("utf-8"), ttl_seconds)
        except Exception as exc:
            logger.warning("Cache write failed for %s: %s", key, exc)

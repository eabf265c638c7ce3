import asyncio
import json

import pytest

from teambalancer.application.use_cases.get_profile import ProfileAggregator
from teambalancer.config import CacheConfig
from teambalancer.domain.entities.player import RankEntry
from teambalancer.domain.errors import UpstreamError, UpstreamFailure
from teambalancer.domain.value_objects.types import Position

from fakes import FakeAccount, FakeCache, FakeProvider, participation, solo_rank


def _provider() -> FakeProvider:
    flex = RankEntry(
        queue_type="RANKED_FLEX_SR",
        tier="DIAMOND",
        division="I",
        league_points=0,
        wins=1,
        losses=0,
    )
    return FakeProvider(
        {
            "Faker": FakeAccount(
                rank_entries=[flex, solo_rank("GOLD", "I", wins=60, losses=40)],
                matches=[participation(), None, participation(role="TOP", dragon_kills=1)],
            ),
            "Newbie": FakeAccount(),
        }
    )


def test_builds_profile_and_caches_both_layers() -> None:
    provider = _provider()
    cache = FakeCache()
    aggregator = ProfileAggregator(provider, cache, CacheConfig(profile_ttl_s=3600, stats_ttl_s=3600))

    profile = asyncio.run(aggregator.get_profile("FAKER"))

    assert profile.summoner_name == "Faker"
    assert profile.tier == "GOLD"
    assert profile.division == "I"
    assert profile.win_rate == 0.6
    assert profile.stats is not None
    assert profile.stats.sample_size == 2
    assert profile.stats.objective_participation == 0.5
    assert profile.stats.primary_position == Position.MID
    assert cache.ttls == {"profile:faker": 3600, "stats:puuid-faker": 3600}


def test_cache_hit_makes_no_upstream_calls() -> None:
    cache = FakeCache()
    asyncio.run(ProfileAggregator(_provider(), cache).get_profile("Faker"))

    provider = _provider()
    profile = asyncio.run(ProfileAggregator(provider, cache).get_profile("faker"))

    assert provider.calls == []
    assert profile.tier == "GOLD"
    assert profile.stats is not None
    assert profile.stats.primary_position == Position.MID


def test_stats_layer_reused_across_profile_misses() -> None:
    cache = FakeCache()
    asyncio.run(ProfileAggregator(_provider(), cache).get_profile("Faker"))
    del cache.store["profile:faker"]

    provider = _provider()
    profile = asyncio.run(ProfileAggregator(provider, cache).get_profile("Faker"))

    assert [kind for kind, _ in provider.calls] == ["identity", "rank"]
    assert profile.stats is not None


def test_unranked_without_matches_has_absent_stats() -> None:
    cache = FakeCache()
    profile = asyncio.run(ProfileAggregator(_provider(), cache).get_profile("Newbie"))

    assert profile.rank is None
    assert profile.tier is None
    assert profile.win_rate == 0.0
    assert profile.stats is None
    assert "stats:puuid-newbie" not in cache.store


def test_identity_failure_propagates() -> None:
    provider = FakeProvider({"Limited": FakeAccount(identity_error=UpstreamError(429, "slow down"))})

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(ProfileAggregator(provider, FakeCache()).get_profile("Limited"))

    assert exc_info.value.failure == UpstreamFailure.RATE_LIMITED

    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(ProfileAggregator(provider, FakeCache()).get_profile("Ghost"))
    assert exc_info.value.status_code == 404
    assert exc_info.value.failure == UpstreamFailure.NOT_FOUND


def test_match_history_failure_degrades_to_no_stats() -> None:
    provider = FakeProvider(
        {"Faker": FakeAccount(rank_entries=[solo_rank("GOLD", "I")], match_error=UpstreamError(503, "down"))}
    )
    profile = asyncio.run(ProfileAggregator(provider, FakeCache()).get_profile("Faker"))

    assert profile.tier == "GOLD"
    assert profile.stats is None


def test_degraded_profile_is_not_cached() -> None:
    account = FakeAccount(
        rank_entries=[solo_rank("GOLD", "I")],
        matches=[participation()],
        match_error=UpstreamError(429, "slow down"),
    )
    provider = FakeProvider({"Faker": account})
    cache = FakeCache()
    aggregator = ProfileAggregator(provider, cache)

    degraded = asyncio.run(aggregator.get_profile("Faker"))

    assert degraded.stats is None
    assert cache.store == {}

    account.match_error = None
    recovered = asyncio.run(aggregator.get_profile("Faker"))

    assert recovered.stats is not None
    assert recovered.stats.sample_size == 1
    assert "profile:faker" in cache.store


def test_broken_cache_is_ignored() -> None:
    profile = asyncio.run(ProfileAggregator(_provider(), FakeCache(broken=True)).get_profile("Faker"))
    assert profile.tier == "GOLD"


def test_corrupt_cache_entry_is_a_miss() -> None:
    cache = FakeCache()
    cache.store["profile:faker"] = b"{not json"
    cache.store["stats:puuid-faker"] = json.dumps({"unexpected": 1}).encode("utf-8")
    provider = _provider()

    profile = asyncio.run(ProfileAggregator(provider, cache).get_profile("Faker"))

    assert ("identity", "Faker") in provider.calls
    assert profile.stats is not None
    assert json.loads(cache.store["profile:faker"])["identity"]["name"] == "Faker"

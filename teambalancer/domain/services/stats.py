"""Summary statistics over a player's recent matches."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Optional

from ..entities.player import MatchParticipation, PlayerStats, RankEntry
from ..value_objects.types import MATCH_WINDOW, UNRANKED, Position, Puuid, position_from_riot


def match_kda(p: MatchParticipation) -> float:
    return (p.kills + p.assists) / max(p.deaths, 1)


def match_cs_per_min(p: MatchParticipation) -> float:
    minutes = p.duration_seconds / 60
    return (p.minions_killed + p.neutral_minions_killed) / minutes


def took_objective(p: MatchParticipation) -> bool:
    return p.dragon_kills > 0 or p.baron_kills > 0


def primary_position(participations: Iterable[MatchParticipation]) -> Position:
    counts: Counter = Counter(position_from_riot(p.role) for p in participations)
    if not counts:
        return Position.FILL
    # most_common keeps first-seen order among equal counts
    return counts.most_common(1)[0][0]


def usable_window(participations: Iterable[MatchParticipation]) -> List[MatchParticipation]:
    window = list(participations)[:MATCH_WINDOW]
    return [p for p in window if p.duration_seconds > 0]


def aggregate_stats(
    puuid: Puuid,
    participations: Iterable[MatchParticipation],
    rank: Optional[RankEntry] = None,
) -> Optional[PlayerStats]:
    usable = usable_window(participations)
    if not usable:
        return None

    n = len(usable)
    return PlayerStats(
        puuid=puuid,
        summoner_name=usable[0].summoner_name,
        tier=rank.tier if rank else UNRANKED,
        division=(rank.division or "") if rank else "",
        lp=rank.league_points if rank else 0,
        wins=rank.wins if rank else 0,
        losses=rank.losses if rank else 0,
        win_rate=rank.win_rate if rank else 0.0,
        avg_kda=sum(match_kda(p) for p in usable) / n,
        avg_cs_per_min=sum(match_cs_per_min(p) for p in usable) / n,
        avg_vision_score=sum(p.vision_score for p in usable) / n,
        objective_participation=sum(1 for p in usable if took_objective(p)) / n,
        primary_position=primary_position(usable),
        sample_size=n,
    )

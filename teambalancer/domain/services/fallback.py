"""Deterministic local team partition used when the optimizer is unavailable."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..entities.player import PlayerProfile
from ..entities.team import BalanceResult, PlayerInput, TeamPlayer
from ..value_objects.types import HiddenRating, Probability
from .scoring import profile_score


def _team_player(player: PlayerInput, profile: PlayerProfile, rating: float) -> TeamPlayer:
    return TeamPlayer(
        summoner_name=player.summoner_name,
        assigned_position=player.primary_position,
        hidden_mmr=HiddenRating(rating),
        tier=profile.display_tier,
        division=profile.display_division,
    )


def snake_order(
    roster: Sequence[PlayerInput],
    profiles: Sequence[PlayerProfile],
) -> List[Tuple[PlayerInput, PlayerProfile, float]]:
    scored = [(player, profile, profile_score(profile)) for player, profile in zip(roster, profiles)]
    # sorted() is stable, so equal scores keep roster order
    return sorted(scored, key=lambda item: item[2], reverse=True)


def fallback_partition(
    roster: Sequence[PlayerInput],
    profiles: Sequence[PlayerProfile],
) -> BalanceResult:
    """Split the roster by alternating over players sorted by hidden rating.

    Sorted positions 0, 2, 4, ... go to team A and 1, 3, 5, ... to team B.
    Players keep their declared primary position.

    Args:
        roster: Caller roster
        profiles: Profiles aligned index-for-index with ``roster``

    Returns:
        A single rank-1 BalanceResult
    """
    if len(roster) != len(profiles):
        raise ValueError("roster and profiles must be the same length")

    team_a: List[TeamPlayer] = []
    team_b: List[TeamPlayer] = []
    score_a = 0.0
    score_b = 0.0
    for idx, (player, profile, rating) in enumerate(snake_order(roster, profiles)):
        if idx % 2 == 0:
            team_a.append(_team_player(player, profile, rating))
            score_a += rating
        else:
            team_b.append(_team_player(player, profile, rating))
            score_b += rating

    total = score_a + score_b
    team_a_win_rate = score_a / total if total > 0 else 0.5

    return BalanceResult(
        rank=1,
        team_a=team_a,
        team_b=team_b,
        team_a_win_rate=Probability(team_a_win_rate),
        team_b_win_rate=Probability(1 - team_a_win_rate),
        balance_score=abs(score_a - score_b),
    )

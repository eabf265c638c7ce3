"""Domain value objects."""

from .types import (
    MATCH_WINDOW,
    SOLO_QUEUE_ID,
    SOLO_QUEUE_TYPE,
    UNRANKED,
    Division,
    HiddenRating,
    MatchId,
    Position,
    Probability,
    Puuid,
    SummonerId,
    Tier,
    position_from_riot,
)

__all__ = [
    "MATCH_WINDOW",
    "SOLO_QUEUE_ID",
    "SOLO_QUEUE_TYPE",
    "UNRANKED",
    "Division",
    "HiddenRating",
    "MatchId",
    "Position",
    "Probability",
    "Puuid",
    "SummonerId",
    "Tier",
    "position_from_riot",
]

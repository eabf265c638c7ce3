"""Domain entities."""

from .player import (
    MatchParticipation,
    PlayerIdentity,
    PlayerProfile,
    PlayerStats,
    RankEntry,
    win_rate,
)
from .team import (
    BalanceResult,
    FeaturePayload,
    PlayerInput,
    TeamPlayer,
)

__all__ = [
    "BalanceResult",
    "FeaturePayload",
    "MatchParticipation",
    "PlayerIdentity",
    "PlayerInput",
    "PlayerProfile",
    "PlayerStats",
    "RankEntry",
    "TeamPlayer",
    "win_rate",
]

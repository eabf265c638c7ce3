"""Team partition domain entities."""

from dataclasses import dataclass, field
from typing import List

from ..errors import ValidationError
from ..value_objects.types import HiddenRating, Position, Probability


def _parse_position(raw: str | Position, field_name: str) -> Position:
    if isinstance(raw, Position):
        return raw
    try:
        return Position(str(raw).strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid {field_name}: {raw}") from None


@dataclass(frozen=True)
class PlayerInput:
    """Roster entry supplied by the caller."""

    summoner_name: str
    primary_position: Position
    secondary_position: Position

    @classmethod
    def from_raw(cls, summoner_name: str, primary: str, secondary: str) -> "PlayerInput":
        """Build a roster entry from untrusted strings.

        Raises:
            ValidationError: blank name or a role outside Position
        """
        name = (summoner_name or "").strip()
        if not name:
            raise ValidationError("summonerName must not be empty")
        return cls(
            summoner_name=name,
            primary_position=_parse_position(primary, "primaryPosition"),
            secondary_position=_parse_position(secondary, "secondaryPosition"),
        )


@dataclass(frozen=True)
class FeaturePayload:
    """Per-player feature vector sent to the optimizer."""

    summoner_name: str
    primary_position: Position
    secondary_position: Position
    tier_score: float
    win_rate: float
    avg_kda: float = 0.0
    avg_cs_per_min: float = 0.0
    avg_vision_score: float = 0.0
    objective_participation: float = 0.0


@dataclass
class TeamPlayer:
    """A player placed on a team."""

    summoner_name: str
    assigned_position: Position
    hidden_mmr: HiddenRating
    tier: str
    division: str


@dataclass
class BalanceResult:
    """One candidate two-team partition."""

    rank: int  # 1 = best
    team_a: List[TeamPlayer] = field(default_factory=list)
    team_b: List[TeamPlayer] = field(default_factory=list)
    team_a_win_rate: Probability = Probability(0.5)
    team_b_win_rate: Probability = Probability(0.5)
    balance_score: float = 0.0  # lower = more even

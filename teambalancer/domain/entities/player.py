"""Player domain entities."""

from dataclasses import asdict, dataclass
from typing import Any, Dict

from ..value_objects.types import UNRANKED, Position, Puuid, SummonerId


def win_rate(wins: int, losses: int) -> float:
    games = wins + losses
    return wins / games if games > 0 else 0.0


@dataclass(frozen=True)
class PlayerIdentity:
    """Account identity as reported by the data provider."""

    puuid: Puuid
    summoner_id: SummonerId
    name: str
    level: int
    icon_id: int


@dataclass(frozen=True)
class RankEntry:
    """One ranked queue standing."""

    queue_type: str
    tier: str
    division: str | None  # None above Master
    league_points: int
    wins: int
    losses: int
    hot_streak: bool = False
    veteran: bool = False
    fresh_blood: bool = False
    inactive: bool = False

    @property
    def win_rate(self) -> float:
        return win_rate(self.wins, self.losses)


@dataclass(frozen=True)
class MatchParticipation:
    """A single player's line in one match."""

    summoner_name: str
    champion: str
    role: str  # raw provider position string
    kills: int
    deaths: int
    assists: int
    minions_killed: int
    neutral_minions_killed: int
    vision_score: int
    win: bool
    duration_seconds: int
    dragon_kills: int = 0
    baron_kills: int = 0


@dataclass
class PlayerStats:
    """Aggregate over a player's recent solo queue window.

    Only built from at least one usable match; absence of evidence is
    represented by ``None`` at the call site, never by a zeroed instance.
    """

    puuid: Puuid
    summoner_name: str
    tier: str
    division: str
    lp: int
    wins: int
    losses: int
    win_rate: float
    avg_kda: float
    avg_cs_per_min: float
    avg_vision_score: float
    objective_participation: float
    primary_position: Position
    sample_size: int

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["primary_position"] = self.primary_position.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        return cls(**{**data, "primary_position": Position(data["primary_position"])})


@dataclass
class PlayerProfile:
    """Identity, best-effort solo rank and optional recent stats."""

    identity: PlayerIdentity
    rank: RankEntry | None = None
    stats: PlayerStats | None = None

    @property
    def puuid(self) -> Puuid:
        return self.identity.puuid

    @property
    def summoner_name(self) -> str:
        return self.identity.name

    @property
    def tier(self) -> str | None:
        return self.rank.tier if self.rank else None

    @property
    def division(self) -> str | None:
        return self.rank.division if self.rank else None

    @property
    def lp(self) -> int:
        return self.rank.league_points if self.rank else 0

    @property
    def wins(self) -> int:
        return self.rank.wins if self.rank else 0

    @property
    def losses(self) -> int:
        return self.rank.losses if self.rank else 0

    @property
    def win_rate(self) -> float:
        return self.rank.win_rate if self.rank else 0.0

    @property
    def display_tier(self) -> str:
        return self.tier or UNRANKED

    @property
    def display_division(self) -> str:
        return self.division or ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identity": asdict(self.identity),
            "rank": asdict(self.rank) if self.rank else None,
            "stats": self.stats.to_dict() if self.stats else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerProfile":
        rank = data.get("rank")
        stats = data.get("stats")
        return cls(
            identity=PlayerIdentity(**data["identity"]),
            rank=RankEntry(**rank) if rank else None,
            stats=PlayerStats.from_dict(stats) if stats else None,
        )

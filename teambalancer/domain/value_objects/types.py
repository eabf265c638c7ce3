"""Domain value objects and type aliases."""

from enum import Enum
from typing import NewType

# Type aliases for domain clarity
Puuid = NewType("Puuid", str)
SummonerId = NewType("SummonerId", str)
MatchId = NewType("MatchId", str)
HiddenRating = NewType("HiddenRating", float)
Probability = NewType("Probability", float)  # 0-1

UNRANKED = "UNRANKED"
SOLO_QUEUE_TYPE = "RANKED_SOLO_5x5"
SOLO_QUEUE_ID = 420
MATCH_WINDOW = 20


class Tier(int, Enum):
    """Competitive tier, ordered from lowest to highest."""

    IRON = 1
    BRONZE = 2
    SILVER = 3
    GOLD = 4
    PLATINUM = 5
    EMERALD = 6
    DIAMOND = 7
    MASTER = 8
    GRANDMASTER = 9
    CHALLENGER = 10


class Division(str, Enum):
    """Sub-tier division. Master and above have none."""

    I = "I"
    II = "II"
    III = "III"
    IV = "IV"


class Position(str, Enum):
    """Player role/position in game."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MID = "MID"
    ADC = "ADC"
    SUPPORT = "SUPPORT"
    FILL = "FILL"  # flexible, no preference


_RIOT_POSITIONS = {
    "TOP": Position.TOP,
    "JUNGLE": Position.JUNGLE,
    "MIDDLE": Position.MID,
    "MID": Position.MID,
    "BOTTOM": Position.ADC,
    "ADC": Position.ADC,
    "UTILITY": Position.SUPPORT,
    "SUPPORT": Position.SUPPORT,
}


def position_from_riot(raw: object) -> Position:
    """Map a Riot teamPosition string to a Position, FILL when unmapped."""
    if not raw:
        return Position.FILL
    return _RIOT_POSITIONS.get(str(raw).strip().upper(), Position.FILL)

"""Tier/division to hidden rating conversion."""

from __future__ import annotations

from typing import Dict, Optional

from ..entities.player import PlayerProfile
from ..value_objects.types import Division, Tier

TIER_VALUES: Dict[str, int] = {tier.name: tier.value for tier in Tier}

# Always below one tier step, so a higher tier beats any division of a lower one.
DIVISION_BONUS: Dict[str, float] = {
    Division.I.value: 0.75,
    Division.II.value: 0.5,
    Division.III.value: 0.25,
    Division.IV.value: 0.0,
}


def tier_value(tier: Optional[str]) -> int:
    if not tier:
        return 0
    return TIER_VALUES.get(tier.strip().upper(), 0)


def division_bonus(division: Optional[str]) -> float:
    if not division:
        return 0.0
    return DIVISION_BONUS.get(division.strip().upper(), 0.0)


def score(tier: Optional[str], division: Optional[str]) -> float:
    """Hidden rating for a tier/division pair.

    Unknown tiers count as 0 instead of raising, e.g. ``score("GOLD", "I")``
    is 4.75 and ``score("UNKNOWN", "I")`` is 0.75.
    """
    return tier_value(tier) + division_bonus(division)


def profile_score(profile: PlayerProfile) -> float:
    # Unranked players are rated as the floor of the ladder.
    return score(profile.tier or Tier.IRON.name, profile.division or Division.IV.value)

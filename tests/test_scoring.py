import pytest

from teambalancer.domain.services.scoring import division_bonus, profile_score, score, tier_value
from teambalancer.domain.value_objects.types import Tier

from fakes import profile

DIVISIONS = ["I", "II", "III", "IV", None]


def test_score_examples() -> None:
    assert score("IRON", "IV") == 1
    assert score("GOLD", "I") == 4.75
    assert score("DIAMOND", "II") == 7.5
    assert score("CHALLENGER", "I") == 10.75


def test_higher_tier_beats_any_lower_division() -> None:
    tiers = [t.name for t in Tier]
    for lower, higher in zip(tiers, tiers[1:]):
        best_lower = max(score(lower, d) for d in DIVISIONS)
        for d in DIVISIONS:
            assert score(higher, d) > best_lower


@pytest.mark.parametrize("division,bonus", [("I", 0.75), ("II", 0.5), ("III", 0.25), ("IV", 0.0), (None, 0.0)])
def test_unknown_tier_scores_division_bonus_only(division, bonus) -> None:
    assert score("UNKNOWN", division) == bonus
    assert score(None, division) == bonus


def test_lookup_is_case_insensitive() -> None:
    assert tier_value("gold") == 4
    assert division_bonus("ii") == 0.5
    assert division_bonus("V") == 0.0


def test_profile_score_treats_unranked_as_iron_iv() -> None:
    assert profile_score(profile("Nobody", None, None)) == 1.0
    assert profile_score(profile("Climber", "MASTER", None)) == 8.0

"""Use case for partitioning a custom game roster into two teams."""

import asyncio
import logging
import math
from collections import Counter
from concurrent.futures import Executor
from dataclasses import replace
from typing import Dict, List, Sequence

from ..ports.optimizer import OptimizerPort
from .executor import default_executor, run_blocking
from .get_profile import ProfileAggregator
from ...config import OptimizerConfig
from ...domain.entities.player import PlayerProfile
from ...domain.entities.team import BalanceResult, FeaturePayload, PlayerInput, TeamPlayer
from ...domain.errors import OptimizerError, OptimizerFault, ValidationError
from ...domain.services.fallback import fallback_partition
from ...domain.services.scoring import profile_score
from ...domain.value_objects.types import UNRANKED

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 10
# optimizers round win rates to a few decimals
WIN_RATE_TOLERANCE = 1e-3


def validate_roster(roster: Sequence[PlayerInput]) -> None:
    if not MIN_PLAYERS <= len(roster) <= MAX_PLAYERS:
        raise ValidationError(
            f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {len(roster)}"
        )


def build_feature_payload(player: PlayerInput, profile: PlayerProfile) -> FeaturePayload:
    stats = profile.stats
    # Zeroed stats exist only in the optimizer payload, never on the profile.
    return FeaturePayload(
        summoner_name=player.summoner_name,
        primary_position=player.primary_position,
        secondary_position=player.secondary_position,
        tier_score=profile_score(profile),
        win_rate=profile.win_rate,
        avg_kda=stats.avg_kda if stats else 0.0,
        avg_cs_per_min=stats.avg_cs_per_min if stats else 0.0,
        avg_vision_score=stats.avg_vision_score if stats else 0.0,
        objective_participation=stats.objective_participation if stats else 0.0,
    )


def _profile_index(
    roster: Sequence[PlayerInput],
    profiles: Sequence[PlayerProfile],
) -> Dict[str, PlayerProfile]:
    index: Dict[str, PlayerProfile] = {}
    for player, profile in zip(roster, profiles):
        index.setdefault(profile.summoner_name.lower(), profile)
        index[player.summoner_name.lower()] = profile
    return index


def _with_display(player: TeamPlayer, index: Dict[str, PlayerProfile]) -> TeamPlayer:
    profile = index.get(player.summoner_name.lower())
    if profile is None:
        return replace(player, tier=UNRANKED, division="")
    return replace(player, tier=profile.display_tier, division=profile.display_division)


def validate_candidate(
    candidate: BalanceResult,
    roster: Sequence[PlayerInput],
    profiles: Sequence[PlayerProfile],
) -> None:
    """Check that a candidate seats every roster player exactly once.

    Names match case-insensitively against the roster name or the display
    name returned by the provider.

    Raises:
        OptimizerError: BAD_RESPONSE when the candidate is not a partition
            of the roster or its win rates do not sum to one
    """
    canonical: Dict[str, str] = {}
    for player, profile in zip(roster, profiles):
        canonical[player.summoner_name.lower()] = player.summoner_name.lower()
        canonical.setdefault(profile.summoner_name.lower(), player.summoner_name.lower())

    seated = Counter(
        canonical.get(p.summoner_name.lower(), p.summoner_name.lower())
        for p in candidate.team_a + candidate.team_b
    )
    expected = Counter(p.summoner_name.lower() for p in roster)
    if seated != expected:
        raise OptimizerError(
            OptimizerFault.BAD_RESPONSE,
            f"Candidate {candidate.rank} does not partition the roster",
        )

    win_rates = (candidate.team_a_win_rate, candidate.team_b_win_rate)
    if not all(0.0 <= w <= 1.0 for w in win_rates) or not math.isclose(
        sum(win_rates), 1.0, abs_tol=WIN_RATE_TOLERANCE
    ):
        raise OptimizerError(
            OptimizerFault.BAD_RESPONSE,
            f"Candidate {candidate.rank} win rates {win_rates} do not sum to 1",
        )


def resolve_display_fields(
    candidate: BalanceResult,
    index: Dict[str, PlayerProfile],
) -> BalanceResult:
    return replace(
        candidate,
        team_a=[_with_display(p, index) for p in candidate.team_a],
        team_b=[_with_display(p, index) for p in candidate.team_b],
    )


class TeamPartitioner:
    """Use case for balancing a roster of 2-10 players.

    This orchestrates the process of:
    1. Fetching every player's profile concurrently (fail-fast)
    2. Building optimizer feature payloads
    3. Asking the optimizer for up to three partitions under a deadline
    4. Falling back to a deterministic snake split if the optimizer fails
    """

    def __init__(
        self,
        profile_aggregator: ProfileAggregator,
        optimizer: OptimizerPort,
        optimizer_config: OptimizerConfig | None = None,
        executor: Executor | None = None,
    ):
        self._profiles = profile_aggregator
        self._optimizer = optimizer
        self._optimizer_config = optimizer_config or OptimizerConfig()
        self._executor = executor or default_executor

    async def balance(self, roster: Sequence[PlayerInput]) -> List[BalanceResult]:
        """Partition the roster into two teams.

        Args:
            roster: Caller-supplied players

        Returns:
            One to three candidates, best first

        Raises:
            ValidationError: roster size outside [2, 10]
            UpstreamError: any player's profile could not be built
        """
        validate_roster(roster)

        profiles: List[PlayerProfile] = list(
            await asyncio.gather(*(self._profiles.get_profile(p.summoner_name) for p in roster))
        )
        payloads = [build_feature_payload(p, prof) for p, prof in zip(roster, profiles)]

        try:
            candidates = await self._optimize(payloads)
            for candidate in candidates:
                validate_candidate(candidate, roster, profiles)
        except (OptimizerError, asyncio.TimeoutError) as exc:
            logger.warning(
                "Optimizer result unusable, using fallback partition: %s",
                str(exc) or "deadline exceeded",
            )
            return [fallback_partition(roster, profiles)]

        index = _profile_index(roster, profiles)
        return [resolve_display_fields(c, index) for c in candidates]

    async def _optimize(self, payloads: List[FeaturePayload]) -> List[BalanceResult]:
        deadline = self._optimizer_config.timeout_s
        return await asyncio.wait_for(
            run_blocking(self._executor, self._optimizer.optimize, payloads, deadline),
            timeout=deadline,
        )

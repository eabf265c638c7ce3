"""Adapter for the external team-balancing engine over HTTP."""

import logging
from typing import Any, Dict, List

import requests

from ...application.ports.optimizer import OptimizerPort
from ...config import OptimizerConfig, optimizer_config_from_env
from ...domain.entities.team import BalanceResult, FeaturePayload, TeamPlayer
from ...domain.errors import OptimizerError, OptimizerFault
from ...domain.value_objects.types import HiddenRating, Probability, position_from_riot

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 3


def payload_to_json(player: FeaturePayload) -> Dict[str, Any]:
    return {
        "summonerName": player.summoner_name,
        "primaryPosition": player.primary_position.value,
        "secondaryPosition": player.secondary_position.value,
        "tierScore": player.tier_score,
        "winRate": player.win_rate,
        "avgKda": player.avg_kda,
        "avgCsPerMin": player.avg_cs_per_min,
        "avgVisionScore": player.avg_vision_score,
        "objectiveParticipation": player.objective_participation,
    }


def _team_from_json(players: List[Dict[str, Any]]) -> List[TeamPlayer]:
    return [
        TeamPlayer(
            summoner_name=str(p["summonerName"]),
            assigned_position=position_from_riot(p.get("assignedPosition")),
            hidden_mmr=HiddenRating(float(p["hiddenMmr"])),
            tier="",
            division="",
        )
        for p in players
    ]


def candidates_from_json(body: Any) -> List[BalanceResult]:
    """Parse the engine's ``{"results": [...]}`` body.

    Raises:
        OptimizerError: BAD_RESPONSE when the body does not have the expected shape
    """
    try:
        results = body["results"]
        candidates = [
            BalanceResult(
                rank=int(r["rank"]),
                team_a=_team_from_json(r["teamA"]),
                team_b=_team_from_json(r["teamB"]),
                team_a_win_rate=Probability(float(r["teamAWinRate"])),
                team_b_win_rate=Probability(float(r["teamBWinRate"])),
                balance_score=float(r["balanceScore"]),
            )
            for r in results
        ]
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise OptimizerError(OptimizerFault.BAD_RESPONSE, f"Malformed optimizer response: {exc!r}") from exc

    if not 1 <= len(candidates) <= MAX_CANDIDATES:
        raise OptimizerError(
            OptimizerFault.BAD_RESPONSE,
            f"Expected 1-{MAX_CANDIDATES} candidates, got {len(candidates)}",
        )
    return candidates


class HttpOptimizerClient(OptimizerPort):
    """Client for the balancing engine's ``POST /team/balance`` endpoint."""

    def __init__(self, config: OptimizerConfig | None = None, session: requests.Session | None = None):
        self._config = config or optimizer_config_from_env()
        self._session = session or requests.Session()
        self._session.headers.update({"content-type": "application/json", "accept": "application/json"})

    def optimize(self, players: List[FeaturePayload], deadline_s: float) -> List[BalanceResult]:
        url = f"{self._config.base_url}/team/balance"
        try:
            resp = self._session.post(
                url,
                json={"players": [payload_to_json(p) for p in players]},
                timeout=deadline_s,
            )
        except requests.Timeout as exc:
            raise OptimizerError(OptimizerFault.TIMEOUT, f"Optimizer timed out after {deadline_s}s") from exc
        except requests.RequestException as exc:
            raise OptimizerError(OptimizerFault.UNAVAILABLE, f"Optimizer unreachable: {exc}") from exc

        if not resp.ok:
            raise OptimizerError(OptimizerFault.UNAVAILABLE, f"Optimizer returned HTTP {resp.status_code}")
        try:
            body = resp.json()
        except ValueError as exc:
            raise OptimizerError(OptimizerFault.BAD_RESPONSE, "Optimizer response is not JSON") from exc
        return candidates_from_json(body)

    def ping(self) -> bool:
        try:
            resp = self._session.get(f"{self._config.base_url}/health", timeout=3)
        except requests.RequestException as exc:
            logger.debug("Optimizer health check failed: %s", exc)
            return False
        return resp.ok

    def close(self) -> None:
        self._session.close()

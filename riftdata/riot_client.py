from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from .config import DEFAULT_MATCH_COUNT, RiotConfig, riot_config_from_env


STATUS_MESSAGES: Dict[int, str] = {
    400: "Bad request.",
    401: "The Riot API key is invalid.",
    403: "Access to the Riot API was denied.",
    404: "Summoner not found.",
    429: "Riot API rate limit exceeded. Please try again shortly.",
    500: "Riot API server error.",
}


class RiotApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    @classmethod
    def from_status(cls, status_code: int) -> "RiotApiError":
        return cls(status_code, STATUS_MESSAGES.get(status_code, "An unknown error occurred."))


@dataclass
class RiotApiClient:
    config: Optional[RiotConfig] = None

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = riot_config_from_env()
        self.session = requests.Session()
        self.session.headers.update(
            {
                "X-Riot-Token": self.config.api_key,
                "content-type": "application/json",
                "accept": "application/json",
            }
        )

    def _get(self, base_url: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        assert self.config is not None
        try:
            resp = self.session.get(base_url + path, params=params, timeout=self.config.timeout_s)
        except requests.RequestException as exc:
            raise RiotApiError(500, f"{STATUS_MESSAGES[500]} ({exc})") from exc
        if not resp.ok:
            raise RiotApiError.from_status(resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise RiotApiError(500, "Unexpected response body from the Riot API.") from exc

    def get_summoner_by_name(self, summoner_name: str) -> Dict[str, Any]:
        assert self.config is not None
        encoded = quote(summoner_name, safe="")
        return self._get(self.config.platform_url, f"/lol/summoner/v4/summoners/by-name/{encoded}")

    def get_league_entries(self, summoner_id: str) -> List[Dict[str, Any]]:
        assert self.config is not None
        return self._get(self.config.platform_url, f"/lol/league/v4/entries/by-summoner/{summoner_id}")

    def get_match_ids(
        self,
        puuid: str,
        count: int = DEFAULT_MATCH_COUNT,
        queue_id: Optional[int] = None,
    ) -> List[str]:
        assert self.config is not None
        params: Dict[str, Any] = {"count": count}
        if queue_id:
            params["queue"] = queue_id
        return self._get(
            self.config.regional_url,
            f"/lol/match/v5/matches/by-puuid/{puuid}/ids",
            params=params,
        )

    def get_match(self, match_id: str) -> Dict[str, Any]:
        assert self.config is not None
        return self._get(self.config.regional_url, f"/lol/match/v5/matches/{match_id}")

    def close(self) -> None:
        self.session.close()


def find_participant(match: Dict[str, Any], puuid: str) -> Optional[Dict[str, Any]]:
    """
    Return the participant entry for puuid with the match duration injected.

    Riot reports gameDuration on the match info, not on each participant.
    """
    info = match.get("info") or {}
    for participant in info.get("participants") or []:
        if participant.get("puuid") == puuid:
            return {**participant, "gameDuration": info.get("gameDuration", 0)}
    return None

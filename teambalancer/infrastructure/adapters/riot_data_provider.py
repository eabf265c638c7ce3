"""Adapter wrapping the Riot API client."""

from typing import List

from riftdata.normalize import normalize_league_entry, normalize_participant, normalize_summoner
from riftdata.riot_client import RiotApiClient, RiotApiError, find_participant

from ...application.ports.data_provider import DataProviderPort
from ...domain.entities.player import MatchParticipation, PlayerIdentity, RankEntry
from ...domain.errors import UpstreamError
from ...domain.value_objects.types import MatchId, Puuid, SummonerId


def _upstream(exc: RiotApiError) -> UpstreamError:
    return UpstreamError(exc.status_code, exc.message)


class RiotDataProvider(DataProviderPort):
    """Adapter for fetching player data from the Riot Games API."""

    def __init__(self, client: RiotApiClient | None = None):
        """Initialize with a client.

        Args:
            client: Riot API client. If None, one is built from the environment.
        """
        self._client = client or RiotApiClient()

    def get_identity(self, summoner_name: str) -> PlayerIdentity:
        try:
            raw = self._client.get_summoner_by_name(summoner_name)
        except RiotApiError as exc:
            raise _upstream(exc) from exc
        return PlayerIdentity(**normalize_summoner(raw))

    def get_rank_entries(self, summoner_id: SummonerId) -> List[RankEntry]:
        try:
            raw = self._client.get_league_entries(summoner_id)
        except RiotApiError as exc:
            raise _upstream(exc) from exc
        return [RankEntry(**normalize_league_entry(e)) for e in raw or []]

    def get_recent_match_ids(self, puuid: Puuid, count: int, queue_id: int) -> List[MatchId]:
        try:
            raw = self._client.get_match_ids(puuid, count=count, queue_id=queue_id)
        except RiotApiError as exc:
            raise _upstream(exc) from exc
        return [MatchId(str(match_id)) for match_id in raw or []]

    def get_match_participant(self, match_id: MatchId, puuid: Puuid) -> MatchParticipation | None:
        try:
            match = self._client.get_match(match_id)
        except RiotApiError as exc:
            raise _upstream(exc) from exc
        participant = find_participant(match, puuid)
        if participant is None:
            return None
        return MatchParticipation(**normalize_participant(participant))

    def close(self) -> None:
        self._client.close()

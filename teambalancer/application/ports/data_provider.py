"""Port (interface) for the read-only game-data provider."""

from abc import ABC, abstractmethod
from typing import List

from ...domain.entities.player import MatchParticipation, PlayerIdentity, RankEntry
from ...domain.value_objects.types import MatchId, Puuid, SummonerId


class DataProviderPort(ABC):
    """Port for fetching identity, rank and match data.

    Implementations are blocking and raise ``UpstreamError`` for any
    rejected or unanswered request. They must not retry.
    """

    @abstractmethod
    def get_identity(self, summoner_name: str) -> PlayerIdentity:
        """Look up an account by display name."""
        ...

    @abstractmethod
    def get_rank_entries(self, summoner_id: SummonerId) -> List[RankEntry]:
        """Fetch every ranked queue standing for a summoner."""
        ...

    @abstractmethod
    def get_recent_match_ids(self, puuid: Puuid, count: int, queue_id: int) -> List[MatchId]:
        """Fetch the most recent match ids, newest first.

        Args:
            puuid: Player UUID
            count: Maximum number of ids
            queue_id: Queue filter

        Returns:
            Match id list, possibly empty
        """
        ...

    @abstractmethod
    def get_match_participant(self, match_id: MatchId, puuid: Puuid) -> MatchParticipation | None:
        """Fetch one player's line from a match, or None if they are not in it."""
        ...

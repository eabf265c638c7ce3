"""Port (interface) for the external team optimizer."""

from abc import ABC, abstractmethod
from typing import List

from ...domain.entities.team import BalanceResult, FeaturePayload


class OptimizerPort(ABC):
    """Remote capability ranking candidate team partitions."""

    @abstractmethod
    def optimize(self, players: List[FeaturePayload], deadline_s: float) -> List[BalanceResult]:
        """Request ranked partitions for the given feature vectors.

        Returned candidates carry the optimizer's names, positions and
        ratings. Tier and division are left blank for the caller to fill.

        Args:
            players: One payload per roster member
            deadline_s: Seconds the remote call may take

        Returns:
            One to three candidates, best first

        Raises:
            OptimizerError: on timeout, unreachable service or malformed body
        """
        ...

    def ping(self) -> bool:
        return True

"""Application use cases."""

from .balance_teams import TeamPartitioner
from .get_profile import ProfileAggregator

__all__ = [
    "ProfileAggregator",
    "TeamPartitioner",
]

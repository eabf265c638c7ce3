"""Pure domain services: scoring, stats aggregation and fallback partitioning."""

from .fallback import fallback_partition
from .scoring import profile_score, score
from .stats import aggregate_stats

__all__ = [
    "aggregate_stats",
    "fallback_partition",
    "profile_score",
    "score",
]

"""Riot Games API access package."""

__all__ = [
    "config",
    "riot_client",
    "normalize",
]

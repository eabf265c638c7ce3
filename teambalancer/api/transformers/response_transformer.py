"""Transform domain results into the frontend's camelCase format."""

from typing import Any, Dict, List

from ...domain.entities.player import PlayerProfile, PlayerStats
from ...domain.entities.team import BalanceResult, TeamPlayer


def _to_camel_case(snake_str: str) -> str:
    """Convert snake_case to camelCase."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def transform_stats(stats: PlayerStats | None) -> Dict[str, Any] | None:
    if stats is None:
        return None
    data = {_to_camel_case(k): v for k, v in stats.to_dict().items()}
    # frontend field names predate the generic aggregate
    data["recentGamesAnalyzed"] = data.pop("sampleSize")
    data["primaryPosition"] = stats.primary_position.value
    data["rank"] = data.pop("division")
    return data


def transform_profile(profile: PlayerProfile) -> Dict[str, Any]:
    """Flatten a profile into the summoner response shape."""
    return {
        "puuid": profile.puuid,
        "summonerName": profile.summoner_name,
        "summonerLevel": profile.identity.level,
        "profileIconId": profile.identity.icon_id,
        "tier": profile.tier,
        "rank": profile.division,
        "lp": profile.lp,
        "wins": profile.wins,
        "losses": profile.losses,
        "winRate": profile.win_rate,
        "stats": transform_stats(profile.stats),
    }


def _transform_team_player(player: TeamPlayer) -> Dict[str, Any]:
    return {
        "summonerName": player.summoner_name,
        "assignedPosition": player.assigned_position.value,
        "hiddenMmr": player.hidden_mmr,
        "tier": player.tier,
        "rank": player.division,
    }


def transform_balance_results(results: List[BalanceResult], player_count: int) -> Dict[str, Any]:
    return {
        "playerCount": player_count,
        "results": [
            {
                "rank": r.rank,
                "teamA": [_transform_team_player(p) for p in r.team_a],
                "teamB": [_transform_team_player(p) for p in r.team_b],
                "teamAWinRate": r.team_a_win_rate,
                "teamBWinRate": r.team_b_win_rate,
                "balanceScore": r.balance_score,
            }
            for r in results
        ],
    }

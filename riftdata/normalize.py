from __future__ import annotations

from typing import Any, Dict


def _safe_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _safe_str(value: Any) -> str:
    return str(value) if value is not None else ""


def normalize_summoner(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "puuid": _safe_str(raw.get("puuid")),
        "summoner_id": _safe_str(raw.get("id")),
        "name": _safe_str(raw.get("name")),
        "level": _safe_int(raw.get("summonerLevel")),
        "icon_id": _safe_int(raw.get("profileIconId")),
    }


def normalize_league_entry(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "queue_type": _safe_str(raw.get("queueType")),
        "tier": _safe_str(raw.get("tier")).upper(),
        "division": raw.get("rank") or None,
        "league_points": _safe_int(raw.get("leaguePoints")),
        "wins": _safe_int(raw.get("wins")),
        "losses": _safe_int(raw.get("losses")),
        "hot_streak": bool(raw.get("hotStreak")),
        "veteran": bool(raw.get("veteran")),
        "fresh_blood": bool(raw.get("freshBlood")),
        "inactive": bool(raw.get("inactive")),
    }


def normalize_participant(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "summoner_name": _safe_str(raw.get("summonerName") or raw.get("riotIdGameName")),
        "champion": _safe_str(raw.get("championName")),
        "role": _safe_str(raw.get("teamPosition")).upper(),
        "kills": _safe_int(raw.get("kills")),
        "deaths": _safe_int(raw.get("deaths")),
        "assists": _safe_int(raw.get("assists")),
        "minions_killed": _safe_int(raw.get("totalMinionsKilled")),
        "neutral_minions_killed": _safe_int(raw.get("neutralMinionsKilled")),
        "vision_score": _safe_int(raw.get("visionScore")),
        "win": bool(raw.get("win")),
        "duration_seconds": _safe_int(raw.get("gameDuration")),
        "dragon_kills": _safe_int(raw.get("dragonKills")),
        "baron_kills": _safe_int(raw.get("baronKills")),
    }

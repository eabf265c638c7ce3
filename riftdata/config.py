from __future__ import annotations

import os
from dataclasses import dataclass


PLATFORM_URL = "https://kr.api.riotgames.com"
REGIONAL_URL = "https://asia.api.riotgames.com"
DEFAULT_MATCH_COUNT = 20


@dataclass(frozen=True)
class RiotConfig:
    api_key: str
    platform_url: str = PLATFORM_URL
    regional_url: str = REGIONAL_URL
    timeout_s: float = 10.0


def riot_config_from_env() -> RiotConfig:
    return RiotConfig(
        api_key=os.environ.get("RIOT_API_KEY", ""),
        platform_url=os.environ.get("RIOT_PLATFORM_URL", PLATFORM_URL),
        regional_url=os.environ.get("RIOT_REGIONAL_URL", REGIONAL_URL),
    )

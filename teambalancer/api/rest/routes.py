"""REST API routes for summoner profiles and custom game balancing."""

import logging
import time
from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from ..transformers.response_transformer import transform_balance_results, transform_profile
from ...domain.entities.team import PlayerInput
from ...domain.errors import UpstreamError, UpstreamFailure, ValidationError
from ...infrastructure.container import BalancerServices

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

_STARTED_AT = time.monotonic()

_UPSTREAM_CODES = {
    UpstreamFailure.BAD_REQUEST: "UPSTREAM_BAD_REQUEST",
    UpstreamFailure.UNAUTHORIZED: "UPSTREAM_UNAUTHORIZED",
    UpstreamFailure.FORBIDDEN: "UPSTREAM_FORBIDDEN",
    UpstreamFailure.NOT_FOUND: "SUMMONER_NOT_FOUND",
    UpstreamFailure.RATE_LIMITED: "UPSTREAM_RATE_LIMITED",
    UpstreamFailure.SERVER_FAULT: "UPSTREAM_SERVER_ERROR",
}


class PlayerRequest(BaseModel):
    """One roster entry in a balance request."""

    summoner_name: str = Field(..., alias="summonerName", min_length=1)
    primary_position: str = Field(
        ...,
        alias="primaryPosition",
        description="TOP, JUNGLE, MID, ADC, SUPPORT or FILL",
    )
    secondary_position: str = Field(..., alias="secondaryPosition")

    class Config:
        populate_by_name = True


class BalanceRequest(BaseModel):
    """Request body for team balancing."""

    players: List[PlayerRequest] = Field(..., description="2-10 players to split into two teams")


def _services(request: Request) -> BalancerServices:
    return request.app.state.services


def _error(status_code: int, code: str, message: str, details: dict | None = None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "success": False,
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            }
        },
    )


def _success(data: dict) -> dict:
    return {"success": True, "data": data}


def _upstream_error(exc: UpstreamError, details: dict) -> HTTPException:
    return _error(exc.status_code, _UPSTREAM_CODES[exc.failure], exc.message, details)


@router.get("/health", tags=["health"])
async def health(request: Request):
    """Report service uptime and dependency status."""
    services = _services(request)
    try:
        cache_ok = services.cache.ping()
    except Exception:
        cache_ok = False
    try:
        optimizer_ok = services.optimizer.ping()
    except Exception:
        optimizer_ok = False

    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - _STARTED_AT,
        "dependencies": {
            "cache": "ok" if cache_ok else "error",
            "aiEngine": "ok" if optimizer_ok else "error",
        },
    }


@router.get("/summoner/{name}", tags=["summoner"])
async def get_summoner(name: str, request: Request):
    """Get a summoner's profile, rank and recent solo queue stats.

    Profiles are cached for one hour.

    Args:
        name: Summoner name

    Returns:
        ``{"success": true, "data": profile}`` in frontend format
    """
    try:
        profile = await _services(request).profiles.get_profile(name)
    except UpstreamError as e:
        raise _upstream_error(e, {"summonerName": name})
    except Exception as e:
        logger.exception("Profile lookup failed for %s", name)
        raise _error(500, "INTERNAL_ERROR", f"Error fetching summoner: {str(e)}")

    return _success(transform_profile(profile))


@router.post("/custom-game/balance", tags=["custom-game"])
async def balance_teams(body: BalanceRequest, request: Request):
    """Split 2-10 players into two teams.

    Returns up to three candidate partitions ranked by balance. When the
    balancing engine is unavailable a single deterministic split is returned.

    Args:
        body: Players with their preferred positions

    Returns:
        ``{"success": true, "data": {playerCount, results}}``
    """
    try:
        roster = [
            PlayerInput.from_raw(p.summoner_name, p.primary_position, p.secondary_position)
            for p in body.players
        ]
        results = await _services(request).partitioner.balance(roster)
    except ValidationError as e:
        raise _error(400, "INVALID_REQUEST", e.reason)
    except UpstreamError as e:
        raise _upstream_error(e, {"playerCount": len(body.players)})
    except Exception as e:
        logger.exception("Team balancing failed")
        raise _error(500, "INTERNAL_ERROR", f"Error balancing teams: {str(e)}")

    return _success(transform_balance_results(results, len(roster)))

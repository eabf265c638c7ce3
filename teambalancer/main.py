"""Main FastAPI application with hexagonal architecture."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.rest.routes import router as api_router
from .config import ServiceConfig, service_config_from_env
from .infrastructure.container import BalancerServices, build_services

logger = logging.getLogger(__name__)


def create_app(
    services: BalancerServices | None = None,
    service_config: ServiceConfig | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        services: Prebuilt collaborators. If None, they are built from the
            environment when the app starts.
        service_config: Service settings. If None, read from the environment.
    """
    load_dotenv()
    config = service_config or service_config_from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        owned = app.state.services is None
        if owned:
            app.state.services = build_services(config)
            logger.info("Team balancer services started")
        yield
        if owned:
            app.state.services.close()
            app.state.services = None

    app = FastAPI(
        title="SOWJS Team Balancer API",
        description="Summoner profiling and custom game team balancing for League of Legends",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


app = create_app()

"""Tetramap — FastAPI application factory.

Run with ``uvicorn tetramap.main:create_app --factory``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tetramap.config import Settings, settings as default_settings
from tetramap.domain.errors import ConfigurationError
from tetramap.infrastructure.api.dependencies import Container
from tetramap.infrastructure.api.routes_commands import router as commands_router
from tetramap.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )
    # httpx logs full request URLs, which include the geocoder key.
    logging.getLogger("httpx").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("Tetramap ready")
    yield
    await app.state.container.aclose()
    logger.info("Network clients closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)

    missing = settings.missing_credentials()
    if missing:
        logger.critical("Missing required configuration: %s", ", ".join(missing))
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    app = FastAPI(
        title="Tetramap",
        description="Chat users share where they are; place names are geocoded and stored per user",
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.container = Container(settings)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(commands_router, prefix="/api")

    return app

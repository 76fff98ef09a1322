"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from presencekit.api.routes import customizer, health, preferences
from presencekit.config import VERSION, get_customizer_path
from presencekit.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    setup_logging()
    logger.info("[STARTUP] Customizer catalog: %s", get_customizer_path())
    logger.info("[STARTUP] presencekit ready")

    yield

    logger.info("[SHUTDOWN] presencekit stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="presencekit API",
        description="Presence template validation and preview",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(customizer.router, prefix="/api/v1", tags=["Customizer"])
    app.include_router(preferences.router, prefix="/api/v1/preferences", tags=["Preferences"])

    return app


app = create_app()

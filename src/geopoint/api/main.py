"""
Main FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geopoint import __version__
from geopoint.api.error_handlers import register_error_handlers
from geopoint.api.geodesy import router as geodesy_router
from geopoint.api.middleware import RequestCorrelationMiddleware
from geopoint.api.points import router as points_router
from geopoint.core.config import settings
from geopoint.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    setup_logging()
    logger.info(f"Starting geopoint API v{__version__} in {settings.environment} mode")

    yield

    logger.info("Shutting down geopoint API")


app = FastAPI(
    title="geopoint API",
    description="Coordinate parsing, formatting and great-circle geodesy",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestCorrelationMiddleware)

register_error_handlers(app)

app.include_router(points_router, prefix=settings.api_v1_prefix)
app.include_router(geodesy_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint returning API information.

    Returns:
        dict[str, str]: API name, version and description.
    """
    return {
        "name": "geopoint API",
        "version": __version__,
        "description": "Coordinate parsing, formatting and great-circle geodesy",
    }


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}

"""Main FastAPI application for plugind daemon.

Exposes plugin_library over a REST API with SSE progress streaming.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .dependencies import get_plugin_service
from .dependencies import get_settings
from .routers import events_router
from .routers import plugins_router
from .routers import registries_router
from .routers import status_router
from .routers import workspace_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Args:
        app: FastAPI application instance
    """
    logger.info(f"Starting plugind on {settings.host}:{settings.port}")

    yield

    logger.info("Shutting down plugind")
    try:
        await get_plugin_service().dispose()
    except Exception as e:
        logger.error(f"Failed to dispose plugin service: {e}")


app = FastAPI(
    title="plugind",
    description="Plugin registry cache and workspace plugin management",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.info(f"CORS enabled for origins: {settings.cors_origins}")

app.include_router(events_router)
app.include_router(plugins_router)
app.include_router(registries_router)
app.include_router(status_router)
app.include_router(workspace_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with API information."""
    return {
        "name": "plugind",
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }

"""Status router for plugind API.

Provides health check and status information.
"""

import logging
import time
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends

from plugin_library.services import PluginService

from .. import __version__
from ..dependencies import get_plugin_service
from ..models import StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["status"])

# Track daemon start time for uptime calculation
_start_time = time.time()


@router.get("/status", response_model=StatusResponse)
async def get_status(
    service: Annotated[PluginService, Depends(get_plugin_service)],
) -> StatusResponse:
    """Get daemon status.

    Returns:
        Daemon status including version, uptime and cache size
    """
    return StatusResponse(
        status="running",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        cached_plugins=len(service.cache),
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}

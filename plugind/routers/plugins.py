"""Thin HTTP wrapper around the plugin cache.

Rebuilds run in the background; progress is delivered on /api/v1/events.
"""

import logging
from collections.abc import Mapping
from typing import Annotated

from fastapi import APIRouter
from fastapi import BackgroundTasks
from fastapi import Depends
from fastapi import Query

from plugin_library.config import PluginServiceSettings
from plugin_library.errors import PluginServiceError
from plugin_library.models.plugins import PluginMetadata
from plugin_library.models.registries import PluginRegistry
from plugin_library.services import PluginService

from ..dependencies import get_plugin_service
from ..dependencies import get_settings
from ..models import RebuildCacheRequest
from .registries import configured_registries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/plugins", tags=["plugins"])


async def _run_rebuild(service: PluginService, registries: Mapping[str, PluginRegistry]) -> None:
    try:
        await service.rebuild_cache(registries)
    except PluginServiceError as exc:
        logger.error(f"Plugin cache rebuild failed: {exc}")


@router.get("", response_model=list[PluginMetadata])
async def list_plugins(
    service: Annotated[PluginService, Depends(get_plugin_service)],
    filter: Annotated[str | None, Query(description="Plugin filter expression")] = None,
) -> list[PluginMetadata]:
    """List cached plugins (editors excluded)."""
    return service.query_plugins(filter)


@router.post("/cache", status_code=202)
async def rebuild_cache(
    background_tasks: BackgroundTasks,
    service: Annotated[PluginService, Depends(get_plugin_service)],
    settings: Annotated[PluginServiceSettings, Depends(get_settings)],
    request: RebuildCacheRequest | None = None,
) -> dict[str, str | int]:
    """Start a plugin cache rebuild.

    The default registry is resolved up front so configuration problems
    are reported to the caller instead of the event stream.
    """
    registries = await configured_registries(service, settings)
    if request is not None and request.registries:
        registries = request.registries

    background_tasks.add_task(_run_rebuild, service, registries)
    logger.info(f"Scheduled plugin cache rebuild for {len(registries)} registries")
    return {"status": "started", "registries": len(registries)}

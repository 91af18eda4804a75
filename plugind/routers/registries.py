"""Plugin registry API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException

from plugin_library.config import PluginServiceSettings
from plugin_library.errors import ConfigurationError
from plugin_library.models.registries import PluginRegistry
from plugin_library.services import PluginService

from ..dependencies import get_plugin_service
from ..dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/registries", tags=["registries"])


async def configured_registries(service: PluginService, settings: PluginServiceSettings) -> dict[str, PluginRegistry]:
    """Default registry followed by the configured extra registries.

    Raises:
        HTTPException: 503 if the default registry is not configured
    """
    try:
        default_registry = await service.get_default_registry()
    except ConfigurationError as exc:
        logger.error(f"Default plugin registry unavailable: {exc}")
        raise HTTPException(status_code=503, detail=str(exc)) from exc

    registries = {default_registry.name: default_registry}
    for registry in settings.extra_registries:
        registries[registry.name] = registry
    return registries


@router.get("", response_model=list[PluginRegistry])
async def list_registries(
    service: Annotated[PluginService, Depends(get_plugin_service)],
    settings: Annotated[PluginServiceSettings, Depends(get_settings)],
) -> list[PluginRegistry]:
    """List the registries cached by default."""
    registries = await configured_registries(service, settings)
    return list(registries.values())


@router.get("/default", response_model=PluginRegistry)
async def get_default_registry(
    service: Annotated[PluginService, Depends(get_plugin_service)],
) -> PluginRegistry:
    """Get the default plugin registry."""
    try:
        return await service.get_default_registry()
    except ConfigurationError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc

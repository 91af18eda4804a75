"""Workspace devfile plugin endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query

from plugin_library.errors import PluginServiceError
from plugin_library.services import PluginService

from ..dependencies import get_plugin_service
from ..models import DesiredPluginsRequest
from ..models import DesiredPluginsResponse
from ..models import PluginKeyRequest
from ..models import PluginUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/workspace/plugins", tags=["workspace"])


async def _current_plugins(service: PluginService) -> DesiredPluginsResponse:
    try:
        return DesiredPluginsResponse(plugins=await service.list_desired_plugins())
    except PluginServiceError as exc:
        logger.error(f"Failed to read workspace plugins: {exc}")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("", response_model=DesiredPluginsResponse)
async def list_workspace_plugins(
    service: Annotated[PluginService, Depends(get_plugin_service)],
) -> DesiredPluginsResponse:
    """List plugins referenced by the devfile."""
    return await _current_plugins(service)


@router.put("", response_model=DesiredPluginsResponse)
async def set_workspace_plugins(
    request: DesiredPluginsRequest,
    service: Annotated[PluginService, Depends(get_plugin_service)],
) -> DesiredPluginsResponse:
    """Replace the plugins referenced by the devfile."""
    try:
        await service.set_desired_plugins(request.plugins)
    except PluginServiceError as exc:
        logger.error(f"Failed to set workspace plugins: {exc}")
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return await _current_plugins(service)


@router.post("", response_model=DesiredPluginsResponse, status_code=201)
async def add_workspace_plugin(
    request: PluginKeyRequest,
    service: Annotated[PluginService, Depends(get_plugin_service)],
) -> DesiredPluginsResponse:
    """Add a plugin to the devfile."""
    try:
        await service.add_plugin(request.key)
    except PluginServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return await _current_plugins(service)


@router.delete("", response_model=DesiredPluginsResponse)
async def remove_workspace_plugin(
    service: Annotated[PluginService, Depends(get_plugin_service)],
    key: Annotated[str, Query(min_length=1, description="Plugin key or URL")],
) -> DesiredPluginsResponse:
    """Remove a plugin from the devfile."""
    try:
        await service.remove_plugin(key)
    except PluginServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return await _current_plugins(service)


@router.patch("", response_model=DesiredPluginsResponse)
async def update_workspace_plugin(
    request: PluginUpdateRequest,
    service: Annotated[PluginService, Depends(get_plugin_service)],
) -> DesiredPluginsResponse:
    """Replace one plugin with another in the devfile."""
    try:
        await service.update_plugin(request.old_key, request.new_key)
    except PluginServiceError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return await _current_plugins(service)

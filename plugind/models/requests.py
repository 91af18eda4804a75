"""Request and response models for the plugind API."""

from pydantic import Field

from plugin_library.models.base import CamelCaseModel
from plugin_library.models.registries import PluginRegistry


class RebuildCacheRequest(CamelCaseModel):
    """Request to rebuild the plugin cache.

    When ``registries`` is omitted the default registry and the configured
    extra registries are used.
    """

    registries: dict[str, PluginRegistry] | None = Field(default=None, description="Registries by name")


class PluginKeyRequest(CamelCaseModel):
    """Request naming a single plugin."""

    key: str = Field(..., min_length=1, description="Plugin key or URL")


class PluginUpdateRequest(CamelCaseModel):
    """Request to replace one plugin with another."""

    old_key: str = Field(..., min_length=1)
    new_key: str = Field(..., min_length=1)


class DesiredPluginsRequest(CamelCaseModel):
    """Request setting the full list of workspace plugins."""

    plugins: list[str]


class DesiredPluginsResponse(CamelCaseModel):
    """Plugins referenced by the workspace devfile."""

    plugins: list[str]


class StatusResponse(CamelCaseModel):
    """Daemon status."""

    status: str
    version: str
    uptime_seconds: float
    cached_plugins: int

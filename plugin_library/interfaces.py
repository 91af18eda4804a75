"""Collaborator interfaces consumed by plugin_library.

Services receive these through their constructors, so tests and hosts can
supply their own implementations.
"""

from collections.abc import Mapping
from typing import Protocol

from .models.devfile import Devfile
from .models.plugins import PluginMetadata
from .models.registries import PluginRegistry


class Transport(Protocol):
    """Fetches remote text resources."""

    async def get(self, uri: str) -> str:
        """Return the body at ``uri``; raise TransportError on failure."""
        ...


class WorkspaceSettingsProvider(Protocol):
    """Provides workspace-wide settings (registry URLs among them)."""

    async def get_settings(self) -> Mapping[str, str] | None: ...


class DevfileStore(Protocol):
    """Loads and persists the workspace devfile."""

    async def get(self) -> Devfile: ...

    async def update(self, devfile: Devfile) -> None:
        """Persist the full document; raise DevfileStoreError on failure."""
        ...


class PluginFilter(Protocol):
    """Narrows a plugin list by a filter expression."""

    def filter_plugins(self, plugins: list[PluginMetadata], expression: str) -> list[PluginMetadata]: ...


class CacheObserver(Protocol):
    """Receives progress notifications while the plugin cache is rebuilt."""

    async def on_cache_size_changed(self, size: int) -> None: ...

    async def on_plugin_cached(self, cached: int) -> None: ...

    async def on_invalid_registry(self, registry: PluginRegistry) -> None: ...

    async def on_invalid_plugin(self, uri: str) -> None: ...

    async def on_caching_complete(self) -> None: ...

"""Plugin service.

Single entry point for hosts: plugin cache rebuilds and queries, and
management of the plugins declared in the workspace devfile.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from ..cache.builder import CacheBuilder
from ..cache.query import PluginQueryService
from ..cache.store import PluginCache
from ..config.settings import PluginServiceSettings
from ..devfile.reconciler import DevfileReconciler
from ..devfile.store import YamlDevfileStore
from ..interfaces import CacheObserver
from ..interfaces import DevfileStore
from ..interfaces import PluginFilter
from ..interfaces import Transport
from ..interfaces import WorkspaceSettingsProvider
from ..models.plugins import PluginMetadata
from ..models.registries import PluginRegistry
from ..registry.client import RegistryClient
from ..registry.transport import HttpTransport
from ..registry.workspace import SettingsWorkspaceProvider
from ..storage.paths import get_state_dir

logger = logging.getLogger(__name__)


class PluginService:
    """Facade over registry access, the plugin cache and the devfile."""

    def __init__(
        self,
        transport: Transport,
        workspace_settings: WorkspaceSettingsProvider,
        devfile_store: DevfileStore,
        plugin_filter: PluginFilter | None = None,
    ) -> None:
        """Initialize plugin service.

        Args:
            transport: Transport for registry requests
            workspace_settings: Provider of the default registry URLs
            devfile_store: Store holding the workspace devfile
            plugin_filter: Filter applied to queries (default: TextPluginFilter)
        """
        self.transport = transport
        self.registry_client = RegistryClient(transport, workspace_settings)
        self.cache = PluginCache()
        self.cache_builder = CacheBuilder(self.registry_client, self.cache)
        self.query_service = PluginQueryService(self.cache, plugin_filter)
        self.reconciler = DevfileReconciler(devfile_store)

    @classmethod
    def from_settings(cls, settings: PluginServiceSettings) -> "PluginService":
        """Create a service using HTTP transport and a YAML devfile store."""
        devfile_path = Path(settings.devfile_path) if settings.devfile_path else get_state_dir() / "devfile.yaml"
        logger.info(f"Using devfile {devfile_path}")
        return cls(
            transport=HttpTransport(timeout=settings.request_timeout),
            workspace_settings=SettingsWorkspaceProvider(settings),
            devfile_store=YamlDevfileStore(devfile_path),
        )

    # Observer

    def set_observer(self, observer: CacheObserver) -> None:
        self.cache_builder.observer = observer

    def clear_observer(self) -> None:
        self.cache_builder.observer = None

    # Registries and cache

    async def get_default_registry(self) -> PluginRegistry:
        return await self.registry_client.resolve_default_registry()

    async def rebuild_cache(self, registries: Mapping[str, PluginRegistry]) -> None:
        await self.cache_builder.rebuild_cache(registries)

    def query_plugins(self, filter_expression: str | None = None) -> list[PluginMetadata]:
        return self.query_service.query(filter_expression)

    # Devfile

    async def list_desired_plugins(self) -> list[str]:
        return await self.reconciler.get_desired_plugins()

    async def set_desired_plugins(self, keys: list[str]) -> None:
        await self.reconciler.set_desired_plugins(keys)

    async def add_plugin(self, key: str) -> None:
        await self.reconciler.add_plugin(key)

    async def remove_plugin(self, key: str) -> None:
        await self.reconciler.remove_plugin(key)

    async def update_plugin(self, old_key: str, new_key: str) -> None:
        await self.reconciler.update_plugin(old_key, new_key)

    async def dispose(self) -> None:
        """Release the transport."""
        self.clear_observer()
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

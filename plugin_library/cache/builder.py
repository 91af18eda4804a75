"""Cache builder for plugin metadata.

Walks every configured registry, resolves each listed plugin to its
metadata document and fills the plugin cache, reporting progress to the
attached observer.

Contract:
- Inputs: Mapping of registry name to PluginRegistry
- Outputs: None (cache contents, observer notifications)
- Side Effects: Resets and refills the shared PluginCache
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import InvalidRegistryError
from ..errors import PluginDocumentError
from ..interfaces import CacheObserver
from ..models.plugins import PluginDocument
from ..models.plugins import PluginMetadata
from ..models.registries import PluginRegistry
from ..models.registries import RawPluginSummary
from ..registry.client import RegistryClient
from ..registry.keys import canonical_key
from ..registry.keys import is_absolute_url
from .store import PluginCache

logger = logging.getLogger(__name__)


def normalize_icon(icon: str, public_uri: str) -> str:
    """Make an icon link absolute.

    Relative icons are resolved against the registry's public root.
    """
    if is_absolute_url(icon):
        return icon
    if icon.startswith("/"):
        return public_uri + icon
    return f"{public_uri}/{icon}"


def to_plugin_metadata(
    document: dict[str, Any],
    document_uri: str,
    long_format: bool,
    public_uri: str,
) -> PluginMetadata:
    """Normalize a plugin metadata document into its cached form.

    Raises:
        PluginDocumentError: If the document lacks required fields
    """
    try:
        props = PluginDocument.model_validate(document)
    except ValidationError as e:
        raise PluginDocumentError(f"Unable to load plugin metadata. {e}") from e

    return PluginMetadata(
        publisher=props.publisher,
        name=props.name,
        version=props.version,
        type=props.type,
        display_name=props.display_name,
        title=props.title,
        description=props.description,
        icon=normalize_icon(props.icon, public_uri),
        url=props.url,
        repository=props.repository,
        first_publication_date=props.first_publication_date,
        category=props.category,
        latest_update_date=props.latest_update_date,
        key=canonical_key(props.publisher, props.name, props.version, document_uri, long_format),
        built_in=False,
    )


class CacheBuilder:
    """Builds the plugin cache from a set of registries."""

    def __init__(self, registry_client: RegistryClient, cache: PluginCache):
        """Initialize cache builder.

        Args:
            registry_client: Client used for all registry access
            cache: Cache filled by rebuilds
        """
        self.registry_client = registry_client
        self.cache = cache
        self.observer: CacheObserver | None = None
        self._lock = asyncio.Lock()

    async def rebuild_cache(self, registries: Mapping[str, PluginRegistry]) -> None:
        """Rebuild the plugin cache.

        Does nothing unless an observer is attached. Unreachable or invalid
        registries and plugins are reported to the observer and skipped.
        Concurrent calls are serialized.

        Args:
            registries: Registries to cache, processed in mapping order

        Raises:
            ConfigurationError: If the default registry cannot be resolved
        """
        observer = self.observer
        if observer is None:
            logger.debug("No cache observer attached, skipping plugin cache rebuild")
            return

        async with self._lock:
            await self._rebuild(registries, observer)

    async def _rebuild(self, registries: Mapping[str, PluginRegistry], observer: CacheObserver) -> None:
        logger.info(f"Rebuilding plugin cache from {len(registries)} registries")
        self.cache.reset()
        await observer.on_cache_size_changed(0)

        default_registry = await self.registry_client.resolve_default_registry()

        available_plugins = 0
        for registry_name, registry in registries.items():
            try:
                index = await self.registry_client.fetch_index(registry)
            except InvalidRegistryError as e:
                logger.warning(f"Skipping registry '{registry_name}': {e}")
                await observer.on_invalid_registry(registry)
                continue

            if not isinstance(index, list):
                logger.warning(f"Skipping registry '{registry_name}': plugin index is not a list")
                await observer.on_invalid_registry(registry)
                continue

            available_plugins += len(index)
            await observer.on_cache_size_changed(available_plugins)

            long_format = registry.uri != default_registry.uri
            for entry in index:
                await self._cache_plugin(registry, entry, long_format, observer)

        logger.info(f"Plugin cache rebuilt with {len(self.cache)} plugins")
        await observer.on_caching_complete()

    async def _cache_plugin(
        self,
        registry: PluginRegistry,
        entry: Any,
        long_format: bool,
        observer: CacheObserver,
    ) -> None:
        try:
            summary = RawPluginSummary.model_validate(entry)
        except ValidationError as e:
            logger.warning(f"Invalid plugin entry in registry {registry.name}: {e}")
            await observer.on_invalid_plugin(f"{registry.uri}/plugins/")
            return

        document_uri = self.registry_client.resolve_plugin_document_uri(registry, summary)
        try:
            document = await self.registry_client.fetch_plugin_document(document_uri)
            plugin = to_plugin_metadata(document, document_uri, long_format, registry.public_uri or registry.uri)
        except PluginDocumentError as e:
            logger.warning(f"Unable to get plugin metadata from {document_uri}: {e}")
            await observer.on_invalid_plugin(document_uri)
            return

        cached = self.cache.append(plugin)
        logger.debug(f"Cached plugin {plugin.key}")
        await observer.on_plugin_cached(cached)

"""Cache observer publishing rebuild progress to SSE subscribers."""

import logging

from plugin_library.models.registries import PluginRegistry

from ..models.events import CacheEvent
from ..models.events import CacheSizeChangedEvent
from ..models.events import CachingCompleteEvent
from ..models.events import InvalidPluginEvent
from ..models.events import InvalidRegistryEvent
from ..models.events import PluginCachedEvent
from ..streaming import EventQueueEmitter

logger = logging.getLogger(__name__)


class EventStreamObserver:
    """Forwards plugin cache notifications to an event emitter.

    Every subscriber of ``emitter`` receives each notification as a
    ``{"event": "cache:...", "data": {...}}`` item with camelCase payload keys.
    """

    def __init__(self, emitter: EventQueueEmitter):
        self.emitter = emitter

    async def publish(self, event: CacheEvent) -> None:
        await self.emitter.emit(event.event_type, event.model_dump(mode="json", by_alias=True))

    async def on_cache_size_changed(self, size: int) -> None:
        await self.publish(CacheSizeChangedEvent(size=size))

    async def on_plugin_cached(self, cached: int) -> None:
        await self.publish(PluginCachedEvent(cached=cached))

    async def on_invalid_registry(self, registry: PluginRegistry) -> None:
        logger.info(f"Invalid plugin registry: {registry.uri}")
        await self.publish(InvalidRegistryEvent(registry=registry))

    async def on_invalid_plugin(self, uri: str) -> None:
        await self.publish(InvalidPluginEvent(uri=uri))

    async def on_caching_complete(self) -> None:
        await self.publish(CachingCompleteEvent())

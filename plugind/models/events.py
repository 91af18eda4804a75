"""Plugin cache events for SSE streaming.

Emitted while the plugin cache is rebuilt and delivered through the
global SSE endpoint at /api/v1/events.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

from plugin_library.models.registries import PluginRegistry


class CacheEvent(BaseModel):
    """Base model for cache events streamed over SSE."""

    event_type: str
    timestamp: datetime = Field(default_factory=datetime.now)


class CacheSizeChangedEvent(CacheEvent):
    """Emitted when the number of discovered plugins changes."""

    event_type: Literal["cache:size_changed"] = "cache:size_changed"
    size: int


class PluginCachedEvent(CacheEvent):
    """Emitted after each plugin is added to the cache."""

    event_type: Literal["cache:plugin_cached"] = "cache:plugin_cached"
    cached: int


class InvalidRegistryEvent(CacheEvent):
    """Emitted when a registry index cannot be used."""

    event_type: Literal["cache:invalid_registry"] = "cache:invalid_registry"
    registry: PluginRegistry


class InvalidPluginEvent(CacheEvent):
    """Emitted when a plugin metadata document cannot be loaded."""

    event_type: Literal["cache:invalid_plugin"] = "cache:invalid_plugin"
    uri: str


class CachingCompleteEvent(CacheEvent):
    """Emitted once when a cache rebuild finishes."""

    event_type: Literal["cache:complete"] = "cache:complete"

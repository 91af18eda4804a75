"""API models for plugind."""

from .events import CacheEvent
from .events import CacheSizeChangedEvent
from .events import CachingCompleteEvent
from .events import InvalidPluginEvent
from .events import InvalidRegistryEvent
from .events import PluginCachedEvent
from .requests import DesiredPluginsRequest
from .requests import DesiredPluginsResponse
from .requests import PluginKeyRequest
from .requests import PluginUpdateRequest
from .requests import RebuildCacheRequest
from .requests import StatusResponse

__all__ = [
    "CacheEvent",
    "CacheSizeChangedEvent",
    "CachingCompleteEvent",
    "InvalidPluginEvent",
    "InvalidRegistryEvent",
    "PluginCachedEvent",
    "DesiredPluginsRequest",
    "DesiredPluginsResponse",
    "PluginKeyRequest",
    "PluginUpdateRequest",
    "RebuildCacheRequest",
    "StatusResponse",
]

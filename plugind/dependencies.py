"""Shared dependency factories for FastAPI endpoints.

The plugin service is created once per process: its cache must outlive
individual requests.
"""

from functools import lru_cache

from plugin_library.config import PluginServiceSettings
from plugin_library.config import load_config
from plugin_library.services import PluginService

from .services.cache_events import EventStreamObserver
from .streaming import EventQueueEmitter


@lru_cache
def get_settings() -> PluginServiceSettings:
    """Get plugin service settings.

    Returns:
        PluginServiceSettings loaded from plugind.yaml and the environment
    """
    return load_config()


@lru_cache
def get_event_emitter() -> EventQueueEmitter:
    """Get the emitter shared by cache events and SSE subscribers.

    Returns:
        Process-wide EventQueueEmitter instance
    """
    return EventQueueEmitter()


@lru_cache
def get_plugin_service() -> PluginService:
    """Get the plugin service with SSE progress reporting attached.

    Returns:
        PluginService instance
    """
    service = PluginService.from_settings(get_settings())
    service.set_observer(EventStreamObserver(get_event_emitter()))
    return service

"""Services for plugin_library."""

from .plugin_service import PluginService

__all__ = ["PluginService"]

"""Read access to the plugin cache."""

import logging

from ..interfaces import PluginFilter
from ..models.plugins import PluginMetadata
from .filter import TextPluginFilter
from .store import PluginCache

logger = logging.getLogger(__name__)

# Plugin types never returned by queries
EDITOR_PLUGIN_TYPES = frozenset({"editor", "Che Editor"})


class PluginQueryService:
    """Serves filtered views of the plugin cache.

    Queries never wait for a running rebuild; they see the cache as it is.
    """

    def __init__(self, cache: PluginCache, plugin_filter: PluginFilter | None = None):
        self.cache = cache
        self.plugin_filter = plugin_filter or TextPluginFilter()

    def query(self, filter_expression: str | None = None) -> list[PluginMetadata]:
        """Return cached plugins, excluding editors.

        Args:
            filter_expression: Optional expression passed to the plugin filter

        Returns:
            Copy of the matching cached plugins
        """
        plugins = self.cache.snapshot()
        if filter_expression:
            plugins = self.plugin_filter.filter_plugins(plugins, filter_expression)
        result = [plugin for plugin in plugins if plugin.type not in EDITOR_PLUGIN_TYPES]
        logger.debug(f"Plugin query '{filter_expression or ''}' matched {len(result)} plugins")
        return result

"""Plugin cache: in-memory store, rebuild pipeline and queries.

Public Interface:
    - PluginCache: Shared in-memory plugin list
    - CacheBuilder: Rebuilds the cache from registries
    - PluginQueryService: Filtered, editor-free reads
    - TextPluginFilter: Default filter implementation
"""

from .builder import CacheBuilder
from .builder import normalize_icon
from .builder import to_plugin_metadata
from .filter import TextPluginFilter
from .query import EDITOR_PLUGIN_TYPES
from .query import PluginQueryService
from .store import PluginCache

__all__ = [
    "CacheBuilder",
    "normalize_icon",
    "to_plugin_metadata",
    "TextPluginFilter",
    "EDITOR_PLUGIN_TYPES",
    "PluginQueryService",
    "PluginCache",
]

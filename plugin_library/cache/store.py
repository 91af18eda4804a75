"""In-memory plugin cache."""

from ..models.plugins import PluginMetadata


class PluginCache:
    """Ordered list of cached plugins.

    Written only by the cache builder. Readers get a copy of whatever the
    list holds at call time, which may be partial while a rebuild runs.
    """

    def __init__(self) -> None:
        self._plugins: list[PluginMetadata] = []

    def reset(self) -> None:
        self._plugins = []

    def append(self, plugin: PluginMetadata) -> int:
        """Add a plugin and return the new cache size."""
        self._plugins.append(plugin)
        return len(self._plugins)

    def snapshot(self) -> list[PluginMetadata]:
        return list(self._plugins)

    def __len__(self) -> int:
        return len(self._plugins)

"""Default plugin filter.

Expressions are whitespace-separated terms. ``@builtin`` keeps built-in
plugins only; every other term must occur (case-insensitive) in one of the
plugin's name, display name, title, publisher, description or category.
"""

from ..models.plugins import PluginMetadata

BUILTIN_QUALIFIER = "@builtin"


def _searchable_text(plugin: PluginMetadata) -> str:
    fields = (
        plugin.name,
        plugin.display_name,
        plugin.title,
        plugin.publisher,
        plugin.description,
        plugin.category,
    )
    return " ".join(field for field in fields if field).lower()


class TextPluginFilter:
    """Filters plugins by qualifiers and free text."""

    def filter_plugins(self, plugins: list[PluginMetadata], expression: str) -> list[PluginMetadata]:
        terms = expression.lower().split()
        if BUILTIN_QUALIFIER in terms:
            plugins = [plugin for plugin in plugins if plugin.built_in]
        words = [term for term in terms if not term.startswith("@")]
        if not words:
            return plugins
        return [plugin for plugin in plugins if all(word in _searchable_text(plugin) for word in words)]

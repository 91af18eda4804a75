"""Plugin key and reference normalization.

A plugin key identifies a plugin in the devfile. It is either short::

    {publisher}/{name}/{version}

or long, prefixed with the location of the plugin in its registry::

    {http|https}://{host}/{path}/{publisher}/{name}/{version}

Devfile components reference plugins by ``id`` (a key) or by ``url`` (the
absolute location of the plugin's ``meta.yaml``).
"""

from ..models.devfile import DevfileComponent
from ..models.devfile import PluginReference

META_YAML_SUFFIX = "/meta.yaml"


def is_absolute_url(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


def short_key(publisher: str, name: str, version: str) -> str:
    return f"{publisher}/{name}/{version}"


def canonical_key(publisher: str, name: str, version: str, document_uri: str, long_format: bool) -> str:
    """Compute the cache key of a plugin.

    In long format the key is prefixed with the part of ``document_uri``
    preceding the short key. When ``document_uri`` ends neither with the
    short key nor with ``{short key}/meta.yaml`` the short key is returned.

    Args:
        publisher: Plugin publisher
        name: Plugin name
        version: Plugin version
        document_uri: URI the plugin metadata document was requested from
        long_format: Whether a long (URI-prefixed) key is wanted

    Returns:
        Plugin key
    """
    key = short_key(publisher, name, version)
    if not long_format:
        return key

    # TODO: decide whether the short-key fallback below should be an error for non-default registries
    for suffix in (key, f"{key}{META_YAML_SUFFIX}"):
        if document_uri.endswith(suffix):
            return document_uri[: len(document_uri) - len(suffix)] + key
    return key


def normalize_reference_id(reference: str) -> str:
    """Remove a trailing ``/meta.yaml`` from an absolute plugin URL."""
    if is_absolute_url(reference) and reference.endswith(META_YAML_SUFFIX):
        return reference[: -len(META_YAML_SUFFIX)]
    return reference


def build_reference_component(reference: str) -> DevfileComponent:
    """Create a devfile plugin component for a plugin key or URL."""
    if is_absolute_url(reference):
        return DevfileComponent(plugin=PluginReference(url=f"{reference}{META_YAML_SUFFIX}"))
    return DevfileComponent(plugin=PluginReference(id=reference))


def component_reference_id(component: DevfileComponent) -> str | None:
    """Normalized reference of a plugin component (None for other components)."""
    plugin = component.plugin
    if plugin is None:
        return None
    if plugin.url:
        return normalize_reference_id(plugin.url)
    return plugin.id

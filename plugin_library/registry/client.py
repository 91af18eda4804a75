"""Registry client.

Resolves the default plugin registry from workspace settings, fetches
registry indexes and locates plugin metadata documents.

Registries publish the location of a plugin's ``meta.yaml`` in different
ways depending on how they are deployed. The four cases are modelled by
DocumentLocation and resolved through a lookup table.
"""

import json
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any
from urllib.parse import urlsplit

import yaml

from ..errors import ConfigurationError
from ..errors import InvalidRegistryError
from ..errors import PluginDocumentError
from ..errors import RegistryUnreachableError
from ..errors import TransportError
from ..interfaces import Transport
from ..interfaces import WorkspaceSettingsProvider
from ..models.registries import PluginRegistry
from ..models.registries import RawPluginSummary

logger = logging.getLogger(__name__)

# Workspace setting holding the public registry URI (used for icons and other resources)
PLUGIN_REGISTRY_URL = "cheWorkspacePluginRegistryUrl"

# Workspace setting holding the internal registry URI (used for plugin metadata)
PLUGIN_REGISTRY_INTERNAL_URL = "cheWorkspacePluginRegistryInternalUrl"

DEFAULT_REGISTRY_NAME = "Default plugin registry"

META_YAML = "meta.yaml"


class DocumentLocation(Enum):
    """How a plugin's metadata document is located within a registry."""

    ABSOLUTE_PATH_ON_DEFAULT = "absolute-path-on-default"
    ABSOLUTE_PATH_CROSS_HOST = "absolute-path-cross-host"
    RELATIVE_TO_BASE = "relative-to-base"
    NO_SELF_LINK = "no-self-link"


def base_directory(registry: PluginRegistry) -> str:
    """Directory against which relative plugin links are resolved.

    A registry URI pointing at a ``.json`` index file resolves to the
    directory containing it; any other URI gets exactly one trailing slash.
    """
    uri = registry.uri
    if uri.endswith(".json"):
        return uri[: uri.rfind("/") + 1]
    return uri + "/"


def classify_document_location(summary: RawPluginSummary, is_default_registry: bool) -> DocumentLocation:
    self_link = summary.self_link
    if not self_link:
        return DocumentLocation.NO_SELF_LINK
    if not self_link.startswith("/"):
        return DocumentLocation.RELATIVE_TO_BASE
    if is_default_registry:
        return DocumentLocation.ABSOLUTE_PATH_ON_DEFAULT
    return DocumentLocation.ABSOLUTE_PATH_CROSS_HOST


def _on_default(registry: PluginRegistry, summary: RawPluginSummary) -> str:
    # The default registry is served under `.../v3` in multi-host mode and
    # `.../plugin-registry/v3` in single-host mode, while `self` always starts
    # with `/v3/plugins/{id}`. Both resolve to `{uri}/plugins/{id}/`.
    return f"{registry.uri}/plugins/{summary.id}/"


def _cross_host(registry: PluginRegistry, summary: RawPluginSummary) -> str:
    parts = urlsplit(registry.uri)
    return f"{parts.scheme}://{parts.netloc}{summary.self_link}"


def _relative(registry: PluginRegistry, summary: RawPluginSummary) -> str:
    return f"{base_directory(registry)}{summary.self_link}"


def _no_self_link(registry: PluginRegistry, summary: RawPluginSummary) -> str:
    return f"{base_directory(registry)}/{summary.id}/{META_YAML}"


_DOCUMENT_URI_BUILDERS: dict[DocumentLocation, Callable[[PluginRegistry, RawPluginSummary], str]] = {
    DocumentLocation.ABSOLUTE_PATH_ON_DEFAULT: _on_default,
    DocumentLocation.ABSOLUTE_PATH_CROSS_HOST: _cross_host,
    DocumentLocation.RELATIVE_TO_BASE: _relative,
    DocumentLocation.NO_SELF_LINK: _no_self_link,
}


def resolve_plugin_document_uri(
    registry: PluginRegistry,
    summary: RawPluginSummary,
    is_default_registry: bool,
) -> str:
    """Compute the absolute URI of a plugin's metadata document.

    Args:
        registry: Registry the plugin was listed by
        summary: Index entry of the plugin
        is_default_registry: Whether ``registry`` is the default registry

    Returns:
        URI of the plugin's metadata document
    """
    location = classify_document_location(summary, is_default_registry)
    return _DOCUMENT_URI_BUILDERS[location](registry, summary)


class RegistryClient:
    """Client for plugin registries."""

    def __init__(self, transport: Transport, workspace_settings: WorkspaceSettingsProvider):
        """Initialize registry client.

        Args:
            transport: Transport used for all registry requests
            workspace_settings: Provider of the default registry URLs
        """
        self.transport = transport
        self.workspace_settings = workspace_settings
        self._default_registry: PluginRegistry | None = None

    @property
    def default_registry(self) -> PluginRegistry | None:
        """Default registry, if already resolved."""
        return self._default_registry

    async def resolve_default_registry(self) -> PluginRegistry:
        """Resolve the default registry from workspace settings.

        The internal URL is preferred for fetching; the public URL is kept
        for building links to registry resources.

        Returns:
            The cached default registry

        Raises:
            ConfigurationError: If settings are unavailable or the public URL is missing
        """
        if self._default_registry is not None:
            return self._default_registry

        try:
            settings = await self.workspace_settings.get_settings()
        except Exception as e:
            logger.error(f"Unable to read workspace settings: {e}")
            raise ConfigurationError(f"Unable to get default plugin registry URI. {e}") from e

        if not settings:
            raise ConfigurationError("Plugin registry URI is not set.")

        public_uri = settings.get(PLUGIN_REGISTRY_URL)
        if not public_uri:
            raise ConfigurationError(f"Plugin registry URI is not set ({PLUGIN_REGISTRY_URL} is missing).")
        uri = settings.get(PLUGIN_REGISTRY_INTERNAL_URL) or public_uri

        self._default_registry = PluginRegistry(
            name=DEFAULT_REGISTRY_NAME,
            uri=uri,
            public_uri=public_uri,
        )
        logger.info(f"Resolved default plugin registry: {self._default_registry.uri}")
        return self._default_registry

    def is_default_registry(self, registry: PluginRegistry) -> bool:
        return self._default_registry is not None and registry.uri == self._default_registry.uri

    async def fetch_index(self, registry: PluginRegistry) -> Any:
        """Fetch the plugin index of a registry.

        An empty response is read as ``{}``. The parsed value is returned
        as-is; callers must check that it is a list.

        Raises:
            RegistryUnreachableError: If the index cannot be fetched
            InvalidRegistryError: If the index is not valid JSON
        """
        index_uri = f"{registry.uri}/plugins/"
        try:
            content = await self.transport.get(index_uri)
        except TransportError as e:
            raise RegistryUnreachableError(f"Cannot access the registry {registry.name}: {e}") from e

        try:
            return json.loads(content or "{}")
        except json.JSONDecodeError as e:
            raise InvalidRegistryError(f"Registry {registry.name} returned an invalid index: {e}") from e

    def resolve_plugin_document_uri(self, registry: PluginRegistry, summary: RawPluginSummary) -> str:
        return resolve_plugin_document_uri(registry, summary, self.is_default_registry(registry))

    async def fetch_plugin_document(self, uri: str) -> dict[str, Any]:
        """Fetch and parse a plugin metadata document.

        When ``uri`` does not yield a document, ``{uri}/meta.yaml`` is tried once.

        Raises:
            PluginDocumentError: If neither location yields a document
        """
        try:
            return await self._load_yaml(uri)
        except (TransportError, PluginDocumentError) as e:
            logger.debug(f"No plugin document at {uri}: {e}")
            first_error = e

        fallback_uri = uri if uri.endswith("/") else uri + "/"
        fallback_uri += META_YAML
        try:
            return await self._load_yaml(fallback_uri)
        except (TransportError, PluginDocumentError) as e:
            logger.warning(f"No plugin document at {fallback_uri}: {e}")
            raise PluginDocumentError(f"Unable to load plugin metadata. {first_error}") from e

    async def _load_yaml(self, uri: str) -> dict[str, Any]:
        content = await self.transport.get(uri)
        try:
            document = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise PluginDocumentError(f"Invalid YAML at {uri}: {e}") from e
        if not isinstance(document, dict):
            raise PluginDocumentError(f"{uri} is not a plugin metadata document")
        return document

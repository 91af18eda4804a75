"""Registry access: default registry resolution, indexes, plugin documents and keys."""

from .client import DEFAULT_REGISTRY_NAME
from .client import PLUGIN_REGISTRY_INTERNAL_URL
from .client import PLUGIN_REGISTRY_URL
from .client import DocumentLocation
from .client import RegistryClient
from .client import base_directory
from .client import resolve_plugin_document_uri
from .keys import build_reference_component
from .keys import canonical_key
from .keys import normalize_reference_id
from .transport import HttpTransport
from .workspace import SettingsWorkspaceProvider

__all__ = [
    "DEFAULT_REGISTRY_NAME",
    "PLUGIN_REGISTRY_INTERNAL_URL",
    "PLUGIN_REGISTRY_URL",
    "DocumentLocation",
    "RegistryClient",
    "base_directory",
    "resolve_plugin_document_uri",
    "build_reference_component",
    "canonical_key",
    "normalize_reference_id",
    "HttpTransport",
    "SettingsWorkspaceProvider",
]

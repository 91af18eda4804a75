"""Plugin library layer.

Business logic for plugin registries and workspace devfiles. The plugind
daemon exposes it over HTTP and SSE.

Public Interface:
    Modules:
    - registry: Default registry resolution, indexes, plugin documents, keys
    - cache: Plugin cache rebuilds and queries
    - devfile: Devfile plugin reconciliation
    - config: Configuration loading
    - storage: Storage paths
"""

from .errors import ConfigurationError
from .errors import DevfileStoreError
from .errors import DevfileUpdateError
from .errors import InvalidRegistryError
from .errors import PluginDocumentError
from .errors import PluginServiceError
from .errors import RegistryUnreachableError
from .errors import TransportError
from .models import PluginMetadata
from .models import PluginRegistry
from .services import PluginService

__all__ = [
    "ConfigurationError",
    "DevfileStoreError",
    "DevfileUpdateError",
    "InvalidRegistryError",
    "PluginDocumentError",
    "PluginServiceError",
    "RegistryUnreachableError",
    "TransportError",
    "PluginMetadata",
    "PluginRegistry",
    "PluginService",
]

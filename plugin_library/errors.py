"""Exception hierarchy for plugin_library.

Contract:
- Per-item failures during a cache rebuild (InvalidRegistryError,
  PluginDocumentError) are caught by the cache builder and turned into
  observer notifications.
- ConfigurationError aborts a rebuild before any registry is processed.
- DevfileStoreError and DevfileUpdateError propagate to the caller of a
  reconciliation operation.
"""


class PluginServiceError(Exception):
    """Base class for all plugin service errors."""


class ConfigurationError(PluginServiceError):
    """Default plugin registry settings are missing or invalid."""


class TransportError(PluginServiceError):
    """A remote resource could not be fetched."""

    def __init__(self, uri: str, message: str):
        super().__init__(f"Failed to fetch {uri}: {message}")
        self.uri = uri


class InvalidRegistryError(PluginServiceError):
    """A registry index could not be used (unreachable or malformed)."""


class RegistryUnreachableError(InvalidRegistryError):
    """Transport failure while fetching a registry index."""


class PluginDocumentError(PluginServiceError):
    """A plugin metadata document could not be loaded or normalized."""


class DevfileStoreError(PluginServiceError):
    """The devfile store failed to read or write the document."""


class DevfileUpdateError(PluginServiceError):
    """A plugin add/remove/update operation on the devfile failed.

    Attributes:
        keys: Plugin keys involved in the failed operation
    """

    def __init__(self, message: str, keys: list[str]):
        super().__init__(message)
        self.keys = keys

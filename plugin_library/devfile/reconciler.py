"""Devfile reconciler.

Keeps the plugin components of a devfile in line with a desired list of
plugin keys. Components that are not plugin references are never touched
and keep their positions; surviving plugin components keep their order and
new plugin components are appended.
"""

import logging

from ..errors import DevfileUpdateError
from ..interfaces import DevfileStore
from ..models.devfile import Devfile
from ..models.devfile import DevfileComponent
from ..registry.keys import build_reference_component
from ..registry.keys import component_reference_id

logger = logging.getLogger(__name__)


def list_desired_plugins(devfile: Devfile) -> list[str]:
    """List plugin references of a devfile in document order.

    URL references are returned without their ``/meta.yaml`` suffix.
    Materializes ``devfile.components`` as an empty list when absent.
    """
    if devfile.components is None:
        devfile.components = []

    plugins = []
    for component in devfile.components:
        reference = component_reference_id(component)
        if reference:
            plugins.append(reference)
    return plugins


def reconcile_components(components: list[DevfileComponent], desired_keys: list[str]) -> list[DevfileComponent]:
    """Compute the component list matching ``desired_keys``.

    Each existing plugin component consumes one matching occurrence of its
    key; unmatched plugin components are dropped. Keys left over are
    appended as new components in ``desired_keys`` order.
    """
    pending = list(desired_keys)
    result = []
    for component in components:
        if not component.is_plugin_reference:
            result.append(component)
            continue

        reference = component_reference_id(component)
        if reference is not None and reference in pending:
            pending.remove(reference)
            result.append(component)

    result.extend(build_reference_component(key) for key in pending)
    return result


class DevfileReconciler:
    """Reads and updates the desired plugins of the workspace devfile."""

    def __init__(self, store: DevfileStore):
        """Initialize reconciler.

        Args:
            store: Store holding the devfile
        """
        self.store = store

    async def get_desired_plugins(self) -> list[str]:
        devfile = await self.store.get()
        return list_desired_plugins(devfile)

    async def reconcile(self, devfile: Devfile, desired_keys: list[str]) -> Devfile:
        """Update ``devfile`` to reference exactly ``desired_keys`` and persist it.

        Raises:
            DevfileStoreError: If the store rejects the update
        """
        devfile.components = reconcile_components(devfile.components or [], desired_keys)
        await self.store.update(devfile)
        logger.info(f"Devfile updated with {len(desired_keys)} plugins")
        return devfile

    async def set_desired_plugins(self, keys: list[str]) -> None:
        devfile = await self.store.get()
        await self.reconcile(devfile, keys)

    async def add_plugin(self, key: str) -> None:
        """Add a plugin to the devfile.

        Raises:
            DevfileUpdateError: If the devfile cannot be read or updated
        """
        try:
            devfile = await self.store.get()
            plugins = list_desired_plugins(devfile)
            if key not in plugins:
                plugins.append(key)
            await self.reconcile(devfile, plugins)
        except Exception as e:
            logger.error(f"Unable to install plugin {key}: {e}")
            raise DevfileUpdateError(f"Unable to install plugin {key}: {e}", [key]) from e

    async def remove_plugin(self, key: str) -> None:
        """Remove a plugin from the devfile.

        Raises:
            DevfileUpdateError: If the devfile cannot be read or updated
        """
        try:
            devfile = await self.store.get()
            plugins = [plugin for plugin in list_desired_plugins(devfile) if plugin != key]
            await self.reconcile(devfile, plugins)
        except Exception as e:
            logger.error(f"Unable to remove plugin {key}: {e}")
            raise DevfileUpdateError(f"Unable to remove plugin {key}: {e}", [key]) from e

    async def update_plugin(self, old_key: str, new_key: str) -> None:
        """Replace a plugin in the devfile.

        A missing ``old_key`` is not an error; ``new_key`` is added anyway.

        Raises:
            DevfileUpdateError: If the devfile cannot be read or updated
        """
        try:
            devfile = await self.store.get()
            plugins = [plugin for plugin in list_desired_plugins(devfile) if plugin != old_key]
            if new_key not in plugins:
                plugins.append(new_key)
            await self.reconcile(devfile, plugins)
        except Exception as e:
            logger.error(f"Unable to update plugin from {old_key} to {new_key}: {e}")
            raise DevfileUpdateError(
                f"Unable to update plugin from {old_key} to {new_key}: {e}", [old_key, new_key]
            ) from e

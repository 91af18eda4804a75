"""Workspace settings provider backed by service configuration."""

from ..config.settings import PluginServiceSettings
from .client import PLUGIN_REGISTRY_INTERNAL_URL
from .client import PLUGIN_REGISTRY_URL


class SettingsWorkspaceProvider:
    """Exposes configured registry URLs under the workspace setting names."""

    def __init__(self, settings: PluginServiceSettings):
        self.settings = settings

    async def get_settings(self) -> dict[str, str]:
        workspace_settings: dict[str, str] = {}
        if self.settings.public_registry_url:
            workspace_settings[PLUGIN_REGISTRY_URL] = self.settings.public_registry_url
        if self.settings.internal_registry_url:
            workspace_settings[PLUGIN_REGISTRY_INTERNAL_URL] = self.settings.internal_registry_url
        return workspace_settings

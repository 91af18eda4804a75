"""
Shared pytest fixtures for the plugind test suite.

Provides in-memory stand-ins for the collaborators of plugin_library:
- transport serving canned registry responses
- workspace settings with a default registry
- devfile store keeping the document in memory
- observer recording cache notifications
"""

import copy
import os
import tempfile
from pathlib import Path
from typing import Any

import pytest
import yaml

# Isolate storage before plugind.main is imported during collection
os.environ.setdefault("PLUGIND_HOME", tempfile.mkdtemp(prefix="plugind-tests-"))

from plugin_library.errors import DevfileStoreError  # noqa: E402
from plugin_library.errors import TransportError  # noqa: E402
from plugin_library.models.devfile import Devfile  # noqa: E402
from plugin_library.models.registries import PluginRegistry  # noqa: E402
from plugin_library.registry.client import PLUGIN_REGISTRY_URL  # noqa: E402
from plugin_library.registry.client import RegistryClient  # noqa: E402
from plugin_library.services import PluginService  # noqa: E402

DEFAULT_REGISTRY_URI = "http://reg/a"


class FakeTransport:
    """Transport answering from a mapping of URI to body (or exception)."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.requests: list[str] = []

    async def get(self, uri: str) -> str:
        self.requests.append(uri)
        response = self.responses.get(uri)
        if response is None:
            raise TransportError(uri, "404 Not Found")
        if isinstance(response, Exception):
            raise response
        return response


class StaticWorkspaceSettings:
    """Workspace settings provider returning a fixed mapping."""

    def __init__(self, settings: dict[str, str] | None) -> None:
        self.settings = settings

    async def get_settings(self) -> dict[str, str] | None:
        return self.settings


class InMemoryDevfileStore:
    """Devfile store holding the document as a plain mapping."""

    def __init__(self, document: dict[str, Any] | None = None) -> None:
        self.document: dict[str, Any] = document if document is not None else {}
        self.updates = 0
        self.fail_updates = False

    async def get(self) -> Devfile:
        return Devfile.model_validate(copy.deepcopy(self.document))

    async def update(self, devfile: Devfile) -> None:
        if self.fail_updates:
            raise DevfileStoreError("devfile is read-only")
        self.document = devfile.to_document()
        self.updates += 1


class RecordingObserver:
    """Cache observer recording every notification in order."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    async def on_cache_size_changed(self, size: int) -> None:
        self.events.append(("size", size))

    async def on_plugin_cached(self, cached: int) -> None:
        self.events.append(("cached", cached))

    async def on_invalid_registry(self, registry: PluginRegistry) -> None:
        self.events.append(("invalid_registry", registry.name))

    async def on_invalid_plugin(self, uri: str) -> None:
        self.events.append(("invalid_plugin", uri))

    async def on_caching_complete(self) -> None:
        self.events.append(("complete",))


def plugin_yaml(
    publisher: str = "pub",
    name: str = "pl",
    version: str = "1.0.0",
    plugin_type: str = "VS Code extension",
    icon: str = "/icons/pl.svg",
    **extra: Any,
) -> str:
    """Render a plugin meta.yaml document."""
    document = {
        "publisher": publisher,
        "name": name,
        "version": version,
        "type": plugin_type,
        "displayName": f"{name} plugin",
        "title": f"{name} title",
        "description": f"The {name} plugin",
        "icon": icon,
        "category": "Language",
        **extra,
    }
    return yaml.safe_dump(document)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def workspace_settings() -> StaticWorkspaceSettings:
    return StaticWorkspaceSettings({PLUGIN_REGISTRY_URL: DEFAULT_REGISTRY_URI})


@pytest.fixture
def registry_client(transport: FakeTransport, workspace_settings: StaticWorkspaceSettings) -> RegistryClient:
    return RegistryClient(transport, workspace_settings)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def devfile_store() -> InMemoryDevfileStore:
    return InMemoryDevfileStore()


@pytest.fixture
def plugin_service(
    transport: FakeTransport,
    workspace_settings: StaticWorkspaceSettings,
    devfile_store: InMemoryDevfileStore,
    observer: RecordingObserver,
) -> PluginService:
    """PluginService wired to the in-memory collaborators."""
    service = PluginService(
        transport=transport,
        workspace_settings=workspace_settings,
        devfile_store=devfile_store,
    )
    service.set_observer(observer)
    return service


@pytest.fixture
def registries() -> dict[str, PluginRegistry]:
    """Default registry A and a second registry B."""
    return {
        "A": PluginRegistry(name="A", uri=DEFAULT_REGISTRY_URI),
        "B": PluginRegistry(name="B", uri="http://reg/b", public_uri="https://public.reg/b"),
    }


@pytest.fixture
def mock_storage_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point PLUGIND_HOME at a temporary directory.

    Returns:
        Path to temporary storage directory
    """
    monkeypatch.setenv("PLUGIND_HOME", str(tmp_path))
    monkeypatch.delenv("PLUGIND_CONFIG_DIR", raising=False)
    monkeypatch.delenv("PLUGIND_STATE_DIR", raising=False)
    return tmp_path


@pytest.fixture
def render_plugin():
    """Factory rendering plugin meta.yaml documents."""
    return plugin_yaml

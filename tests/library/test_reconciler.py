"""Tests for devfile plugin reconciliation."""

import pytest

from plugin_library.devfile.reconciler import DevfileReconciler
from plugin_library.devfile.reconciler import list_desired_plugins
from plugin_library.devfile.reconciler import reconcile_components
from plugin_library.errors import DevfileUpdateError
from plugin_library.models.devfile import Devfile

DOCKER = {"type": "dockerimage", "alias": "tools", "image": "quay.io/tools:latest"}
K8S = {"type": "kubernetes", "reference": "app.yaml"}

DOCUMENTS = [
    {},
    {"apiVersion": "1.0.0", "components": []},
    {"components": [DOCKER, {"plugin": {"id": "pub/a/1.0"}}, K8S]},
    {
        "metadata": {"name": "ws"},
        "components": [
            {"plugin": {"id": "pub/a/1.0"}},
            DOCKER,
            {"plugin": {"url": "https://reg/b/pub/b/2.0/meta.yaml"}},
            K8S,
            {"plugin": {"id": "pub/c/3.0", "memoryLimit": "512Mi"}},
        ],
    },
]

KEY_SETS = [
    [],
    ["pub/a/1.0"],
    ["pub/c/3.0", "https://reg/b/pub/b/2.0"],
    ["pub/d/4.0", "https://reg/e/pub/e/5.0", "pub/a/1.0"],
]


def non_plugin_components(devfile: Devfile) -> list[dict]:
    return [component.model_dump(exclude_unset=True) for component in devfile.components if component.plugin is None]


@pytest.mark.unit
class TestReconcileComponents:
    """Test reconciliation properties."""

    @pytest.mark.parametrize("document", DOCUMENTS)
    @pytest.mark.parametrize("keys", KEY_SETS)
    def test_result_lists_exactly_desired_keys(self, document: dict, keys: list[str]) -> None:
        devfile = Devfile.model_validate(document)

        devfile.components = reconcile_components(devfile.components or [], keys)

        assert set(list_desired_plugins(devfile)) == set(keys)
        assert len(list_desired_plugins(devfile)) == len(keys)

    @pytest.mark.parametrize("document", DOCUMENTS)
    def test_reconcile_with_current_plugins_is_noop(self, document: dict) -> None:
        devfile = Devfile.model_validate(document)
        before = devfile.to_document().get("components", [])

        devfile.components = reconcile_components(devfile.components or [], list_desired_plugins(devfile))

        assert devfile.to_document()["components"] == before

    @pytest.mark.parametrize("document", DOCUMENTS)
    @pytest.mark.parametrize("keys", KEY_SETS)
    def test_non_plugin_components_untouched(self, document: dict, keys: list[str]) -> None:
        devfile = Devfile.model_validate(document)
        expected = [c for c in document.get("components", []) if "plugin" not in c]

        devfile.components = reconcile_components(devfile.components or [], keys)

        assert non_plugin_components(devfile) == expected

    def test_surviving_components_keep_order_and_content(self) -> None:
        devfile = Devfile.model_validate(DOCUMENTS[3])

        components = reconcile_components(devfile.components, ["pub/c/3.0", "pub/a/1.0", "pub/new/1.0"])

        assert [component.model_dump(exclude_unset=True) for component in components] == [
            {"plugin": {"id": "pub/a/1.0"}},
            DOCKER,
            K8S,
            {"plugin": {"id": "pub/c/3.0", "memoryLimit": "512Mi"}},
            {"plugin": {"id": "pub/new/1.0"}},
        ]

    def test_duplicate_references_are_kept_when_listed_twice(self) -> None:
        devfile = Devfile.model_validate({"components": [{"plugin": {"id": "pub/a/1.0"}}, {"plugin": {"id": "pub/a/1.0"}}]})

        components = reconcile_components(devfile.components, list_desired_plugins(devfile))

        assert len(components) == 2

    def test_list_materializes_components(self) -> None:
        devfile = Devfile()

        assert list_desired_plugins(devfile) == []
        assert devfile.components == []


class TestDevfileReconciler:
    """Test read-modify-write operations against the store."""

    @pytest.fixture
    def reconciler(self, devfile_store) -> DevfileReconciler:
        return DevfileReconciler(devfile_store)

    async def test_add_plugin_to_empty_document(self, reconciler, devfile_store) -> None:
        await reconciler.add_plugin("pub/pl/1.0")

        assert devfile_store.document == {"components": [{"plugin": {"id": "pub/pl/1.0"}}]}

    async def test_add_url_plugin(self, reconciler, devfile_store) -> None:
        await reconciler.add_plugin("https://reg/b/pub/pl/1.0")

        assert devfile_store.document["components"] == [{"plugin": {"url": "https://reg/b/pub/pl/1.0/meta.yaml"}}]
        assert await reconciler.get_desired_plugins() == ["https://reg/b/pub/pl/1.0"]

    async def test_add_existing_plugin_does_not_duplicate(self, reconciler, devfile_store) -> None:
        devfile_store.document = {"components": [{"plugin": {"id": "pub/pl/1.0"}}]}

        await reconciler.add_plugin("pub/pl/1.0")

        assert devfile_store.document == {"components": [{"plugin": {"id": "pub/pl/1.0"}}]}

    async def test_remove_plugin_keeps_other_content(self, reconciler, devfile_store) -> None:
        devfile_store.document = {
            "apiVersion": "1.0.0",
            "components": [{"plugin": {"id": "pub/a/1.0"}}, DOCKER, {"plugin": {"id": "pub/b/1.0"}}],
        }

        await reconciler.remove_plugin("pub/a/1.0")

        assert devfile_store.document == {
            "apiVersion": "1.0.0",
            "components": [DOCKER, {"plugin": {"id": "pub/b/1.0"}}],
        }

    async def test_remove_url_plugin_by_normalized_id(self, reconciler, devfile_store) -> None:
        devfile_store.document = {"components": [{"plugin": {"url": "https://reg/b/pub/b/2.0/meta.yaml"}}]}

        await reconciler.remove_plugin("https://reg/b/pub/b/2.0")

        assert devfile_store.document == {"components": []}

    async def test_update_plugin(self, reconciler, devfile_store) -> None:
        devfile_store.document = {"components": [{"plugin": {"id": "pub/a/1.0"}}, DOCKER]}

        await reconciler.update_plugin("pub/a/1.0", "pub/a/2.0")

        assert devfile_store.document["components"] == [DOCKER, {"plugin": {"id": "pub/a/2.0"}}]

    async def test_update_missing_plugin_adds_new_key(self, reconciler, devfile_store) -> None:
        await reconciler.update_plugin("pub/missing/1.0", "pub/a/2.0")

        assert await reconciler.get_desired_plugins() == ["pub/a/2.0"]

    async def test_set_desired_plugins(self, reconciler, devfile_store) -> None:
        devfile_store.document = {"components": [{"plugin": {"id": "pub/a/1.0"}}, K8S]}

        await reconciler.set_desired_plugins(["pub/b/1.0"])

        assert devfile_store.document["components"] == [K8S, {"plugin": {"id": "pub/b/1.0"}}]

    @pytest.mark.parametrize(
        ("operation", "args", "keys"),
        [
            ("add_plugin", ("pub/a/1.0",), ["pub/a/1.0"]),
            ("remove_plugin", ("pub/a/1.0",), ["pub/a/1.0"]),
            ("update_plugin", ("pub/a/1.0", "pub/a/2.0"), ["pub/a/1.0", "pub/a/2.0"]),
        ],
    )
    async def test_store_failure_is_wrapped(self, reconciler, devfile_store, operation, args, keys) -> None:
        devfile_store.fail_updates = True

        with pytest.raises(DevfileUpdateError) as exc_info:
            await getattr(reconciler, operation)(*args)

        assert exc_info.value.keys == keys
        assert "devfile is read-only" in str(exc_info.value)
        for key in keys:
            assert key in str(exc_info.value)

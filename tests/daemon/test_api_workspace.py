"""Integration tests for the workspace plugin endpoints."""

import pytest
from fastapi.testclient import TestClient

from plugind.dependencies import get_plugin_service
from plugind.main import app


@pytest.fixture
def client(plugin_service):
    app.dependency_overrides[get_plugin_service] = lambda: plugin_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.mark.integration
class TestWorkspaceAPI:
    """Test devfile plugin management over HTTP."""

    def test_list_plugins(self, client: TestClient, devfile_store) -> None:
        devfile_store.document = {
            "components": [
                {"plugin": {"id": "pub/a/1.0"}},
                {"type": "dockerimage", "alias": "tools"},
                {"plugin": {"url": "https://reg/b/pub/b/2.0/meta.yaml"}},
            ]
        }

        response = client.get("/api/v1/workspace/plugins")

        assert response.status_code == 200
        assert response.json() == {"plugins": ["pub/a/1.0", "https://reg/b/pub/b/2.0"]}

    def test_add_plugin(self, client: TestClient, devfile_store) -> None:
        response = client.post("/api/v1/workspace/plugins", json={"key": "pub/pl/1.0"})

        assert response.status_code == 201
        assert response.json() == {"plugins": ["pub/pl/1.0"]}
        assert devfile_store.document == {"components": [{"plugin": {"id": "pub/pl/1.0"}}]}

    def test_remove_plugin(self, client: TestClient, devfile_store) -> None:
        devfile_store.document = {"components": [{"plugin": {"id": "pub/a/1.0"}}, {"plugin": {"id": "pub/b/1.0"}}]}

        response = client.delete("/api/v1/workspace/plugins", params={"key": "pub/a/1.0"})

        assert response.json() == {"plugins": ["pub/b/1.0"]}

    def test_update_plugin(self, client: TestClient, devfile_store) -> None:
        devfile_store.document = {"components": [{"plugin": {"id": "pub/a/1.0"}}]}

        response = client.patch(
            "/api/v1/workspace/plugins",
            json={"oldKey": "pub/a/1.0", "newKey": "pub/a/2.0"},
        )

        assert response.json() == {"plugins": ["pub/a/2.0"]}

    def test_set_plugins(self, client: TestClient, devfile_store) -> None:
        devfile_store.document = {"components": [{"plugin": {"id": "pub/a/1.0"}}]}

        response = client.put("/api/v1/workspace/plugins", json={"plugins": ["pub/b/1.0", "pub/c/1.0"]})

        assert response.json() == {"plugins": ["pub/b/1.0", "pub/c/1.0"]}

    def test_store_failure(self, client: TestClient, devfile_store) -> None:
        devfile_store.fail_updates = True

        response = client.post("/api/v1/workspace/plugins", json={"key": "pub/pl/1.0"})

        assert response.status_code == 500
        assert "pub/pl/1.0" in response.json()["detail"]
        assert "devfile is read-only" in response.json()["detail"]

    def test_empty_key_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/workspace/plugins", json={"key": ""})

        assert response.status_code == 422

"""
Integration Tests for zfsquery API Endpoints

The API runs against sessions over the fake backing store.
"""

import pytest
from fastapi.testclient import TestClient

from zfsquery.api.dependencies import get_session
from zfsquery.core.exceptions.zfs_exceptions import CommandFailedError
from zfsquery.core.result import Result
from zfsquery.main import app
from tests.fixtures.fake_pools import HOLD_TIME_1, recursive_pool, single_pool


class TestAPIEndpoints:
    """Test suite for zfsquery API endpoints."""

    @pytest.fixture
    def api_session(self, make_session):
        return make_session({
            "TestPool1": single_pool(),
            "tank": recursive_pool(holds={"keep": HOLD_TIME_1}),
        })

    @pytest.fixture
    def client(self, api_session):
        """Create test client bound to the fake session."""
        app.dependency_overrides[get_session] = lambda: api_session
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "zfsquery"
        assert data["pools"] == "/api/v1/pools"

    def test_list_pools(self, client):
        response = client.get("/api/v1/pools/")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["count"] == 2
        assert [pool["name"] for pool in data["pools"]] == ["TestPool1", "tank"]
        assert data["pools"][0]["guid"] == 123456789012345
        assert data["pools"][0]["fragmentation_percent"] == 5

    def test_get_pool(self, client):
        response = client.get("/api/v1/pools/tank")

        assert response.status_code == 200
        assert response.json()["pool"]["guid"] == 42
        assert set(response.json()) == {"success", "pool"}

    def test_get_pool_not_found(self, client):
        response = client.get("/api/v1/pools/missing")

        assert response.status_code == 404
        assert "missing" in response.json()["detail"]

    def test_get_pool_property(self, client):
        response = client.get("/api/v1/pools/TestPool1/properties/health")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "pool": "TestPool1",
            "property": "health",
            "value": "ONLINE",
        }

    def test_list_file_systems(self, client):
        response = client.get("/api/v1/pools/tank/filesystems")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [fs["full_name"] for fs in data["file_systems"]] == ["tank", "tank/a", "tank/b"]

    def test_list_snapshots_of_root_by_default(self, client):
        response = client.get("/api/v1/pools/tank/snapshots")

        assert response.status_code == 200
        data = response.json()
        assert data["file_system"] == "tank"
        assert [snap["name"] for snap in data["snapshots"]] == ["partial", "s1", "s2"]

    def test_list_snapshots_of_child(self, client):
        response = client.get("/api/v1/pools/tank/snapshots", params={"filesystem": "tank/b"})

        assert response.status_code == 200
        assert [snap["full_name"] for snap in response.json()["snapshots"]] == ["tank/b@s1", "tank/b@s2"]

    def test_list_snapshots_unknown_file_system(self, client):
        response = client.get("/api/v1/pools/tank/snapshots", params={"filesystem": "tank/zzz"})

        assert response.status_code == 404

    def test_list_holds(self, client):
        response = client.get("/api/v1/pools/tank/holds", params={"filesystem": "tank/a", "snapshot": "s1"})

        assert response.status_code == 200
        data = response.json()
        assert data["snapshot"] == "tank/a@s1"
        assert data["count"] == 1
        assert data["holds"][0]["tag"] == "keep"

    def test_list_holds_requires_snapshot(self, client):
        response = client.get("/api/v1/pools/tank/holds")

        assert response.status_code == 422

    def test_list_holds_unknown_snapshot(self, client):
        response = client.get("/api/v1/pools/tank/holds", params={"snapshot": "nope"})

        assert response.status_code == 404

    def test_list_recursive_snapshot_groups(self, client):
        response = client.get("/api/v1/pools/tank/recursive-snapshots")

        assert response.status_code == 200
        data = response.json()
        assert [group["name"] for group in data["groups"]] == ["s2", "s1"]
        assert data["count"] == 2

    def test_list_recursive_hold_groups(self, client):
        response = client.get("/api/v1/pools/tank/recursive-snapshots/s1/holds")

        assert response.status_code == 200
        data = response.json()
        assert data["group"] == "s1"
        assert [hold_group["tag"] for hold_group in data["hold_groups"]] == ["keep"]

    def test_partial_group_not_found(self, client):
        response = client.get("/api/v1/pools/tank/recursive-snapshots/partial/holds")

        assert response.status_code == 404

    def test_command_failure_is_server_error(self, client, api_session):
        failure = CommandFailedError("zpool", ["list"], reason="exit status 1", stderr="no pools", returncode=1)
        api_session.command.zpool.set_list_override(lambda columns: Result.failure(failure))

        response = client.get("/api/v1/pools/")

        assert response.status_code == 500
        assert "failed to list pools" in response.json()["detail"]

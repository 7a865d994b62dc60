"""
Integration tests for API endpoints.

Runs the full application, lifespan included, against in-memory
store and cache doubles.
"""

import pytest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from comedy_club.exceptions import StoreUnavailableError
from comedy_club.main import ApplicationState, create_application
from tests.mocks.store_mocks import InMemoryJokeCache, InMemoryJokeStore


@pytest.fixture
def store():
    """In-memory store shared with the app."""
    return InMemoryJokeStore()


@pytest.fixture
def cache():
    """In-memory cache shared with the app."""
    return InMemoryJokeCache()


@pytest.fixture
def client(test_config, store, cache):
    """Run the seeded application."""
    app_config = test_config.model_copy(update={"auto_seed": True})
    app = create_application(app_config)

    with patch.object(
        ApplicationState, "_connect_store", AsyncMock(return_value=store)
    ), patch.object(ApplicationState, "_connect_cache", AsyncMock(return_value=cache)):
        with TestClient(app) as test_client:
            yield test_client


class TestJokeFlow:
    """End-to-end joke serving."""

    def test_should_seed_on_startup(self, client):
        """Test listing returns the seeded jokes."""
        response = client.get("/api/jokes")

        assert response.status_code == 200
        assert len(response.json()) == 40

    def test_should_count_every_serve(self, client, cache):
        """Test displays add up across endpoints."""
        served = [client.get("/api/jokes/random").json() for _ in range(10)]

        assert all(joke["times_displayed"] >= 1 for joke in served)

        stats = client.get("/api/stats").json()
        assert stats["totalJokes"] == 40
        assert stats["totalDisplays"] == 10
        assert len(stats["topJokes"]) == 5

        last = served[-1]
        fetched = client.get(f"/api/jokes/{last['id']}").json()
        assert fetched["times_displayed"] >= last["times_displayed"]
        assert f"joke:{last['id']}" in cache.entries

    def test_should_not_count_lookups(self, client):
        """Test lookups leave counters alone."""
        joke_id = client.get("/api/jokes").json()[0]["id"]

        client.get(f"/api/jokes/{joke_id}")
        client.get(f"/api/jokes/{joke_id}")

        assert client.get("/api/stats").json()["totalDisplays"] == 0

    def test_should_return_404_for_unknown_ids(self, client):
        """Test unknown and malformed ids."""
        for joke_id in ("65a1f0c2e4b0a1b2c3d4e5f6", "not-an-id"):
            response = client.get(f"/api/jokes/{joke_id}")
            assert response.status_code == 404
            assert response.json() == {"error": "Joke not found"}

    def test_should_tag_responses_with_request_id(self, client):
        """Test request id header."""
        response = client.get("/api/jokes/random")

        assert len(response.headers["X-Request-ID"]) == 8

    def test_should_report_healthy(self, client):
        """Test health endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_should_describe_service(self, client):
        """Test root endpoint."""
        assert client.get("/").json()["name"] == "ContainerComedy Club"


class TestDegradedDependencies:
    """Behavior with failing dependencies."""

    def test_should_serve_without_cache(self, test_config, store):
        """Test Redis outage does not affect serving."""
        app = create_application(test_config.model_copy(update={"auto_seed": True}))
        broken_cache = InMemoryJokeCache(should_fail=True)

        with patch.object(
            ApplicationState, "_connect_store", AsyncMock(return_value=store)
        ), patch.object(
            ApplicationState, "_connect_cache", AsyncMock(return_value=broken_cache)
        ):
            with TestClient(app) as client:
                response = client.get("/api/jokes/random")
                health = client.get("/health")

        assert response.status_code == 200
        assert response.json()["times_displayed"] == 1
        assert health.status_code == 500
        assert health.json() == {"status": "unhealthy", "error": "Redis ping failed"}

    def test_should_report_empty_store(self, test_config, store, cache):
        """Test serving from an unseeded store."""
        app = create_application(test_config)

        with patch.object(
            ApplicationState, "_connect_store", AsyncMock(return_value=store)
        ), patch.object(ApplicationState, "_connect_cache", AsyncMock(return_value=cache)):
            with TestClient(app) as client:
                response = client.get("/api/jokes/random")
                stats = client.get("/api/stats")

        assert response.status_code == 404
        assert response.json() == {"error": "No jokes found"}
        assert stats.json() == {"totalJokes": 0, "totalDisplays": 0, "topJokes": []}

    def test_should_refuse_to_start_without_store(self, test_config):
        """Test MongoDB outage at startup aborts."""
        app = create_application(test_config)

        with patch.object(
            ApplicationState,
            "_connect_store",
            AsyncMock(side_effect=StoreUnavailableError("Failed to connect to MongoDB")),
        ):
            with pytest.raises(StoreUnavailableError):
                with TestClient(app):
                    pass

"""
Tests for the cache administration API.
"""

import pytest
from fastapi.testclient import TestClient

from ai_cache.api.app import create_app
from ai_cache.services import AICacheService


@pytest.fixture
def service(clock):
    """Create the cache served by the app."""
    return AICacheService.create(clock=clock)


@pytest.fixture
def client(service):
    """Create a test client (runs the lifespan)."""
    with TestClient(create_app(cache_service=service)) as test_client:
        yield test_client


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "AI Cache API"


def test_health(client, service):
    """Health reports size and a running reaper."""
    service.set("f", "a", "A")
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["cache_size"] == 1
    assert data["reaper_running"] is True


def test_get_stats(client, service):
    """Stats mirror the service counters."""
    service.set("f", "a", "A")
    service.get("f", "a")
    service.get("f", "b")

    response = client.get("/stats")
    assert response.status_code == 200
    assert response.json() == {
        "hits": 1,
        "misses": 1,
        "total_requests": 2,
        "hit_rate": 50.0,
        "hit_rate_status": "good",
        "size": 1,
    }


def test_reset_stats(client, service):
    """Reset zeroes counters but keeps entries."""
    service.set("f", "a", "A")
    service.get("f", "a")

    assert client.post("/stats/reset").status_code == 200
    stats = service.get_stats()
    assert stats.hits == 0
    assert stats.size == 1


def test_clear_cache(client, service):
    """Clear empties the store."""
    service.set("f", "a", "A")
    service.set("f", "b", "B")

    response = client.delete("/cache")
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["deleted_count"] == 2
    assert len(service) == 0


def test_cleanup(client, service, clock):
    """Cleanup removes expired entries, or all when forced."""
    service.set("f", "a", "A", ttl_ms=5)
    service.set("f", "b", "B")
    clock.advance(6)

    response = client.post("/cache/cleanup", json={})
    assert response.json() == {"removed": 1, "force": False}

    response = client.post("/cache/cleanup", json={"force": True})
    assert response.json() == {"removed": 1, "force": True}


def test_similar_content(client, service):
    """Similar lookup returns sorted matches."""
    service.set("polish_text", "hello world", {"polished": "Hello, world."})

    response = client.post("/cache/similar", json={"content": "hello world", "threshold": 0.5})
    assert response.status_code == 200
    data = response.json()
    assert data["threshold"] == 0.5
    assert data["matches"][0] == {"content": {"polished": "Hello, world."}, "similarity": 1.0}


def test_similar_content_validation(client):
    """Empty content and out-of-range thresholds are rejected."""
    assert client.post("/cache/similar", json={"content": ""}).status_code == 422
    assert client.post("/cache/similar", json={"content": "x", "threshold": 2}).status_code == 422


def test_delete_entry(client, service):
    """Delete one entry by its request fingerprint."""
    service.set("f", "a", "A", params={"model": "m"})

    body = {"function_name": "f", "content": "a", "params": {"model": "m"}}
    assert client.post("/cache/entry/delete", json=body).json() == {"deleted": True}
    assert client.post("/cache/entry/delete", json=body).json() == {"deleted": False}


def test_app_serves_injected_cache(service):
    """The lifespan keeps the injected (empty) cache."""
    app = create_app(cache_service=service)
    with TestClient(app):
        assert app.state.cache_service is service


def test_delete_entry_with_lone_surrogate(client, service):
    """Unpaired surrogates in content do not break the API."""
    service.set("f", "\ud800", "A")

    # Escaped in the raw body, decoded by the server into a lone surrogate
    response = client.post(
        "/cache/entry/delete",
        content=b'{"function_name": "f", "content": "\\ud800"}',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json() == {"deleted": True}

# =============================================================================
# tests/test_health.py - Health Endpoint Tests
# =============================================================================

from unittest.mock import AsyncMock


def test_health_with_memory_backend(client):
    body = client.get("/api/health").json()

    assert body["status"] == "healthy"
    assert body["sessions"] == "ok (memory)"


def test_health_degraded_when_backend_unreachable(app, client, monkeypatch):
    monkeypatch.setattr(app.state.session_backend, "ping", AsyncMock(return_value=False))

    body = client.get("/api/health").json()

    assert body["status"] == "degraded"
    assert body["sessions"] == "unreachable (memory)"

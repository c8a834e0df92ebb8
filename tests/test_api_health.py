"""
Tests for health probes, root endpoints and API-wide error handling.
"""

from app.api.v1 import health
from app.shared.config.settings import get_settings
from app.shared.core.rate_limiter import limiter
from tests.conftest import DEFAULT_PASSWORD


async def test_health_check(client):
    response = await client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "leaflings-api"
    assert body["version"] == get_settings().APP_VERSION
    assert body["uptime_seconds"] >= 0


async def test_liveness_probe(client):
    response = await client.get("/api/health/live")

    assert response.status_code == 200
    assert response.text == "OK"


async def test_readiness_probe(client, monkeypatch):
    async def healthy():
        return {"status": "healthy"}

    monkeypatch.setattr(health, "db_health_check", healthy)

    response = await client.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json()["status"] == "ready"


async def test_readiness_probe_without_database(client, monkeypatch):
    async def unhealthy():
        return {"status": "unhealthy", "error": "Database not initialized"}

    monkeypatch.setattr(health, "db_health_check", unhealthy)

    response = await client.get("/api/health/ready")

    assert response.status_code == 503
    assert response.json()["reason"] == "database_unhealthy"


async def test_root_describes_api(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["name"] == get_settings().APP_NAME
    assert response.json()["health_check"] == "/api/health"


async def test_favicon_is_empty(client):
    response = await client.get("/favicon.ico")
    assert response.status_code == 204


async def test_unknown_endpoint(client):
    response = await client.get("/api/compost")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "HTTP_404"
    assert error["message"] == "Endpoint not found: /api/compost"
    assert error["timestamp"]


async def test_login_is_rate_limited(client, user, monkeypatch):
    monkeypatch.setattr(get_settings(), "LOGIN_RATE_LIMIT", "2/minute")
    limiter.reset()
    credentials = {"email": user.email, "password": DEFAULT_PASSWORD}

    statuses = [(await client.post("/api/auth/login", json=credentials)).status_code for _ in range(3)]

    assert statuses == [200, 200, 429]

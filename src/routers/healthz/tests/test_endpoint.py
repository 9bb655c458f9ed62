import pytest

from src.routers.healthz import router as healthz_module


@pytest.mark.asyncio
async def test_health_check(client):
    """Test the health check endpoint returns healthy status."""
    response = await client.get("/healthz/")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "0.1.0"
    assert data["database"] == "ok"


@pytest.mark.asyncio
async def test_health_check_reports_unreachable_database(client, monkeypatch):
    async def unreachable() -> bool:
        return False

    monkeypatch.setattr(healthz_module, "database_reachable", unreachable)

    response = await client.get("/healthz/")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "version": "0.1.0", "database": "unreachable"}


@pytest.mark.asyncio
async def test_root_endpoint(client):
    """Test the root endpoint returns welcome message."""
    response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Welcome to the EventHost API"

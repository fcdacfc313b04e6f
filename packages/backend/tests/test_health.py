"""Health endpoint tests."""

import pytest


@pytest.mark.asyncio
async def test_health_ok(client):
    r = await client.get("/health-check")
    assert r.status_code == 200
    assert r.json() == {
        "status": 200,
        "message": "health check",
        "data": {"status": "healthy", "database": "healthy"},
    }


@pytest.mark.asyncio
async def test_health_database_down(client, store):
    store.healthy = False
    r = await client.get("/health-check")
    assert r.status_code == 503
    assert r.json()["status"] == 503
    assert r.json()["data"] == {"status": "unhealthy", "database": "unhealthy"}

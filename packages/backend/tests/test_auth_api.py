"""Auth API tests — registration and login over HTTP.

Learn: Tests cover:
1. The full register → login → wrong password → re-register scenario
2. Malformed bodies and policy violations → 400
3. Response envelope on success and failure
4. Storage / unexpected failures → 500 without leaking internals
"""

import uuid

import jwt
import pytest
from httpx import ASGITransport, AsyncClient

from imagesmith.db.memory import InMemoryAccountStore
from imagesmith.errors import StorageFailure
from imagesmith.main import create_app


JAMAL = {"name": "Jamal", "email": "jamalunyu@gmail.com", "password": "Rahasia#123"}


# ═══════════════════════════════════════════════════════════
# End-to-end scenario
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_register_login_scenario(client, settings):
    r = await client.post("/auth/register", json=JAMAL)
    assert r.status_code == 201
    body = r.json()
    assert body["status"] == 201
    assert body["message"] == "successfully create user"
    account = body["data"]
    assert account["name"] == "Jamal"
    assert account["email"] == "jamalunyu@gmail.com"
    assert account["id"]
    assert account["created_at"]

    r = await client.post(
        "/auth/login",
        json={"email": JAMAL["email"], "password": JAMAL["password"]},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "successfully login to account"
    token = body["data"]["token"]
    assert token
    assert jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])["sub"] == account["id"]

    r = await client.post("/auth/login", json={"email": JAMAL["email"], "password": "wrong"})
    assert r.status_code == 401
    assert r.json() == {"status": 401, "message": "incorrect password", "data": None}

    r = await client.post("/auth/register", json=JAMAL)
    assert r.status_code == 409
    assert r.json() == {"status": 409, "message": "email already exist", "data": None}


# ═══════════════════════════════════════════════════════════
# Registration
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_register_never_returns_password(client):
    r = await client.post("/auth/register", json=JAMAL)
    data = r.json()["data"]
    assert set(data) == {"id", "name", "email", "created_at"}
    assert "Rahasia#123" not in r.text


@pytest.mark.asyncio
async def test_register_short_password(client, store):
    r = await client.post(
        "/auth/register",
        json={"name": "Jamal", "email": "jamalunyu@gmail.com", "password": "salah"},
    )
    assert r.status_code == 400
    assert r.json() == {
        "status": 400,
        "message": "Password must be at least 8 characters long",
        "data": None,
    }
    assert store.create_calls == 0


@pytest.mark.asyncio
async def test_register_invalid_json(client):
    r = await client.post(
        "/auth/register",
        content="invalid json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["status"] == 400
    assert r.json()["data"] is None


@pytest.mark.asyncio
async def test_register_missing_field(client):
    r = await client.post("/auth/register", json={"name": "Jamal", "password": "Rahasia#123"})
    assert r.status_code == 400
    assert "email" in r.json()["message"]


# ═══════════════════════════════════════════════════════════
# Login
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_login_unknown_email(client):
    r = await client.post(
        "/auth/login",
        json={"email": f"nobody-{uuid.uuid4().hex[:8]}@example.com", "password": "whatever1"},
    )
    assert r.status_code == 404
    assert r.json() == {"status": 404, "message": "email not found", "data": None}


@pytest.mark.asyncio
async def test_register_password_over_72_bytes(client, store):
    r = await client.post(
        "/auth/register",
        json={"name": "Jamal", "email": "jamalunyu@gmail.com", "password": "Z" * 72 + "real"},
    )
    assert r.status_code == 400
    assert r.json() == {
        "status": 400,
        "message": "Password must be at most 72 bytes long",
        "data": None,
    }
    assert store.create_calls == 0


@pytest.mark.asyncio
async def test_login_with_longer_password_sharing_prefix(client):
    """Extra bytes past bcrypt's 72 are not silently ignored."""
    password = "Z" * 72
    r = await client.post(
        "/auth/register",
        json={"name": "Jamal", "email": "jamalunyu@gmail.com", "password": password},
    )
    assert r.status_code == 201

    r = await client.post(
        "/auth/login",
        json={"email": "jamalunyu@gmail.com", "password": password + "real"},
    )
    assert r.status_code == 401

    r = await client.post(
        "/auth/login",
        json={"email": "jamalunyu@gmail.com", "password": password},
    )
    assert r.status_code == 200


@pytest.mark.asyncio
async def test_login_malformed_body(client):
    r = await client.post("/auth/login", json={"email": "jamalunyu@gmail.com"})
    assert r.status_code == 400
    assert r.json()["data"] is None


@pytest.mark.asyncio
async def test_unknown_route_uses_envelope(client):
    r = await client.get("/auth/nope")
    assert r.status_code == 404
    assert r.json()["status"] == 404
    assert r.json()["data"] is None


# ═══════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════


class BrokenStore(InMemoryAccountStore):
    async def find_by_email(self, email):
        raise StorageFailure() from ConnectionError("could not connect to 10.1.2.3:5432")


class ExplodingStore(InMemoryAccountStore):
    async def find_by_email(self, email):
        raise RuntimeError("cursor state corrupted at 0xdeadbeef")


@pytest.mark.asyncio
async def test_storage_failure_is_generic_500(settings):
    app = create_app(settings, store=BrokenStore())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.post("/auth/login", json={"email": "a@b.c", "password": "Rahasia#123"})
        assert r.status_code == 500
        assert r.json() == {"status": 500, "message": "internal server error", "data": None}
        assert "10.1.2.3" not in r.text

        r = await ac.post("/auth/register", json=JAMAL)
        assert r.status_code == 500


@pytest.mark.asyncio
async def test_unexpected_error_is_generic_500(settings):
    app = create_app(settings, store=ExplodingStore())
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.post(
            "/auth/register",
            json=JAMAL,
            headers={"X-Request-ID": "crash-trace-1"},
        )
    assert r.status_code == 500
    assert r.json()["message"] == "internal server error"
    assert "deadbeef" not in r.text
    assert r.json()["data"] is None
    assert r.headers["X-Request-ID"] == "crash-trace-1"
    assert r.headers["Cache-Control"] == "no-store"
    assert r.headers["X-Content-Type-Options"] == "nosniff"

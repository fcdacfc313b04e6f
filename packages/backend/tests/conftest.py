"""Test fixtures — app wired to an in-memory account store.

Learn: create_app() accepts a store, so HTTP tests run the real routes,
service, hasher and token issuer against InMemoryAccountStore. bcrypt
rounds are dropped to 4 to keep hashing fast.

SQL store tests use SQLite in memory (aiosqlite) with a StaticPool so
every session shares the one connection and therefore the one schema.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from imagesmith.auth.jwt import JwtTokenIssuer
from imagesmith.auth.password import BcryptPasswordHasher
from imagesmith.auth.policy import PasswordPolicy
from imagesmith.config import Settings
from imagesmith.db.engine import build_session_factory
from imagesmith.db.memory import InMemoryAccountStore
from imagesmith.db.models import Base
from imagesmith.db.store import SqlAccountStore
from imagesmith.main import create_app
from imagesmith.services.account_service import AccountService

TEST_SECRET = "test-signing-secret-that-is-long-enough-for-hs256"


@pytest.fixture()
def settings():
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        database_url="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture()
def store():
    return InMemoryAccountStore()


@pytest.fixture()
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture()
def token_issuer(settings):
    return JwtTokenIssuer(
        secret=settings.jwt_secret,
        lifetime=settings.token_lifetime,
        algorithm=settings.jwt_algorithm,
    )


@pytest.fixture()
def service(store, hasher, token_issuer):
    return AccountService(
        store=store,
        hasher=hasher,
        tokens=token_issuer,
        policy=PasswordPolicy(),
    )


@pytest.fixture()
def app(settings, store):
    return create_app(settings, store=store)


@pytest_asyncio.fixture()
async def client(app):
    """HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture()
async def sql_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture()
def sql_store(sql_engine):
    return SqlAccountStore(build_session_factory(sql_engine))

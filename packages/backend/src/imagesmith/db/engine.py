"""Async SQLAlchemy engine and session factory.

Learn: SQLAlchemy 2.0 async mode — create_async_engine for connection pooling,
async_sessionmaker for per-call sessions. Both are built from Settings by
create_app() and live on app.state; there is no module-level engine.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from imagesmith.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled engine. No connection is opened until first use."""
    url = settings.sqlalchemy_url
    if url.startswith("sqlite"):
        # SQLite uses a single-connection pool; sizing args don't apply.
        return create_async_engine(url, echo=settings.debug)

    # Connection pool: min 5, max 20 connections.
    return create_async_engine(
        url,
        echo=settings.debug,
        pool_size=5,
        max_overflow=15,
        pool_pre_ping=True,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory — each store call gets its own session."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

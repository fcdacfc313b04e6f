"""image-smith CLI — run the API server and prepare the database.

Usage:
    imagesmith serve                  # Run the API on IMAGESMITH_PORT
    imagesmith serve --port 9000      # Override host/port
    imagesmith init-db                # Create the accounts table
"""

from __future__ import annotations

import asyncio
import sys
from typing import Optional

import click
from sqlalchemy.exc import SQLAlchemyError

from imagesmith.config import get_settings


@click.group()
def cli():
    """image-smith — account service."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: IMAGESMITH_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: IMAGESMITH_PORT).")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes.")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    if not settings.jwt_secret:
        click.secho("Error: IMAGESMITH_JWT_SECRET is not set", fg="red", err=True)
        sys.exit(1)

    uvicorn.run(
        "imagesmith.main:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@cli.command("init-db")
def init_db():
    """Create database tables from the ORM models."""
    from imagesmith.db.engine import build_engine
    from imagesmith.db.models import Base

    settings = get_settings()

    async def _create():
        engine = build_engine(settings)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        finally:
            await engine.dispose()

    try:
        asyncio.run(_create())
    except (SQLAlchemyError, OSError) as e:
        click.secho(f"Error: cannot reach database: {e}", fg="red", err=True)
        sys.exit(1)
    click.secho("accounts table ready", fg="green")


def main():
    cli()


if __name__ == "__main__":
    main()

"""Application configuration via environment variables.

Uses pydantic-settings to load config from env vars with IMAGESMITH_ prefix
(and an optional .env file). The Settings object is built once at startup,
frozen, and handed to create_app(); nothing below the app factory reads
the environment.
"""

from datetime import timedelta
from functools import lru_cache
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """All app configuration. Set via IMAGESMITH_* env vars."""

    # Server
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # Database: either a full URL or the individual parts
    database_url: Optional[str] = None
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "imagesmith"

    # Auth
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_lifetime: timedelta = timedelta(hours=24)
    bcrypt_rounds: int = 12
    password_min_length: int = 8

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="IMAGESMITH_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Refuse to start outside development without a signing secret."""
        if self.environment != "development" and not self.jwt_secret:
            raise ValueError(
                "IMAGESMITH_JWT_SECRET must be set in non-development "
                "environments. Generate one with: "
                'python -c "import secrets; print(secrets.token_urlsafe(32))"'
            )
        return self

    @property
    def sqlalchemy_url(self) -> str:
        """Async driver URL for SQLAlchemy."""
        if self.database_url:
            return self.database_url
        url = URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, resolved once."""
    return Settings()

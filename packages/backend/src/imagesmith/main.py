"""FastAPI application factory.

Learn: App factory pattern — create_app() takes the frozen Settings and
wires every collaborator by hand: token issuer, hasher, policy, store,
service. The token issuer is built first so a missing JWT secret stops
the process before it binds a port.

uvicorn runs it in factory mode: `uvicorn imagesmith.main:create_app --factory`
(or `imagesmith serve`).
"""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI

from imagesmith import __version__
from imagesmith.api import api_router
from imagesmith.api.errors import register_error_handlers
from imagesmith.auth.jwt import JwtTokenIssuer
from imagesmith.auth.password import BcryptPasswordHasher
from imagesmith.auth.policy import PasswordPolicy
from imagesmith.config import Settings, get_settings
from imagesmith.db.engine import build_engine, build_session_factory
from imagesmith.db.store import AccountStore, SqlAccountStore
from imagesmith.log import configure_logging
from imagesmith.middleware.errors import UnhandledErrorMiddleware
from imagesmith.middleware.request_id import RequestIdMiddleware
from imagesmith.middleware.security import SecurityHeadersMiddleware
from imagesmith.services.account_service import AccountService

logger = structlog.get_logger()


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[AccountStore] = None,
) -> FastAPI:
    """Build and return the FastAPI application.

    Pass `store` to run against something other than the SQL database
    (tests use InMemoryAccountStore); no engine is created in that case.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    tokens = JwtTokenIssuer(
        secret=settings.jwt_secret,
        lifetime=settings.token_lifetime,
        algorithm=settings.jwt_algorithm,
    )

    engine = None
    if store is None:
        engine = build_engine(settings)
        store = SqlAccountStore(build_session_factory(engine))

    service = AccountService(
        store=store,
        hasher=BcryptPasswordHasher(rounds=settings.bcrypt_rounds),
        tokens=tokens,
        policy=PasswordPolicy(min_length=settings.password_min_length),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "imagesmith.starting",
            version=__version__,
            environment=settings.environment,
            port=settings.port,
        )
        yield
        logger.info("imagesmith.shutdown")
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title="image-smith",
        description="Account registration and login",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.account_store = store
    app.state.account_service = service

    # Starlette middleware executes in reverse order of registration.
    # Request flow: RequestId → Security → UnhandledError → handler
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIdMiddleware)

    register_error_handlers(app)
    app.include_router(api_router)

    return app

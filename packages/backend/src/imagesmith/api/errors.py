"""Exception handlers — the one place domain errors become HTTP statuses.

Learn: FastAPI exception handlers run for any exception raised inside a
route. Domain errors map to fixed status codes with their safe message.
Validation errors (bad JSON, missing fields) become 400 instead of
FastAPI's default 422. Anything unexpected is left to
UnhandledErrorMiddleware, which answers a generic 500 from inside the
middleware stack.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from imagesmith.api.responses import failed_response
from imagesmith.errors import (
    AccountError,
    AccountExists,
    AccountNotFound,
    InvalidCredentials,
    PolicyViolation,
    StorageFailure,
)

logger = structlog.get_logger()

STATUS_BY_ERROR: dict[type[AccountError], int] = {
    PolicyViolation: 400,
    AccountExists: 409,
    AccountNotFound: 404,
    InvalidCredentials: 401,
    StorageFailure: 500,
}


def status_for(exc: AccountError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


def _describe_validation(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request body"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if loc:
        return f"invalid request body: {loc}: {first.get('msg', 'invalid')}"
    return f"invalid request body: {first.get('msg', 'invalid')}"


async def account_error_handler(request: Request, exc: AccountError):
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            "request.storage_failure",
            path=request.url.path,
            cause=repr(exc.__cause__),
        )
        return failed_response(status_code, StorageFailure.default_message)
    return failed_response(status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return failed_response(400, _describe_validation(exc))


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return failed_response(exc.status_code, str(exc.detail))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountError, account_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

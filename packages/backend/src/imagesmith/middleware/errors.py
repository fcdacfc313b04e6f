"""Unhandled error middleware — last-resort 500 inside the middleware stack.

Learn: A handler registered for plain Exception lands on Starlette's
ServerErrorMiddleware, which wraps everything else, so its response
would skip the request-id and security-header middleware. Catching here,
just inside those two, keeps a crash response looking like every other
response: same envelope, same headers, traceback in the log only.
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from imagesmith.api.responses import failed_response
from imagesmith.errors import StorageFailure

logger = structlog.get_logger()


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn any exception that escaped the routes into a generic 500."""

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("request.unhandled_error", path=request.url.path)
            return failed_response(500, StorageFailure.default_message)

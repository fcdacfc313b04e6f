"""Response hardening for a token-issuing API.

Learn: /auth/login puts a bearer token in the response body, and
/auth/register echoes back who owns an email. Neither may sit in a
browser or proxy cache, so every response is marked no-store. The API
only ever serves JSON: sniffing, framing and referrers are all switched
off. HSTS is only meaningful over HTTPS and is sent only there.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
}

JSON_API_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp no-store and JSON-API hardening headers on every response."""

    def __init__(self, app, hsts_max_age: int = 31536000):
        super().__init__(app)
        self.hsts_value = f"max-age={hsts_max_age}; includeSubDomains"

    async def dispatch(self, request: Request, call_next) -> Response:
        response: Response = await call_next(request)
        response.headers.update(NO_CACHE_HEADERS)
        response.headers.update(JSON_API_HEADERS)
        if request.url.scheme == "https":
            response.headers["Strict-Transport-Security"] = self.hsts_value
        return response

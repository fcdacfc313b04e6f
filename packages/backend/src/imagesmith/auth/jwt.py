"""JWT session token issuance.

Learn: JWT (JSON Web Token) provides stateless authentication. The token
carries the account id ("sub") and an expiry ("exp"); anyone holding the
signing secret can verify it without a database lookup.

Only issuance lives here. The issuer validates its configuration in
__init__ so a missing or malformed secret stops the app at startup
instead of failing the first login.
"""

from datetime import datetime, timedelta, timezone
from typing import Protocol

import jwt

from imagesmith.errors import ConfigurationError

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class TokenIssuer(Protocol):
    def create_token(self, subject_id: str) -> str: ...


class JwtTokenIssuer:
    """Creates signed, time-bounded bearer tokens."""

    def __init__(
        self,
        secret: str,
        lifetime: timedelta,
        algorithm: str = "HS256",
    ):
        if not secret or not secret.strip():
            raise ConfigurationError("JWT signing secret is not set")
        if algorithm not in HMAC_ALGORITHMS:
            raise ConfigurationError(f"Unsupported JWT algorithm: {algorithm}")
        if lifetime <= timedelta(0):
            raise ConfigurationError("Token lifetime must be positive")

        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def create_token(self, subject_id: str) -> str:
        """Create a signed token for the given account id."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject_id,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

"""Password policy.

The reference rule set is the minimum length (8) plus bcrypt's 72-byte
ceiling, which the hasher cannot represent. Character-class
rules exist but are off unless a deployment opts in.
"""

import string

from imagesmith.auth.password import BCRYPT_MAX_BYTES
from imagesmith.errors import PolicyViolation

DEFAULT_MIN_LENGTH = 8


class PasswordPolicy:
    """Validates candidate passwords against a fixed rule set."""

    def __init__(
        self,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_bytes: int = BCRYPT_MAX_BYTES,
        require_upper: bool = False,
        require_lower: bool = False,
        require_digit: bool = False,
        require_symbol: bool = False,
    ):
        self.min_length = min_length
        self.max_bytes = max_bytes
        self.require_upper = require_upper
        self.require_lower = require_lower
        self.require_digit = require_digit
        self.require_symbol = require_symbol

    def validate(self, password: str) -> None:
        """Raise PolicyViolation if the password breaks a rule."""
        if len(password) < self.min_length:
            raise PolicyViolation(
                f"Password must be at least {self.min_length} characters long"
            )
        if len(password.encode("utf-8")) > self.max_bytes:
            raise PolicyViolation(
                f"Password must be at most {self.max_bytes} bytes long"
            )
        if self.require_upper and not any(c.isupper() for c in password):
            raise PolicyViolation("Password must contain an uppercase letter")
        if self.require_lower and not any(c.islower() for c in password):
            raise PolicyViolation("Password must contain a lowercase letter")
        if self.require_digit and not any(c.isdigit() for c in password):
            raise PolicyViolation("Password must contain a digit")
        if self.require_symbol and not any(c in string.punctuation for c in password):
            raise PolicyViolation("Password must contain a symbol")

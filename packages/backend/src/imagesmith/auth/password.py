"""Password hashing utilities.

Learn: Uses bcrypt for secure password hashing. bcrypt automatically
handles salting (the salt is embedded in the "$2b$..." output) and
checkpw compares in constant time. The work factor (rounds=12) takes
~100ms per hash on modern hardware; tests drop it to the minimum (4).

bcrypt ignores everything past 72 bytes, so longer passwords are
refused outright: hash() raises and verify() answers False. Otherwise
two passwords sharing a 72-byte prefix would verify against each other.
PasswordPolicy rejects them earlier, at registration.
"""

from typing import Protocol

import bcrypt

BCRYPT_MAX_BYTES = 72


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password_hash: str, password: str) -> bool: ...


class BcryptPasswordHasher:
    """One-way salted hashing with bcrypt."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        pw_bytes = password.encode("utf-8")
        if len(pw_bytes) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password exceeds {BCRYPT_MAX_BYTES} bytes")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")

    def verify(self, password_hash: str, password: str) -> bool:
        """Check a password against a stored hash.

        Returns False on mismatch, on over-long input and on malformed
        hashes; callers decide what a mismatch means.
        """
        pw_bytes = password.encode("utf-8")
        if len(pw_bytes) > BCRYPT_MAX_BYTES:
            return False
        try:
            return bcrypt.checkpw(pw_bytes, password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False

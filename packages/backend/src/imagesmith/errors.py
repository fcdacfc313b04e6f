"""Domain error taxonomy.

The account service raises these; the HTTP layer (api/errors.py) is the
only place that turns them into status codes. Every error carries a
user-facing message that is safe to send to a client.
"""


class ConfigurationError(Exception):
    """Raised at startup when process-wide configuration is unusable."""


class AccountError(Exception):
    """Base class for errors raised by the account service."""

    default_message = "account error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class PolicyViolation(AccountError):
    """Candidate password failed a strength rule."""

    default_message = "password does not satisfy the password policy"


class AccountExists(AccountError):
    """An account with this email is already registered."""

    default_message = "email already exist"


class AccountNotFound(AccountError):
    default_message = "email not found"


class InvalidCredentials(AccountError):
    default_message = "incorrect password"


class StorageFailure(AccountError):
    """Infrastructure error from the account store.

    The underlying driver error is chained as __cause__ and logged, but
    never shown to clients.
    """

    default_message = "internal server error"

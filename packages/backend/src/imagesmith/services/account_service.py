"""Account service — registration and login.

Learn: Service layer separates business logic from HTTP routing.
API routes call the service, the service calls its collaborators.
Every collaborator is passed in the constructor, so tests wire an
in-memory store and a fast hasher without touching globals.

Register: uniqueness pre-check → policy → hash → persist.
Login:    lookup → verify → issue token.
"""

import asyncio
from datetime import datetime, timezone

import structlog

from imagesmith.auth.jwt import TokenIssuer
from imagesmith.auth.password import PasswordHasher
from imagesmith.auth.policy import PasswordPolicy
from imagesmith.db.models import Account, new_id
from imagesmith.db.store import AccountStore
from imagesmith.errors import (
    AccountExists,
    AccountNotFound,
    InvalidCredentials,
    PolicyViolation,
)
from imagesmith.schemas.account import AccountRead

logger = structlog.get_logger()


class AccountService:
    """Business logic for account registration and login."""

    def __init__(
        self,
        store: AccountStore,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        policy: PasswordPolicy,
    ):
        self.store = store
        self.hasher = hasher
        self.tokens = tokens
        self.policy = policy

    async def register(self, name: str, email: str, password: str) -> AccountRead:
        """Create a new account and return its public projection.

        The email lookup is only a fast path. The store's unique
        constraint has the final word, and create_account raises
        AccountExists itself if another request won the race.
        """
        log = logger.bind(email=email)

        if await self.store.find_by_email(email) is not None:
            log.info("account.register_rejected", reason="exists")
            raise AccountExists()

        try:
            self.policy.validate(password)
        except PolicyViolation as e:
            log.info("account.register_rejected", reason="policy", detail=e.message)
            raise

        password_hash = await asyncio.to_thread(self.hasher.hash, password)

        now = datetime.now(timezone.utc)
        account = Account(
            id=new_id(),
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        try:
            account = await self.store.create_account(account)
        except AccountExists:
            log.info("account.register_rejected", reason="exists_on_insert")
            raise

        log.info("account.registered", account_id=account.id)
        return AccountRead.model_validate(account)

    async def login(self, email: str, password: str) -> str:
        """Authenticate and return a signed session token."""
        log = logger.bind(email=email)

        account = await self.store.find_by_email(email)
        if account is None:
            log.info("account.login_rejected", reason="not_found")
            raise AccountNotFound()

        ok = await asyncio.to_thread(self.hasher.verify, account.password_hash, password)
        if not ok:
            log.info("account.login_rejected", reason="bad_password", account_id=account.id)
            raise InvalidCredentials()

        token = self.tokens.create_token(account.id)
        log.info("account.login", account_id=account.id)
        return token

"""Account store — durable mapping from email to account record.

Learn: AccountStore is the seam between the service and the database.
SqlAccountStore is the production implementation; InMemoryAccountStore
(db/memory.py) honours the same contract for tests.

Uniqueness of email is enforced here, by the database's unique
constraint. A violation at insert time becomes AccountExists, so a
register race between two requests still ends in a 409, not a 500.
Every other driver error becomes StorageFailure. asyncio.CancelledError
is never caught: a cancelled request stops its store call.
"""

from typing import Optional, Protocol

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from imagesmith.db.models import Account
from imagesmith.errors import AccountExists, StorageFailure

logger = structlog.get_logger()

# SQLSTATE for unique_violation (PostgreSQL)
UNIQUE_VIOLATION = "23505"


class AccountStore(Protocol):
    async def create_account(self, account: Account) -> Account: ...

    async def find_by_email(self, email: str) -> Optional[Account]: ...

    async def find_by_id(self, account_id: str) -> Optional[Account]: ...

    async def ping(self) -> bool: ...


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a unique-constraint violation apart from other integrity errors."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    # SQLite: "UNIQUE constraint failed: accounts.email"
    return "unique" in str(orig).lower()


class SqlAccountStore:
    """AccountStore backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def create_account(self, account: Account) -> Account:
        try:
            async with self.session_factory() as session:
                session.add(account)
                await session.commit()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise AccountExists() from e
            logger.error("account_store.integrity_error", error=str(e.orig))
            raise StorageFailure() from e
        except SQLAlchemyError as e:
            logger.error("account_store.create_failed", error=str(e))
            raise StorageFailure() from e
        return account

    async def find_by_email(self, email: str) -> Optional[Account]:
        return await self._find_one(select(Account).where(Account.email == email))

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        return await self._find_one(select(Account).where(Account.id == account_id))

    async def ping(self) -> bool:
        """Check the database answers a trivial query."""
        try:
            async with self.session_factory() as session:
                await session.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning("account_store.ping_failed", error=str(e))
            return False

    async def _find_one(self, query) -> Optional[Account]:
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("account_store.query_failed", error=str(e))
            raise StorageFailure() from e

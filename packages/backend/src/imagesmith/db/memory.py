"""In-memory AccountStore.

Used by the test suite and handy for running the API without Postgres.
Same contract as SqlAccountStore: email uniqueness is checked at insert
time and reported as AccountExists.
"""

from typing import Optional

from imagesmith.db.models import Account
from imagesmith.errors import AccountExists


class InMemoryAccountStore:
    """Dict-backed account store."""

    def __init__(self):
        self._by_id: dict[str, Account] = {}
        self._id_by_email: dict[str, str] = {}
        self.create_calls = 0
        self.healthy = True

    async def create_account(self, account: Account) -> Account:
        self.create_calls += 1
        # No await between check and insert, so this is atomic on the loop.
        if account.email in self._id_by_email:
            raise AccountExists()
        self._by_id[account.id] = account
        self._id_by_email[account.email] = account.id
        return account

    async def find_by_email(self, email: str) -> Optional[Account]:
        account_id = self._id_by_email.get(email)
        return self._by_id.get(account_id) if account_id else None

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        return self._by_id.get(account_id)

    async def ping(self) -> bool:
        return self.healthy

    def count_by_email(self, email: str) -> int:
        return sum(1 for a in self._by_id.values() if a.email == email)

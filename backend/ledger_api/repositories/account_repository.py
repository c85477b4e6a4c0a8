from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ledger_api.domain.account import Account


class AccountRepository(Protocol):
    def add(self, account: Account) -> None: ...
    def get_account(self, account_id: UUID) -> Account: ...
    def list_accounts(self, *, limit: int, offset: int) -> list[Account]: ...

from __future__ import annotations

import logging
from typing import Any, Optional
from uuid import UUID

from ledger_api.api.pagination import DEFAULT_LIMIT, DEFAULT_OFFSET
from ledger_api.domain.account import Account
from ledger_api.repositories.account_repository import AccountRepository


logger = logging.getLogger(__name__)


class AccountNotFound(KeyError):
    def __init__(self, account_id: UUID) -> None:
        super().__init__(f"account '{account_id}' not found")
        self.account_id = account_id


class AccountService:
    def __init__(self, *, account_repo: AccountRepository) -> None:
        self._accounts = account_repo

    def create_account(
        self,
        *,
        owner_id: UUID,
        currency: str,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Account:
        account = Account.open(owner_id=owner_id, currency=currency, metadata=metadata)
        self._accounts.add(account)
        logger.info("account created id=%s owner_id=%s currency=%s", account.id, owner_id, account.currency)
        return account

    def get_account(self, account_id: UUID) -> Account:
        try:
            return self._accounts.get_account(account_id)
        except KeyError:
            raise AccountNotFound(account_id) from None

    def list_accounts(self, *, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET) -> list[Account]:
        return self._accounts.list_accounts(limit=limit, offset=offset)

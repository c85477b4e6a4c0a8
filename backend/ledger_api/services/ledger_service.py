from __future__ import annotations

import datetime as dt
import logging
from typing import Optional
from uuid import UUID

from ledger_api.domain.balance import Balance
from ledger_api.domain.ledger_entry import EntryStatus, LedgerEntry
from ledger_api.engine.account_balance import compute_balance
from ledger_api.repositories.ledger_entry_repository import LedgerEntryRepository
from ledger_api.services.account_service import AccountService


logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(self, *, account_service: AccountService, entry_repo: LedgerEntryRepository) -> None:
        self._accounts = account_service
        self._entries = entry_repo

    def get_account_balance(self, account_id: UUID, at: Optional[dt.datetime] = None) -> Balance:
        if at is not None and at.tzinfo is None:
            raise ValueError("at must be timezone-aware (UTC recommended)")
        entries = self._entries.list(account_id=account_id)
        return compute_balance(account_id=account_id, entries=entries, at=at)

    def record_entry(
        self,
        *,
        account_id: UUID,
        amount: int,
        status: EntryStatus = EntryStatus.POSTED,
        description: Optional[str] = None,
        created_at: Optional[dt.datetime] = None,
    ) -> LedgerEntry:
        # raises AccountNotFound
        account = self._accounts.get_account(account_id)
        if not account.can_transact():
            raise ValueError(f"account '{account_id}' is {account.status} and cannot transact")

        entry = LedgerEntry.create(
            account_id=account.id,
            amount=amount,
            status=status,
            description=description,
            created_at=created_at,
        )
        self._entries.add(entry)
        logger.info("ledger entry recorded id=%s account_id=%s status=%s", entry.id, account.id, entry.status.value)
        return entry

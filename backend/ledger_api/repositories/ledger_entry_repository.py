from __future__ import annotations

from typing import Protocol
from uuid import UUID

from ledger_api.domain.ledger_entry import LedgerEntry


class LedgerEntryRepository(Protocol):
    def add(self, entry: LedgerEntry) -> None: ...
    def list(self, account_id: UUID | None = None) -> list[LedgerEntry]: ...

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from ledger_api.domain.ledger_entry import LedgerEntry


@dataclass
class InMemoryLedgerEntryRepository:
    _items: list[LedgerEntry] = field(default_factory=list)

    def add(self, entry: LedgerEntry) -> None:
        if any(e.id == entry.id for e in self._items):
            raise ValueError(f"Entry with id {entry.id} already exists")
        self._items.append(entry)

    def list(self, account_id: UUID | None = None) -> list[LedgerEntry]:
        items = self._items
        if account_id is not None:
            items = [e for e in items if e.account_id == account_id]

        # Tri deterministe : created_at, id
        return sorted(items, key=lambda e: (e.created_at, str(e.id)))

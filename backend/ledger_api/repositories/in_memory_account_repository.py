from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from ledger_api.domain.account import Account


@dataclass
class InMemoryAccountRepository:
    """
    Repo en memoire.
    - Deterministe (tri created_at, id)
    - Facile a tester
    - Utilise par defaut quand LEDGER_DATABASE_URL n'est pas defini
    """
    _items: dict[UUID, Account] = field(default_factory=dict)

    def add(self, account: Account) -> None:
        if not isinstance(account, Account):
            raise TypeError("account must be an Account")
        if account.id in self._items:
            raise ValueError(f"account id '{account.id}' already exists")
        self._items[account.id] = account

    def get_account(self, account_id: UUID) -> Account:
        try:
            return self._items[account_id]
        except KeyError:
            raise KeyError(f"unknown account_id '{account_id}'") from None

    def list_accounts(self, *, limit: int, offset: int) -> list[Account]:
        ordered = sorted(self._items.values(), key=lambda a: (a.created_at, str(a.id)))
        return ordered[offset:offset + limit]

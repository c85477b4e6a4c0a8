from __future__ import annotations

from ledger_api.api.schemas.accounts import AccountResponse, BalanceResponse
from ledger_api.domain.account import Account
from ledger_api.domain.balance import Balance


def to_account_response(acc: Account) -> AccountResponse:
    return AccountResponse(
        id=acc.id,
        owner_id=acc.owner_id,
        currency=acc.currency,
        status=str(acc.status),
        metadata=acc.metadata or None,
        created_at=acc.created_at,
        updated_at=acc.updated_at,
    )


def to_balance_response(acc: Account, bal: Balance) -> BalanceResponse:
    return BalanceResponse(
        account_id=bal.account_id,
        currency=acc.currency,  # toujours la devise du compte, jamais celle de la balance
        posted_balance=bal.posted_balance,
        pending_balance=bal.pending_balance,
        available_balance=bal.available_balance,
        timestamp=bal.timestamp,
    )

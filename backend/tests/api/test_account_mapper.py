import datetime as dt
from uuid import uuid4

import pytest

from ledger_api.api.mappers.account_mapper import to_account_response, to_balance_response
from ledger_api.domain.account import Account, AccountStatus
from ledger_api.domain.balance import Balance


T0 = dt.datetime(2026, 1, 10, 9, 30, tzinfo=dt.timezone.utc)


def _account(currency: str = "USD", status: AccountStatus = AccountStatus.ACTIVE) -> Account:
    return Account(
        id=uuid4(),
        owner_id=uuid4(),
        currency=currency,
        status=status,
        created_at=T0,
        updated_at=T0 + dt.timedelta(hours=1),
        metadata={"label": "main", "tags": ["a", "b"]},
    )


def test_account_projection_copies_fields():
    acc = _account()
    r = to_account_response(acc)

    assert r.id == acc.id
    assert r.owner_id == acc.owner_id
    assert r.currency == "USD"
    assert r.metadata == {"label": "main", "tags": ["a", "b"]}
    assert r.created_at == acc.created_at
    assert r.updated_at == acc.updated_at


@pytest.mark.parametrize("status", list(AccountStatus))
def test_account_projection_status_is_canonical_name(status):
    r = to_account_response(_account(status=status))
    assert r.status == status.value
    assert r.status == str(status)


@pytest.mark.parametrize("bal_currency", [None, "EUR", "USD", "XXX"])
def test_balance_currency_always_comes_from_account(bal_currency):
    acc = _account(currency="USD")
    bal = Balance(
        account_id=acc.id,
        posted_balance=10_000,
        pending_balance=-2_500,
        available_balance=7_500,
        timestamp=T0,
        currency=bal_currency,
    )

    r = to_balance_response(acc, bal)

    assert r.currency == "USD"
    assert r.account_id == bal.account_id
    assert (r.posted_balance, r.pending_balance, r.available_balance) == (10_000, -2_500, 7_500)
    assert r.timestamp == T0


def test_account_projection_empty_metadata_is_none():
    acc = Account.open(owner_id=uuid4(), currency="USD", now=T0)
    assert to_account_response(acc).metadata is None

import datetime as dt
from uuid import uuid4

import pytest

from ledger_api.domain.balance import Balance
from ledger_api.domain.ledger_entry import EntryStatus, LedgerEntry


T0 = dt.datetime(2026, 1, 10, 12, 0, tzinfo=dt.timezone.utc)


def test_balance_rejects_non_int_amounts():
    with pytest.raises(TypeError):
        Balance(account_id=uuid4(), posted_balance=1.5, pending_balance=0, available_balance=0, timestamp=T0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        Balance(account_id=uuid4(), posted_balance=True, pending_balance=0, available_balance=0, timestamp=T0)  # type: ignore[arg-type]


def test_balance_requires_aware_timestamp():
    with pytest.raises(ValueError):
        Balance(account_id=uuid4(), posted_balance=0, pending_balance=0, available_balance=0, timestamp=dt.datetime(2026, 1, 1))


def test_entry_create_normalizes():
    acc_id = uuid4()
    paris = dt.timezone(dt.timedelta(hours=1))
    e = LedgerEntry.create(
        account_id=acc_id,
        amount=-1250,
        status=EntryStatus.PENDING,
        description="  Carte  ",
        created_at=dt.datetime(2026, 1, 10, 13, 0, tzinfo=paris),
    )

    assert e.account_id == acc_id
    assert e.description == "Carte"
    assert e.created_at == T0
    assert e.created_at.tzinfo == dt.timezone.utc
    assert not e.is_posted()


def test_entry_defaults_to_posted():
    e = LedgerEntry.create(account_id=uuid4(), amount=100)
    assert e.is_posted()
    assert e.created_at.tzinfo is not None


@pytest.mark.parametrize("amount", [0, 1.0, True])
def test_entry_rejects_bad_amount(amount):
    with pytest.raises(ValueError):
        LedgerEntry.create(account_id=uuid4(), amount=amount)


def test_entry_rejects_blank_description():
    with pytest.raises(ValueError):
        LedgerEntry.create(account_id=uuid4(), amount=1, description="   ")

import datetime as dt
from uuid import uuid4

from ledger_api.domain.ledger_entry import EntryStatus, LedgerEntry
from ledger_api.engine.account_balance import compute_balance


T0 = dt.datetime(2026, 1, 10, 12, 0, tzinfo=dt.timezone.utc)


def _entry(account_id, amount, status=EntryStatus.POSTED, minutes=0):
    return LedgerEntry.create(
        account_id=account_id,
        amount=amount,
        status=status,
        created_at=T0 + dt.timedelta(minutes=minutes),
    )


def test_no_entries_gives_zero_balance():
    acc = uuid4()
    bal = compute_balance(account_id=acc, entries=[], now=T0)
    assert (bal.posted_balance, bal.pending_balance, bal.available_balance) == (0, 0, 0)
    assert bal.timestamp == T0
    assert bal.currency is None


def test_pending_outgoing_reduces_available_but_incoming_does_not():
    acc = uuid4()
    entries = [
        _entry(acc, 10_000),
        _entry(acc, -3_000),
        _entry(acc, -1_000, EntryStatus.PENDING),
        _entry(acc, 2_500, EntryStatus.PENDING),
    ]

    bal = compute_balance(account_id=acc, entries=entries, now=T0)

    assert bal.posted_balance == 7_000
    assert bal.pending_balance == 1_500
    assert bal.available_balance == 6_000


def test_other_accounts_ignored():
    acc, other = uuid4(), uuid4()
    bal = compute_balance(account_id=acc, entries=[_entry(acc, 100), _entry(other, 999)], now=T0)
    assert bal.posted_balance == 100
    assert bal.account_id == acc


def test_at_filters_inclusive_and_sets_timestamp():
    acc = uuid4()
    entries = [_entry(acc, 100, minutes=0), _entry(acc, 200, minutes=5), _entry(acc, 400, minutes=10)]

    at = T0 + dt.timedelta(minutes=5)
    bal = compute_balance(account_id=acc, entries=entries, at=at)

    assert bal.posted_balance == 300
    assert bal.timestamp == at

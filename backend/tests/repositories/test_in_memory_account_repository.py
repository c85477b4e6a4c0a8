import datetime as dt
from uuid import uuid4

import pytest

from ledger_api.domain.account import Account
from ledger_api.domain.ledger_entry import LedgerEntry
from ledger_api.repositories.in_memory_account_repository import InMemoryAccountRepository
from ledger_api.repositories.in_memory_ledger_entry_repository import InMemoryLedgerEntryRepository


T0 = dt.datetime(2026, 1, 10, 12, 0, tzinfo=dt.timezone.utc)


def _acc(minutes: int) -> Account:
    return Account.open(owner_id=uuid4(), currency="EUR", now=T0 + dt.timedelta(minutes=minutes))


def test_add_and_get():
    repo = InMemoryAccountRepository()
    acc = _acc(0)
    repo.add(acc)
    assert repo.get_account(acc.id) == acc


def test_add_duplicate_raises():
    repo = InMemoryAccountRepository()
    acc = _acc(0)
    repo.add(acc)
    with pytest.raises(ValueError):
        repo.add(acc)


def test_get_unknown_raises_key_error():
    repo = InMemoryAccountRepository()
    with pytest.raises(KeyError):
        repo.get_account(uuid4())


def test_list_is_ordered_by_creation_and_sliced():
    repo = InMemoryAccountRepository()
    a3, a1, a2 = _acc(3), _acc(1), _acc(2)
    for a in (a3, a1, a2):
        repo.add(a)

    assert repo.list_accounts(limit=20, offset=0) == [a1, a2, a3]
    assert repo.list_accounts(limit=2, offset=1) == [a2, a3]
    assert repo.list_accounts(limit=5, offset=10) == []


def test_entry_repo_filters_and_sorts():
    repo = InMemoryLedgerEntryRepository()
    acc, other = uuid4(), uuid4()
    late = LedgerEntry.create(account_id=acc, amount=2, created_at=T0 + dt.timedelta(minutes=1))
    early = LedgerEntry.create(account_id=acc, amount=1, created_at=T0)
    foreign = LedgerEntry.create(account_id=other, amount=3, created_at=T0)
    for e in (late, early, foreign):
        repo.add(e)

    assert repo.list(account_id=acc) == [early, late]
    assert len(repo.list()) == 3

    with pytest.raises(ValueError):
        repo.add(early)

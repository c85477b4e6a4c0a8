from __future__ import annotations

from functools import lru_cache

from ledger_api.settings import get_settings
from ledger_api.repositories.account_repository import AccountRepository
from ledger_api.repositories.ledger_entry_repository import LedgerEntryRepository
from ledger_api.repositories.in_memory_account_repository import InMemoryAccountRepository
from ledger_api.repositories.in_memory_ledger_entry_repository import InMemoryLedgerEntryRepository
from ledger_api.services.account_service import AccountService
from ledger_api.services.ledger_service import LedgerService


@lru_cache
def get_account_repo() -> AccountRepository:
    # If LEDGER_DATABASE_URL is set -> use SQL repo (Postgres/SQLite)
    if get_settings().database_url:
        from ledger_api.repositories.sql_account_repository import SqlAccountRepository
        return SqlAccountRepository()
    return InMemoryAccountRepository()


@lru_cache
def get_entry_repo() -> LedgerEntryRepository:
    if get_settings().database_url:
        from ledger_api.repositories.sql_ledger_entry_repository import SqlLedgerEntryRepository
        return SqlLedgerEntryRepository()
    return InMemoryLedgerEntryRepository()


@lru_cache
def get_account_service() -> AccountService:
    return AccountService(account_repo=get_account_repo())


@lru_cache
def get_ledger_service() -> LedgerService:
    return LedgerService(account_service=get_account_service(), entry_repo=get_entry_repo())


def reset_dependencies() -> None:
    for factory in (get_ledger_service, get_account_service, get_entry_repo, get_account_repo):
        factory.cache_clear()

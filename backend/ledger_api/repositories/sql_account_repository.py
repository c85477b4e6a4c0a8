from __future__ import annotations

import datetime as dt
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, DateTime, String, select
from sqlalchemy.orm import Mapped, mapped_column

from ledger_api.db import init_db, new_session
from ledger_api.db_base import Base
from ledger_api.domain.account import Account, AccountStatus
from ledger_api.repositories.account_repository import AccountRepository


class AccountRow(Base):
    __tablename__ = "accounts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    owner_id: Mapped[str] = mapped_column(String(36), index=True, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    metadata_json: Mapped[dict[str, Any]] = mapped_column("metadata", JSON, nullable=False, default=dict)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)
    updated_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), nullable=False)


def _as_utc(value: dt.datetime) -> dt.datetime:
    # sqlite drops tzinfo on read
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


class SqlAccountRepository(AccountRepository):
    """
    SQL implementation aligned with InMemoryAccountRepository behavior:
    - get_account(): raises KeyError if unknown
    - add(): raises ValueError if id exists
    - list_accounts(): ordered by (created_at, id), sliced by limit/offset
    """

    def __init__(self) -> None:
        init_db()

    def add(self, account: Account) -> None:
        if not isinstance(account, Account):
            raise TypeError("account must be an Account")

        with new_session() as s:
            existing = s.get(AccountRow, str(account.id))
            if existing is not None:
                raise ValueError(f"account id '{account.id}' already exists")

            row = AccountRow(
                id=str(account.id),
                owner_id=str(account.owner_id),
                currency=account.currency,
                status=account.status.value,
                metadata_json=dict(account.metadata),
                created_at=account.created_at,
                updated_at=account.updated_at,
            )
            s.add(row)
            s.commit()

    def get_account(self, account_id: UUID) -> Account:
        with new_session() as s:
            row = s.get(AccountRow, str(account_id))
            if row is None:
                raise KeyError(f"unknown account_id '{account_id}'")
            return self._to_domain(row)

    def list_accounts(self, *, limit: int, offset: int) -> list[Account]:
        stmt = (
            select(AccountRow)
            .order_by(AccountRow.created_at.asc(), AccountRow.id.asc())
            .limit(limit)
            .offset(offset)
        )
        with new_session() as s:
            rows = s.execute(stmt).scalars().all()
            return [self._to_domain(r) for r in rows]

    @staticmethod
    def _to_domain(row: AccountRow) -> Account:
        return Account(
            id=UUID(row.id),
            owner_id=UUID(row.owner_id),
            currency=row.currency,
            status=AccountStatus.parse(row.status),
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
            metadata=dict(row.metadata_json or {}),
        )

from __future__ import annotations

import datetime as dt
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, ForeignKey, String, select
from sqlalchemy.orm import Mapped, mapped_column

from ledger_api.db import init_db, new_session
from ledger_api.db_base import Base
from ledger_api.domain.ledger_entry import EntryStatus, LedgerEntry
from ledger_api.repositories.ledger_entry_repository import LedgerEntryRepository
from ledger_api.repositories.sql_account_repository import _as_utc


class LedgerEntryRow(Base):
    __tablename__ = "ledger_entries"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    account_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("accounts.id", ondelete="RESTRICT"),
        index=True,
        nullable=False,
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False)
    description: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), index=True, nullable=False)


class SqlLedgerEntryRepository(LedgerEntryRepository):
    def __init__(self) -> None:
        init_db()

    def add(self, entry: LedgerEntry) -> None:
        with new_session() as s:
            if s.get(LedgerEntryRow, str(entry.id)) is not None:
                raise ValueError(f"Entry with id {entry.id} already exists")

            s.add(
                LedgerEntryRow(
                    id=str(entry.id),
                    account_id=str(entry.account_id),
                    amount=entry.amount,
                    status=entry.status.value,
                    description=entry.description,
                    created_at=entry.created_at,
                )
            )
            s.commit()

    def list(self, account_id: UUID | None = None) -> list[LedgerEntry]:
        stmt = select(LedgerEntryRow)
        if account_id is not None:
            stmt = stmt.where(LedgerEntryRow.account_id == str(account_id))
        stmt = stmt.order_by(LedgerEntryRow.created_at, LedgerEntryRow.id)

        with new_session() as s:
            rows = s.execute(stmt).scalars().all()

        return [self._to_domain(r) for r in rows]

    @staticmethod
    def _to_domain(row: LedgerEntryRow) -> LedgerEntry:
        return LedgerEntry(
            id=UUID(row.id),
            account_id=UUID(row.account_id),
            amount=row.amount,
            status=EntryStatus(row.status),
            description=row.description,
            created_at=_as_utc(row.created_at),
        )

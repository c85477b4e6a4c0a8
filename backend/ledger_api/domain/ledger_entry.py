from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class EntryStatus(str, Enum):
    POSTED = "POSTED"
    PENDING = "PENDING"


@dataclass(frozen=True)
class LedgerEntry:
    id: UUID
    account_id: UUID
    amount: int
    status: EntryStatus
    description: Optional[str]
    created_at: dt.datetime

    @staticmethod
    def create(
        *,
        account_id: UUID,
        amount: int,
        status: EntryStatus = EntryStatus.POSTED,
        description: Optional[str] = None,
        id: Optional[UUID] = None,
        created_at: Optional[dt.datetime] = None,
    ) -> "LedgerEntry":
        if not isinstance(account_id, UUID):
            raise ValueError("account_id must be a UUID")

        if not isinstance(amount, int) or isinstance(amount, bool):
            raise ValueError("amount must be an int (minor units)")
        if amount == 0:
            raise ValueError("Entry amount cannot be zero")

        if not isinstance(status, EntryStatus):
            raise ValueError("status must be an EntryStatus")

        if description is None:
            norm_description = None
        else:
            if not isinstance(description, str) or description.strip() == "":
                raise ValueError("description cannot be empty if provided")
            norm_description = description.strip()

        if created_at is None:
            final_created_at = dt.datetime.now(dt.timezone.utc)
        else:
            if not isinstance(created_at, dt.datetime):
                raise ValueError("created_at must be a datetime")
            if created_at.tzinfo is None:
                raise ValueError("created_at must be timezone-aware (UTC recommended)")
            final_created_at = created_at.astimezone(dt.timezone.utc)

        return LedgerEntry(
            id=id or uuid4(),
            account_id=account_id,
            amount=amount,
            status=status,
            description=norm_description,
            created_at=final_created_at,
        )

    def is_posted(self) -> bool:
        return self.status == EntryStatus.POSTED

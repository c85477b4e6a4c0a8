from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt
from enum import Enum
import re
from typing import Any, Optional
from uuid import UUID, uuid4


_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")


class AccountStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    FROZEN = "frozen"
    CLOSED = "closed"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "AccountStatus":
        if not isinstance(text, str) or not text.strip():
            raise ValueError("account status cannot be empty")
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"invalid account status '{text}'") from None


def normalize_currency(code: str) -> str:
    """
    Currency = code ISO 4217 a 3 lettres ("usd" -> "USD").
    """
    if not isinstance(code, str):
        raise ValueError("currency must be a string")
    norm = code.strip().upper()
    if not _CURRENCY_RE.match(norm):
        raise ValueError("invalid currency code, must be 3-letter ISO 4217")
    return norm


@dataclass(frozen=True, slots=True)
class Account:
    """
    Domain account.
    - currency: immutable ISO code, also the currency of every balance of the account
    - status: lifecycle state, only ACTIVE accounts can transact
    """
    id: UUID
    owner_id: UUID
    currency: str
    status: AccountStatus
    created_at: dt.datetime
    updated_at: dt.datetime
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.id, UUID):
            raise ValueError("account.id must be a UUID")
        if not isinstance(self.owner_id, UUID):
            raise ValueError("account.owner_id must be a UUID")
        object.__setattr__(self, "currency", normalize_currency(self.currency))
        if not isinstance(self.status, AccountStatus):
            raise ValueError("account.status must be an AccountStatus")
        if not isinstance(self.metadata, dict):
            raise ValueError("account.metadata must be a dict")
        for name in ("created_at", "updated_at"):
            value = getattr(self, name)
            if not isinstance(value, dt.datetime):
                raise ValueError(f"account.{name} must be a datetime")
            if value.tzinfo is None:
                raise ValueError(f"account.{name} must be timezone-aware (UTC recommended)")
        if self.updated_at < self.created_at:
            raise ValueError("account.updated_at cannot be before created_at")

    @staticmethod
    def open(
        *,
        owner_id: UUID,
        currency: str,
        metadata: Optional[dict[str, Any]] = None,
        id: Optional[UUID] = None,
        now: Optional[dt.datetime] = None,
    ) -> "Account":
        if now is None:
            ts = dt.datetime.now(dt.timezone.utc)
        else:
            if now.tzinfo is None:
                raise ValueError("now must be timezone-aware (UTC recommended)")
            ts = now.astimezone(dt.timezone.utc)

        return Account(
            id=id or uuid4(),
            owner_id=owner_id,
            currency=currency,
            status=AccountStatus.ACTIVE,
            created_at=ts,
            updated_at=ts,
            metadata=dict(metadata) if metadata else {},
        )

    def can_transact(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    def is_closed(self) -> bool:
        return self.status == AccountStatus.CLOSED

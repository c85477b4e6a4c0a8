from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class Balance:
    """
    Balance d'un compte, en unites mineures (cents).
    - posted: settled funds
    - pending: uncleared funds (incoming and outgoing)
    - available: posted minus pending outgoing, the spendable amount

    `currency` may be filled by producers but is never authoritative:
    the owning Account carries the currency.
    """
    account_id: UUID
    posted_balance: int
    pending_balance: int
    available_balance: int
    timestamp: dt.datetime
    currency: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.account_id, UUID):
            raise ValueError("balance.account_id must be a UUID")
        for name in ("posted_balance", "pending_balance", "available_balance"):
            value = getattr(self, name)
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"balance.{name} must be an int (minor units)")
        if not isinstance(self.timestamp, dt.datetime):
            raise ValueError("balance.timestamp must be a datetime")
        if self.timestamp.tzinfo is None:
            raise ValueError("balance.timestamp must be timezone-aware (UTC recommended)")

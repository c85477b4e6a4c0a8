from __future__ import annotations

import datetime as dt
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class AccountCreateRequest(BaseModel):
    # validated in the route: missing/nil owner_id and empty currency are 400s
    owner_id: UUID | None = None
    currency: str | None = None
    metadata: dict[str, Any] | None = None


class AccountResponse(BaseModel):
    id: UUID
    owner_id: UUID
    currency: str
    status: str
    metadata: dict[str, Any] | None = None  # omis quand vide
    created_at: dt.datetime
    updated_at: dt.datetime


class BalanceResponse(BaseModel):
    account_id: UUID
    currency: str
    posted_balance: int = Field(description="Settled funds, part of the official record")
    pending_balance: int = Field(description="Uncleared funds (incoming and outgoing)")
    available_balance: int = Field(description="Posted minus pending outgoing: the spendable amount")
    timestamp: dt.datetime

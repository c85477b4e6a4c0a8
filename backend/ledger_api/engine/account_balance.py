from __future__ import annotations

import datetime as dt
from typing import Iterable, Optional
from uuid import UUID

from ledger_api.domain.balance import Balance
from ledger_api.domain.ledger_entry import EntryStatus, LedgerEntry


def compute_balance(
    *,
    account_id: UUID,
    entries: Iterable[LedgerEntry],
    at: Optional[dt.datetime] = None,
    now: Optional[dt.datetime] = None,
) -> Balance:
    """
    Calcule (posted, pending, available) pour un compte.
    - entries d'autres comptes ignorees
    - filtre created_at <= at si fourni (inclus)
    - available = posted + pending sortant (montants negatifs)
      le pending entrant n'est pas encore depensable
    """
    txs = [e for e in entries if e.account_id == account_id]
    if at is not None:
        txs = [e for e in txs if e.created_at <= at]

    posted = 0
    pending = 0
    pending_out = 0
    for e in txs:
        if e.status == EntryStatus.POSTED:
            posted += e.amount
        else:
            pending += e.amount
            if e.amount < 0:
                pending_out += e.amount

    if at is not None:
        ts = at
    elif now is not None:
        ts = now
    else:
        ts = dt.datetime.now(dt.timezone.utc)

    return Balance(
        account_id=account_id,
        posted_balance=posted,
        pending_balance=pending,
        available_balance=posted + pending_out,
        timestamp=ts,
    )

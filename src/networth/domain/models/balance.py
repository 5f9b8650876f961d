"""BalanceEntry domain model."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class BalanceEntry:
    """
    Snapshot of one account's balance on one date.

    At most one entry exists per (account, date); writing the same pair again
    overwrites the value. ``date`` is the canonical ``YYYY-MM-DD`` form.
    """

    balance_id: str
    owner_id: str
    account_id: str
    date: str
    balance: Decimal
    account: Optional[str] = None  # account name, populated on reads

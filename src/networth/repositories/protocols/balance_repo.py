"""Balance repository protocol."""

from decimal import Decimal
from typing import Protocol, Optional

from networth.domain.models import BalanceEntry


class BalanceRepository(Protocol):
    """Interface for balance snapshot data access."""

    def list_all(self, owner_id: str) -> list[BalanceEntry]:
        """List the owner's balances with account names, ordered by date then account name."""
        ...

    def get_by_id(self, owner_id: str, balance_id: str) -> Optional[BalanceEntry]:
        """Retrieve one of the owner's balances by ID."""
        ...

    def upsert(
        self,
        owner_id: str,
        account_id: str,
        date: str,
        balance: Decimal,
    ) -> BalanceEntry:
        """Insert the balance, or overwrite the value already stored for (account, date)."""
        ...

    def update_value(self, owner_id: str, balance_id: str, balance: Decimal) -> BalanceEntry:
        """Change the value of an existing balance."""
        ...

    def delete(self, owner_id: str, balance_id: str) -> None:
        """Delete a balance (idempotent)."""
        ...

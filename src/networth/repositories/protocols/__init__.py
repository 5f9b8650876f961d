"""Repository protocol definitions (interfaces)."""

from networth.repositories.protocols.account_repo import AccountRepository
from networth.repositories.protocols.balance_repo import BalanceRepository

__all__ = [
    "AccountRepository",
    "BalanceRepository",
]

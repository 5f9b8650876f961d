"""Repository layer - data access abstractions and implementations."""

from networth.repositories.protocols import (
    AccountRepository,
    BalanceRepository,
)

__all__ = [
    "AccountRepository",
    "BalanceRepository",
]

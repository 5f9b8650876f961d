"""Domain layer - pure business models with no external dependencies."""

from networth.domain.models import (
    Account,
    BalanceEntry,
    AccountType,
)
from networth.domain.views import (
    ImportRecord,
    ImportSummary,
    TimeSeriesPoint,
    CategoryRollupRow,
)

__all__ = [
    "Account",
    "BalanceEntry",
    "AccountType",
    "ImportRecord",
    "ImportSummary",
    "TimeSeriesPoint",
    "CategoryRollupRow",
]

"""View models for service outputs."""

from networth.domain.views.ledger import (
    ImportRecord,
    ParseResult,
    AccountSyncResult,
    BalanceSyncResult,
    BulkDeleteResult,
    ImportSummary,
    RowSaveResult,
)
from networth.domain.views.timeseries import (
    TimeSeriesPoint,
    CategoryRollupRow,
    MonthTick,
    AxisScale,
    CategorySlice,
    CategorySnapshot,
    ChartOverview,
)

__all__ = [
    "ImportRecord",
    "ParseResult",
    "AccountSyncResult",
    "BalanceSyncResult",
    "BulkDeleteResult",
    "ImportSummary",
    "RowSaveResult",
    "TimeSeriesPoint",
    "CategoryRollupRow",
    "MonthTick",
    "AxisScale",
    "CategorySlice",
    "CategorySnapshot",
    "ChartOverview",
]

"""Pydantic schemas for API request/response."""

from networth.api.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountListResponse,
)
from networth.api.schemas.balance import (
    BalanceRecordRequest,
    BalanceUpdateRequest,
    BalanceResponse,
    BalanceListResponse,
    RowSaveRequest,
    RowSaveResponse,
    BulkDeleteResponse,
)
from networth.api.schemas.ledger import ImportSummaryResponse
from networth.api.schemas.chart import (
    TimeSeriesPointResponse,
    CategoryRollupRowResponse,
    MonthTickResponse,
    AxisScaleResponse,
    CategorySliceResponse,
    CategorySnapshotResponse,
    TimeSeriesResponse,
    RollupResponse,
    ChartOverviewResponse,
)

__all__ = [
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "AccountListResponse",
    "BalanceRecordRequest",
    "BalanceUpdateRequest",
    "BalanceResponse",
    "BalanceListResponse",
    "RowSaveRequest",
    "RowSaveResponse",
    "BulkDeleteResponse",
    "ImportSummaryResponse",
    "TimeSeriesPointResponse",
    "CategoryRollupRowResponse",
    "MonthTickResponse",
    "AxisScaleResponse",
    "CategorySliceResponse",
    "CategorySnapshotResponse",
    "TimeSeriesResponse",
    "RollupResponse",
    "ChartOverviewResponse",
]

"""Service layer - business logic orchestration."""

from networth.services.account_reconciler import (
    AccountReconciler,
    DesiredAccount,
    resolve_desired_accounts,
)
from networth.services.balance_reconciler import BalanceReconciler, CleanRecord, clean_record
from networth.services.ledger_import_service import LedgerImportService
from networth.services.account_service import AccountService
from networth.services.balance_service import BalanceService, parse_amount
from networth.services.timeseries_builder import TimeSeriesBuilder, LazySeries
from networth.services.axis_scaler import net_worth_scale, stacked_scale
from networth.services.chart_service import ChartService

__all__ = [
    "AccountReconciler",
    "DesiredAccount",
    "resolve_desired_accounts",
    "BalanceReconciler",
    "CleanRecord",
    "clean_record",
    "LedgerImportService",
    "AccountService",
    "BalanceService",
    "parse_amount",
    "TimeSeriesBuilder",
    "LazySeries",
    "net_worth_scale",
    "stacked_scale",
    "ChartService",
]

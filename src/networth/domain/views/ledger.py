"""View models for ledger parsing and import outcomes."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from networth.domain.models.enums import AccountType


@dataclass
class ImportRecord:
    """One parsed ledger row; transient, only drives reconciliation."""

    date: str
    account: str
    balance: Decimal
    category: Optional[str] = None
    type: Optional[AccountType] = None


@dataclass
class ParseResult:
    """Records parsed from a ledger text, in input order, plus the rejected row count."""

    records: list[ImportRecord] = field(default_factory=list)
    rejected: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class AccountSyncResult:
    """Outcome of reconciling accounts against a ledger."""

    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class BalanceSyncResult:
    """Outcome of replacing the balance history with a ledger."""

    imported_count: int = 0
    failed_count: int = 0
    deleted_count: int = 0
    delete_failed_count: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class BulkDeleteResult:
    """Outcome of a batched delete."""

    deleted_count: int = 0
    failed_count: int = 0


@dataclass
class ImportSummary:
    """Summary of a full ledger import."""

    imported_count: int = 0
    failed_count: int = 0
    deleted_count: int = 0
    accounts_created: list[str] = field(default_factory=list)
    accounts_updated: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def status_message(self) -> str:
        """``Imported N rows.`` with `` M failed.`` appended whenever anything failed."""
        message = f"Imported {self.imported_count} rows."
        if self.failed_count:
            message += f" {self.failed_count} failed."
        return message


@dataclass
class RowSaveResult:
    """Outcome of saving one edited date row."""

    date: str
    saved_count: int = 0
    deleted_count: int = 0
    failed_count: int = 0

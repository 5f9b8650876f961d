"""Balance reconciliation for ledger imports (full replace)."""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from networth.config.settings import get_settings
from networth.core.batching import run_in_batches
from networth.core.dates import canonicalize, is_valid_date
from networth.core.exceptions import ConstraintViolation
from networth.domain.views import BalanceSyncResult, BulkDeleteResult, ImportRecord
from networth.repositories.protocols import BalanceRepository

logger = logging.getLogger(__name__)


@dataclass
class CleanRecord:
    """An import row that passed cleaning and is ready to upsert."""

    account: str
    date: str
    balance: Decimal


def clean_record(record: ImportRecord) -> Optional[CleanRecord]:
    """Trim the account, canonicalize the date and check the balance; None if unusable."""
    account = (record.account or "").strip()
    if not account:
        return None

    date = canonicalize(record.date)
    if not is_valid_date(date):
        return None

    try:
        balance = Decimal(record.balance)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not balance.is_finite():
        return None

    return CleanRecord(account=account, date=date, balance=balance)


class BalanceReconciler:
    """
    Replaces an owner's whole balance history with the rows of a ledger.

    Every stored balance is deleted first, then each clean row is upserted. Both
    phases run in bounded concurrent batches; nothing is retried and a failed
    call only affects its own row.
    """

    def __init__(self, balance_repo: BalanceRepository, batch_size: Optional[int] = None):
        self._balance_repo = balance_repo
        self._batch_size = batch_size or get_settings().balance_batch_size

    def delete_all(self, owner_id: str) -> BulkDeleteResult:
        """Delete every balance the owner has, one call per balance."""
        balance_ids = [b.balance_id for b in self._balance_repo.list_all(owner_id) if b.balance_id]
        outcomes = run_in_batches(
            [self._delete_task(owner_id, balance_id) for balance_id in balance_ids],
            self._batch_size,
            label="Deleting balances",
        )

        result = BulkDeleteResult()
        for balance_id, outcome in zip(balance_ids, outcomes):
            if outcome.ok:
                result.deleted_count += 1
            else:
                result.failed_count += 1
                logger.error("Failed to delete balance %s: %s", balance_id, outcome.error)
        return result

    def reconcile(
        self,
        owner_id: str,
        records: list[ImportRecord],
        account_ids: dict[str, str],
    ) -> BalanceSyncResult:
        """
        Replace the owner's balances with ``records``.

        Args:
            owner_id: Owner whose history is replaced
            records: Parsed ledger rows in input order
            account_ids: Lower-cased account name to account id

        Returns:
            BalanceSyncResult with imported, failed and deleted counts
        """
        result = BalanceSyncResult()

        deleted = self.delete_all(owner_id)
        result.deleted_count = deleted.deleted_count
        result.delete_failed_count = deleted.failed_count

        cleaned: list[CleanRecord] = []
        for record in records:
            clean = clean_record(record)
            if clean is None:
                result.failed_count += 1
                result.errors.append(f"Skipped invalid row: {record.date}, {record.account}")
            else:
                cleaned.append(clean)

        outcomes = run_in_batches(
            [self._upsert_task(owner_id, clean, account_ids) for clean in cleaned],
            self._batch_size,
            label="Importing balances",
        )
        for clean, outcome in zip(cleaned, outcomes):
            if outcome.ok:
                result.imported_count += 1
            else:
                result.failed_count += 1
                result.errors.append(f"{clean.date} {clean.account}: {outcome.error}")
                logger.error(
                    "Failed to import balance for '%s' on %s: %s",
                    clean.account, clean.date, outcome.error,
                )

        logger.info(
            "Balance reconciliation: %d deleted, %d imported, %d failed",
            result.deleted_count, result.imported_count, result.failed_count,
        )
        return result

    def _delete_task(self, owner_id: str, balance_id: str):
        return lambda: self._balance_repo.delete(owner_id, balance_id)

    def _upsert_task(self, owner_id: str, clean: CleanRecord, account_ids: dict[str, str]):
        def task():
            account_id = account_ids.get(clean.account.lower())
            if not account_id:
                raise ConstraintViolation(f"Account '{clean.account}' has no id")
            return self._balance_repo.upsert(owner_id, account_id, clean.date, clean.balance)
        return task

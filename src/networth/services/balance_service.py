"""Balance management service: single entries and whole date rows."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from networth.config.settings import get_settings
from networth.core.batching import run_in_batches
from networth.core.dates import canonicalize, is_valid_date
from networth.core.exceptions import ConstraintViolation, ValidationError
from networth.domain.models import Account, BalanceEntry, DEFAULT_CATEGORY
from networth.domain.views import BulkDeleteResult, RowSaveResult
from networth.repositories.protocols import AccountRepository, BalanceRepository
from networth.services.balance_reconciler import BalanceReconciler

logger = logging.getLogger(__name__)


def parse_amount(raw) -> Optional[Decimal]:
    """Parse a typed-in amount; thousands separators allowed, blank is None."""
    if raw is None:
        return None
    text = str(raw).replace(",", "").strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"Please enter valid numbers: {raw}")
    if not value.is_finite():
        raise ValidationError(f"Please enter valid numbers: {raw}")
    return value


class BalanceService:
    """
    Service for recording and editing balances.

    Row operations mirror the history grid: one date row holds a value per
    account, and saving or deleting a row fans out into one store call per
    entry.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        balance_repo: BalanceRepository,
        row_batch_size: Optional[int] = None,
    ):
        self._account_repo = account_repo
        self._balance_repo = balance_repo
        self._row_batch_size = row_batch_size or get_settings().row_edit_batch_size

    def list_balances(self, owner_id: str) -> list[BalanceEntry]:
        """List balances with account names, ordered by date then account name."""
        return self._balance_repo.list_all(owner_id)

    def record_balance(
        self,
        owner_id: str,
        account_name: str,
        date: str,
        balance: Decimal,
    ) -> BalanceEntry:
        """
        Record one balance by account name, creating the account on first use.

        Overwrites any balance already recorded for that account and date.
        """
        name = (account_name or "").strip()
        if not name:
            raise ValidationError("account, date, balance required")
        iso_date = self._require_date(date)

        account = self._get_or_create_account(owner_id, name)
        return self._balance_repo.upsert(owner_id, account.account_id, iso_date, balance)

    def update_balance(self, owner_id: str, balance_id: str, balance: Decimal) -> BalanceEntry:
        """Change the value of an existing balance."""
        return self._balance_repo.update_value(owner_id, balance_id, balance)

    def delete_balance(self, owner_id: str, balance_id: str) -> None:
        """Delete a balance by ID (no error if it is already gone)."""
        self._balance_repo.delete(owner_id, balance_id)

    def delete_all(self, owner_id: str) -> BulkDeleteResult:
        """Delete the owner's entire balance history."""
        result = BalanceReconciler(self._balance_repo).delete_all(owner_id)
        logger.info(
            "Deleted %d balances for owner %s (%d failed)",
            result.deleted_count, owner_id, result.failed_count,
        )
        return result

    def delete_date_row(self, owner_id: str, date: str) -> BulkDeleteResult:
        """Delete every balance recorded on ``date``."""
        iso_date = canonicalize(date)
        ids = [
            b.balance_id for b in self._balance_repo.list_all(owner_id)
            if canonicalize(b.date) == iso_date
        ]
        outcomes = run_in_batches(
            [self._delete_task(owner_id, balance_id) for balance_id in ids],
            self._row_batch_size,
        )

        result = BulkDeleteResult()
        for balance_id, outcome in zip(ids, outcomes):
            if outcome.ok:
                result.deleted_count += 1
            else:
                result.failed_count += 1
                logger.error("Failed to delete balance %s: %s", balance_id, outcome.error)
        return result

    def save_date_row(
        self,
        owner_id: str,
        new_date: str,
        values: dict[str, Optional[str]],
        original_date: Optional[str] = None,
    ) -> RowSaveResult:
        """
        Save an edited date row.

        Args:
            owner_id: Owner of the row
            new_date: Date the row should be saved under
            values: Account name to raw typed value; blank clears the entry
            original_date: Date the row was loaded from; None for a new row

        Every non-blank value must be numeric, otherwise nothing is changed. When
        the date moved, all entries of the original date are removed. Deletes run
        before upserts.
        """
        amounts = {account: parse_amount(raw) for account, raw in values.items()}
        iso_date = self._require_date(new_date)
        original = canonicalize(original_date) if original_date else None
        moved = original is not None and original != iso_date

        existing: dict[str, BalanceEntry] = {}
        if original is not None:
            existing = {
                b.account: b for b in self._balance_repo.list_all(owner_id)
                if canonicalize(b.date) == original and b.account
            }

        delete_ids: list[str] = []
        if moved:
            delete_ids.extend(entry.balance_id for entry in existing.values())

        upsert_tasks = []
        for account, amount in amounts.items():
            entry = existing.get(account)
            if amount is None:
                if entry is not None and not moved:
                    delete_ids.append(entry.balance_id)
                continue
            if entry is not None and not moved:
                upsert_tasks.append(self._update_task(owner_id, entry.balance_id, amount))
            else:
                upsert_tasks.append(self._record_task(owner_id, account, iso_date, amount))

        result = RowSaveResult(date=iso_date)
        for outcome in run_in_batches(
            [self._delete_task(owner_id, balance_id) for balance_id in delete_ids],
            self._row_batch_size,
        ):
            if outcome.ok:
                result.deleted_count += 1
            else:
                result.failed_count += 1
                logger.error("Failed to delete balance during row save: %s", outcome.error)

        for outcome in run_in_batches(upsert_tasks, self._row_batch_size):
            if outcome.ok:
                result.saved_count += 1
            else:
                result.failed_count += 1
                logger.error("Failed to save balance on %s: %s", iso_date, outcome.error)

        return result

    def _get_or_create_account(self, owner_id: str, name: str) -> Account:
        account = self._account_repo.get_by_name(owner_id, name)
        if account:
            return account
        try:
            return self._account_repo.create(owner_id, name, DEFAULT_CATEGORY)
        except ConstraintViolation:
            # Created concurrently by a sibling call.
            account = self._account_repo.get_by_name(owner_id, name)
            if account is None:
                raise
            return account

    @staticmethod
    def _require_date(date: Optional[str]) -> str:
        iso_date = canonicalize(date)
        if not is_valid_date(iso_date):
            raise ValidationError(f"Invalid date: {date}")
        return iso_date

    def _delete_task(self, owner_id: str, balance_id: str):
        return lambda: self._balance_repo.delete(owner_id, balance_id)

    def _update_task(self, owner_id: str, balance_id: str, amount: Decimal):
        return lambda: self._balance_repo.update_value(owner_id, balance_id, amount)

    def _record_task(self, owner_id: str, account: str, date: str, amount: Decimal):
        return lambda: self.record_balance(owner_id, account, date, amount)

"""Account reconciliation for ledger imports."""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from networth.config.settings import get_settings
from networth.core.batching import run_in_batches
from networth.domain.models import (
    Account,
    AccountType,
    category_type,
    default_category_for,
    normalize_category,
)
from networth.domain.views import AccountSyncResult, ImportRecord
from networth.repositories.protocols import AccountRepository

logger = logging.getLogger(__name__)


@dataclass
class DesiredAccount:
    """Resolved metadata for one account referenced by a ledger."""

    name: str
    category: str
    type: AccountType

    @property
    def match_key(self) -> str:
        return self.name.strip().lower()


def resolve_desired_accounts(
    records: Iterable[ImportRecord],
    existing: Iterable[Account],
) -> dict[str, DesiredAccount]:
    """
    Resolve one DesiredAccount per case-insensitive account name.

    When a name appears on several rows the last row wins. Category: last explicit
    ledger category, else the stored account's category, else the default for the
    resolved type. Type: last explicit ledger type, else the type implied by the
    category, else asset. The last spelling of a name is used for creation.
    """
    stored = {a.match_key: a for a in existing}
    names: dict[str, str] = {}
    categories: dict[str, str] = {}
    types: dict[str, AccountType] = {}

    for record in records:
        name = (record.account or "").strip()
        if not name:
            continue
        key = name.lower()
        names[key] = name
        if record.category is not None:
            categories[key] = normalize_category(record.category)
        if record.type is not None:
            types[key] = record.type

    desired: dict[str, DesiredAccount] = {}
    for key, name in names.items():
        existing_account = stored.get(key)
        known_category: Optional[str] = categories.get(key)
        if known_category is None and existing_account is not None:
            known_category = normalize_category(existing_account.category)

        account_type = types.get(key)
        if account_type is None:
            account_type = category_type(known_category) if known_category else AccountType.ASSET

        desired[key] = DesiredAccount(
            name=name,
            category=known_category or default_category_for(account_type),
            type=account_type,
        )
    return desired


class AccountReconciler:
    """
    Brings the owner's accounts in line with the accounts a ledger references.

    Missing accounts are created and accounts whose category differs are
    recategorized; accounts the ledger does not mention are left alone. Store
    calls run in bounded concurrent batches and a failed call is logged and
    counted without stopping the rest.
    """

    def __init__(self, account_repo: AccountRepository, batch_size: Optional[int] = None):
        self._account_repo = account_repo
        self._batch_size = batch_size or get_settings().account_batch_size

    def reconcile(
        self,
        owner_id: str,
        records: list[ImportRecord],
        existing: Optional[list[Account]] = None,
    ) -> AccountSyncResult:
        """Create and update accounts so every referenced name exists with its resolved category."""
        if existing is None:
            existing = self._account_repo.list_all(owner_id)
        stored = {a.match_key: a for a in existing}
        desired = resolve_desired_accounts(records, existing)

        to_create = [d for key, d in desired.items() if key not in stored]
        to_update = [
            (stored[key], d)
            for key, d in desired.items()
            if key in stored and normalize_category(stored[key].category) != d.category
        ]

        result = AccountSyncResult()

        create_outcomes = run_in_batches(
            [self._create_task(owner_id, d) for d in to_create],
            self._batch_size,
            label="Creating accounts",
        )
        for desired_account, outcome in zip(to_create, create_outcomes):
            if outcome.ok:
                result.created.append(desired_account.name)
            else:
                self._record_failure(result, "create", desired_account.name, outcome.error)

        update_outcomes = run_in_batches(
            [self._update_task(owner_id, account, d) for account, d in to_update],
            self._batch_size,
            label="Updating accounts",
        )
        for (account, _), outcome in zip(to_update, update_outcomes):
            if outcome.ok:
                result.updated.append(account.name)
            else:
                self._record_failure(result, "update", account.name, outcome.error)

        logger.info(
            "Account reconciliation: %d created, %d updated, %d failed",
            len(result.created), len(result.updated), len(result.failed),
        )
        return result

    def _create_task(self, owner_id: str, desired: DesiredAccount):
        return lambda: self._account_repo.create(owner_id, desired.name, desired.category)

    def _update_task(self, owner_id: str, account: Account, desired: DesiredAccount):
        return lambda: self._account_repo.update(
            owner_id, account.account_id, account.name, desired.category
        )

    @staticmethod
    def _record_failure(result: AccountSyncResult, action: str, name: str, error: Exception) -> None:
        logger.error("Failed to %s account '%s' during import: %s", action, name, error)
        result.failed.append(name)
        result.errors.append(f"{action} {name}: {error}")

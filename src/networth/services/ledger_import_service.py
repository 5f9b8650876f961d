"""Ledger import orchestration."""

import logging
from typing import Union

from networth.csv.parser import parse_ledger
from networth.domain.views import ImportSummary
from networth.repositories.protocols import AccountRepository
from networth.services.account_reconciler import AccountReconciler
from networth.services.balance_reconciler import BalanceReconciler

logger = logging.getLogger(__name__)


class LedgerImportService:
    """
    Imports a ledger file as the owner's complete balance history.

    Parse, bring accounts in line with the ledger, then replace every balance.
    The import is not transactional: it always runs to completion and reports
    exactly how many rows made it in and how many did not.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        account_reconciler: AccountReconciler,
        balance_reconciler: BalanceReconciler,
    ):
        self._account_repo = account_repo
        self._account_reconciler = account_reconciler
        self._balance_reconciler = balance_reconciler

    def import_ledger(self, owner_id: str, content: Union[str, bytes]) -> ImportSummary:
        """
        Import ledger text for an owner.

        Failed rows are the sum of parser rejections, rows dropped while cleaning
        and upserts the store refused.
        """
        parsed = parse_ledger(content)
        logger.info("Importing %d ledger rows for owner %s", len(parsed.records), owner_id)

        accounts = self._account_reconciler.reconcile(owner_id, parsed.records)

        account_ids = {a.match_key: a.account_id for a in self._account_repo.list_all(owner_id)}
        balances = self._balance_reconciler.reconcile(owner_id, parsed.records, account_ids)

        summary = ImportSummary(
            imported_count=balances.imported_count,
            failed_count=parsed.rejected + balances.failed_count,
            deleted_count=balances.deleted_count,
            accounts_created=accounts.created,
            accounts_updated=accounts.updated,
            errors=parsed.errors + accounts.errors + balances.errors,
        )
        logger.info("Ledger import finished: %s", summary.status_message)
        return summary

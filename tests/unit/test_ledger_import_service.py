"""
Unit tests for ledger import orchestration.

Tests cover:
- End-to-end scenarios: canonical rows, headerless legacy rows, garbage rows
- Empty import after a prior import (full replace)
- Status message and failure accounting
- Accounts whose create failed
- Re-import idempotence
"""

from decimal import Decimal

from networth.domain.models import AccountType
from networth.services import LedgerImportService, TimeSeriesBuilder

from tests.conftest import OWNER, OTHER_OWNER


class TestLedgerImportScenarios:
    """Import scenarios against the in-memory store."""

    def test_asset_and_liability_rows(self, fake_store, fake_import_service: LedgerImportService):
        """
        GIVEN a checking asset row and a mortgage liability row on one date
        WHEN the ledger is imported
        THEN both accounts exist with the right category and type, one entry
             each, and the rollup nets to -199000
        """
        text = (
            "2024-01-01,Checking,cash,asset,1000\n"
            "2024-01-01,Mortgage,mortgage,liability,200000"
        )

        summary = fake_import_service.import_ledger(OWNER, text)

        accounts = {a.name: a for a in fake_store.list_accounts(OWNER)}
        assert accounts["Checking"].category == "cash"
        assert accounts["Checking"].type == AccountType.ASSET
        assert accounts["Mortgage"].category == "mortgage"
        assert accounts["Mortgage"].type == AccountType.LIABILITY

        balances = fake_store.list_balances(OWNER)
        assert [(b.account, b.date) for b in balances] == [
            ("Checking", "2024-01-01"),
            ("Mortgage", "2024-01-01"),
        ]

        categories = {a.name: a.category for a in accounts.values()}
        row = next(iter(TimeSeriesBuilder(balances, categories).rollup))
        assert row.categories["cash"] == Decimal("1000")
        assert row.categories["mortgage"] == Decimal("-200000")
        assert row.net_worth == Decimal("-199000")

        assert summary.imported_count == 2
        assert summary.status_message == "Imported 2 rows."

    def test_headerless_three_column_row(self, fake_store, fake_import_service: LedgerImportService):
        """
        GIVEN "1/2/24,Savings,500"
        WHEN imported
        THEN Savings is an "other" asset with a balance on 2024-01-02
        """
        fake_import_service.import_ledger(OWNER, "1/2/24,Savings,500")

        savings = fake_store.get_by_name(OWNER, "Savings")
        assert savings.category == "other"
        assert savings.type == AccountType.ASSET
        assert [(b.date, b.balance) for b in fake_store.list_balances(OWNER)] == [
            ("2024-01-02", Decimal("500")),
        ]

    def test_garbage_row_is_dropped_and_counted(self, fake_store, fake_import_service: LedgerImportService):
        """
        GIVEN "2024-01-01,,,,abc"
        WHEN imported
        THEN nothing is created and one failure is reported
        """
        summary = fake_import_service.import_ledger(OWNER, "2024-01-01,,,,abc")

        assert summary.imported_count == 0
        assert summary.failed_count == 1
        assert summary.status_message == "Imported 0 rows. 1 failed."
        assert fake_store.accounts == {}
        assert fake_store.calls_for("create") == []

    def test_empty_file_deletes_prior_history(self, fake_store, fake_import_service: LedgerImportService):
        """
        GIVEN a prior import of three rows
        WHEN an empty file is imported
        THEN every prior balance is deleted and nothing is created
        """
        fake_import_service.import_ledger(OWNER, "1/1/24,A,1\n1/1/24,B,2\n2/1/24,A,3")

        summary = fake_import_service.import_ledger(OWNER, "")

        assert fake_store.list_balances(OWNER) == []
        assert summary.deleted_count == 3
        assert summary.imported_count == 0
        assert summary.status_message == "Imported 0 rows."

    def test_failed_account_create_fails_its_rows(self, fake_store, fake_import_service: LedgerImportService):
        """
        GIVEN the store refuses to create "Visa"
        WHEN a ledger with two Visa rows and one Checking row is imported
        THEN the Checking row imports, both Visa rows fail without an upsert call
        """
        fake_store.fail_create.add("Visa")
        text = "1/1/24,Checking,1\n1/1/24,Visa,2\n2/1/24,Visa,3"

        summary = fake_import_service.import_ledger(OWNER, text)

        assert summary.imported_count == 1
        assert summary.failed_count == 2
        assert summary.status_message == "Imported 1 rows. 2 failed."
        assert fake_store.calls_for("upsert") == ["Checking"]

    def test_failures_from_every_stage_add_up(self, fake_store, fake_import_service: LedgerImportService):
        fake_store.fail_upsert.add("Visa")
        text = (
            "date,account,category,type,balance\n"
            "1/1/24,Checking,cash,asset,1\n"
            "1/1/24,Visa,credit card,liability,2\n"
            "someday,Checking,cash,asset,3\n"
            "1/1/24,Broken,cash,asset,n/a\n"
        )

        summary = fake_import_service.import_ledger(OWNER, text)

        # parser rejection + cleaning rejection + refused upsert
        assert summary.failed_count == 3
        assert summary.imported_count == 1

    def test_owners_are_isolated(self, fake_store, fake_import_service: LedgerImportService):
        fake_import_service.import_ledger(OTHER_OWNER, "1/1/24,Checking,1")

        fake_import_service.import_ledger(OWNER, "")

        assert len(fake_store.list_balances(OTHER_OWNER)) == 1


class TestLedgerImportSqlite:
    """Import against the SQLite repositories."""

    def test_reimport_is_idempotent(self, import_service: LedgerImportService, balance_repo, sample_ledger):
        """
        GIVEN a ledger imported once
        WHEN the same ledger is imported again
        THEN the stored balance set is identical and has no duplicate pairs
        """
        import_service.import_ledger(OWNER, sample_ledger)
        first = sorted((b.account, b.date, b.balance) for b in balance_repo.list_all(OWNER))

        summary = import_service.import_ledger(OWNER, sample_ledger)
        second = sorted((b.account, b.date, b.balance) for b in balance_repo.list_all(OWNER))

        assert first == second
        assert len({(a, d) for a, d, _ in second}) == len(second) == 7
        assert summary.deleted_count == 7
        assert summary.accounts_created == []

    def test_import_creates_accounts_with_categories(self, import_service: LedgerImportService, account_repo, sample_ledger):
        summary = import_service.import_ledger(OWNER, sample_ledger)

        categories = {a.name: a.category for a in account_repo.list_all(OWNER)}
        assert categories == {
            "Brokerage": "stocks",
            "Checking": "cash",
            "Home Loan": "mortgage",
            "Visa": "credit card",
        }
        assert sorted(summary.accounts_created) == sorted(categories)
        assert summary.status_message == "Imported 7 rows."

    def test_recategorizes_existing_account(self, import_service: LedgerImportService, account_service):
        account_service.create_account(OWNER, "visa", "other")

        summary = import_service.import_ledger(OWNER, "1/1/24,Visa,credit card,liability,50")

        assert summary.accounts_updated == ["visa"]
        accounts = account_service.list_accounts(OWNER)
        assert [(a.name, a.category) for a in accounts] == [("visa", "credit card")]

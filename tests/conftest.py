"""
Pytest configuration and fixtures for net worth ledger tests.

This module provides:
- File-backed SQLite database fixtures (one database per test)
- Repository and service fixtures
- An in-memory store with injectable failures for reconciliation tests
- A FastAPI test client wired to the test database
"""

import threading
import uuid
from decimal import Decimal
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from networth.main import app
from networth.config.settings import Settings, set_settings, reset_settings
from networth.core.exceptions import ConstraintViolation, NotFoundError
from networth.domain.models import Account, BalanceEntry
from networth.repositories.sqlalchemy.database import (
    Base,
    create_sqlite_engine,
    get_session_factory,
    reset_database,
)
# Import ORM models to register them with Base before creating tables
from networth.repositories.sqlalchemy import orm_models  # noqa: F401
from networth.repositories.sqlalchemy import (
    SqlAlchemyAccountRepository,
    SqlAlchemyBalanceRepository,
)
from networth.services import (
    AccountReconciler,
    AccountService,
    BalanceReconciler,
    BalanceService,
    ChartService,
    LedgerImportService,
)
from networth.csv import CsvExporter, CsvTemplateGenerator

OWNER = "owner-1"
OTHER_OWNER = "owner-2"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine(tmp_path):
    """Create a file-backed SQLite engine; worker threads need a real file."""
    reset_settings()

    engine = create_sqlite_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine) -> sessionmaker:
    """Session factory bound to the test engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=test_engine,
    )


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def account_repo(session_factory) -> SqlAlchemyAccountRepository:
    """Provide test AccountRepository."""
    return SqlAlchemyAccountRepository(session_factory)


@pytest.fixture
def balance_repo(session_factory) -> SqlAlchemyBalanceRepository:
    """Provide test BalanceRepository."""
    return SqlAlchemyBalanceRepository(session_factory)


# =============================================================================
# IN-MEMORY STORE
# =============================================================================


class FakeStore:
    """
    In-memory account and balance store with injectable failures.

    Implements both repository protocols. Names listed in ``fail_create`` or
    ``fail_update`` make those account calls raise; accounts listed in
    ``fail_upsert`` (by name) and balance ids in ``fail_delete`` do the same for
    balance calls. Every call is recorded in ``calls``.
    """

    def __init__(self):
        self.accounts: dict[str, Account] = {}
        self.balances: dict[str, BalanceEntry] = {}
        self.fail_create: set[str] = set()
        self.fail_update: set[str] = set()
        self.fail_upsert: set[str] = set()
        self.fail_delete: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self._lock = threading.Lock()

    def _record(self, action: str, subject: str) -> None:
        with self._lock:
            self.calls.append((action, subject))

    def calls_for(self, action: str) -> list[str]:
        return [subject for a, subject in self.calls if a == action]

    # --- AccountRepository -------------------------------------------------

    def get_by_id(self, owner_id: str, account_id: str) -> Optional[Account]:
        account = self.accounts.get(account_id)
        return account if account and account.owner_id == owner_id else None

    def get_by_name(self, owner_id: str, name: str) -> Optional[Account]:
        for account in self.accounts.values():
            if account.owner_id == owner_id and account.name == name:
                return account
        return None

    def create(self, owner_id: str, name: str, category: str) -> Account:
        self._record("create", name)
        if name in self.fail_create:
            raise ConstraintViolation(f"Account '{name}' rejected by store")
        with self._lock:
            if any(a.owner_id == owner_id and a.name == name for a in self.accounts.values()):
                raise ConstraintViolation(f"Account '{name}' already exists")
            account = Account(
                account_id=str(uuid.uuid4()),
                owner_id=owner_id,
                name=name,
                category=category,
            )
            self.accounts[account.account_id] = account
        return account

    def update(self, owner_id: str, account_id: str, name: str, category: str) -> Account:
        self._record("update", name)
        if name in self.fail_update:
            raise ConstraintViolation(f"Account '{name}' rejected by store")
        account = self.get_by_id(owner_id, account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        account.name = name
        account.category = category
        return account

    # --- BalanceRepository -------------------------------------------------

    def upsert(self, owner_id: str, account_id: str, date: str, balance: Decimal) -> BalanceEntry:
        account = self.get_by_id(owner_id, account_id)
        self._record("upsert", account.name if account else account_id)
        if account is None:
            raise ConstraintViolation(f"Account {account_id} does not exist")
        if account.name in self.fail_upsert:
            raise ConstraintViolation(f"Balance for '{account.name}' rejected by store")
        with self._lock:
            for entry in self.balances.values():
                if entry.account_id == account_id and entry.date == date:
                    entry.balance = balance
                    return entry
            entry = BalanceEntry(
                balance_id=str(uuid.uuid4()),
                owner_id=owner_id,
                account_id=account_id,
                date=date,
                balance=balance,
                account=account.name,
            )
            self.balances[entry.balance_id] = entry
        return entry

    def update_value(self, owner_id: str, balance_id: str, balance: Decimal) -> BalanceEntry:
        self._record("update_value", balance_id)
        entry = self.balances.get(balance_id)
        if entry is None or entry.owner_id != owner_id:
            raise NotFoundError("Balance", balance_id)
        entry.balance = balance
        return entry

    def delete(self, owner_id: str, balance_id: str) -> None:
        self._record("delete", balance_id)
        if balance_id in self.fail_delete:
            raise ConstraintViolation(f"Balance {balance_id} could not be deleted")
        with self._lock:
            entry = self.balances.get(balance_id)
            if entry is not None and entry.owner_id == owner_id:
                del self.balances[balance_id]

    # --- helpers -----------------------------------------------------------

    def list_accounts(self, owner_id: str) -> list[Account]:
        return sorted(
            (a for a in self.accounts.values() if a.owner_id == owner_id),
            key=lambda a: a.name,
        )

    def list_balances(self, owner_id: str) -> list[BalanceEntry]:
        return sorted(
            (b for b in self.balances.values() if b.owner_id == owner_id),
            key=lambda b: (b.date, b.account or ""),
        )


class FakeAccountRepo:
    """AccountRepository view over a FakeStore."""

    def __init__(self, store: FakeStore):
        self._store = store

    def list_all(self, owner_id: str) -> list[Account]:
        return self._store.list_accounts(owner_id)

    def __getattr__(self, name):
        return getattr(self._store, name)


class FakeBalanceRepo:
    """BalanceRepository view over a FakeStore."""

    def __init__(self, store: FakeStore):
        self._store = store

    def list_all(self, owner_id: str) -> list[BalanceEntry]:
        return self._store.list_balances(owner_id)

    def get_by_id(self, owner_id: str, balance_id: str) -> Optional[BalanceEntry]:
        entry = self._store.balances.get(balance_id)
        return entry if entry and entry.owner_id == owner_id else None

    def __getattr__(self, name):
        return getattr(self._store, name)


@pytest.fixture
def fake_store() -> FakeStore:
    """Provide an empty in-memory store."""
    return FakeStore()


@pytest.fixture
def fake_account_repo(fake_store) -> FakeAccountRepo:
    return FakeAccountRepo(fake_store)


@pytest.fixture
def fake_balance_repo(fake_store) -> FakeBalanceRepo:
    return FakeBalanceRepo(fake_store)


@pytest.fixture
def fake_import_service(fake_account_repo, fake_balance_repo) -> LedgerImportService:
    """LedgerImportService over the in-memory store with small batches."""
    return LedgerImportService(
        account_repo=fake_account_repo,
        account_reconciler=AccountReconciler(fake_account_repo, batch_size=2),
        balance_reconciler=BalanceReconciler(fake_balance_repo, batch_size=3),
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def account_service(account_repo) -> AccountService:
    """Provide test AccountService."""
    return AccountService(account_repo=account_repo)


@pytest.fixture
def balance_service(account_repo, balance_repo) -> BalanceService:
    """Provide test BalanceService."""
    return BalanceService(account_repo=account_repo, balance_repo=balance_repo, row_batch_size=5)


@pytest.fixture
def import_service(account_repo, balance_repo) -> LedgerImportService:
    """Provide test LedgerImportService over SQLite."""
    return LedgerImportService(
        account_repo=account_repo,
        account_reconciler=AccountReconciler(account_repo, batch_size=10),
        balance_reconciler=BalanceReconciler(balance_repo, batch_size=100),
    )


@pytest.fixture
def chart_service(account_repo, balance_repo) -> ChartService:
    """Provide test ChartService."""
    return ChartService(account_repo=account_repo, balance_repo=balance_repo)


@pytest.fixture
def csv_exporter(account_repo, balance_repo) -> CsvExporter:
    """Provide test CsvExporter."""
    return CsvExporter(account_repo=account_repo, balance_repo=balance_repo)


@pytest.fixture
def csv_template_generator() -> CsvTemplateGenerator:
    """Provide test CsvTemplateGenerator."""
    return CsvTemplateGenerator()


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def balance_entry_factory() -> Callable[..., BalanceEntry]:
    """Factory for detached BalanceEntry rows (no store)."""

    def _create_entry(account: str, date: str, balance) -> BalanceEntry:
        return BalanceEntry(
            balance_id=str(uuid.uuid4()),
            owner_id=OWNER,
            account_id=f"id-{account}",
            date=date,
            balance=Decimal(str(balance)),
            account=account,
        )

    return _create_entry


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(tmp_path, test_engine, session_factory) -> TestClient:
    """Provide FastAPI test client with test database."""
    set_settings(Settings(data_dir=tmp_path, database_url=f"sqlite:///{tmp_path / 'test.db'}"))
    reset_database()

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# =============================================================================
# SAMPLE CONTENT
# =============================================================================


@pytest.fixture
def sample_ledger() -> str:
    """Two dates, four accounts, canonical five-column layout."""
    return (
        "date,account,category,type,balance\n"
        "1/31/24,Checking,cash,asset,\"$2,500.00\"\n"
        "1/31/24,Brokerage,stocks,asset,18000\n"
        "1/31/24,Home Loan,mortgage,liability,-250000\n"
        "2/29/24,Checking,cash,asset,3000\n"
        "2/29/24,Brokerage,stocks,asset,18500.50\n"
        "2/29/24,Home Loan,mortgage,liability,-249000\n"
        "2/29/24,Visa,credit card,liability,1200\n"
    )

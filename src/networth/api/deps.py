"""Dependency injection for FastAPI."""

from fastapi import Depends, Request
from sqlalchemy.orm import sessionmaker

from networth.config.settings import get_settings
from networth.repositories.sqlalchemy.database import get_session_factory
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


def get_owner_id(request: Request) -> str:
    """Owner whose data the request touches, taken from the owner header."""
    settings = get_settings()
    owner_id = request.headers.get(settings.owner_header, "").strip()
    return owner_id or settings.default_owner_id


def get_account_repo(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> SqlAlchemyAccountRepository:
    """Provide AccountRepository instance."""
    return SqlAlchemyAccountRepository(session_factory)


def get_balance_repo(
    session_factory: sessionmaker = Depends(get_session_factory),
) -> SqlAlchemyBalanceRepository:
    """Provide BalanceRepository instance."""
    return SqlAlchemyBalanceRepository(session_factory)


def get_account_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
) -> AccountService:
    """Provide AccountService instance."""
    return AccountService(account_repo=account_repo)


def get_balance_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    balance_repo: SqlAlchemyBalanceRepository = Depends(get_balance_repo),
) -> BalanceService:
    """Provide BalanceService instance."""
    return BalanceService(
        account_repo=account_repo,
        balance_repo=balance_repo,
        row_batch_size=get_settings().row_edit_batch_size,
    )


def get_ledger_import_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    balance_repo: SqlAlchemyBalanceRepository = Depends(get_balance_repo),
) -> LedgerImportService:
    """Provide LedgerImportService instance."""
    settings = get_settings()
    return LedgerImportService(
        account_repo=account_repo,
        account_reconciler=AccountReconciler(account_repo, settings.account_batch_size),
        balance_reconciler=BalanceReconciler(balance_repo, settings.balance_batch_size),
    )


def get_chart_service(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    balance_repo: SqlAlchemyBalanceRepository = Depends(get_balance_repo),
) -> ChartService:
    """Provide ChartService instance."""
    return ChartService(account_repo=account_repo, balance_repo=balance_repo)


def get_csv_exporter(
    account_repo: SqlAlchemyAccountRepository = Depends(get_account_repo),
    balance_repo: SqlAlchemyBalanceRepository = Depends(get_balance_repo),
) -> CsvExporter:
    """Provide CsvExporter instance."""
    return CsvExporter(account_repo=account_repo, balance_repo=balance_repo)


def get_csv_template_generator() -> CsvTemplateGenerator:
    """Provide CsvTemplateGenerator instance."""
    return CsvTemplateGenerator()

"""SQLAlchemy repository implementations."""

from networth.repositories.sqlalchemy.database import (
    create_sqlite_engine,
    get_engine,
    get_session_factory,
    init_db,
    reset_database,
    Base,
)
from networth.repositories.sqlalchemy.account_repo import SqlAlchemyAccountRepository
from networth.repositories.sqlalchemy.balance_repo import SqlAlchemyBalanceRepository

__all__ = [
    "create_sqlite_engine",
    "get_engine",
    "get_session_factory",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyAccountRepository",
    "SqlAlchemyBalanceRepository",
]

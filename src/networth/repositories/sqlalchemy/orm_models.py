"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    String,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.types import TypeDecorator

from networth.repositories.sqlalchemy.database import Base


class DecimalText(TypeDecorator):
    """Decimal stored as its exact text; SQLite has no lossless numeric type."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else str(Decimal(value))

    def process_result_value(self, value, dialect):
        return None if value is None else Decimal(value)


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"
    __table_args__ = (UniqueConstraint("owner_id", "name", name="uq_accounts_owner_name"),)

    account_id = Column(String(36), primary_key=True)
    owner_id = Column(String(64), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(64), nullable=False, default="other")
    created_at = Column(DateTime, nullable=False)

    balances = relationship(
        "BalanceORM",
        back_populates="account",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class BalanceORM(Base):
    """SQLAlchemy model for BalanceEntry (one snapshot per account and date)."""

    __tablename__ = "balances"
    __table_args__ = (UniqueConstraint("account_id", "date", name="uq_balances_account_date"),)

    balance_id = Column(String(36), primary_key=True)
    owner_id = Column(String(64), nullable=False, index=True)
    account_id = Column(
        String(36),
        ForeignKey("accounts.account_id", ondelete="CASCADE"),
        nullable=False,
    )
    date = Column(String(32), nullable=False)
    balance = Column(DecimalText(), nullable=False)

    account = relationship("AccountORM", back_populates="balances")

"""SQLAlchemy implementation of BalanceRepository."""

import uuid
from decimal import Decimal
from typing import Optional

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from networth.core.exceptions import ConstraintViolation, NotFoundError
from networth.domain.models import BalanceEntry
from networth.repositories.sqlalchemy.orm_models import AccountORM, BalanceORM


class SqlAlchemyBalanceRepository:
    """SQLAlchemy-backed balance repository; one session per call."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list_all(self, owner_id: str) -> list[BalanceEntry]:
        """List the owner's balances with account names, ordered by date then account name."""
        with self._session_factory() as db:
            rows = (
                db.query(BalanceORM, AccountORM.name)
                .join(AccountORM, AccountORM.account_id == BalanceORM.account_id)
                .filter(BalanceORM.owner_id == owner_id)
                .order_by(BalanceORM.date, AccountORM.name)
                .all()
            )
            return [self._to_domain(orm, name) for orm, name in rows]

    def get_by_id(self, owner_id: str, balance_id: str) -> Optional[BalanceEntry]:
        """Retrieve one of the owner's balances by ID."""
        with self._session_factory() as db:
            row = (
                db.query(BalanceORM, AccountORM.name)
                .join(AccountORM, AccountORM.account_id == BalanceORM.account_id)
                .filter(
                    BalanceORM.owner_id == owner_id,
                    BalanceORM.balance_id == balance_id,
                )
                .first()
            )
            return self._to_domain(*row) if row else None

    def upsert(
        self,
        owner_id: str,
        account_id: str,
        date: str,
        balance: Decimal,
    ) -> BalanceEntry:
        """Insert the balance, or overwrite the value already stored for (account, date)."""
        with self._session_factory() as db:
            account = db.query(AccountORM).filter(
                AccountORM.owner_id == owner_id,
                AccountORM.account_id == account_id,
            ).first()
            if not account:
                raise ConstraintViolation(
                    f"Account {account_id} does not exist for owner {owner_id}"
                )

            stmt = sqlite_insert(BalanceORM).values(
                balance_id=str(uuid.uuid4()),
                owner_id=owner_id,
                account_id=account_id,
                date=date,
                balance=balance,
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=["account_id", "date"],
                set_={"balance": stmt.excluded.balance},
            )
            try:
                db.execute(stmt)
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise ConstraintViolation(
                    f"Balance for account {account_id} on {date} rejected by store: {e.orig}"
                ) from e

            orm_balance = db.query(BalanceORM).filter(
                BalanceORM.account_id == account_id,
                BalanceORM.date == date,
            ).one()
            return self._to_domain(orm_balance, account.name)

    def update_value(self, owner_id: str, balance_id: str, balance: Decimal) -> BalanceEntry:
        """Change the value of an existing balance."""
        with self._session_factory() as db:
            orm_balance = db.query(BalanceORM).filter(
                BalanceORM.owner_id == owner_id,
                BalanceORM.balance_id == balance_id,
            ).first()
            if not orm_balance:
                raise NotFoundError("Balance", balance_id)

            orm_balance.balance = balance
            db.commit()
            db.refresh(orm_balance)
            return self._to_domain(orm_balance, orm_balance.account.name)

    def delete(self, owner_id: str, balance_id: str) -> None:
        """Delete a balance (idempotent)."""
        with self._session_factory() as db:
            db.query(BalanceORM).filter(
                BalanceORM.owner_id == owner_id,
                BalanceORM.balance_id == balance_id,
            ).delete()
            db.commit()

    @staticmethod
    def _to_domain(orm: BalanceORM, account_name: Optional[str] = None) -> BalanceEntry:
        """Convert ORM model to domain model."""
        return BalanceEntry(
            balance_id=orm.balance_id,
            owner_id=orm.owner_id,
            account_id=orm.account_id,
            date=orm.date,
            balance=Decimal(str(orm.balance)) if orm.balance is not None else Decimal("0"),
            account=account_name,
        )

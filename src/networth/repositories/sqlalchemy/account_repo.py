"""SQLAlchemy implementation of AccountRepository."""

import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from networth.core.exceptions import ConstraintViolation, NotFoundError
from networth.core.timezone import now_utc
from networth.domain.models import Account
from networth.repositories.sqlalchemy.orm_models import AccountORM, BalanceORM


class SqlAlchemyAccountRepository:
    """
    SQLAlchemy-backed account repository.

    Each call opens and closes its own session, so one instance can be shared by
    concurrently running reconciliation tasks.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def list_all(self, owner_id: str) -> list[Account]:
        """List the owner's accounts ordered by name."""
        with self._session_factory() as db:
            orm_accounts = (
                db.query(AccountORM)
                .filter(AccountORM.owner_id == owner_id)
                .order_by(AccountORM.name)
                .all()
            )
            return [self._to_domain(a) for a in orm_accounts]

    def get_by_id(self, owner_id: str, account_id: str) -> Optional[Account]:
        """Retrieve one of the owner's accounts by ID."""
        with self._session_factory() as db:
            orm_account = db.query(AccountORM).filter(
                AccountORM.owner_id == owner_id,
                AccountORM.account_id == account_id,
            ).first()
            return self._to_domain(orm_account) if orm_account else None

    def get_by_name(self, owner_id: str, name: str) -> Optional[Account]:
        """Retrieve one of the owner's accounts by exact name."""
        with self._session_factory() as db:
            orm_account = db.query(AccountORM).filter(
                AccountORM.owner_id == owner_id,
                AccountORM.name == name,
            ).first()
            return self._to_domain(orm_account) if orm_account else None

    def create(self, owner_id: str, name: str, category: str) -> Account:
        """Persist a new account."""
        orm_account = AccountORM(
            account_id=str(uuid.uuid4()),
            owner_id=owner_id,
            name=name,
            category=category,
            created_at=now_utc(),
        )
        with self._session_factory() as db:
            db.add(orm_account)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise ConstraintViolation(
                    f"Account '{name}' rejected by store: {e.orig}"
                ) from e
            db.refresh(orm_account)
            return self._to_domain(orm_account)

    def update(self, owner_id: str, account_id: str, name: str, category: str) -> Account:
        """Rename and/or recategorize an existing account."""
        with self._session_factory() as db:
            orm_account = db.query(AccountORM).filter(
                AccountORM.owner_id == owner_id,
                AccountORM.account_id == account_id,
            ).first()
            if not orm_account:
                raise NotFoundError("Account", account_id)

            orm_account.name = name
            orm_account.category = category
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise ConstraintViolation(
                    f"Account '{name}' rejected by store: {e.orig}"
                ) from e
            db.refresh(orm_account)
            return self._to_domain(orm_account)

    def delete(self, owner_id: str, account_id: str) -> None:
        """Delete an account together with all of its balances."""
        with self._session_factory() as db:
            db.query(BalanceORM).filter(
                BalanceORM.owner_id == owner_id,
                BalanceORM.account_id == account_id,
            ).delete()
            deleted = db.query(AccountORM).filter(
                AccountORM.owner_id == owner_id,
                AccountORM.account_id == account_id,
            ).delete()
            if deleted == 0:
                db.rollback()
                raise NotFoundError("Account", account_id)
            db.commit()

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            account_id=orm.account_id,
            owner_id=orm.owner_id,
            name=orm.name,
            category=orm.category or "other",
            created_at=orm.created_at,
        )

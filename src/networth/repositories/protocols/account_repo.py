"""Account repository protocol."""

from typing import Protocol, Optional

from networth.domain.models import Account


class AccountRepository(Protocol):
    """
    Interface for account data access.

    Every call is a single unit of work that may raise; implementations translate
    uniqueness or ownership rejections into ConstraintViolation.
    """

    def list_all(self, owner_id: str) -> list[Account]:
        """List the owner's accounts ordered by name."""
        ...

    def get_by_id(self, owner_id: str, account_id: str) -> Optional[Account]:
        """Retrieve one of the owner's accounts by ID."""
        ...

    def get_by_name(self, owner_id: str, name: str) -> Optional[Account]:
        """Retrieve one of the owner's accounts by exact name."""
        ...

    def create(self, owner_id: str, name: str, category: str) -> Account:
        """Persist a new account."""
        ...

    def update(self, owner_id: str, account_id: str, name: str, category: str) -> Account:
        """Rename and/or recategorize an existing account."""
        ...

    def delete(self, owner_id: str, account_id: str) -> None:
        """Delete an account together with all of its balances."""
        ...

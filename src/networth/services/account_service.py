"""Account management service."""

from typing import Optional

from networth.core.exceptions import NotFoundError, ValidationError
from networth.domain.models import Account, normalize_category
from networth.repositories.protocols import AccountRepository


class AccountService:
    """Service for creating, renaming, recategorizing and deleting accounts."""

    def __init__(self, account_repo: AccountRepository):
        self._account_repo = account_repo

    def list_accounts(self, owner_id: str) -> list[Account]:
        """List the owner's accounts ordered by name."""
        return self._account_repo.list_all(owner_id)

    def get_account(self, owner_id: str, account_id: str) -> Account:
        """Get account by ID."""
        account = self._account_repo.get_by_id(owner_id, account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return account

    def create_account(self, owner_id: str, name: str, category: Optional[str] = None) -> Account:
        """
        Create a new account.

        Args:
            owner_id: Owning user
            name: Account name, unique per owner after trimming
            category: Category token; blank means ``other``

        Returns:
            Created Account instance
        """
        clean_name = self._require_name(name)
        if self._account_repo.get_by_name(owner_id, clean_name):
            raise ValidationError(f"Account with name '{clean_name}' already exists")
        return self._account_repo.create(owner_id, clean_name, normalize_category(category))

    def update_account(
        self,
        owner_id: str,
        account_id: str,
        name: str,
        category: Optional[str] = None,
    ) -> Account:
        """Rename and/or recategorize an account."""
        clean_name = self._require_name(name)
        return self._account_repo.update(
            owner_id, account_id, clean_name, normalize_category(category)
        )

    def delete_account(self, owner_id: str, account_id: str) -> None:
        """Delete an account and every balance recorded for it."""
        self._account_repo.delete(owner_id, account_id)

    @staticmethod
    def _require_name(name: Optional[str]) -> str:
        clean_name = (name or "").strip()
        if not clean_name:
            raise ValidationError("Account name is required")
        return clean_name

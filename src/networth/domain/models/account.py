"""Account domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from networth.domain.models.enums import AccountType, category_type, DEFAULT_CATEGORY


@dataclass
class Account:
    """
    Named financial holding owned by a single user.

    The name is unique per owner. Type is never stored: it follows from the category.
    """

    account_id: str
    owner_id: str
    name: str
    category: str = DEFAULT_CATEGORY
    created_at: Optional[datetime] = field(default=None)

    @property
    def type(self) -> AccountType:
        """Asset or liability, derived from the category."""
        return category_type(self.category)

    @property
    def match_key(self) -> str:
        """Case-insensitive key used when matching ledger rows to accounts."""
        return self.name.strip().lower()

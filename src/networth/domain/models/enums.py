"""Enumerations and fixed vocabularies for domain models."""

from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Side of the balance sheet an account sits on."""

    ASSET = "asset"
    LIABILITY = "liability"


# Display order matters: rollups, snapshots and exports follow it.
ASSET_CATEGORIES = ("cash", "stocks", "crypto", "retirement", "property", "other")
LIABILITY_CATEGORIES = ("mortgage", "credit card", "loans", "other liability")
ALL_CATEGORIES = ASSET_CATEGORIES + LIABILITY_CATEGORIES

DEFAULT_CATEGORY = "other"
DEFAULT_LIABILITY_CATEGORY = "other liability"


def normalize_category(value: Optional[str]) -> str:
    """Lower-case and trim a category token; blank becomes ``other``."""
    category = str(value or "").strip().lower()
    return category or DEFAULT_CATEGORY


def category_type(category: Optional[str]) -> AccountType:
    """Liability when the category is in the liability vocabulary, asset otherwise."""
    if str(category or "").strip().lower() in LIABILITY_CATEGORIES:
        return AccountType.LIABILITY
    return AccountType.ASSET


def normalize_type(value: Optional[str]) -> Optional[AccountType]:
    """Prefix-match ``liab``/``asset`` case-insensitively; anything else is None."""
    text = str(value or "").strip().lower()
    if text.startswith("liab"):
        return AccountType.LIABILITY
    if text.startswith("asset"):
        return AccountType.ASSET
    return None


def default_category_for(account_type: Optional[AccountType]) -> str:
    """Fallback category for an account whose ledger rows carry no category."""
    if account_type == AccountType.LIABILITY:
        return DEFAULT_LIABILITY_CATEGORY
    return DEFAULT_CATEGORY

"""Domain models package."""

from networth.domain.models.enums import (
    AccountType,
    ASSET_CATEGORIES,
    LIABILITY_CATEGORIES,
    ALL_CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_LIABILITY_CATEGORY,
    normalize_category,
    category_type,
    normalize_type,
    default_category_for,
)
from networth.domain.models.account import Account
from networth.domain.models.balance import BalanceEntry

__all__ = [
    "AccountType",
    "ASSET_CATEGORIES",
    "LIABILITY_CATEGORIES",
    "ALL_CATEGORIES",
    "DEFAULT_CATEGORY",
    "DEFAULT_LIABILITY_CATEGORY",
    "normalize_category",
    "category_type",
    "normalize_type",
    "default_category_for",
    "Account",
    "BalanceEntry",
]

"""Ledger CSV export."""

import csv
import io
import re
from pathlib import Path
from typing import Optional

from networth.core.dates import format_display, to_timestamp
from networth.core.timezone import today_utc
from networth.domain.models import (
    Account,
    AccountType,
    ASSET_CATEGORIES,
    LIABILITY_CATEGORIES,
    category_type,
    normalize_category,
)
from networth.repositories.protocols import AccountRepository, BalanceRepository
from networth.csv.parser import LEDGER_COLUMNS

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]+')


def export_filename(owner_label: str, on: Optional[str] = None) -> str:
    """``Net Wealth - <owner> - <YYYY-MM-DD>.csv`` with path-unsafe characters replaced."""
    day = on or today_utc().isoformat()
    return _UNSAFE_FILENAME_CHARS.sub("-", f"Net Wealth - {owner_label} - {day}.csv")


def account_sort_key(account: Account) -> tuple[int, int, str]:
    """Assets before liabilities, then vocabulary position (unknown last), then name."""
    if account.type == AccountType.LIABILITY:
        vocabulary, side = LIABILITY_CATEGORIES, 1
    else:
        vocabulary, side = ASSET_CATEGORIES, 0
    try:
        position = vocabulary.index(normalize_category(account.category))
    except ValueError:
        position = len(vocabulary)
    return side, position, account.name


class CsvExporter:
    """
    CSV exporter for the balance history.

    Writes the canonical five-column layout with ``M/D/YY`` dates, one row per
    recorded (date, account) pair, so an export can be re-imported unchanged.
    """

    def __init__(self, account_repo: AccountRepository, balance_repo: BalanceRepository):
        self._account_repo = account_repo
        self._balance_repo = balance_repo

    def build_rows(self, owner_id: str) -> list[list[str]]:
        """Data rows (no header) in export order."""
        accounts = sorted(self._account_repo.list_all(owner_id), key=account_sort_key)
        by_date: dict[str, dict[str, str]] = {}
        for entry in self._balance_repo.list_all(owner_id):
            by_date.setdefault(entry.date, {})[entry.account_id] = str(entry.balance)

        rows = []
        for date in sorted(by_date, key=lambda d: (to_timestamp(d), d)):
            values = by_date[date]
            for account in accounts:
                if account.account_id not in values:
                    continue
                category = normalize_category(account.category)
                rows.append([
                    format_display(date),
                    account.name,
                    category,
                    category_type(category).value,
                    values[account.account_id],
                ])

        return rows

    def export_text(self, owner_id: str) -> str:
        """Render the owner's history as CSV text."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(LEDGER_COLUMNS)
        writer.writerows(self.build_rows(owner_id))
        return buffer.getvalue()

    def export_csv(self, owner_id: str, path: str) -> None:
        """
        Export the owner's history to a CSV file.

        Args:
            owner_id: Owner whose balances are exported
            path: Output file path
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            csvfile.write(self.export_text(owner_id))

"""Ledger text parsing.

Canonical layout: ``date, account, category, type, balance``. Older exports without
a category column (``date, account, type, balance``) or with neither category nor
type (``date, account, balance``) are still accepted. The header row is optional.
"""

import csv
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from networth.core.dates import canonicalize
from networth.core.exceptions import ParseError
from networth.domain.models import normalize_category, normalize_type
from networth.domain.views import ImportRecord, ParseResult

logger = logging.getLogger(__name__)

LEDGER_COLUMNS = ["date", "account", "category", "type", "balance"]
LEGACY_TYPE_COLUMNS = ["date", "account", "type", "balance"]
LEGACY_BASIC_COLUMNS = ["date", "account", "balance"]

_LINE_SPLIT = re.compile(r"\r?\n")
_CURRENCY_NOISE = re.compile(r"[$,]")


def _matches_header(cells: list[str], columns: list[str]) -> bool:
    return cells[:len(columns)] == columns


def decode_ledger(content: bytes) -> str:
    """
    Decode uploaded ledger bytes.

    UTF-8 (with or without a BOM) first, then the legacy spreadsheet encodings.
    latin-1 maps every byte, so decoding never fails.
    """
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass
    try:
        text = content.decode("cp1252")
        encoding = "cp1252"
    except UnicodeDecodeError:
        text = content.decode("latin-1")
        encoding = "latin-1"
    logger.warning("Ledger is not UTF-8; decoded as %s", encoding)
    return text


def detect_header(first_line: str) -> Optional[list[str]]:
    """Return the column layout named by a header line, or None if it is data."""
    cells = [c.strip().lower() for c in first_line.split(",")]
    for columns in (LEDGER_COLUMNS, LEGACY_TYPE_COLUMNS, LEGACY_BASIC_COLUMNS):
        if _matches_header(cells, columns):
            return columns
    return None


def parse_balance(raw: str) -> Decimal:
    """Parse a balance cell, ignoring ``$`` and thousands separators."""
    cleaned = _CURRENCY_NOISE.sub("", raw).strip()
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ParseError(f"Invalid balance: {raw}")
    if not value.is_finite():
        raise ParseError(f"Invalid balance: {raw}")
    return value


def parse_line(line: str, header: Optional[list[str]] = None, line_number: int = 0) -> ImportRecord:
    """
    Turn one data line into an ImportRecord.

    The layout comes from the detected header when there is one, otherwise from
    the number of cells. Raises ParseError for rows that cannot be imported.
    """
    cells = [c.strip() for c in next(csv.reader([line]), [])]
    if len(cells) < 3:
        raise ParseError(f"Expected at least 3 columns, got {len(cells)}", line_number)

    category_raw: Optional[str] = None
    type_raw: Optional[str] = None
    if header is LEDGER_COLUMNS or len(cells) >= 5:
        date_raw, account, category_raw, type_raw, balance_raw = (cells + [""] * 5)[:5]
    elif header is LEGACY_TYPE_COLUMNS or len(cells) == 4:
        date_raw, account, type_raw, balance_raw = cells[:4]
    else:
        date_raw, account, balance_raw = cells[:3]

    if not date_raw or not account or not balance_raw:
        raise ParseError("Missing date, account or balance", line_number)

    try:
        balance = parse_balance(balance_raw)
    except ParseError as e:
        raise ParseError(e.message, line_number) from e

    return ImportRecord(
        date=canonicalize(date_raw),
        account=account,
        balance=balance,
        category=normalize_category(category_raw) if category_raw is not None else None,
        type=normalize_type(type_raw),
    )


def parse_ledger(content: Union[str, bytes]) -> ParseResult:
    """
    Parse ledger text into records, preserving input order.

    Blank lines are ignored, a recognised header is skipped, and every other line
    that cannot be imported is counted in ``rejected``.
    """
    if isinstance(content, bytes):
        content = decode_ledger(content)

    lines = [line.strip() for line in _LINE_SPLIT.split(content)]
    lines = [line for line in lines if line]

    result = ParseResult()
    if not lines:
        return result

    header = detect_header(lines[0])
    start = 1 if header else 0

    for line_number, line in enumerate(lines[start:], start=start + 1):
        try:
            result.records.append(parse_line(line, header, line_number))
        except ParseError as e:
            result.rejected += 1
            result.errors.append(f"Row {e.line_number}: {e.message}")

    if result.rejected:
        logger.warning("Ledger parse rejected %d of %d rows", result.rejected, len(lines) - start)
    return result

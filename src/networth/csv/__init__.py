"""Ledger CSV import/export utilities."""

from networth.csv.parser import (
    LEDGER_COLUMNS,
    decode_ledger,
    detect_header,
    parse_balance,
    parse_line,
    parse_ledger,
)
from networth.csv.exporter import CsvExporter, export_filename, account_sort_key
from networth.csv.template import CsvTemplateGenerator

__all__ = [
    "LEDGER_COLUMNS",
    "decode_ledger",
    "detect_header",
    "parse_balance",
    "parse_line",
    "parse_ledger",
    "CsvExporter",
    "export_filename",
    "account_sort_key",
    "CsvTemplateGenerator",
]

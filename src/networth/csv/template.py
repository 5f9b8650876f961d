"""CSV template generation."""

import csv
import io
from pathlib import Path

from networth.csv.parser import LEDGER_COLUMNS

TEMPLATE_FILENAME = "Net Wealth - Import Template.csv"

EXAMPLE_ROWS = [
    ["1/31/24", "Checking", "cash", "asset", "2500.00"],
    ["1/31/24", "Brokerage", "stocks", "asset", "18000.00"],
    ["1/31/24", "Home Loan", "mortgage", "liability", "250000.00"],
]


class CsvTemplateGenerator:
    """Generator for blank ledger import templates."""

    def template_text(self) -> str:
        """Header plus example rows showing each column's expected format."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(LEDGER_COLUMNS)
        writer.writerows(EXAMPLE_ROWS)
        return buffer.getvalue()

    def generate_template(self, path: str) -> None:
        """
        Generate a CSV template with headers and example rows.

        Args:
            path: Output file path for the template
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", newline="", encoding="utf-8") as csvfile:
            csvfile.write(self.template_text())

"""Spreadsheet export of the currently filtered view."""
import csv
import logging
from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font

from models.transaction import Transaction
from services.report_service import totals
from utils.constants import EXPORT_FILE_PREFIX, EXPORT_SHEET_TITLE
from utils.date_helpers import format_display_date
from utils.errors import ValidationError

logger = logging.getLogger(__name__)

HEADER = ["Date", "Category", "Type", "Description", "Amount"]


class ExportService:
    def __init__(self, date_format: str = "DD/MM/YYYY"):
        self._date_format = date_format

    @staticmethod
    def default_filename(period: str, extension: str = "xlsx") -> str:
        return f"{EXPORT_FILE_PREFIX}_{period}.{extension}"

    def build_rows(self, transactions: Sequence[Transaction]) -> list[list]:
        """Header, one row per transaction, a blank row, then three summary rows."""
        if not transactions:
            raise ValidationError("No transactions to export for this month.")
        rows: list[list] = [list(HEADER)]
        for tx in transactions:
            rows.append([
                format_display_date(tx.date, self._date_format),
                tx.category,
                "Expense" if tx.is_expense else "Income",
                tx.text,
                tx.magnitude,
            ])
        summary = totals(transactions)
        rows.append([])
        rows.append(["", "", "", "Total Income", summary["income"]])
        rows.append(["", "", "", "Total Expense", summary["expense"]])
        rows.append(["", "", "", "Net Balance", summary["balance"]])
        return rows

    def write_xlsx(self, path: str | Path, rows: list[list]) -> Path:
        path = Path(path)
        wb = Workbook()
        ws = wb.active
        ws.title = EXPORT_SHEET_TITLE
        for row in rows:
            ws.append(row)
        for cell in ws[1]:
            cell.font = Font(bold=True)
        for row in ws.iter_rows(min_row=2, min_col=5, max_col=5):
            for cell in row:
                cell.number_format = "#,##0.00"
        wb.save(path)
        logger.info("Exported %d rows to %s", len(rows), path)
        return path

    def write_csv(self, path: str | Path, rows: list[list]) -> Path:
        path = Path(path)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerows(rows)
        logger.info("Exported %d rows to %s", len(rows), path)
        return path

    def export(self, path: str | Path, transactions: Sequence[Transaction]) -> Path:
        """Write .csv or .xlsx depending on the file extension."""
        rows = self.build_rows(transactions)
        if Path(path).suffix.lower() == ".csv":
            return self.write_csv(path, rows)
        return self.write_xlsx(path, rows)

"""
EXCEL READER
------------
Reads a cart kept in an Excel workbook and renders it as CSV text, so the
same validation and parsing rules apply to spreadsheets and CSV files.
Row 1 = headers, rows 2+ = data; fully empty rows are skipped and each row
ends at its last non-empty cell, the same text a CSV export would contain.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

from openpyxl import load_workbook

from config import CELL_SEPARATOR

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")


def _cell_to_text(value: Any) -> str:
    """Render a cell value the way it would appear in a CSV export."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def read_excel_as_text(xlsx_path: Path | str, sheet_name: str | None = None) -> str:
    """
    Read an Excel cart into newline/comma separated text.

    Args:
        xlsx_path: Path to Excel file
        sheet_name: Optional sheet name (uses first sheet if None)

    Returns:
        Text with one line per non-empty worksheet row

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file is not a valid Excel file or the sheet does not exist
    """
    xlsx_path = Path(xlsx_path).expanduser().resolve()

    if not xlsx_path.exists():
        raise FileNotFoundError(f"Excel file not found: {xlsx_path}")

    try:
        wb = load_workbook(xlsx_path, data_only=True, read_only=True)
    except Exception as e:
        raise ValueError(f"Cannot read Excel file (is it corrupted or wrong format?): {e}") from e

    try:
        if sheet_name and sheet_name not in wb.sheetnames:
            raise ValueError(f"Sheet '{sheet_name}' not found in {xlsx_path.name}")
        ws = wb[sheet_name] if sheet_name else wb.worksheets[0]

        lines: List[str] = []
        for row in ws.iter_rows(values_only=True):
            cells = [_cell_to_text(value) for value in row]
            if not any(cells):
                continue
            used = max(i for i, cell in enumerate(cells) if cell) + 1
            # read_only sheets pad rows to the widest row
            lines.append(CELL_SEPARATOR.join(cells[:used]))
    finally:
        wb.close()

    logger.debug("Read %d rows from %s", len(lines), xlsx_path.name)
    return "\n".join(lines)

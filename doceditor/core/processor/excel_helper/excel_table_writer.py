# doceditor/core/processor/excel_helper/excel_table_writer.py
"""
Excel Table Writer - Grid to XLSX Encoding

Encodes a rectangular grid of scalar values into a single-sheet workbook
with openpyxl. Values are written as-is: strings stay strings, including
ones that look like formulas. No merge regions are recreated.
"""
import io
import logging
from typing import Any, List

from openpyxl import Workbook

logger = logging.getLogger("document-editor")

DEFAULT_SHEET_NAME = "Sheet1"


def build_workbook(rows: List[List[Any]], sheet_name: str = DEFAULT_SHEET_NAME) -> Workbook:
    """
    Build an in-memory workbook holding rows on one sheet.

    Args:
        rows: Grid of cell values, row-major
        sheet_name: Title of the single worksheet

    Returns:
        openpyxl Workbook
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    for row_idx, row in enumerate(rows, start=1):
        for col_idx, value in enumerate(row, start=1):
            if value is None:
                continue
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            # openpyxl reads a leading "=" as a formula
            if isinstance(value, str) and value.startswith("="):
                cell.data_type = "s"

    logger.debug(f"Workbook built: sheet '{sheet_name}', {len(rows)} rows")
    return wb


def write_grid_to_xlsx(rows: List[List[Any]], sheet_name: str = DEFAULT_SHEET_NAME) -> bytes:
    """
    Encode rows into .xlsx bytes.

    Args:
        rows: Grid of cell values, row-major
        sheet_name: Title of the single worksheet

    Returns:
        XLSX file content
    """
    wb = build_workbook(rows, sheet_name)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


__all__ = [
    "DEFAULT_SHEET_NAME",
    "build_workbook",
    "write_grid_to_xlsx",
]

"""
Excel Helper Module

Handles the spreadsheet side of the editor: decoding worksheets into a
SheetGrid, transcoding grids into merge-aware tables, and encoding grids
back into .xlsx bytes.

Module Structure:
- excel_sheet_grid: CellRange/MergeRegion/SheetGrid model and openpyxl decoding
- excel_table_extractor: SheetGrid -> TableData transcoding (SheetTableExtractor)
- excel_table_writer: Grid -> XLSX encoding
"""

# === Sheet Grid ===
from doceditor.core.processor.excel_helper.excel_sheet_grid import (
    CellRange,
    MergeRegion,
    SheetGrid,
    load_sheet_grid,
    sheet_to_rows,
)

# === Table Extractor ===
from doceditor.core.processor.excel_helper.excel_table_extractor import (
    SheetTableExtractorConfig,
    MergeIndex,
    SheetTableExtractor,
    convert_sheet_grid_to_table,
)

# === Table Writer ===
from doceditor.core.processor.excel_helper.excel_table_writer import (
    DEFAULT_SHEET_NAME,
    build_workbook,
    write_grid_to_xlsx,
)


__all__ = [
    # Sheet Grid
    'CellRange',
    'MergeRegion',
    'SheetGrid',
    'load_sheet_grid',
    'sheet_to_rows',
    # Table Extractor
    'SheetTableExtractorConfig',
    'MergeIndex',
    'SheetTableExtractor',
    'convert_sheet_grid_to_table',
    # Table Writer
    'DEFAULT_SHEET_NAME',
    'build_workbook',
    'write_grid_to_xlsx',
]

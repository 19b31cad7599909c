# doceditor/core/processor/__init__.py
"""
Processor - Format-specific Handler Module

Provides handlers that convert files into editor HTML and back.

Handler List:
- text_handler: Plain text (.txt)
- docx_handler: Word documents (.docx)
- excel_handler: Spreadsheets (.xlsx)

Helper Modules (subdirectories):
- docx_helper/: DOCX import/export helpers
- excel_helper/: Sheet grid, merge-aware table transcoding, XLSX writing
- html_helper/: Reading editor HTML back out (text, first table)

Usage Example:
    from doceditor.core.processor import ExcelHandler
    from doceditor.core.processor.excel_helper import convert_sheet_grid_to_table
"""

# === Base ===
from doceditor.core.processor.base_handler import BaseHandler

# === Handlers ===
from doceditor.core.processor.text_handler import TextHandler
from doceditor.core.processor.docx_handler import DOCXHandler
from doceditor.core.processor.excel_handler import ExcelHandler

# === Helper Modules ===
from doceditor.core.processor import docx_helper
from doceditor.core.processor import excel_helper
from doceditor.core.processor import html_helper

__all__ = [
    # Base
    "BaseHandler",
    # Handlers
    "TextHandler",
    "DOCXHandler",
    "ExcelHandler",
    # Helper modules
    "docx_helper",
    "excel_helper",
    "html_helper",
]

# doceditor/core/__init__.py
"""
Core - Document Conversion Core Module

Module Structure:
- document_editor: Main DocumentEditor class (content, cursor, actions)
- errors: Exception hierarchy
- processor/: Format-specific handlers
    - text_handler: .txt
    - docx_handler: .docx
    - excel_handler: .xlsx
- functions/: Table model, table formatting, text utilities

Usage Example:
    from doceditor.core import DocumentEditor
    from doceditor.core.processor import ExcelHandler
    from doceditor.core.functions import TableProcessor
"""

# === Main Class ===
from doceditor.core.document_editor import (
    ActionResult,
    CurrentFile,
    DocumentEditor,
    create_editor,
)

# === Errors ===
from doceditor.core.errors import (
    DocumentEditorError,
    UnsupportedFormatError,
    DocumentConversionError,
    NoTableToExportError,
)

# === Explicit subpackages ===
from doceditor.core import processor
from doceditor.core import functions

__all__ = [
    # Main class
    "ActionResult",
    "CurrentFile",
    "DocumentEditor",
    "create_editor",
    # Errors
    "DocumentEditorError",
    "UnsupportedFormatError",
    "DocumentConversionError",
    "NoTableToExportError",
    # Subpackages
    "processor",
    "functions",
]

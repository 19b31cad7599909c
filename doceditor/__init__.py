# doceditor/__init__.py
"""
doceditor Library

Conversion back end of a rich-text document editor. The editor content is
an HTML fragment; plain text, Word and spreadsheet files are imported into
it and exported from it.

Package Structure:
- core: Document conversion core module
    - DocumentEditor: Main editing session class
    - processor: Format handlers (TXT, DOCX, XLSX)
    - functions: Table model and formatting utilities

Usage:
    from doceditor import DocumentEditor

    editor = DocumentEditor()
    editor.open_file("sheet.xlsx")
    result = editor.save("docx", "output/")
"""

__version__ = "0.1.0"

# Expose core classes at top level
from doceditor.core import ActionResult, DocumentEditor, create_editor

# Explicit subpackages
from doceditor import core

__all__ = [
    "__version__",
    # Core classes
    "ActionResult",
    "DocumentEditor",
    "create_editor",
    # Subpackages
    "core",
]

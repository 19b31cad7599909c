# doceditor/core/functions/__init__.py
"""
Functions - Common Utility Functions Module

Provides the table data model, table formatting and text utilities shared
by the format handlers.

Module Components:
- table_extractor: TableCell/TableData model and BaseTableExtractor
- table_processor: TableData -> HTML/Markdown/Text (TableProcessor class)
- utils: Text cleaning, line splitting, cell value formatting

Usage Example:
    from doceditor.core.functions import TableProcessor, TableData
    from doceditor.core.functions import format_cell_value
"""

from doceditor.core.functions.utils import (
    split_lines,
    ensure_suffix,
    format_cell_value,
)

# Table model
from doceditor.core.functions.table_extractor import (
    TableCell,
    TableData,
    TableExtractorConfig,
    BaseTableExtractor,
)

# Table formatting
from doceditor.core.functions.table_processor import (
    TableOutputFormat,
    TableProcessorConfig,
    TableProcessor,
    DEFAULT_TABLE_ATTRIBUTES,
)

__all__ = [
    # Utils
    "split_lines",
    "ensure_suffix",
    "format_cell_value",
    # Table model
    "TableCell",
    "TableData",
    "TableExtractorConfig",
    "BaseTableExtractor",
    # Table formatting
    "TableOutputFormat",
    "TableProcessorConfig",
    "TableProcessor",
    "DEFAULT_TABLE_ATTRIBUTES",
]

"""
HTML Helper Module

Reads editor HTML content back out for export.

Module Structure:
- html_text: Block-aware text rendering of HTML (text export, cell text)
- html_table_reader: First-table extraction and markup -> grid flattening
"""

# === Text ===
from doceditor.core.processor.html_helper.html_text import (
    BLOCK_TAGS,
    parse_html,
    html_to_text,
    rendered_text,
)

# === Table Reader ===
from doceditor.core.processor.html_helper.html_table_reader import (
    HtmlTableExtractor,
    read_first_table,
    table_to_grid,
    html_table_to_grid,
    own_rows,
    cell_span,
)


__all__ = [
    # Text
    'BLOCK_TAGS',
    'parse_html',
    'html_to_text',
    'rendered_text',
    # Table Reader
    'HtmlTableExtractor',
    'read_first_table',
    'table_to_grid',
    'html_table_to_grid',
    'own_rows',
    'cell_span',
]

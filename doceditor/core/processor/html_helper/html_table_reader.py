# doceditor/core/processor/html_helper/html_table_reader.py
"""
HTML Table Reader - Markup to Grid Transcoding

Reads the first <table> of editor content back into TableData and
flattens it into a rectangular grid for spreadsheet export.

Flattening is row-major: each markup cell becomes the next grid column of
its row. Spans are NOT expanded back into filler cells, so a table that
was imported with merges does not export to its original layout.

Usage:
    from doceditor.core.processor.html_helper.html_table_reader import (
        html_table_to_grid,
    )

    rows = html_table_to_grid(editor_html)   # raises NoTableToExportError
"""
import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import Tag

from doceditor.core.errors import NoTableToExportError
from doceditor.core.functions.table_extractor import (
    BaseTableExtractor,
    TableCell,
    TableData,
)
from doceditor.core.processor.html_helper.html_text import parse_html, rendered_text

logger = logging.getLogger("document-editor")


class HtmlTableExtractor(BaseTableExtractor):
    """Extracts the first table of an HTML document as TableData."""

    def supports_format(self, format_type: str) -> bool:
        return format_type.lower() in ("html", "htm")

    def extract_table(self, content: Union[str, BeautifulSoup, Tag]) -> TableData:
        """
        Read the first table in document order.

        Args:
            content: HTML string or parsed soup

        Returns:
            TableData; zero rows when there is no table
        """
        root = parse_html(content) if isinstance(content, (str, bytes)) else content
        table_elem = root.find("table")
        if table_elem is None:
            self.logger.debug("No <table> element found")
            return TableData(source_format="html", metadata={"found": False})

        rows: List[List[TableCell]] = []
        for row_idx, tr in enumerate(own_rows(table_elem)):
            row_cells = []
            for col_idx, cell in enumerate(tr.find_all(["td", "th"], recursive=False)):
                row_cells.append(TableCell(
                    content=rendered_text(cell),
                    row_span=cell_span(cell, "rowspan"),
                    col_span=cell_span(cell, "colspan"),
                    is_header=(cell.name == "th"),
                    row_index=row_idx,
                    col_index=col_idx,
                ))
            rows.append(row_cells)

        num_cols = max((sum(c.col_span for c in row) for row in rows), default=0)
        self.logger.debug(f"HTML table read: {len(rows)} rows, {num_cols} columns")

        return TableData(
            rows=rows,
            num_rows=len(rows),
            num_cols=num_cols,
            has_header=bool(rows and rows[0] and all(c.is_header for c in rows[0])),
            source_format="html",
            metadata={"found": True},
        )


def read_first_table(markup: Union[str, BeautifulSoup, Tag]) -> Optional[TableData]:
    """
    Read the first table of the markup.

    Returns:
        TableData, or None when the markup holds no table
    """
    table = HtmlTableExtractor().extract_table(markup)
    if not table.metadata.get("found"):
        return None
    return table


def table_to_grid(table: Optional[TableData]) -> List[List[str]]:
    """
    Flatten a rendered table into a grid of cell texts.

    Args:
        table: TableData as read from markup (spans are ignored)

    Returns:
        Row-major grid; rows may differ in length

    Raises:
        NoTableToExportError: When there is no table or it has zero rows
    """
    if table is None or table.is_empty():
        raise NoTableToExportError()

    return [[cell.content for cell in row] for row in table.rows]


def html_table_to_grid(markup: Union[str, BeautifulSoup, Tag]) -> List[List[str]]:
    """Read the first table of markup and flatten it."""
    return table_to_grid(read_first_table(markup))


def own_rows(table_elem: Tag) -> List[Tag]:
    """Rows that belong to table_elem itself, not to tables nested in it."""
    return [tr for tr in table_elem.find_all("tr") if tr.find_parent("table") is table_elem]


def cell_span(cell: Tag, attr: str) -> int:
    """Positive integer value of a rowspan/colspan attribute (default 1)."""
    try:
        value = int(cell.get(attr, 1))
    except (TypeError, ValueError):
        return 1
    return value if value > 0 else 1


__all__ = [
    "HtmlTableExtractor",
    "read_first_table",
    "table_to_grid",
    "html_table_to_grid",
    "own_rows",
    "cell_span",
]

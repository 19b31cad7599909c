# doceditor/core/functions/table_extractor.py
"""
Table model shared by sheet import, DOCX import and HTML table reading.

A table is stored as the list of cells that are actually emitted: a merged
area contributes one cell (its top-left origin) carrying the span, and the
positions it covers are simply missing from their rows. Readers turn their
own structure into this model through a BaseTableExtractor subclass and the
TableProcessor renders it.

    class SheetTableExtractor(BaseTableExtractor):
        def extract_table(self, worksheet):
            ...
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger("document-editor")


@dataclass
class TableCell:
    """One emitted cell.

    Attributes:
        content: Display text, may contain newlines
        row_span: Rows covered, 1 for an unmerged cell
        col_span: Columns covered, 1 for an unmerged cell
        is_header: Render as <th> instead of <td>
        row_index: Zero-based row of the origin in the source grid
        col_index: Zero-based column of the origin in the source grid
    """
    content: str = ""
    row_span: int = 1
    col_span: int = 1
    is_header: bool = False
    row_index: int = 0
    col_index: int = 0

    @property
    def is_merged(self) -> bool:
        return self.row_span > 1 or self.col_span > 1


@dataclass
class TableData:
    """Rows of emitted cells plus a little bookkeeping.

    ``num_cols`` is the width of the source grid, so a row that lost cells
    to a merge from above is shorter than ``num_cols``. ``source_format`` is
    one of "xlsx", "docx" or "html"; readers may leave extra facts in
    ``metadata``.
    """
    rows: List[List[TableCell]] = field(default_factory=list)
    num_rows: int = 0
    num_cols: int = 0
    has_header: bool = False
    source_format: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.rows

    def has_merged_cells(self) -> bool:
        return any(cell.is_merged for row in self.rows for cell in row)


@dataclass
class TableExtractorConfig:
    """Options common to every reader."""
    treat_first_row_as_header: bool = False


class BaseTableExtractor(ABC):
    """Turns one reader-specific structure into a TableData."""

    def __init__(self, config: Optional[TableExtractorConfig] = None):
        self.config = config or TableExtractorConfig()
        self.logger = logging.getLogger("document-editor")

    @abstractmethod
    def extract_table(self, content: Any) -> TableData:
        """Build the table model from an already decoded source object.

        Args:
            content: Worksheet, python-docx table or parsed HTML, depending
                on the subclass

        Returns:
            TableData, with no rows when the source holds nothing
        """
        pass

    def supports_format(self, format_type: str) -> bool:
        """Whether ``format_type`` (e.g. "xlsx") is read by this extractor."""
        return False


__all__ = [
    "TableCell",
    "TableData",
    "TableExtractorConfig",
    "BaseTableExtractor",
]

# doceditor/core/functions/table_processor.py
"""
Renders TableData as the HTML table markup the editor holds, or as Markdown
and tab separated text for previews and plain text output.

| Format   | Used for                      | Spans             |
|----------|-------------------------------|-------------------|
| HTML     | Editor content, DOCX export   | rowspan/colspan   |
| Markdown | Sheet previews                | dropped           |
| Text     | Plain text export, debugging  | dropped           |
"""
import html
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from doceditor.core.functions.table_extractor import TableData, TableCell

logger = logging.getLogger("document-editor")

_INLINE_SPACE = re.compile(r"[ \t\f\v]+")


class TableOutputFormat(Enum):
    """Renderings offered by TableProcessor.format_table()."""
    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"


DEFAULT_TABLE_ATTRIBUTES: Dict[str, str] = {
    "border": "1",
    "style": "border-collapse: collapse; width: 100%; font-size: 14px",
}


@dataclass
class TableProcessorConfig:
    """Rendering options.

    Attributes:
        output_format: What format_table() produces
        clean_whitespace: Squeeze spaces and tabs inside each line of a cell
        preserve_merged_cells: Write rowspan/colspan on merge origins
        table_attributes: Written in order on the opening <table> tag
        pretty: One row or cell per line, indented
    """
    output_format: TableOutputFormat = TableOutputFormat.HTML
    clean_whitespace: bool = True
    preserve_merged_cells: bool = True
    table_attributes: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_TABLE_ATTRIBUTES)
    )
    pretty: bool = False


class TableProcessor:
    """
    Formats tables for the editor.

    format_table() picks a renderer from config.output_format; the three
    renderers can also be called directly.
    """

    def __init__(self, config: Optional[TableProcessorConfig] = None):
        self.config = config or TableProcessorConfig()
        self.logger = logging.getLogger("document-editor")

    def format_table(self, table: TableData) -> str:
        """
        Render ``table`` in the configured output format.

        Args:
            table: Table model built by one of the readers

        Returns:
            The rendered table, or "" for a table without rows
        """
        renderers = {
            TableOutputFormat.HTML: self.format_table_as_html,
            TableOutputFormat.MARKDOWN: self.format_table_as_markdown,
            TableOutputFormat.TEXT: self.format_table_as_text,
        }
        return renderers[self.config.output_format](table)

    def format_table_as_html(self, table: TableData) -> str:
        """
        HTML table with spans on merge origins.

        Covered positions are not in the model, so they produce no element.
        """
        if table.is_empty():
            return ""

        newline = "\n" if self.config.pretty else ""
        pad = "  " if self.config.pretty else ""

        parts = [f"<table{self._table_attr_str()}>"]
        for row in table.rows:
            parts.append(f"{pad}<tr>")
            parts.extend(f"{pad * 2}{self._format_html_cell(cell)}" for cell in row)
            parts.append(f"{pad}</tr>")
        parts.append("</table>")

        return newline.join(parts)

    def format_table_as_markdown(self, table: TableData) -> str:
        """Pipe table; spans are lost and short rows stay short."""
        if table.is_empty():
            return ""

        out = []
        for index, row in enumerate(table.rows):
            texts = [self._clean_cell_content(cell.content).replace("|", "\\|") for cell in row]
            out.append("| " + " | ".join(texts) + " |")
            if index == 0 and table.has_header:
                out.append("| " + " | ".join("---" for _ in row) + " |")

        return "\n".join(out)

    def format_table_as_text(self, table: TableData) -> str:
        """Tab between cells, newline between rows."""
        if table.is_empty():
            return ""

        return "\n".join(
            "\t".join(self._clean_cell_content(cell.content) for cell in row)
            for row in table.rows
        )

    def _format_html_cell(self, cell: TableCell) -> str:
        tag = "th" if cell.is_header else "td"
        attrs = ""
        if self.config.preserve_merged_cells:
            if cell.row_span > 1:
                attrs += f' rowspan="{cell.row_span}"'
            if cell.col_span > 1:
                attrs += f' colspan="{cell.col_span}"'

        text = html.escape(self._clean_cell_content(cell.content), quote=False)
        return f"<{tag}{attrs}>{text.replace(chr(10), '<br>')}</{tag}>"

    def _table_attr_str(self) -> str:
        return "".join(
            f' {name}="{html.escape(value)}"'
            for name, value in (self.config.table_attributes or {}).items()
        )

    def _clean_cell_content(self, content: str) -> str:
        """Squeeze inline whitespace per line; newlines survive as <br>."""
        if not content:
            return ""
        if not self.config.clean_whitespace:
            return content
        return "\n".join(_INLINE_SPACE.sub(" ", line).strip() for line in content.splitlines()).strip()


__all__ = [
    "TableOutputFormat",
    "TableProcessorConfig",
    "TableProcessor",
    "DEFAULT_TABLE_ATTRIBUTES",
]

# doceditor/core/processor/docx_helper/docx_writer.py
"""
HTML to DOCX Writer

Builds a python-docx Document from editor HTML.

Supported markup:
- h1-h6 -> "Heading N" paragraphs
- p, div, blockquote, pre -> paragraphs
- ul/ol (nested) -> "List Bullet"/"List Number" paragraphs
- strong/b, em/i, u, s/del, mark, sup, sub, code -> run formatting
- br -> line break
- table -> Word table, rowspan/colspan merged
- img with a base64 data URI -> inline picture

Anything else is written as its text.
"""
import io
import logging
import re
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from bs4.element import NavigableString, PreformattedString, Tag
from docx import Document as new_document
from docx.document import Document
from docx.enum.text import WD_COLOR_INDEX
from docx.image.exceptions import UnrecognizedImageError
from docx.shared import Emu

from doceditor.core.processor.docx_helper.docx_constants import (
    BULLET_STYLES,
    MONOSPACE_FONT,
    NUMBER_STYLES,
    QUOTE_STYLE,
    TABLE_STYLE,
)
from doceditor.core.processor.docx_helper.docx_image import decode_data_uri
from doceditor.core.processor.html_helper.html_table_reader import cell_span, own_rows
from doceditor.core.processor.html_helper.html_text import BLOCK_TAGS, SKIP_TAGS, parse_html

logger = logging.getLogger("document-editor")

_WHITESPACE_RE = re.compile(r"\s+")

# EMU per CSS pixel (96 dpi)
EMU_PER_PX = 9525

HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}

PARAGRAPH_TAGS = frozenset(["p", "dt", "dd", "figcaption", "address"])

FORMAT_TAGS = {
    "strong": "bold",
    "b": "bold",
    "em": "italic",
    "i": "italic",
    "u": "underline",
    "ins": "underline",
    "s": "strike",
    "strike": "strike",
    "del": "strike",
    "mark": "highlight",
    "sup": "superscript",
    "sub": "subscript",
    "code": "monospace",
    "kbd": "monospace",
    "samp": "monospace",
}


@dataclass
class DocxExportConfig:
    """Configuration for DOCX export.

    Attributes:
        table_style: Style applied to tables (None for the template default)
        bullet_styles: Paragraph styles for unordered list levels
        number_styles: Paragraph styles for ordered list levels
        quote_style: Paragraph style for blockquotes
        max_image_width: Widest picture in EMU (None = usable page width)
    """
    table_style: Optional[str] = TABLE_STYLE
    bullet_styles: List[str] = field(default_factory=lambda: list(BULLET_STYLES))
    number_styles: List[str] = field(default_factory=lambda: list(NUMBER_STYLES))
    quote_style: Optional[str] = QUOTE_STYLE
    max_image_width: Optional[int] = None


@dataclass(frozen=True)
class RunFormat:
    """Character formatting inherited from enclosing inline elements."""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False
    highlight: bool = False
    superscript: bool = False
    subscript: bool = False
    monospace: bool = False
    preserve_space: bool = False


class HtmlToDocxWriter:
    """
    Converts editor HTML into a python-docx Document.

    Usage:
        writer = HtmlToDocxWriter()
        data = writer.to_bytes("<h1>Title</h1><p>Body</p>")
    """

    def __init__(self, config: Optional[DocxExportConfig] = None):
        self.config = config or DocxExportConfig()
        self.logger = logging.getLogger("document-editor")
        self._doc: Optional[Document] = None
        self._image_count = 0

    def convert(self, markup: str) -> Document:
        """
        Build a document from HTML.

        Args:
            markup: HTML fragment or full HTML document

        Returns:
            python-docx Document
        """
        soup = parse_html(markup)
        root = soup.body or soup

        self._doc = new_document()
        self._image_count = 0
        self._write_blocks(self._doc, list(root.children))

        self.logger.debug(
            f"DOCX document built: {len(self._doc.paragraphs)} paragraphs, "
            f"{len(self._doc.tables)} tables, {self._image_count} images"
        )
        return self._doc

    def to_bytes(self, markup: str) -> bytes:
        """Build a document from HTML and serialize it."""
        doc = self.convert(markup)
        stream = io.BytesIO()
        doc.save(stream)
        return stream.getvalue()

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _write_blocks(self, container, nodes, list_level: int = 0) -> None:
        """Write a sequence of nodes; loose inline content becomes a paragraph."""
        pending = []
        for node in nodes:
            if _is_block(node):
                self._flush_inline(container, pending)
                pending = []
                self._write_block(container, node, list_level)
            else:
                pending.append(node)
        self._flush_inline(container, pending)

    def _flush_inline(self, container, nodes) -> None:
        if not _has_content(nodes):
            return
        paragraph = self._new_paragraph(container)
        self._write_inline(paragraph, _trim_trailing_breaks(nodes), RunFormat())

    def _write_block(self, container, node: Tag, list_level: int) -> None:
        name = node.name

        if name in HEADING_TAGS:
            self._write_paragraph_like(container, node, f"Heading {HEADING_TAGS[name]}")
        elif name in PARAGRAPH_TAGS:
            self._write_paragraph_like(container, node)
        elif name in ("ul", "ol"):
            self._write_list(container, node, list_level)
        elif name == "li":
            self._write_paragraph_like(container, node, self._list_style(False, list_level), list_level)
        elif name == "table":
            self._write_table(container, node)
        elif name == "blockquote":
            self._write_paragraph_like(container, node, self.config.quote_style)
        elif name == "pre":
            self._write_paragraph_like(
                container, node, fmt=RunFormat(monospace=True, preserve_space=True)
            )
        elif name == "hr":
            self._new_paragraph(container)
        else:
            self._write_blocks(container, list(node.children), list_level)

    def _write_paragraph_like(
        self,
        container,
        node: Tag,
        style: Optional[str] = None,
        list_level: int = 0,
        fmt: Optional[RunFormat] = None
    ) -> None:
        """
        Write node's inline content into one paragraph.

        Block children (e.g. a nested list inside <li>) are written after
        it; inline content following them starts a plain paragraph.
        """
        fmt = fmt or RunFormat()
        paragraph = self._new_paragraph(container, style)
        inline = []

        for child in node.children:
            if not _is_block(child):
                inline.append(child)
                continue
            if paragraph is not None:
                self._write_inline(paragraph, _trim_trailing_breaks(inline), fmt)
            elif _has_content(inline):
                self._write_inline(self._new_paragraph(container), _trim_trailing_breaks(inline), fmt)
            inline = []
            paragraph = None
            if child.name in ("ul", "ol"):
                self._write_list(container, child, list_level + 1)
            else:
                self._write_block(container, child, list_level)

        if paragraph is not None:
            self._write_inline(paragraph, _trim_trailing_breaks(inline), fmt)
        elif _has_content(inline):
            self._write_inline(self._new_paragraph(container), _trim_trailing_breaks(inline), fmt)

    def _write_list(self, container, node: Tag, list_level: int) -> None:
        ordered = node.name == "ol"
        for child in node.children:
            if not isinstance(child, Tag):
                continue
            if child.name == "li":
                self._write_paragraph_like(
                    container, child, self._list_style(ordered, list_level), list_level
                )
            elif child.name in ("ul", "ol"):
                self._write_list(container, child, list_level + 1)

    def _list_style(self, ordered: bool, list_level: int) -> Optional[str]:
        styles = self.config.number_styles if ordered else self.config.bullet_styles
        if not styles:
            return None
        return styles[min(list_level, len(styles) - 1)]

    def _new_paragraph(self, container, style: Optional[str] = None):
        paragraph = container.add_paragraph()
        if style:
            self._apply_style(paragraph, style)
        return paragraph

    def _apply_style(self, target, style: str) -> None:
        try:
            target.style = style
        except KeyError:
            self.logger.warning(f"Style '{style}' is not defined in the document template")

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _write_table(self, container, node: Tag) -> None:
        rows = own_rows(node)
        placements = place_table_cells(rows)
        if not placements:
            return

        num_rows = len(rows)
        num_cols = max(col + colspan for _, col, _, colspan, _ in placements)

        table = container.add_table(num_rows, num_cols)
        if self.config.table_style:
            self._apply_style(table, self.config.table_style)

        for row, col, rowspan, colspan, cell_tag in placements:
            cell = table.cell(row, col)
            if rowspan > 1 or colspan > 1:
                cell = cell.merge(table.cell(row + rowspan - 1, col + colspan - 1))
            self._write_cell(cell, cell_tag)

    def _write_cell(self, cell, cell_tag: Tag) -> None:
        first = cell.paragraphs[0]
        self._write_blocks(cell, list(cell_tag.children))

        # the template paragraph of the cell stays only when nothing else was written
        if len(cell.paragraphs) > 1 and not first.text and not first.runs:
            first._element.getparent().remove(first._element)

        if cell_tag.name == "th":
            for paragraph in cell.paragraphs:
                for run in paragraph.runs:
                    run.bold = True

    # ------------------------------------------------------------------
    # Inline content
    # ------------------------------------------------------------------

    def _write_inline(self, paragraph, nodes, fmt: RunFormat) -> None:
        for node in nodes:
            if isinstance(node, PreformattedString):
                continue
            if isinstance(node, NavigableString):
                self._write_text(paragraph, str(node), fmt)
                continue
            if not isinstance(node, Tag) or node.name in SKIP_TAGS:
                continue

            if node.name == "br":
                paragraph.add_run().add_break()
            elif node.name == "img":
                self._write_image(paragraph, node)
            elif node.name in FORMAT_TAGS:
                self._write_inline(paragraph, node.children, replace(fmt, **{FORMAT_TAGS[node.name]: True}))
            else:
                self._write_inline(paragraph, node.children, _style_format(node, fmt))

    def _write_text(self, paragraph, text: str, fmt: RunFormat) -> None:
        if not fmt.preserve_space:
            text = _WHITESPACE_RE.sub(" ", text)
            current = paragraph.text
            if not current or current.endswith((" ", "\n")):
                text = text.lstrip(" ")
        if not text:
            return

        run = paragraph.add_run(text)
        if fmt.bold:
            run.bold = True
        if fmt.italic:
            run.italic = True
        if fmt.underline:
            run.underline = True
        if fmt.strike:
            run.font.strike = True
        if fmt.highlight:
            run.font.highlight_color = WD_COLOR_INDEX.YELLOW
        if fmt.superscript:
            run.font.superscript = True
        elif fmt.subscript:
            run.font.subscript = True
        if fmt.monospace:
            run.font.name = MONOSPACE_FONT

    def _write_image(self, paragraph, node: Tag) -> None:
        decoded = decode_data_uri(node.get("src"))
        if decoded is None:
            self.logger.debug(f"Skipping image without data URI: {str(node.get('src'))[:60]}")
            return

        content_type, data = decoded
        try:
            shape = paragraph.add_run().add_picture(io.BytesIO(data))
        except UnrecognizedImageError:
            self.logger.warning(f"Skipping image of unrecognized type {content_type}")
            return

        width, height = shape.width, shape.height
        requested = _px_to_emu(node.get("width"))
        if requested and width:
            height = int(height * requested / width)
            width = requested

        max_width = self._max_image_width()
        if max_width and width > max_width:
            height = int(height * max_width / width)
            width = max_width

        shape.width, shape.height = Emu(width), Emu(height)
        self._image_count += 1

    def _max_image_width(self) -> Optional[int]:
        if self.config.max_image_width:
            return self.config.max_image_width
        section = self._doc.sections[0]
        if section.page_width is None:
            return None
        return section.page_width - (section.left_margin or 0) - (section.right_margin or 0)


def place_table_cells(rows: List[Tag]) -> List[Tuple[int, int, int, int, Tag]]:
    """
    Lay the cells of HTML rows out on a grid.

    Each cell takes the next free column of its row. Spans are clipped at
    the last row and never overlap a position that is already taken.

    Args:
        rows: <tr> elements in order

    Returns:
        List of (row, col, rowspan, colspan, cell) tuples
    """
    placements = []
    occupied = set()
    num_rows = len(rows)

    for row, tr in enumerate(rows):
        col = 0
        for cell in tr.find_all(["td", "th"], recursive=False):
            while (row, col) in occupied:
                col += 1

            rowspan = min(cell_span(cell, "rowspan"), num_rows - row)
            colspan = cell_span(cell, "colspan")
            while colspan > 1 and (row, col + colspan - 1) in occupied:
                colspan -= 1
            while rowspan > 1 and any(
                (row + rowspan - 1, c) in occupied for c in range(col, col + colspan)
            ):
                rowspan -= 1

            for r in range(row, row + rowspan):
                for c in range(col, col + colspan):
                    occupied.add((r, c))
            placements.append((row, col, rowspan, colspan, cell))
            col += colspan

    return placements


def _is_block(node) -> bool:
    return isinstance(node, Tag) and node.name in BLOCK_TAGS


def _has_content(nodes) -> bool:
    for node in nodes:
        if isinstance(node, PreformattedString):
            continue
        if isinstance(node, NavigableString):
            if node.strip():
                return True
        elif isinstance(node, Tag) and node.name not in SKIP_TAGS:
            return True
    return False


def _trim_trailing_breaks(nodes) -> list:
    """Drop <br> elements that end a block; they do not add a line."""
    nodes = list(nodes)
    while nodes:
        last = nodes[-1]
        if isinstance(last, NavigableString) and not last.strip():
            nodes.pop()
        elif isinstance(last, Tag) and last.name == "br":
            nodes.pop()
        else:
            break
    return nodes


def _style_format(node: Tag, fmt: RunFormat) -> RunFormat:
    """Apply the inline CSS of a span-like element."""
    style = (node.get("style") or "").replace(" ", "").lower()
    if not style:
        return fmt
    if "font-weight:bold" in style or "font-weight:700" in style:
        fmt = replace(fmt, bold=True)
    if "font-style:italic" in style:
        fmt = replace(fmt, italic=True)
    if "text-decoration:underline" in style:
        fmt = replace(fmt, underline=True)
    if "text-decoration:line-through" in style:
        fmt = replace(fmt, strike=True)
    return fmt


def _px_to_emu(value) -> Optional[int]:
    if not value:
        return None
    match = re.match(r"^\s*(\d+(?:\.\d+)?)\s*(px)?\s*$", str(value))
    if not match:
        return None
    return int(float(match.group(1)) * EMU_PER_PX)


__all__ = [
    'DocxExportConfig',
    'RunFormat',
    'HtmlToDocxWriter',
    'place_table_cells',
]

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from docx.enum.style import WD_STYLE_TYPE

from doceditor import DocumentEditor
from doceditor.core.processor.excel_helper import CellRange, SheetGrid
from tests.helpers import docx_bytes, ensure_style, xlsx_bytes


@pytest.fixture
def editor() -> DocumentEditor:
    return DocumentEditor()


@pytest.fixture
def merge_example_grid() -> SheetGrid:
    """2x2 sheet A B / C D with A merged down over C."""
    return SheetGrid.from_rows(
        [["A", "B"], ["C", "D"]],
        merges=[CellRange(start_row=0, end_row=1, start_col=0, end_col=0)],
    )


@pytest.fixture
def make_xlsx(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, rows, merges=()) -> Path:
        path = tmp_path / name
        path.write_bytes(xlsx_bytes(rows, merges))
        return path

    return _make


@pytest.fixture
def make_docx(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, build: Callable) -> Path:
        path = tmp_path / name
        path.write_bytes(docx_bytes(build))
        return path

    return _make


@pytest.fixture
def styled_docx() -> bytes:
    """Document using the mapped paragraph and run styles."""

    def build(doc) -> None:
        ensure_style(doc, "List Paragraph", WD_STYLE_TYPE.PARAGRAPH)
        ensure_style(doc, "Strong", WD_STYLE_TYPE.CHARACTER)

        doc.add_heading("Title", level=1)
        doc.add_heading("Section", level=2)
        doc.add_heading("Detail", level=3)

        p = doc.add_paragraph()
        p.add_run("bold").bold = True
        p.add_run(" and ")
        p.add_run("italic").italic = True

        doc.add_paragraph("first item", style="List Paragraph")
        doc.add_paragraph("second item", style="List Paragraph")

        p = doc.add_paragraph()
        p.add_run("strong style", style="Strong")

        doc.add_paragraph()

    return docx_bytes(build)

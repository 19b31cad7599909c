from __future__ import annotations

import base64
import io
from typing import Callable, Iterable

from docx import Document
from openpyxl import Workbook, load_workbook

# 1x1 transparent PNG
PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
PNG_DATA_URI = "data:image/png;base64," + base64.b64encode(PNG_1X1).decode("ascii")


def xlsx_bytes(rows: Iterable[Iterable], merges: Iterable[str] = (), title: str = "Sheet1") -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = title
    for row in rows:
        ws.append(list(row))
    for ref in merges:
        ws.merge_cells(ref)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def xlsx_values(data: bytes) -> tuple[str, list[list]]:
    wb = load_workbook(io.BytesIO(data))
    ws = wb.active
    return ws.title, [list(row) for row in ws.iter_rows(values_only=True)]


def docx_bytes(build: Callable) -> bytes:
    doc = Document()
    build(doc)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def open_docx(data: bytes):
    return Document(io.BytesIO(data))


def ensure_style(doc, name: str, style_type) -> None:
    try:
        doc.styles[name]
    except KeyError:
        doc.styles.add_style(name, style_type)

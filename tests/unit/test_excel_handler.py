from __future__ import annotations

import io
import logging

import pytest
from openpyxl import Workbook, load_workbook

from doceditor.core.errors import DocumentConversionError, NoTableToExportError
from doceditor.core.functions.table_processor import TableProcessorConfig
from doceditor.core.processor.excel_handler import ExcelHandler
from doceditor.core.processor.excel_helper import SheetTableExtractorConfig
from tests.helpers import xlsx_bytes, xlsx_values

MERGE_EXAMPLE_HTML = (
    '<table border="1" style="border-collapse: collapse; width: 100%; font-size: 14px">'
    '<tr><td rowspan="2">A</td><td>B</td></tr>'
    "<tr><td>D</td></tr>"
    "</table>"
)


def current_file(data: bytes, name: str = "sheet.xlsx") -> dict:
    return {"file_path": name, "file_name": name, "file_extension": ".xlsx", "file_data": data}


def test_import_merged_sheet() -> None:
    data = xlsx_bytes([["A", "B"], ["C", "D"]], merges=["A1:A2"])

    assert ExcelHandler().import_content(current_file(data)) == MERGE_EXAMPLE_HTML


def test_import_logs_merge_count(caplog) -> None:
    data = xlsx_bytes([["A", "B"], ["C", "D"]], merges=["A1:A2"])

    with caplog.at_level(logging.INFO, logger="document-editor"):
        ExcelHandler().import_content(current_file(data))

    assert any(
        "XLSX import completed: 2 rows, 2 columns, 1 merges" in r.message for r in caplog.records
    )


def test_import_formats_values() -> None:
    data = xlsx_bytes([[1, 2.5, True], ["x & y", None, "z"]])
    handler = ExcelHandler(config={"table_processor_config": TableProcessorConfig(table_attributes={})})

    html = handler.import_content(current_file(data))

    assert html == (
        "<table><tr><td>1</td><td>2.5</td><td>TRUE</td></tr>"
        "<tr><td>x &amp; y</td><td></td><td>z</td></tr></table>"
    )


def test_import_header_row_from_config() -> None:
    data = xlsx_bytes([["Name", "Qty"], ["pen", 3]])
    handler = ExcelHandler(config={
        "sheet_extractor_config": SheetTableExtractorConfig(treat_first_row_as_header=True),
        "table_processor_config": TableProcessorConfig(table_attributes={}),
    })

    html = handler.import_content(current_file(data))

    assert html.startswith("<table><tr><th>Name</th><th>Qty</th></tr>")


def test_import_empty_sheet_gives_no_markup() -> None:
    assert ExcelHandler().import_content(current_file(xlsx_bytes([]))) == ""


def test_only_the_first_sheet_is_read() -> None:
    wb = Workbook()
    wb.active["A1"] = "first"
    wb.create_sheet("Second")["A1"] = "second"
    buffer = io.BytesIO()
    wb.save(buffer)

    table = ExcelHandler().extract_table(current_file(buffer.getvalue()))

    assert [[c.content for c in row] for row in table.rows] == [["first"]]


@pytest.mark.parametrize("data", [b"", b"not a workbook"])
def test_import_invalid_bytes_raise(data: bytes) -> None:
    with pytest.raises(DocumentConversionError):
        ExcelHandler().import_content(current_file(data))


def test_preview_rows_ignore_merges() -> None:
    data = xlsx_bytes([["A", "B"], ["C", "D"]], merges=["A1:A2"])

    assert ExcelHandler().preview_rows(current_file(data)) == [["A", "B"], ["", "D"]]


def test_export_writes_first_table_row_major() -> None:
    data = ExcelHandler().export_content(
        "<p>intro</p>" + MERGE_EXAMPLE_HTML + "<table><tr><td>ignored</td></tr></table>"
    )

    title, rows = xlsx_values(data)
    assert title == "Sheet1"
    assert rows == [["A", "B"], ["D", None]]


def test_export_keeps_cell_text_as_strings() -> None:
    data = ExcelHandler().export_content("<table><tr><td>42</td><td>a<br>b</td></tr></table>")

    _, rows = xlsx_values(data)
    assert rows == [["42", "a\nb"]]


def test_export_keeps_leading_equals_as_text() -> None:
    data = ExcelHandler().export_content("<table><tr><td>=1+2</td><td>plain</td></tr></table>")

    ws = load_workbook(io.BytesIO(data)).active
    assert ws["A1"].data_type == "s"
    assert ws["A1"].value == "=1+2"
    assert ExcelHandler().preview_rows(current_file(data)) == [["=1+2", "plain"]]


def test_export_sheet_name() -> None:
    data = ExcelHandler().export_content("<table><tr><td>x</td></tr></table>", sheet_name="Data")

    assert xlsx_values(data)[0] == "Data"


def test_export_without_table_raises() -> None:
    with pytest.raises(NoTableToExportError):
        ExcelHandler().export_content("<p>no table</p>")


def test_output_file_name() -> None:
    assert ExcelHandler().output_file_name() == "table.xlsx"
    assert ExcelHandler().output_file_name("budget") == "budget.xlsx"

from __future__ import annotations

import pytest

from doceditor.core.errors import NoTableToExportError
from doceditor.core.functions.table_processor import TableProcessor
from doceditor.core.processor.excel_helper import convert_sheet_grid_to_table
from doceditor.core.processor.html_helper import (
    HtmlTableExtractor,
    cell_span,
    html_table_to_grid,
    parse_html,
    read_first_table,
    table_to_grid,
)


def test_first_table_in_document_order() -> None:
    markup = (
        "<p>intro</p>"
        "<table><tr><td>first</td></tr></table>"
        "<table><tr><td>second</td></tr></table>"
    )

    assert html_table_to_grid(markup) == [["first"]]


def test_grid_rows_keep_their_own_lengths() -> None:
    markup = "<table><tr><td>a</td><td>b</td><td>c</td></tr><tr><td>d</td></tr></table>"

    assert html_table_to_grid(markup) == [["a", "b", "c"], ["d"]]


@pytest.mark.parametrize(
    "markup",
    [
        "<p>no tables here</p>",
        "",
        "<table></table>",
    ],
)
def test_missing_or_empty_table_raises(markup: str) -> None:
    with pytest.raises(NoTableToExportError) as excinfo:
        html_table_to_grid(markup)

    assert str(excinfo.value) == "No tables to save."
    assert excinfo.value.kind == "no_table_to_export"


def test_none_table_raises() -> None:
    with pytest.raises(NoTableToExportError):
        table_to_grid(None)


def test_merged_import_does_not_restore_layout(merge_example_grid) -> None:
    markup = TableProcessor().format_table_as_html(convert_sheet_grid_to_table(merge_example_grid))

    assert html_table_to_grid(markup) == [["A", "B"], ["D"]]


def test_nested_table_rows_stay_with_inner_table() -> None:
    markup = (
        "<table>"
        "<tr><td>outer<table><tr><td>inner</td></tr></table></td><td>x</td></tr>"
        "<tr><td>y</td></tr>"
        "</table>"
    )

    grid = html_table_to_grid(markup)

    assert len(grid) == 2
    assert grid[0] == ["outer\ninner", "x"]
    assert grid[1] == ["y"]


def test_th_cells_and_line_breaks() -> None:
    markup = (
        "<table><thead><tr><th>Name</th><th>Notes</th></tr></thead>"
        "<tbody><tr><td>Ann</td><td>line one<br>line  two</td></tr></tbody></table>"
    )

    table = read_first_table(markup)

    assert table is not None
    assert table.has_header
    assert table.rows[0][0].is_header
    assert table_to_grid(table) == [["Name", "Notes"], ["Ann", "line one\nline two"]]


def test_extractor_reads_spans_and_width() -> None:
    markup = '<table><tr><td rowspan="2" colspan="2">m</td><td>r</td></tr></table>'

    table = HtmlTableExtractor().extract_table(markup)

    cell = table.rows[0][0]
    assert (cell.row_span, cell.col_span) == (2, 2)
    assert table.num_cols == 3
    assert read_first_table("<p>x</p>") is None


@pytest.mark.parametrize(
    "value, expected",
    [("3", 3), ("0", 1), ("-2", 1), ("wide", 1), (None, 1)],
)
def test_cell_span_parsing(value, expected: int) -> None:
    attrs = "" if value is None else f' colspan="{value}"'
    cell = parse_html(f"<table><tr><td{attrs}>x</td></tr></table>").find("td")

    assert cell_span(cell, "colspan") == expected

from __future__ import annotations

import logging

from doceditor.core.processor.excel_helper import (
    CellRange,
    MergeIndex,
    SheetGrid,
    SheetTableExtractor,
    SheetTableExtractorConfig,
    convert_sheet_grid_to_table,
)


def cell_tuples(table) -> list[list[tuple[str, int, int]]]:
    return [[(c.content, c.row_span, c.col_span) for c in row] for row in table.rows]


def test_no_merges_reproduces_the_grid() -> None:
    grid = SheetGrid.from_rows([["a", "b", None], [1, None, 2.5]])

    table = convert_sheet_grid_to_table(grid)

    assert table.num_rows == 2
    assert table.num_cols == 3
    assert cell_tuples(table) == [
        [("a", 1, 1), ("b", 1, 1), ("", 1, 1)],
        [("1", 1, 1), ("", 1, 1), ("2.5", 1, 1)],
    ]


def test_vertical_merge_skips_covered_cell(merge_example_grid) -> None:
    table = convert_sheet_grid_to_table(merge_example_grid)

    assert cell_tuples(table) == [
        [("A", 2, 1), ("B", 1, 1)],
        [("D", 1, 1)],
    ]


def test_absent_used_range_gives_empty_table() -> None:
    grid = SheetGrid(merges=[CellRange(0, 3, 0, 3)])

    table = convert_sheet_grid_to_table(grid)

    assert table.rows == []
    assert table.num_rows == 0
    assert table.is_empty()


def test_block_merge_sets_both_spans() -> None:
    grid = SheetGrid.from_rows(
        [["x", None, "y"], [None, None, "z"]],
        merges=[CellRange(0, 1, 0, 1)],
    )

    table = convert_sheet_grid_to_table(grid)

    assert cell_tuples(table) == [[("x", 2, 2), ("y", 1, 1)], [("z", 1, 1)]]
    assert table.has_merged_cells()


def test_single_cell_merge_is_a_plain_cell() -> None:
    grid = SheetGrid.from_rows([["a", "b"]], merges=[CellRange(0, 0, 1, 1)])

    table = convert_sheet_grid_to_table(grid)

    assert cell_tuples(table) == [[("a", 1, 1), ("b", 1, 1)]]
    assert not table.has_merged_cells()


def test_fully_covered_row_is_still_emitted() -> None:
    grid = SheetGrid.from_rows([["tall"], [None], ["after"]], merges=[CellRange(0, 1, 0, 0)])

    table = convert_sheet_grid_to_table(grid)

    assert cell_tuples(table) == [[("tall", 2, 1)], [], [("after", 1, 1)]]


def test_overlapping_merges_resolve_first_match() -> None:
    grid = SheetGrid.from_rows(
        [["o", "p", "q"], ["r", "s", "t"]],
        merges=[CellRange(0, 1, 0, 1), CellRange(0, 0, 0, 2)],
    )

    table = convert_sheet_grid_to_table(grid)

    assert cell_tuples(table) == [[("o", 2, 2)], [("t", 1, 1)]]


def test_merge_index_matches_linear_scan() -> None:
    merges = [CellRange(0, 1, 0, 1), CellRange(1, 2, 1, 2), CellRange(0, 0, 0, 2)]
    index = MergeIndex(merges)

    for row in range(4):
        for col in range(4):
            covered = any(m.contains(row, col) and m.origin != (row, col) for m in merges)
            first_origin = next((m for m in merges if m.origin == (row, col)), None)
            assert index.is_covered(row, col) is covered
            assert index.origin_at(row, col) == first_origin


def test_malformed_merges_are_ignored_with_warning(caplog) -> None:
    grid = SheetGrid.from_rows(
        [["a", "b"], ["c", "d"]],
        merges=[CellRange(0, 5, 0, 0), CellRange(1, 0, 1, 1)],
    )

    with caplog.at_level(logging.WARNING, logger="document-editor"):
        table = convert_sheet_grid_to_table(grid)

    assert cell_tuples(table) == [
        [("a", 1, 1), ("b", 1, 1)],
        [("c", 1, 1), ("d", 1, 1)],
    ]
    assert sum("Ignoring malformed merge region" in r.message for r in caplog.records) == 2


def test_out_of_range_merge_kept_when_not_ignoring() -> None:
    grid = SheetGrid.from_rows([["a", "b"], ["c", "d"]], merges=[CellRange(0, 5, 0, 0)])
    config = SheetTableExtractorConfig(ignore_malformed_merges=False)

    table = SheetTableExtractor(config).extract_table(grid)

    assert cell_tuples(table) == [[("a", 6, 1), ("b", 1, 1)], [("d", 1, 1)]]


def test_offset_used_range_indexes_relative_to_origin() -> None:
    grid = SheetGrid(
        used_range=CellRange(2, 3, 1, 2),
        cells={(2, 1): "top", (3, 2): "bottom"},
        sheet_name="Offset",
    )

    table = convert_sheet_grid_to_table(grid)

    assert cell_tuples(table) == [[("top", 1, 1), ("", 1, 1)], [("", 1, 1), ("bottom", 1, 1)]]
    assert table.rows[1][1].row_index == 1
    assert table.rows[1][1].col_index == 1
    assert table.metadata["sheet_name"] == "Offset"


def test_first_row_header_option() -> None:
    grid = SheetGrid.from_rows([["h1", "h2"], ["v1", "v2"]])
    config = SheetTableExtractorConfig(treat_first_row_as_header=True)

    table = SheetTableExtractor(config).extract_table(grid)

    assert table.has_header
    assert [c.is_header for c in table.rows[0]] == [True, True]
    assert [c.is_header for c in table.rows[1]] == [False, False]

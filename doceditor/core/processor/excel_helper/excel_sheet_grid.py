# doceditor/core/processor/excel_helper/excel_sheet_grid.py
"""
Excel Sheet Grid - Decoded Worksheet Model

Decodes an openpyxl Worksheet into a SheetGrid: the used range, a cell
value map and the list of merge regions. All coordinates are zero-based
(openpyxl is one-based; conversion happens only in this module).

Usage:
    from openpyxl import load_workbook
    from doceditor.core.processor.excel_helper.excel_sheet_grid import load_sheet_grid

    wb = load_workbook(stream, data_only=True)
    grid = load_sheet_grid(wb[wb.sheetnames[0]])
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from openpyxl.utils.cell import range_boundaries

from doceditor.core.functions.utils import format_cell_value

logger = logging.getLogger("document-editor")

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class CellRange:
    """Axis-aligned rectangle of cells with inclusive, zero-based bounds."""
    start_row: int
    end_row: int
    start_col: int
    end_col: int

    @classmethod
    def from_ref(cls, ref: str) -> "CellRange":
        """Build a range from an A1-style reference such as "B2:D4"."""
        min_col, min_row, max_col, max_row = range_boundaries(ref)
        return cls(
            start_row=min_row - 1,
            end_row=max_row - 1,
            start_col=min_col - 1,
            end_col=max_col - 1,
        )

    @property
    def origin(self) -> Coordinate:
        return (self.start_row, self.start_col)

    def is_valid(self) -> bool:
        return (
            0 <= self.start_row <= self.end_row
            and 0 <= self.start_col <= self.end_col
        )

    def contains(self, row: int, col: int) -> bool:
        return (
            self.start_row <= row <= self.end_row
            and self.start_col <= col <= self.end_col
        )

    def within(self, other: "CellRange") -> bool:
        """True when this range lies completely inside other."""
        return (
            other.start_row <= self.start_row
            and self.end_row <= other.end_row
            and other.start_col <= self.start_col
            and self.end_col <= other.end_col
        )

    def row_count(self) -> int:
        return self.end_row - self.start_row + 1

    def col_count(self) -> int:
        return self.end_col - self.start_col + 1

    def coordinates(self):
        """Yield every (row, col) inside the range in row-major order."""
        for row in range(self.start_row, self.end_row + 1):
            for col in range(self.start_col, self.end_col + 1):
                yield (row, col)


# A merge region is a plain range; its top-left cell is the origin.
MergeRegion = CellRange


@dataclass
class SheetGrid:
    """Decoded spreadsheet sheet.

    Attributes:
        used_range: Region holding every non-empty cell, None for an empty sheet
        cells: (row, col) -> raw cell value
        merges: Merge regions in the order the sheet declares them
        sheet_name: Title of the source worksheet
    """
    used_range: Optional[CellRange] = None
    cells: Dict[Coordinate, Any] = field(default_factory=dict)
    merges: List[MergeRegion] = field(default_factory=list)
    sheet_name: str = ""

    def cell_value(self, row: int, col: int) -> Any:
        """Raw value at (row, col); None when empty or outside the used range."""
        if self.used_range is None or not self.used_range.contains(row, col):
            return None
        return self.cells.get((row, col))

    @classmethod
    def from_rows(
        cls,
        rows: List[List[Any]],
        merges: Optional[List[MergeRegion]] = None,
        sheet_name: str = "",
    ) -> "SheetGrid":
        """Build a grid anchored at (0, 0) from an array of rows."""
        cells: Dict[Coordinate, Any] = {}
        width = 0
        for r, row in enumerate(rows):
            width = max(width, len(row))
            for c, value in enumerate(row):
                if value is not None:
                    cells[(r, c)] = value

        used_range = None
        if rows and width:
            used_range = CellRange(0, len(rows) - 1, 0, width - 1)

        return cls(
            used_range=used_range,
            cells=cells,
            merges=list(merges or []),
            sheet_name=sheet_name,
        )


def load_sheet_grid(ws) -> SheetGrid:
    """
    Decode an openpyxl worksheet into a SheetGrid.

    The used range is the worksheet's dimension. A sheet without a single
    value and without merges has no used range.

    Args:
        ws: openpyxl Worksheet object (not read-only; merges are needed)

    Returns:
        SheetGrid
    """
    sheet_name = getattr(ws, "title", "")
    cells: Dict[Coordinate, Any] = {}

    for row in ws.iter_rows():
        for cell in row:
            if cell.value is not None:
                cells[(cell.row - 1, cell.column - 1)] = cell.value

    merges = [CellRange.from_ref(rng.coord) for rng in ws.merged_cells.ranges]

    if not cells and not merges:
        logger.debug(f"Sheet '{sheet_name}' is empty, no used range")
        return SheetGrid(sheet_name=sheet_name)

    used_range = CellRange(
        start_row=ws.min_row - 1,
        end_row=ws.max_row - 1,
        start_col=ws.min_column - 1,
        end_col=ws.max_column - 1,
    )

    logger.debug(
        f"Sheet '{sheet_name}': used range {used_range.row_count()}x{used_range.col_count()}, "
        f"{len(cells)} values, {len(merges)} merges"
    )
    return SheetGrid(used_range=used_range, cells=cells, merges=merges, sheet_name=sheet_name)


def sheet_to_rows(grid: SheetGrid) -> List[List[str]]:
    """
    Array-of-rows display text of the used range, ignoring merges.

    Trailing empty cells of each row are dropped, so an all-empty row
    becomes an empty list.

    Args:
        grid: SheetGrid

    Returns:
        List of rows of display strings
    """
    rng = grid.used_range
    if rng is None:
        return []

    rows: List[List[str]] = []
    for r in range(rng.start_row, rng.end_row + 1):
        values = [
            format_cell_value(grid.cell_value(r, c))
            for c in range(rng.start_col, rng.end_col + 1)
        ]
        while values and values[-1] == "":
            values.pop()
        rows.append(values)
    return rows


__all__ = [
    "Coordinate",
    "CellRange",
    "MergeRegion",
    "SheetGrid",
    "load_sheet_grid",
    "sheet_to_rows",
]

# doceditor/core/processor/excel_helper/excel_table_extractor.py
"""
Excel Table Extractor - SheetGrid to TableData Transcoding

Turns a decoded sheet (used range + cell values + merge regions) into a
TableData whose row_span/col_span reproduce the merged layout.

Algorithm (row-major scan over the used range):
1. Covered cells (inside a merge region but not its origin) emit nothing
2. Every other cell emits its display text
3. Merge origins carry the region extent as row_span/col_span
4. Every scanned row is emitted, even when all of its cells were covered

Merge lookup is precomputed once per call (MergeIndex) and resolves ties
the same way a first-match scan of the merge list would.

Usage:
    from doceditor.core.processor.excel_helper.excel_table_extractor import (
        SheetTableExtractor,
    )

    extractor = SheetTableExtractor()
    table = extractor.extract_table(grid)
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from doceditor.core.functions.table_extractor import (
    BaseTableExtractor,
    TableCell,
    TableData,
    TableExtractorConfig,
)
from doceditor.core.functions.utils import format_cell_value
from doceditor.core.processor.excel_helper.excel_sheet_grid import (
    CellRange,
    Coordinate,
    MergeRegion,
    SheetGrid,
)

logger = logging.getLogger("document-editor")


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class SheetTableExtractorConfig(TableExtractorConfig):
    """Configuration specific to sheet transcoding.

    Attributes:
        ignore_malformed_merges: Drop merge regions that are inverted or not
            fully inside the used range (their cells render unmerged)
    """
    ignore_malformed_merges: bool = True


# ============================================================================
# Merge Index
# ============================================================================

class MergeIndex:
    """Precomputed covered-cell set and origin lookup for a list of merges.

    Regions are registered in list order and the first registration of an
    origin wins, so overlapping (illegal) input resolves exactly like a
    first-match linear scan.
    """

    def __init__(self, merges: List[MergeRegion]):
        self._origins: Dict[Coordinate, MergeRegion] = {}
        self._covered: Set[Coordinate] = set()

        for region in merges:
            if not region.is_valid():
                continue
            self._origins.setdefault(region.origin, region)
            for coord in region.coordinates():
                if coord != region.origin:
                    self._covered.add(coord)

    def __len__(self) -> int:
        return len(self._origins)

    def is_covered(self, row: int, col: int) -> bool:
        return (row, col) in self._covered

    def origin_at(self, row: int, col: int) -> Optional[MergeRegion]:
        return self._origins.get((row, col))

    def spans_at(self, row: int, col: int) -> Tuple[int, int]:
        region = self.origin_at(row, col)
        if region is None:
            return 1, 1
        return region.row_count(), region.col_count()


# ============================================================================
# Sheet Table Extractor
# ============================================================================

class SheetTableExtractor(BaseTableExtractor):
    """SheetGrid to TableData transcoder.

    Pure and stateless between calls: the merge index lives only for the
    duration of one extract_table() call.
    """

    def __init__(self, config: Optional[SheetTableExtractorConfig] = None):
        self._config = config or SheetTableExtractorConfig()
        super().__init__(self._config)

    def supports_format(self, format_type: str) -> bool:
        return format_type.lower() in ("xlsx", "xlsm")

    def extract_table(self, content: SheetGrid) -> TableData:
        """Transcode a sheet grid into a merge-aware table.

        Args:
            content: SheetGrid decoded by the spreadsheet codec

        Returns:
            TableData; zero rows when the grid has no used range
        """
        grid = content
        used_range = grid.used_range if grid is not None else None
        if used_range is None or not used_range.is_valid():
            self.logger.debug("No used range, producing an empty table")
            return TableData(source_format="xlsx")

        merge_index = MergeIndex(self._usable_merges(grid.merges, used_range))

        rows: List[List[TableCell]] = []
        for row_idx in range(used_range.start_row, used_range.end_row + 1):
            row_cells: List[TableCell] = []

            for col_idx in range(used_range.start_col, used_range.end_col + 1):
                if merge_index.is_covered(row_idx, col_idx):
                    continue

                row_span, col_span = merge_index.spans_at(row_idx, col_idx)
                row_cells.append(TableCell(
                    content=format_cell_value(grid.cell_value(row_idx, col_idx)),
                    row_span=row_span,
                    col_span=col_span,
                    is_header=(row_idx == used_range.start_row
                               and self._config.treat_first_row_as_header),
                    row_index=row_idx - used_range.start_row,
                    col_index=col_idx - used_range.start_col,
                ))

            rows.append(row_cells)

        self.logger.debug(
            f"Sheet '{grid.sheet_name}' transcoded: {len(rows)} rows, "
            f"{len(merge_index)} merge origins"
        )

        return TableData(
            rows=rows,
            num_rows=len(rows),
            num_cols=used_range.col_count(),
            has_header=self._config.treat_first_row_as_header,
            source_format="xlsx",
            metadata={
                "sheet_name": grid.sheet_name,
                "merge_count": len(merge_index),
                "used_range": {
                    "start_row": used_range.start_row,
                    "end_row": used_range.end_row,
                    "start_col": used_range.start_col,
                    "end_col": used_range.end_col,
                },
            },
        )

    def _usable_merges(
        self,
        merges: List[MergeRegion],
        used_range: CellRange,
    ) -> List[MergeRegion]:
        """Drop malformed merge regions when configured to."""
        if not self._config.ignore_malformed_merges:
            return list(merges)

        usable = []
        for region in merges:
            if not region.is_valid() or not region.within(used_range):
                self.logger.warning(
                    f"Ignoring malformed merge region rows {region.start_row}-{region.end_row}, "
                    f"cols {region.start_col}-{region.end_col}"
                )
                continue
            usable.append(region)
        return usable


# ============================================================================
# Convenience Functions
# ============================================================================

def convert_sheet_grid_to_table(
    grid: SheetGrid,
    config: Optional[SheetTableExtractorConfig] = None,
) -> TableData:
    """Transcode a SheetGrid with a one-off extractor."""
    return SheetTableExtractor(config).extract_table(grid)


__all__ = [
    "SheetTableExtractorConfig",
    "MergeIndex",
    "SheetTableExtractor",
    "convert_sheet_grid_to_table",
]

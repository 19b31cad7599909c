# doceditor/core/processor/excel_handler.py
"""
Excel Handler - XLSX Spreadsheet Converter

Key Features:
- Import: first worksheet -> SheetGrid -> merge-aware HTML table
  (rowspan/colspan reproduce merged cells, covered cells are skipped)
- Export: first table of the content -> flat grid -> single-sheet workbook
- Preview: array-of-rows display text of the first worksheet

Formulas are read as their cached values (data_only=True); styles are
not carried in either direction.

Class-based Handler:
- ExcelHandler class inherits from BaseHandler to manage config
- Imported tables are inserted at the editor cursor instead of replacing
  the content
"""
import logging
import traceback
import zipfile
from typing import Any, List, Optional, TYPE_CHECKING

from openpyxl import load_workbook

from doceditor.core.errors import DocumentConversionError
from doceditor.core.functions.table_extractor import TableData
from doceditor.core.functions.table_processor import TableProcessor, TableProcessorConfig
from doceditor.core.processor.base_handler import BaseHandler
from doceditor.core.processor.excel_helper import (
    DEFAULT_SHEET_NAME,
    SheetGrid,
    SheetTableExtractor,
    SheetTableExtractorConfig,
    load_sheet_grid,
    sheet_to_rows,
    write_grid_to_xlsx,
)
from doceditor.core.processor.html_helper import html_table_to_grid

if TYPE_CHECKING:
    from doceditor.core.document_editor import CurrentFile

logger = logging.getLogger("document-editor")


class ExcelHandler(BaseHandler):
    """
    XLSX Spreadsheet Handler

    Usage:
        handler = ExcelHandler(config=config)
        table_html = handler.import_content(current_file)
        xlsx_bytes = handler.export_content(editor_html)
    """

    suffix = ".xlsx"
    default_file_name = "table.xlsx"
    replaces_content = False

    def __init__(self, config: Optional[dict] = None):
        super().__init__(config)
        self._extractor = SheetTableExtractor(
            self.config.get("sheet_extractor_config") or SheetTableExtractorConfig()
        )
        self._table_processor = TableProcessor(
            self.config.get("table_processor_config") or TableProcessorConfig()
        )

    def import_content(self, current_file: "CurrentFile", **kwargs) -> str:
        """
        Convert the first worksheet into an HTML table.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            **kwargs: Additional options

        Returns:
            HTML table string ("" for an empty sheet)
        """
        file_path = current_file.get("file_path", "unknown")
        self.logger.info(f"XLSX import: {file_path}")

        table = self.extract_table(current_file)
        table_html = self._table_processor.format_table_as_html(table)

        self.logger.info(
            f"XLSX import completed: {table.num_rows} rows, {table.num_cols} columns, "
            f"{table.metadata.get('merge_count', 0)} merges"
        )
        return table_html

    def extract_table(self, current_file: "CurrentFile") -> TableData:
        """Decode the first worksheet and transcode it into TableData."""
        return self._extractor.extract_table(self.load_grid(current_file))

    def load_grid(self, current_file: "CurrentFile") -> SheetGrid:
        """
        Decode the first worksheet of the workbook.

        Raises:
            DocumentConversionError: When the bytes are not a readable workbook
        """
        file_path = current_file.get("file_path", "unknown")
        try:
            wb = load_workbook(self.get_file_stream(current_file), data_only=True)
        except (zipfile.BadZipFile, KeyError, ValueError, OSError) as e:
            self.logger.error(f"Error reading XLSX workbook {file_path}: {e}")
            self.logger.debug(traceback.format_exc())
            raise DocumentConversionError(f"Failed to read XLSX file: {file_path}") from e

        try:
            ws = wb[wb.sheetnames[0]]
            return load_sheet_grid(ws)
        finally:
            wb.close()

    def preview_rows(self, current_file: "CurrentFile") -> List[List[str]]:
        """
        Display text of the first worksheet as an array of rows.

        Merges are not applied; covered cells read as empty strings.
        """
        return sheet_to_rows(self.load_grid(current_file))

    def export_content(
        self,
        html_content: str,
        sheet_name: str = DEFAULT_SHEET_NAME,
        **kwargs: Any
    ) -> bytes:
        """
        Convert the first table of the content into a workbook.

        Args:
            html_content: Current editor HTML
            sheet_name: Title of the written worksheet
            **kwargs: Additional options

        Returns:
            XLSX file content

        Raises:
            NoTableToExportError: When the content holds no table rows
        """
        rows = html_table_to_grid(html_content)
        data = write_grid_to_xlsx(rows, sheet_name=sheet_name)
        self.logger.info(f"XLSX export completed: {len(rows)} rows, {len(data)} bytes")
        return data


__all__ = ["ExcelHandler"]

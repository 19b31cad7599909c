# doceditor/core/processor/docx_handler.py
"""
DOCX Handler - Word Document Converter

Key Features:
- Import: mammoth convert_to_html with the configured style map
  (headings, list items, strong/em/mark runs), images embedded as data
  URIs, merge-aware tables; empty paragraphs and inline elements cleaned
  up afterwards
- Export: editor HTML wrapped in a full HTML document and written with
  python-docx (headings, lists, tables, images)

Class-based Handler:
- DOCXHandler class inherits from BaseHandler to manage config
- config["docx_import_config"] / config["docx_export_config"] override the
  defaults
"""
import logging
import re
import traceback
from typing import Optional, TYPE_CHECKING

from doceditor.core.errors import DocumentConversionError
from doceditor.core.processor.base_handler import BaseHandler
from doceditor.core.processor.docx_helper import (
    DocxExportConfig,
    DocxImportConfig,
    HTML_DOCUMENT_TEMPLATE,
    HtmlToDocxWriter,
    read_docx_html,
)

if TYPE_CHECKING:
    from doceditor.core.document_editor import CurrentFile

logger = logging.getLogger("document-editor")

_EMPTY_PARAGRAPH_RE = re.compile(r"<p>\s*</p>")
_EMPTY_INLINE_RE = re.compile(r"<(strong|em)></\1>")


# ============================================================================
# DOCXHandler Class
# ============================================================================

class DOCXHandler(BaseHandler):
    """
    DOCX Document Handler

    Usage:
        handler = DOCXHandler(config=config)
        html_content = handler.import_content(current_file)
        docx_bytes = handler.export_content(html_content)
    """

    suffix = ".docx"
    default_file_name = "document.docx"

    def __init__(self, config: Optional[dict] = None):
        super().__init__(config)
        self.import_config: DocxImportConfig = (
            self.config.get("docx_import_config") or DocxImportConfig()
        )
        self.export_config: DocxExportConfig = (
            self.config.get("docx_export_config") or DocxExportConfig()
        )

    def import_content(self, current_file: "CurrentFile", **kwargs) -> str:
        """
        Convert a DOCX file into editor HTML.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            **kwargs: Additional options

        Returns:
            HTML fragment

        Raises:
            DocumentConversionError: When the file is not a readable DOCX
        """
        file_path = current_file.get("file_path", "unknown")
        self.logger.info(f"DOCX import: {file_path}")

        try:
            result = read_docx_html(self.get_file_stream(current_file), self.import_config)
        except Exception as e:
            self.logger.error(f"Error reading DOCX file {file_path}: {e}")
            self.logger.debug(traceback.format_exc())
            raise DocumentConversionError(f"Failed to read DOCX file: {file_path}") from e

        if self.import_config.clean_empty:
            result = clean_html(result)

        self.logger.info(f"DOCX import completed: {len(result)} characters of HTML")
        return result

    def export_content(self, html_content: str, **kwargs) -> bytes:
        """
        Convert editor HTML into a DOCX file.

        Args:
            html_content: Current editor HTML
            **kwargs: Additional options

        Returns:
            DOCX file content
        """
        document_html = HTML_DOCUMENT_TEMPLATE.format(body=html_content or "")
        data = HtmlToDocxWriter(self.export_config).to_bytes(document_html)
        self.logger.info(f"DOCX export completed: {len(data)} bytes")
        return data


def clean_html(markup: str) -> str:
    """
    Normalize converter output for the editor.

    Empty paragraphs keep a <br> so that they stay visible; empty strong
    and em elements are dropped.
    """
    markup = _EMPTY_PARAGRAPH_RE.sub("<p><br></p>", markup)
    return _EMPTY_INLINE_RE.sub("", markup)


__all__ = ["DOCXHandler", "clean_html"]

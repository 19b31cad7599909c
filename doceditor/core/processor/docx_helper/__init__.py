"""
DOCX Helper Module

Utilities for converting between DOCX documents and editor HTML, split by
direction.

Module Structure:
- docx_constants: default style map, export styles, HTML document template
- docx_reader: DOCX -> HTML with mammoth, DocxImportConfig
- docx_image: data URI decoding for embedded pictures
- docx_writer: HTML -> python-docx Document
"""

# Constants
from doceditor.core.processor.docx_helper.docx_constants import (
    DEFAULT_STYLE_MAP,
    HTML_DOCUMENT_TEMPLATE,
)

# Reader
from doceditor.core.processor.docx_helper.docx_reader import (
    DocxImportConfig,
    inline_image,
    read_docx_html,
)

# Image
from doceditor.core.processor.docx_helper.docx_image import (
    decode_data_uri,
)

# Writer
from doceditor.core.processor.docx_helper.docx_writer import (
    DocxExportConfig,
    HtmlToDocxWriter,
    place_table_cells,
)


__all__ = [
    # Constants
    'DEFAULT_STYLE_MAP',
    'HTML_DOCUMENT_TEMPLATE',
    # Reader
    'DocxImportConfig',
    'inline_image',
    'read_docx_html',
    # Image
    'decode_data_uri',
    # Writer
    'DocxExportConfig',
    'HtmlToDocxWriter',
    'place_table_cells',
]

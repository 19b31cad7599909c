# doceditor/core/processor/docx_helper/docx_constants.py
"""
DOCX Constants

Style map for import and style names used on export.
"""

# mammoth style mapping rules applied on import
DEFAULT_STYLE_MAP = [
    "p[style-name='Heading 1'] => h1:fresh",
    "p[style-name='Heading 2'] => h2:fresh",
    "r[style-name='Strong'] => strong",
    "r[style-name='Emphasis'] => em",
    "p[style-name='List Paragraph'] => ul > li:fresh",
    "r[style-name='Highlight'] => mark",
]

# Paragraph styles written on export (present in the python-docx template)
BULLET_STYLES = ["List Bullet", "List Bullet 2", "List Bullet 3"]
NUMBER_STYLES = ["List Number", "List Number 2", "List Number 3"]
TABLE_STYLE = "Table Grid"
QUOTE_STYLE = "Quote"

MONOSPACE_FONT = "Courier New"

HTML_DOCUMENT_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n"
    "<meta charset=\"utf-8\">\n"
    "</head>\n"
    "<body>{body}</body>\n"
    "</html>"
)


__all__ = [
    'DEFAULT_STYLE_MAP',
    'BULLET_STYLES',
    'NUMBER_STYLES',
    'TABLE_STYLE',
    'QUOTE_STYLE',
    'MONOSPACE_FONT',
    'HTML_DOCUMENT_TEMPLATE',
]

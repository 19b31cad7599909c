# doceditor/core/processor/text_handler.py
"""
Text Handler - Plain Text File Converter

Class-based handler for .txt files inheriting from BaseHandler.

- import: each line becomes a paragraph, blank lines become empty paragraphs
- export: block text of the content joined by a block separator
"""
import html
import logging
from typing import List, Optional, TYPE_CHECKING

from doceditor.core.errors import DocumentConversionError
from doceditor.core.functions.utils import split_lines
from doceditor.core.processor.base_handler import BaseHandler
from doceditor.core.processor.html_helper import html_to_text

if TYPE_CHECKING:
    from doceditor.core.document_editor import CurrentFile

logger = logging.getLogger("document-editor")


DEFAULT_ENCODINGS = ['utf-8', 'utf-8-sig', 'cp1251', 'latin-1']

EMPTY_PARAGRAPH = "<p><br></p>"


class TextHandler(BaseHandler):
    """Plain Text File Handler Class"""

    suffix = ".txt"
    default_file_name = "document.txt"

    def import_content(
        self,
        current_file: "CurrentFile",
        encodings: Optional[List[str]] = None,
        **kwargs
    ) -> str:
        """
        Convert a text file into paragraphs.

        Args:
            current_file: CurrentFile dict containing file info and binary data
            encodings: List of encodings to try
            **kwargs: Additional options

        Returns:
            HTML fragment of <p> elements
        """
        file_path = current_file.get("file_path", "unknown")
        file_data = current_file.get("file_data", b"")
        enc = encodings or self.config.get("text_encodings") or DEFAULT_ENCODINGS

        for e in enc:
            try:
                text = file_data.decode(e)
            except UnicodeDecodeError:
                self.logger.debug(f"Failed to decode {file_path} with {e}, trying next...")
                continue
            self.logger.info(f"Successfully decoded {file_path} with {e} encoding")
            return text_to_html(text)

        raise DocumentConversionError(f"Could not decode file {file_path} with any supported encoding")

    def export_content(
        self,
        html_content: str,
        block_separator: Optional[str] = None,
        **kwargs
    ) -> bytes:
        """
        Convert editor HTML to UTF-8 plain text.

        Args:
            html_content: Current editor HTML
            block_separator: String placed between blocks (default "\\n\\n")
            **kwargs: Additional options

        Returns:
            UTF-8 encoded text
        """
        separator = block_separator
        if separator is None:
            separator = self.config.get("text_block_separator", "\n\n")

        text = html_to_text(html_content, block_separator=separator)
        self.logger.info(f"Text export: {len(text)} characters")
        return text.encode("utf-8")


def text_to_html(text: str) -> str:
    """
    Wrap every line of text in a paragraph.

    Lines holding only whitespace become an empty paragraph with a <br>
    so that the editor keeps them.
    """
    return "".join(
        f"<p>{html.escape(line, quote=False)}</p>" if line.strip() else EMPTY_PARAGRAPH
        for line in split_lines(text)
    )


__all__ = ["TextHandler", "text_to_html", "DEFAULT_ENCODINGS"]

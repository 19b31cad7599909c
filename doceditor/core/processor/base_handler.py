# doceditor/core/processor/base_handler.py
"""
Contract every format handler fulfils.

A handler owns one file suffix. It turns the bytes of such a file into an
HTML fragment for the editor (import_content) and turns the editor's HTML
back into file bytes (export_content). DocumentEditor hands its config dict
to each handler when it creates it; handlers read their own keys from it.

    class TextHandler(BaseHandler):
        suffix = ".txt"

        def import_content(self, current_file, **kwargs) -> str:
            ...
"""
import io
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TYPE_CHECKING

from doceditor.core.functions.utils import ensure_suffix

if TYPE_CHECKING:
    from doceditor.core.document_editor import CurrentFile

logger = logging.getLogger("document-editor")


class BaseHandler(ABC):
    """
    Shared base of the TXT, DOCX and XLSX handlers.

    Subclasses set ``suffix``, ``default_file_name`` and
    ``replaces_content``; the last one tells the editor whether imported
    markup overwrites the document or goes in at the cursor.
    """

    suffix: str = ""
    default_file_name: str = ""
    replaces_content: bool = True

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self._config = config or {}
        self._logger = logging.getLogger(f"document-editor.{self.__class__.__name__}")

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @abstractmethod
    def import_content(self, current_file: "CurrentFile", **kwargs) -> str:
        """
        Read a file and return editor HTML.

        Args:
            current_file: Name, suffix and raw bytes of the opened file
            **kwargs: Handler specific options

        Returns:
            HTML fragment ("" when the file holds nothing)

        Raises:
            DocumentConversionError: The bytes are not a valid file of this type
        """
        pass

    @abstractmethod
    def export_content(self, html_content: str, **kwargs) -> bytes:
        """
        Serialize editor HTML into this handler's file format.

        Raises:
            NoTableToExportError: Table-only formats given markup without a table
        """
        pass

    def get_file_stream(self, current_file: "CurrentFile") -> io.BytesIO:
        """Binary stream over the file bytes, positioned at offset 0."""
        stream = current_file.get("file_stream")
        if stream is None:
            return io.BytesIO(current_file.get("file_data", b""))
        stream.seek(0)
        return stream

    def output_file_name(self, file_name: Optional[str] = None) -> str:
        """``file_name`` (or the handler default) ending in ``suffix``."""
        return ensure_suffix(file_name or self.default_file_name, self.suffix)


__all__ = ["BaseHandler"]

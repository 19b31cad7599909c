# doceditor/core/document_editor.py
"""DocumentEditor - Document Editing Session Class

Main class of the doceditor library. Holds the current editor content (an
HTML fragment) and converts files into and out of it.

- .txt and .docx imports replace the content
- .xlsx imports insert a table at the cursor
- exports turn the current content into .txt, .docx or .xlsx bytes

Every action returns an ActionResult. Conversion failures are logged and
reported in the result; they never escape to the caller.

Usage Example:
    from doceditor import DocumentEditor

    editor = DocumentEditor()
    result = editor.open_file("report.docx")
    if not result.ok:
        print(result.message)

    editor.open_file("figures.xlsx")           # inserts a table at the cursor
    result = editor.export("xlsx")             # first table -> table.xlsx
    result = editor.save("txt", "output/")     # writes output/document.txt
"""

import io
import logging
import os
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union, TypedDict

from doceditor.core.errors import UnsupportedFormatError
from doceditor.core.processor.base_handler import BaseHandler

logger = logging.getLogger("document-editor")


class CurrentFile(TypedDict, total=False):
    """
    TypedDict containing file information.

    Standard structure for passing a file read at binary level to handlers.

    Attributes:
        file_path: Absolute path of the original file (file name for uploads)
        file_name: File name (including suffix)
        file_extension: Suffix including the dot (e.g. ".docx")
        file_data: Binary data of the file
        file_stream: BytesIO stream (reusable)
        file_size: File size in bytes
    """
    file_path: str
    file_name: str
    file_extension: str
    file_data: bytes
    file_stream: io.BytesIO
    file_size: int


@dataclass
class ActionResult:
    """
    Outcome of one editor action.

    Attributes:
        ok: Whether the action succeeded
        action: Action name ("open", "export", "save", "preview")
        data: Imported HTML, exported bytes or preview rows
        file_name: Name of the file read or produced
        path: Path written by save()
        error: Exception that made the action fail
        error_kind: Short failure kind (e.g. "no_table_to_export")
        message: Human readable outcome
    """
    ok: bool
    action: str = ""
    data: Any = None
    file_name: Optional[str] = None
    path: Optional[str] = None
    error: Optional[BaseException] = None
    error_kind: Optional[str] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok


class DocumentEditor:
    """
    doceditor Main Editing Class

    Attributes:
        content: Current HTML content (most recent import or edit wins)
        cursor: Insertion point as a character offset into content
                (None means the end of the content)
        supported_suffixes: File suffixes that can be opened and exported

    Example:
        >>> editor = DocumentEditor()
        >>> editor.open_bytes("notes.txt", b"hello")
        >>> editor.content
        '<p>hello</p>'
    """

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        content: str = "",
        **kwargs
    ):
        """
        Initialize DocumentEditor.

        Args:
            config: Configuration dictionary handed to every handler
                   - "text_encodings": encodings tried for .txt imports
                   - "text_block_separator": separator for .txt exports
                   - "docx_import_config": DocxImportConfig
                   - "docx_export_config": DocxExportConfig
                   - "sheet_extractor_config": SheetTableExtractorConfig
                   - "table_processor_config": TableProcessorConfig
            content: Initial HTML content
            **kwargs: Additional configuration options (merged into config)
        """
        self._config: Dict[str, Any] = dict(config or {})
        self._config.update(kwargs)
        self._content = content or ""
        self._cursor: Optional[int] = None

        # Logger setup
        self._logger = logging.getLogger("document-editor.editor")

        # Handler registry
        self._handler_registry: Optional[Dict[str, BaseHandler]] = None

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> Dict[str, Any]:
        """Current configuration."""
        return self._config

    @property
    def content(self) -> str:
        """Current HTML content."""
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = value or ""
        self._cursor = None

    @property
    def cursor(self) -> Optional[int]:
        """Insertion point (None = end of content)."""
        return self._cursor

    @cursor.setter
    def cursor(self, position: Optional[int]) -> None:
        if position is None:
            self._cursor = None
            return
        if position < 0:
            raise ValueError(f"Cursor position must be non-negative, got {position}")
        self._cursor = min(position, len(self._content))

    @property
    def supported_suffixes(self) -> List[str]:
        """List of supported file suffixes."""
        return list(self._get_handler_registry().keys())

    # =========================================================================
    # Public Methods - Import
    # =========================================================================

    def open_file(self, file_path: Union[str, Path]) -> ActionResult:
        """
        Import a file from disk into the content.

        Args:
            file_path: Path of a .txt, .docx or .xlsx file

        Returns:
            ActionResult; data holds the imported HTML
        """
        file_path_str = str(file_path)
        file_name = os.path.basename(file_path_str)

        def action() -> ActionResult:
            handler = self.get_handler(file_name)
            current_file = self._create_current_file_from_path(file_path_str)
            return self._import(handler, current_file)

        return self._run_action("open", file_name, action)

    def open_bytes(self, file_name: str, data: bytes) -> ActionResult:
        """
        Import uploaded file content into the content.

        Args:
            file_name: Name of the uploaded file (its suffix picks the handler)
            data: File content

        Returns:
            ActionResult; data holds the imported HTML
        """
        def action() -> ActionResult:
            handler = self.get_handler(file_name)
            current_file = self._create_current_file(file_name, data)
            return self._import(handler, current_file)

        return self._run_action("open", file_name, action)

    def preview_bytes(self, file_name: str, data: bytes) -> ActionResult:
        """
        Read the first sheet of a spreadsheet as rows of display text.

        The content is not changed.

        Args:
            file_name: Name of an .xlsx file
            data: File content

        Returns:
            ActionResult; data holds a list of rows
        """
        def action() -> ActionResult:
            handler = self.get_handler(file_name)
            preview = getattr(handler, "preview_rows", None)
            if preview is None:
                raise UnsupportedFormatError(file_name, self._preview_suffixes())
            rows = preview(self._create_current_file(file_name, data))
            return ActionResult(
                ok=True,
                data=rows,
                file_name=file_name,
                message=f"{len(rows)} rows read from {file_name}",
            )

        return self._run_action("preview", file_name, action)

    def insert_content(self, html_content: str, position: Optional[int] = None) -> None:
        """
        Insert HTML at a position (default: the cursor).

        The cursor moves to the end of the inserted markup.

        Args:
            html_content: Markup to insert
            position: Character offset, None for the cursor
        """
        if position is None:
            position = self._cursor
        if position is None:
            position = len(self._content)
        position = max(0, min(position, len(self._content)))

        self._content = self._content[:position] + html_content + self._content[position:]
        self._cursor = position + len(html_content)

    # =========================================================================
    # Public Methods - Export
    # =========================================================================

    def export(self, fmt: str, file_name: Optional[str] = None) -> ActionResult:
        """
        Export the content.

        Args:
            fmt: Target format ("txt", "docx", "xlsx"; a leading dot is allowed)
            file_name: Output name; the format suffix is appended when missing

        Returns:
            ActionResult; data holds the file bytes, file_name the output name
        """
        suffix = fmt if fmt.startswith(".") else f".{fmt}"

        def action() -> ActionResult:
            handler = self._get_handler_registry().get(suffix)
            if handler is None:
                raise UnsupportedFormatError(file_name or suffix, self.supported_suffixes)
            output_name = handler.output_file_name(file_name)
            data = handler.export_content(self._content)
            return ActionResult(
                ok=True,
                data=data,
                file_name=output_name,
                message=f"Exported {output_name} ({len(data)} bytes)",
            )

        return self._run_action("export", file_name or suffix, action)

    def save(
        self,
        fmt: str,
        directory: Union[str, Path] = ".",
        file_name: Optional[str] = None
    ) -> ActionResult:
        """
        Export the content and write it into a directory.

        Args:
            fmt: Target format ("txt", "docx", "xlsx")
            directory: Output directory (created when missing)
            file_name: Output name; defaults to the format's default name

        Returns:
            ActionResult; path holds the written file path
        """
        result = self.export(fmt, file_name)
        if not result.ok:
            result.action = "save"
            return result

        def action() -> ActionResult:
            out_dir = Path(directory)
            out_dir.mkdir(parents=True, exist_ok=True)
            out_path = out_dir / result.file_name
            out_path.write_bytes(result.data)
            self._logger.info(f"Saved {out_path}")
            return ActionResult(
                ok=True,
                data=result.data,
                file_name=result.file_name,
                path=str(out_path),
                message=f"Saved {out_path}",
            )

        return self._run_action("save", result.file_name, action)

    # =========================================================================
    # Public Methods - Utilities
    # =========================================================================

    def get_handler(self, file_name: str) -> BaseHandler:
        """
        Handler for a file name, chosen by case-sensitive suffix.

        Raises:
            UnsupportedFormatError: When no handler matches
        """
        for suffix, handler in self._get_handler_registry().items():
            if file_name.endswith(suffix):
                return handler
        raise UnsupportedFormatError(file_name, self.supported_suffixes)

    def is_supported(self, file_name: str) -> bool:
        """Check whether a file name has a supported suffix."""
        return any(file_name.endswith(suffix) for suffix in self.supported_suffixes)

    def clear(self) -> None:
        """Drop the content and reset the cursor."""
        self._content = ""
        self._cursor = None

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _get_handler_registry(self) -> Dict[str, BaseHandler]:
        """Build and cache handler registry.

        All handlers are class-based, inheriting from BaseHandler.
        """
        if self._handler_registry is not None:
            return self._handler_registry

        from doceditor.core.processor.docx_handler import DOCXHandler
        from doceditor.core.processor.excel_handler import ExcelHandler
        from doceditor.core.processor.text_handler import TextHandler

        self._handler_registry = {}
        for handler_cls in (TextHandler, DOCXHandler, ExcelHandler):
            handler = handler_cls(config=self._config)
            self._handler_registry[handler.suffix] = handler

        return self._handler_registry

    def _preview_suffixes(self) -> List[str]:
        return [
            suffix for suffix, handler in self._get_handler_registry().items()
            if hasattr(handler, "preview_rows")
        ]

    def _import(self, handler: BaseHandler, current_file: CurrentFile) -> ActionResult:
        html_content = handler.import_content(current_file)

        if handler.replaces_content:
            self._content = html_content
            self._cursor = None
        else:
            self.insert_content(html_content)

        file_name = current_file.get("file_name")
        return ActionResult(
            ok=True,
            data=html_content,
            file_name=file_name,
            message=f"Opened {file_name}",
        )

    def _run_action(self, action: str, file_name: Optional[str], func: Callable[[], ActionResult]) -> ActionResult:
        """
        Run one action, turning any failure into a failed ActionResult.

        The content is left untouched when the action fails.
        """
        try:
            result = func()
        except Exception as e:
            kind = getattr(e, "kind", None) or ("io_error" if isinstance(e, OSError) else "unexpected_error")
            self._logger.error(f"{action} failed for {file_name}: {e}")
            self._logger.debug(traceback.format_exc())
            return ActionResult(
                ok=False,
                action=action,
                file_name=file_name,
                error=e,
                error_kind=kind,
                message=str(e),
            )

        result.action = action
        self._logger.info(result.message)
        return result

    def _create_current_file(
        self,
        file_name: str,
        data: bytes,
        file_path: Optional[str] = None
    ) -> CurrentFile:
        """
        Create a CurrentFile dict from in-memory content.

        Args:
            file_name: File name (including suffix)
            data: Binary data
            file_path: Original path, when the data was read from disk

        Returns:
            CurrentFile dict containing file info and binary data
        """
        data = data or b""
        suffix = os.path.splitext(file_name)[1]

        # Return as plain dict (TypedDict is for type hints only)
        return {
            "file_path": file_path or file_name,
            "file_name": file_name,
            "file_extension": suffix,
            "file_data": data,
            "file_stream": io.BytesIO(data),
            "file_size": len(data),
        }

    def _create_current_file_from_path(self, file_path: str) -> CurrentFile:
        """
        Read a file at binary level into a CurrentFile dict.

        Raises:
            OSError: If file cannot be read
        """
        file_path = os.path.abspath(file_path)
        with open(file_path, 'rb') as f:
            file_data = f.read()
        return self._create_current_file(os.path.basename(file_path), file_data, file_path)

    # =========================================================================
    # Context Manager Support
    # =========================================================================

    def __enter__(self) -> "DocumentEditor":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.clear()

    # =========================================================================
    # String Representation
    # =========================================================================

    def __repr__(self) -> str:
        return f"DocumentEditor(content_length={len(self._content)}, cursor={self._cursor!r})"

    def __str__(self) -> str:
        return f"doceditor DocumentEditor ({', '.join(self.supported_suffixes)})"


# === Module-level Convenience Functions ===

def create_editor(
    config: Optional[Dict[str, Any]] = None,
    content: str = "",
    **kwargs
) -> DocumentEditor:
    """
    Create a DocumentEditor instance.

    Args:
        config: Configuration dictionary
        content: Initial HTML content
        **kwargs: Additional configuration options

    Returns:
        DocumentEditor instance
    """
    return DocumentEditor(config=config, content=content, **kwargs)


__all__ = [
    "CurrentFile",
    "ActionResult",
    "DocumentEditor",
    "create_editor",
]

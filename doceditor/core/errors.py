# doceditor/core/errors.py
"""
Exceptions raised by the conversion handlers.

Every exception carries a short ``kind`` string so that callers can tell
failures apart without isinstance chains (the editor reports it in
ActionResult.error_kind).
"""


class DocumentEditorError(Exception):
    """Base class for all editor conversion failures."""

    kind = "editor_error"


class UnsupportedFormatError(DocumentEditorError):
    """The file name does not end with a supported suffix."""

    kind = "unsupported_format"

    def __init__(self, file_name: str, supported=None):
        self.file_name = file_name
        self.supported = list(supported or [])
        message = f"Unsupported file format: {file_name}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class DocumentConversionError(DocumentEditorError):
    """A converter could not read or write the document."""

    kind = "conversion_failed"


class NoTableToExportError(DocumentEditorError):
    """Spreadsheet export was requested but the content holds no table."""

    kind = "no_table_to_export"

    def __init__(self, message: str = "No tables to save."):
        super().__init__(message)


__all__ = [
    "DocumentEditorError",
    "UnsupportedFormatError",
    "DocumentConversionError",
    "NoTableToExportError",
]

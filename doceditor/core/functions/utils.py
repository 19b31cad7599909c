# doceditor/core/functions/utils.py
"""
Common text utilities for document conversion.
"""
import datetime
import re
from typing import Any, List


def split_lines(text: str) -> List[str]:
    """Split text on CRLF or LF line endings."""
    if not text:
        return [""]
    return re.split(r"\r?\n", text)


def ensure_suffix(file_name: str, suffix: str) -> str:
    """Append suffix unless file_name already ends with it."""
    return file_name if file_name.endswith(suffix) else f"{file_name}{suffix}"


def format_cell_value(value: Any) -> str:
    """
    Narrow an untyped spreadsheet value to its display text.

    Args:
        value: Cell value as decoded by the spreadsheet codec

    Returns:
        Display text ("" for empty cells)
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, datetime.datetime):
        if value.time() == datetime.time(0, 0):
            return value.date().isoformat()
        return value.isoformat(sep=" ")
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)

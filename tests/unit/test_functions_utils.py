from __future__ import annotations

import datetime

import pytest

from doceditor.core.functions.utils import (
    ensure_suffix,
    format_cell_value,
    split_lines,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ""),
        ("text", "text"),
        (42, "42"),
        (3.0, "3"),
        (2.5, "2.5"),
        (True, "TRUE"),
        (False, "FALSE"),
        (datetime.datetime(2024, 5, 1), "2024-05-01"),
        (datetime.datetime(2024, 5, 1, 13, 30), "2024-05-01 13:30:00"),
        (datetime.date(2024, 5, 1), "2024-05-01"),
        (datetime.time(8, 15), "08:15:00"),
    ],
)
def test_format_cell_value(value, expected: str) -> None:
    assert format_cell_value(value) == expected


def test_split_lines_handles_both_line_endings() -> None:
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("") == [""]


def test_ensure_suffix() -> None:
    assert ensure_suffix("report", ".docx") == "report.docx"
    assert ensure_suffix("report.docx", ".docx") == "report.docx"
    assert ensure_suffix("report.DOCX", ".docx") == "report.DOCX.docx"

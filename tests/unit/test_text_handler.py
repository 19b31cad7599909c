from __future__ import annotations

import pytest

from doceditor.core.errors import DocumentConversionError
from doceditor.core.processor.text_handler import TextHandler, text_to_html


def current_file(data: bytes, name: str = "notes.txt") -> dict:
    return {"file_path": name, "file_name": name, "file_extension": ".txt", "file_data": data}


def test_each_line_becomes_a_paragraph() -> None:
    html = TextHandler().import_content(current_file(b"first\nsecond"))

    assert html == "<p>first</p><p>second</p>"


def test_blank_lines_become_empty_paragraphs() -> None:
    assert text_to_html("a\n\n   \nb") == "<p>a</p><p><br></p><p><br></p><p>b</p>"
    assert text_to_html("") == "<p><br></p>"


def test_crlf_line_endings() -> None:
    html = TextHandler().import_content(current_file(b"one\r\ntwo\r\n"))

    assert html == "<p>one</p><p>two</p><p><br></p>"


def test_markup_in_text_is_escaped() -> None:
    html = TextHandler().import_content(current_file(b"<b>not bold</b> & more"))

    assert html == "<p>&lt;b&gt;not bold&lt;/b&gt; &amp; more</p>"


def test_falls_back_to_cp1251() -> None:
    data = "Привет".encode("cp1251")

    html = TextHandler().import_content(current_file(data))

    assert html == "<p>Привет</p>"


def test_configured_encodings_that_all_fail_raise() -> None:
    handler = TextHandler(config={"text_encodings": ["ascii"]})

    with pytest.raises(DocumentConversionError) as excinfo:
        handler.import_content(current_file("café".encode("utf-8")))

    assert excinfo.value.kind == "conversion_failed"


def test_export_joins_blocks_with_blank_line() -> None:
    data = TextHandler().export_content("<h1>Title</h1><p>one</p><p>two <b>bold</b></p>")

    assert data == b"Title\n\none\n\ntwo bold"


def test_export_separator_from_config_and_argument() -> None:
    handler = TextHandler(config={"text_block_separator": "\n"})

    assert handler.export_content("<p>a</p><p>b</p>") == b"a\nb"
    assert handler.export_content("<p>a</p><p>b</p>", block_separator=" | ") == b"a | b"


def test_export_is_utf8() -> None:
    assert TextHandler().export_content("<p>café &amp; crème</p>") == "café & crème".encode("utf-8")


def test_export_keeps_escaped_angle_brackets() -> None:
    handler = TextHandler()
    html = handler.import_content(current_file(b"a <b> c"))

    assert html == "<p>a &lt;b&gt; c</p>"
    assert handler.export_content(html) == b"a <b> c"


def test_export_table_cells_become_blocks() -> None:
    data = TextHandler().export_content("<table><tr><td>A</td><td>B</td></tr></table>")

    assert data == b"A\n\nB"


def test_output_file_name() -> None:
    handler = TextHandler()

    assert handler.output_file_name() == "document.txt"
    assert handler.output_file_name("notes") == "notes.txt"
    assert handler.output_file_name("notes.txt") == "notes.txt"

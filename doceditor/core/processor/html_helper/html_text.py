# doceditor/core/processor/html_helper/html_text.py
"""
HTML Text Utilities

Renders editor HTML to text the way the editing surface does: the text of
consecutive blocks is joined with a block separator, <br> becomes a line
break, and whitespace inside inline content is collapsed.

- html_to_text: whole-document text with a block separator
- rendered_text: text of a single element (used for table cells)
"""
import logging
import re
from typing import List, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

logger = logging.getLogger("document-editor")

BLOCK_TAGS = frozenset([
    "address", "article", "aside", "blockquote", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5",
    "h6", "header", "hr", "li", "main", "nav", "ol", "p", "pre", "section",
    "table", "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
])

SKIP_TAGS = frozenset(["script", "style", "head", "title", "template"])

_WHITESPACE_RE = re.compile(r"\s+")


def parse_html(markup: Union[str, bytes]) -> BeautifulSoup:
    """Parse an HTML fragment or document with the stdlib-backed parser."""
    return BeautifulSoup(markup or "", "html.parser")


def html_to_text(markup: Union[str, BeautifulSoup, Tag], block_separator: str = "\n\n") -> str:
    """
    Extract the text of editor content.

    A separator is written when a block starts after some text, so empty
    blocks never produce doubled separators.

    Args:
        markup: HTML string or parsed soup/tag
        block_separator: String placed between blocks

    Returns:
        Plain text
    """
    root = parse_html(markup) if isinstance(markup, (str, bytes)) else markup

    parts: List[str] = []
    state = {"separated": True}

    def walk(node, in_pre: bool) -> None:
        for child in node.children:
            if isinstance(child, PreformattedString):
                continue
            if isinstance(child, NavigableString):
                text = str(child)
                if not in_pre:
                    if state["separated"] and not text.strip():
                        continue
                    text = _WHITESPACE_RE.sub(" ", text)
                    if state["separated"]:
                        text = text.lstrip()
                parts.append(text)
                state["separated"] = False
                continue
            if not isinstance(child, Tag) or child.name in SKIP_TAGS:
                continue
            if child.name == "br":
                parts.append("\n")
                state["separated"] = False
                continue
            if child.name in BLOCK_TAGS:
                if not state["separated"]:
                    _rstrip_last(parts)
                    parts.append(block_separator)
                    state["separated"] = True
                walk(child, in_pre or child.name == "pre")
                continue
            walk(child, in_pre)

    walk(root, False)
    _rstrip_last(parts)
    return "".join(parts)


def rendered_text(element: Tag) -> str:
    """
    Text of one element with block boundaries and <br> as line breaks.

    Whitespace is collapsed inside each line and blank lines are dropped.

    Args:
        element: Parsed element, e.g. a <td>

    Returns:
        Display text of the element
    """
    text = html_to_text(element, block_separator="\n")
    lines = [line.strip() for line in text.split("\n")]
    return "\n".join(line for line in lines if line)


def _rstrip_last(parts: List[str]) -> None:
    """Drop trailing collapsible spaces of the last emitted text."""
    if parts:
        parts[-1] = parts[-1].rstrip(" ")


__all__ = [
    "BLOCK_TAGS",
    "SKIP_TAGS",
    "parse_html",
    "html_to_text",
    "rendered_text",
]

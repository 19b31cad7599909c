# doceditor/core/processor/docx_helper/docx_reader.py
"""
DOCX Reader

Converts a DOCX stream into editor HTML with mammoth. Style mapping rules
are written in mammoth's notation, one rule per entry:

    p[style-name='Heading 1'] => h1:fresh
    r[style-name='Strong'] => strong
    p[style-name='List Paragraph'] => ul > li:fresh

Rules given in DocxImportConfig.style_map take priority over mammoth's
built-in map. Images are embedded as base64 data URIs.
"""
import base64
import logging
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional

import mammoth

from doceditor.core.processor.docx_helper.docx_constants import DEFAULT_STYLE_MAP

logger = logging.getLogger("document-editor")


@dataclass
class DocxImportConfig:
    """Configuration for DOCX import.

    Attributes:
        style_map: mammoth style mapping rules, highest priority first
        include_default_style_map: Apply mammoth's built-in rules after style_map
        ignore_empty_paragraphs: Drop paragraphs that have no content
        include_images: Embed images as data URIs; False leaves them out
        clean_empty: Normalize empty paragraphs and drop empty strong/em
    """
    style_map: List[str] = field(default_factory=lambda: list(DEFAULT_STYLE_MAP))
    include_default_style_map: bool = True
    ignore_empty_paragraphs: bool = True
    include_images: bool = True
    clean_empty: bool = True


@mammoth.images.img_element
def inline_image(image) -> dict:
    """<img> attributes for an embedded picture; alt is always written."""
    with image.open() as image_bytes:
        encoded = base64.b64encode(image_bytes.read()).decode("ascii")
    return {
        "src": f"data:{image.content_type};base64,{encoded}",
        "alt": image.alt_text or "",
    }


def _drop_image(image) -> list:
    return []


def read_docx_html(stream: BinaryIO, config: Optional[DocxImportConfig] = None) -> str:
    """
    Convert a DOCX stream to HTML.

    Args:
        stream: Binary stream positioned at the start of the file
        config: Import configuration

    Returns:
        HTML fragment as produced by mammoth

    Raises:
        Whatever mammoth raises for unreadable input (zipfile.BadZipFile,
        KeyError, OSError, XML parse errors)
    """
    config = config or DocxImportConfig()
    result = mammoth.convert_to_html(
        stream,
        style_map="\n".join(config.style_map),
        include_default_style_map=config.include_default_style_map,
        ignore_empty_paragraphs=config.ignore_empty_paragraphs,
        convert_image=inline_image if config.include_images else _drop_image,
    )

    for message in result.messages:
        logger.warning(f"DOCX conversion {message.type}: {message.message}")

    return result.value


__all__ = [
    'DocxImportConfig',
    'inline_image',
    'read_docx_html',
]

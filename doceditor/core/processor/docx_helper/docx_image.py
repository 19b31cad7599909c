# doceditor/core/processor/docx_helper/docx_image.py
"""
DOCX Image Utilities

Export side of image handling: the editor keeps images as base64 data URIs
in <img src>, and the writer needs the raw bytes back to embed a picture.
"""
import base64
import binascii
import logging
import re
from typing import Optional, Tuple

logger = logging.getLogger("document-editor")

_DATA_URI_RE = re.compile(r"^data:(?P<type>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]*)*?);base64,(?P<data>.*)$", re.S)


def decode_data_uri(src: Optional[str]) -> Optional[Tuple[str, bytes]]:
    """
    Decode a base64 data URI.

    Args:
        src: Value of an <img> src attribute

    Returns:
        (content_type, data), or None for anything but a valid base64 data URI
    """
    if not src:
        return None

    match = _DATA_URI_RE.match(src.strip())
    if not match:
        return None

    try:
        data = base64.b64decode(re.sub(r"\s+", "", match.group("data")), validate=True)
    except (binascii.Error, ValueError):
        logger.warning("Skipping image with an invalid base64 payload")
        return None

    return match.group("type") or "application/octet-stream", data


__all__ = [
    'decode_data_uri',
]

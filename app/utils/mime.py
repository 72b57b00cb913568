"""Extension-based MIME inference and the matching Pillow encoder names."""
from __future__ import annotations

from pathlib import PurePath

_EXTENSION_TO_MIME = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".jpe": "image/jpeg",
    ".gif": "image/gif",
    ".png": "image/png",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".bmp": "image/bmp",
}

_MIME_TO_FORMAT = {
    "image/jpeg": "JPEG",
    "image/gif": "GIF",
    "image/png": "PNG",
    "image/tiff": "TIFF",
    "image/bmp": "BMP",
}


def content_type_for(name: str) -> str | None:
    """Return the image MIME type for *name*'s extension, or None if unrecognized."""

    return _EXTENSION_TO_MIME.get(PurePath(name).suffix.lower())


def content_type_to_format(content_type: str | None) -> str:
    return _MIME_TO_FORMAT.get((content_type or "").lower(), "JPEG")

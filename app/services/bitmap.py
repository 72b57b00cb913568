"""Pillow-backed decode / crop / encode helpers."""
from __future__ import annotations

import io
import logging

from PIL import Image, UnidentifiedImageError

from app.models import CropRectangle

from .errors import DecodeError, ValidationError

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("JPEG", "GIF", "PNG", "TIFF", "BMP")

# Modes JPEG can store without conversion
_JPEG_MODES = {"RGB", "L", "CMYK"}


def load(data: bytes) -> Image.Image:
    """Decode *data* into a Pillow image, forcing pixel data to load."""

    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Not a supported image: {exc}") from exc
    return img


def crop(img: Image.Image, rectangle: CropRectangle) -> Image.Image:
    """Return a new image holding *rectangle* clamped to *img*'s bounds."""

    width, height = img.size
    area = rectangle.clamp(width, height)
    if area != rectangle:
        logger.info("Crop rectangle %s clamped to %s for %dx%d source", rectangle, area, width, height)
    if area.is_empty:
        raise ValidationError("Empty crop area")
    return img.crop(area.as_box())


def encode(img: Image.Image, fmt: str, *, quality: int = 90) -> bytes:
    """Serialize *img* as *fmt*; unknown formats fall back to JPEG."""

    fmt = fmt.upper()
    if fmt not in SUPPORTED_FORMATS:
        logger.debug("Unknown output format %s, using JPEG", fmt)
        fmt = "JPEG"

    params = {}
    if fmt == "JPEG":
        if img.mode not in _JPEG_MODES:
            img = img.convert("RGB")  # drop alpha / palette
        params["quality"] = quality

    buffer = io.BytesIO()
    img.save(buffer, format=fmt, **params)
    return buffer.getvalue()

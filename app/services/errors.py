"""Error taxonomy shared by the storage and image services."""
from __future__ import annotations


class ImageCropError(Exception):
    """Base class for request-scoped failures surfaced to the caller."""


class ValidationError(ImageCropError):
    """Raised for bad or missing input: empty name, unknown extension, absent file."""


class DecodeError(ImageCropError):
    """Raised when bytes cannot be decoded as a supported raster image."""


class NotFoundError(ImageCropError):
    """Raised by storage when a bucket directory or file is absent."""

    def __init__(self, bucket: str, name: str) -> None:
        super().__init__(f"{name} not found in {bucket}")
        self.bucket = bucket
        self.name = name

"""Upload / crop / download operations over ``LocalStorage``.

Each call validates its inputs and then touches the filesystem; there is no
state carried between calls.
"""
from __future__ import annotations

import logging
import math
from typing import BinaryIO

from app.models import CropRequest, ImageFile
from app.utils.coordinates import to_pixel_rectangle
from app.utils.mime import content_type_for, content_type_to_format

from . import bitmap
from .errors import ValidationError
from .storage import Bucket, LocalStorage

logger = logging.getLogger(__name__)


class ImageService:
    """Validates requests and delegates to storage and the bitmap helpers."""

    def __init__(self, storage: LocalStorage, *, jpeg_quality: int = 90) -> None:
        self._storage = storage
        self._jpeg_quality = jpeg_quality

    def list_uploaded(self) -> list[str]:
        return self._storage.list_names(Bucket.ORIGINALS)

    def upload(self, file_name: str | None, data: bytes | BinaryIO) -> str:
        """Store *data* as *file_name* in the originals bucket and return the name.

        An existing file with the same name is overwritten.
        """

        if not file_name:
            raise ValidationError("No image")

        if content_type_for(file_name) is None:
            raise ValidationError("No extension")

        if not isinstance(data, bytes):
            data = data.read()

        self._storage.write(Bucket.ORIGINALS, file_name, data)
        logger.info("Uploaded %s (%d bytes)", file_name, len(data))
        return file_name

    def crop(
        self,
        relative_top: float,
        relative_left: float,
        relative_width: float,
        relative_height: float,
        image_name: str | None,
    ) -> str:
        """Crop an uploaded original and store the result under the same name.

        Raises
        ------
        ValidationError
            ``"No image"`` for an empty name, ``"No extension"`` when the
            extension is not a known image type, ``"File does not exist"``
            when the original is absent, ``"Invalid crop coordinates"``
            for NaN, infinite or overflowing fractions, ``"Empty crop area"`` when nothing
            of the rectangle lies inside the source.
        DecodeError
            If the stored original is not a readable image.
        """

        if not image_name:
            raise ValidationError("No image")

        content_type = content_type_for(image_name)
        if content_type is None:
            raise ValidationError("No extension")

        if not self._storage.exists(Bucket.ORIGINALS, image_name):
            raise ValidationError("File does not exist")

        fractions = (relative_top, relative_left, relative_width, relative_height)
        with bitmap.load(self._storage.read(Bucket.ORIGINALS, image_name)) as source:
            # NaN, infinity, or a fraction that overflows once scaled
            extent = max(source.size)
            if not all(math.isfinite(v * extent) for v in fractions):
                raise ValidationError("Invalid crop coordinates")
            rectangle = to_pixel_rectangle(
                source.width,
                source.height,
                relative_top=relative_top,
                relative_left=relative_left,
                relative_width=relative_width,
                relative_height=relative_height,
            )
            cropped = bitmap.crop(source, rectangle)

        data = bitmap.encode(cropped, content_type_to_format(content_type), quality=self._jpeg_quality)
        self._storage.write(Bucket.CROPPED, image_name, data)
        logger.info("Cropped %s to %dx%d", image_name, cropped.width, cropped.height)
        return image_name

    def crop_request(self, request: CropRequest) -> str:
        return self.crop(
            request.relative_top,
            request.relative_left,
            request.relative_width,
            request.relative_height,
            request.image_name,
        )

    def download_cropped(self, image_name: str | None) -> ImageFile:
        if not image_name:
            raise ValidationError("No image")

        matches = self._storage.find_by_pattern(Bucket.CROPPED, image_name)
        if not matches:
            raise ValidationError("No image")

        match = matches[0]
        content_type = content_type_for(match.name)
        if content_type is None:
            raise ValidationError("No extension")

        content = self._storage.read(Bucket.CROPPED, match.name)
        logger.info("Serving cropped image %s (%s)", match.name, content_type)
        return ImageFile(name=match.name, content=content, mime_type=content_type)

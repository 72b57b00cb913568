from .crop import CropRectangle, CropRequest
from .image_file import ImageFile

__all__ = [
    "CropRectangle",
    "CropRequest",
    "ImageFile",
]

"""HTTP routes for uploading, cropping and downloading images."""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, TypeVar

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile

from app.config import get_settings
from app.models import CropRequest
from app.services.errors import ImageCropError
from app.services.image_service import ImageService
from app.services.storage import LocalStorage

router = APIRouter(prefix="/api/image", tags=["image"])
logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache()
def get_image_service() -> ImageService:
    settings = get_settings()
    storage = LocalStorage(
        settings.storage_root,
        originals_dir=settings.originals_dir,
        cropped_dir=settings.cropped_dir,
    )
    return ImageService(storage, jpeg_quality=settings.jpeg_quality)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _run(operation: Callable[[], T]) -> T:
    """Execute a service call, mapping request-scoped failures to 400."""

    try:
        return operation()
    except ImageCropError as exc:
        logger.warning("Rejected request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except OSError as exc:
        logger.exception("Storage failure: %s", exc)
        raise HTTPException(status_code=400, detail="Storage failure") from exc


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("")
def list_images(service: ImageService = Depends(get_image_service)) -> list[str]:
    return _run(service.list_uploaded)


@router.post("/upload")
def upload_image(
    file: UploadFile | str | None = File(None),
    service: ImageService = Depends(get_image_service),
) -> str:
    # a part sent with an empty filename arrives as a plain string
    if not isinstance(file, UploadFile):
        raise HTTPException(status_code=400, detail="No image")
    return _run(lambda: service.upload(file.filename, file.file))


@router.get("/crop")
def crop_image(
    relative_top: float = Query(0.0, alias="relativeTop"),
    relative_left: float = Query(0.0, alias="relativeLeft"),
    relative_width: float = Query(0.0, alias="relativeWidth"),
    relative_height: float = Query(0.0, alias="relativeHeight"),
    image_name: str | None = Query(None, alias="imageName"),
    service: ImageService = Depends(get_image_service),
) -> str:
    request = CropRequest(
        relative_top=relative_top,
        relative_left=relative_left,
        relative_width=relative_width,
        relative_height=relative_height,
        image_name=image_name,
    )
    return _run(lambda: service.crop_request(request))


@router.get("/downloadCroppedImage")
def download_cropped_image(
    image_name: str | None = Query(None, alias="imageName"),
    service: ImageService = Depends(get_image_service),
) -> Response:
    image = _run(lambda: service.download_cropped(image_name))
    return Response(content=image.content, media_type=image.mime_type)

#!/usr/bin/env python
"""Script to upload a local image and crop it into the configured storage root."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from app.handlers.image_handler import get_image_service
from app.services.errors import ImageCropError


def main() -> None:
    parser = argparse.ArgumentParser(description="Upload and crop an image with ImageCrop")
    parser.add_argument("source", type=Path, help="Local image file to upload")
    parser.add_argument("--top", type=float, default=0.0)
    parser.add_argument("--left", type=float, default=0.0)
    parser.add_argument("--width", type=float, required=True)
    parser.add_argument("--height", type=float, required=True)
    args = parser.parse_args()

    service = get_image_service()
    try:
        name = service.upload(args.source.name, args.source.read_bytes())
        service.crop(args.top, args.left, args.width, args.height, name)
        cropped = service.download_cropped(name)
    except ImageCropError as exc:
        sys.exit(f"Crop failed: {exc}")

    print(f"Cropped {name}: {len(cropped.content)} bytes ({cropped.mime_type})")


if __name__ == "__main__":
    main()

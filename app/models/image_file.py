from __future__ import annotations

from pydantic import BaseModel, Field


class ImageFile(BaseModel):
    """A stored image as returned to download callers."""

    name: str = Field(..., min_length=1)
    content: bytes
    mime_type: str

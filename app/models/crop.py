from __future__ import annotations

from pydantic import BaseModel


class CropRequest(BaseModel):
    relative_top: float = 0.0
    relative_left: float = 0.0
    relative_width: float = 0.0
    relative_height: float = 0.0
    image_name: str | None = None


class CropRectangle(BaseModel):
    """Absolute pixel region, origin at the top-left of the source image."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def clamp(self, source_width: int, source_height: int) -> "CropRectangle":
        """Return the intersection of this rectangle with a source of the given size."""

        left = min(max(self.x, 0), source_width)
        top = min(max(self.y, 0), source_height)
        right = min(max(self.right, left), source_width)
        bottom = min(max(self.bottom, top), source_height)
        return CropRectangle(x=left, y=top, width=right - left, height=bottom - top)

    def as_box(self) -> tuple[int, int, int, int]:
        """Pillow-style ``(left, upper, right, lower)`` box."""
        return self.x, self.y, self.right, self.bottom

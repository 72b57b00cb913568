"""Relative-to-absolute crop coordinate mapping."""
from __future__ import annotations

from app.models import CropRectangle


def to_pixel_rectangle(
    source_width: int,
    source_height: int,
    *,
    relative_top: float,
    relative_left: float,
    relative_width: float,
    relative_height: float,
) -> CropRectangle:
    """Scale relative fractions by the source size.

    No clamping happens here; a fraction outside [0, 1] yields a rectangle
    outside the source, see ``CropRectangle.clamp``. Fractions must be finite.

    Rounding is Python's ``round``, which rounds ties to even: a 0.5
    fraction of an odd dimension of 5 gives 2, not 3.
    """

    return CropRectangle(
        x=int(round(source_width * relative_left)),
        y=int(round(source_height * relative_top)),
        width=int(round(source_width * relative_width)),
        height=int(round(source_height * relative_height)),
    )

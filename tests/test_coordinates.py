"""
Tests for app.utils.coordinates and CropRectangle clamping.
"""

from app.models import CropRectangle
from app.utils.coordinates import to_pixel_rectangle


def test_half_width_half_height_from_origin():
    rect = to_pixel_rectangle(
        200, 100, relative_top=0, relative_left=0, relative_width=0.5, relative_height=0.5
    )
    assert rect == CropRectangle(x=0, y=0, width=100, height=50)


def test_offsets_scale_by_matching_dimension():
    rect = to_pixel_rectangle(
        200, 100, relative_top=0.1, relative_left=0.25, relative_width=0.5, relative_height=0.3
    )
    assert (rect.x, rect.y, rect.width, rect.height) == (50, 10, 100, 30)


def test_out_of_range_fractions_are_not_clamped():
    rect = to_pixel_rectangle(
        200, 100, relative_top=-0.5, relative_left=-0.1, relative_width=1.5, relative_height=2
    )
    assert (rect.x, rect.y, rect.width, rect.height) == (-20, -50, 300, 200)


def test_clamp_trims_overhanging_edges():
    rect = CropRectangle(x=150, y=80, width=100, height=50)
    assert rect.clamp(200, 100) == CropRectangle(x=150, y=80, width=50, height=20)


def test_clamp_negative_origin():
    rect = CropRectangle(x=-20, y=0, width=100, height=10)
    assert rect.clamp(200, 100) == CropRectangle(x=0, y=0, width=80, height=10)


def test_clamp_fully_outside_is_empty():
    rect = CropRectangle(x=250, y=10, width=100, height=10)
    clamped = rect.clamp(200, 100)
    assert clamped.is_empty
    assert clamped.width == 0


def test_as_box_is_pillow_order():
    assert CropRectangle(x=1, y=2, width=3, height=4).as_box() == (1, 2, 4, 6)


def test_half_of_odd_dimension_rounds_to_even():
    rect = to_pixel_rectangle(
        5, 7, relative_top=0, relative_left=0, relative_width=0.5, relative_height=0.5
    )
    assert (rect.width, rect.height) == (2, 4)

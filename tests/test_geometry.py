"""
Deterministic tests for containment predicates and shapely helpers.
See: docs/ALGORITHM.md P0.
"""

from __future__ import annotations

import pytest

from tipplace.core.geometry import (
    box_to_polygon,
    is_bottom_contained,
    is_contained,
    is_horizontally_contained,
    is_left_contained,
    is_right_contained,
    is_top_contained,
    is_vertically_contained,
    overlap_area,
    viewport_polygon,
)
from tipplace.core.types import BoundingBox, Size

VIEWPORT = Size(200, 100)


def test_low_edges_allow_equality() -> None:
    # top - margin == 0 and left - margin == 0 are contained
    b = BoundingBox.of(10, 10, 20, 20)
    assert is_top_contained(b, VIEWPORT, 10)
    assert is_left_contained(b, VIEWPORT, 10)
    assert not is_top_contained(b, VIEWPORT, 10.5)
    assert not is_left_contained(b, VIEWPORT, 10.5)


def test_high_edges_are_strict() -> None:
    # bottom + margin == height and right + margin == width are NOT contained
    b = BoundingBox.of(170, 70, 20, 20)
    assert not is_bottom_contained(b, VIEWPORT, 10)
    assert not is_right_contained(b, VIEWPORT, 10)
    assert is_bottom_contained(b, VIEWPORT, 9.5)
    assert is_right_contained(b, VIEWPORT, 9.5)


def test_axis_combinations() -> None:
    # fits vertically, sticks out to the left
    b = BoundingBox.of(-5, 30, 20, 20)
    assert is_vertically_contained(b, VIEWPORT, 5)
    assert not is_horizontally_contained(b, VIEWPORT, 5)
    assert not is_contained(b, VIEWPORT, 5)
    inside = BoundingBox.of(50, 30, 20, 20)
    assert is_contained(inside, VIEWPORT, 5)


def test_zero_margin() -> None:
    b = BoundingBox.of(0, 0, 199, 99)
    assert is_contained(b, VIEWPORT, 0)
    assert not is_contained(BoundingBox.of(0, 0, 200, 99), VIEWPORT, 0)


def test_box_to_polygon_bounds() -> None:
    poly = box_to_polygon(BoundingBox.of(1, 2, 4, 6))
    assert poly.bounds == (1, 2, 5, 8)
    assert poly.area == pytest.approx(24)


def test_viewport_polygon_inset() -> None:
    poly = viewport_polygon(VIEWPORT, inset=10)
    assert poly.bounds == (10, 10, 190, 90)
    assert viewport_polygon(Size(15, 15), inset=10).is_empty


def test_overlap_area() -> None:
    a = BoundingBox.of(0, 0, 10, 10)
    assert overlap_area(a, BoundingBox.of(5, 5, 10, 10)) == pytest.approx(25)
    assert overlap_area(a, BoundingBox.of(10, 0, 10, 10)) == 0.0
    assert overlap_area(a, BoundingBox.of(50, 50, 1, 1)) == 0.0

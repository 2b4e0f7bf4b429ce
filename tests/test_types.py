"""
Value types: Location addition, Size zero sentinel, BoundingBox derived edges.
"""

from __future__ import annotations

import dataclasses

import pytest

from tipplace.core.types import BoundingBox, Location, Size, TooltipConfig


def test_location_add() -> None:
    assert Location(1, 2) + Location(10, -5) == Location(11, -3)


def test_size_is_zero() -> None:
    assert Size(0, 0).is_zero
    assert not Size(0, 1).is_zero
    assert not Size(3, 0).is_zero


def test_bounding_box_edges_and_center() -> None:
    b = BoundingBox.of(100, 100, 50, 20)
    assert b.top == 100 and b.left == 100
    assert b.bottom == 120 and b.right == 150
    assert b.center == Location(125, 110)
    assert b.bottom >= b.top and b.right >= b.left


def test_values_are_immutable_and_comparable() -> None:
    s = Size(80, 40)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.width = 10  # type: ignore[misc]
    assert s == Size(80, 40)
    assert BoundingBox.of(1, 2, 3, 4) == BoundingBox(Location(1, 2), Size(3, 4))


def test_tooltip_config_defaults() -> None:
    cfg = TooltipConfig()
    assert cfg.margin == 16
    assert cfg.show_on_hover is True
    assert cfg.hide_on_no_hover is True

"""
Push/subscribe observers: change-only notification, unsubscribe, bind/unbind reset.
"""

from __future__ import annotations

from tipplace.core.config import DEFAULT_VIEWPORT_HEIGHT, DEFAULT_VIEWPORT_WIDTH
from tipplace.core.observers import BoxObserver, HoverObserver, SizeObserver, ViewportObserver
from tipplace.core.types import ZERO_BOX, BoundingBox, Size


def test_defaults() -> None:
    assert HoverObserver().value is False
    assert BoxObserver().value == ZERO_BOX
    assert SizeObserver().value.is_zero
    assert ViewportObserver().value == Size(DEFAULT_VIEWPORT_WIDTH, DEFAULT_VIEWPORT_HEIGHT)


def test_notifies_only_on_change() -> None:
    obs = SizeObserver()
    seen: list[Size] = []
    obs.subscribe(seen.append)
    obs.set(Size(10, 10))
    obs.set(Size(10, 10))
    obs.set(Size(20, 10))
    assert seen == [Size(10, 10), Size(20, 10)]


def test_unsubscribe() -> None:
    obs = HoverObserver()
    seen: list[bool] = []
    unsubscribe = obs.subscribe(seen.append)
    obs.set(True)
    unsubscribe()
    unsubscribe()
    obs.set(False)
    assert seen == [True]


def test_unbind_resets_to_initial() -> None:
    obs = BoxObserver()
    seen: list[BoundingBox] = []
    obs.subscribe(seen.append)
    obs.bind("trigger")
    assert obs.target == "trigger"
    obs.set(BoundingBox.of(1, 2, 3, 4))
    obs.bind("trigger")
    assert obs.value == BoundingBox.of(1, 2, 3, 4)
    obs.bind(None)
    assert obs.target is None
    assert obs.value == ZERO_BOX
    assert seen == [BoundingBox.of(1, 2, 3, 4), ZERO_BOX]

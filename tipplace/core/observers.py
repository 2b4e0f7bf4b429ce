"""
Push/subscribe observers for the external signals the coordinator consumes:
hover state, trigger box, overlay size and viewport size.

A host toolkit adapter (or a test) binds an observer to a target and pushes
new values with set(); subscribers are called synchronously, only on change.
Unbinding (bind(None)) resets the observer to its initial value.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from tipplace.core.config import DEFAULT_VIEWPORT_HEIGHT, DEFAULT_VIEWPORT_WIDTH
from tipplace.core.types import ZERO_BOX, ZERO_SIZE, BoundingBox, Size

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], None]


class Observable(Generic[T]):
    """Latest value of an external signal plus its listeners."""

    def __init__(self, initial: T) -> None:
        self._initial = initial
        self._value = initial
        self._listeners: list[Listener[T]] = []
        self.target: Any = None

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Store value and notify listeners if it differs from the current one."""
        if value == self._value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Register listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def bind(self, target: Any) -> None:
        """Attach to target. bind(None) detaches and resets to the initial value."""
        if target is self.target:
            return
        logger.debug("%s bound to %r", type(self).__name__, target)
        self.target = target
        if target is None:
            self.set(self._initial)


class HoverObserver(Observable[bool]):
    """True while the pointer is over the bound element."""

    def __init__(self, initial: bool = False) -> None:
        super().__init__(initial)


class BoxObserver(Observable[BoundingBox]):
    """Bounding box of the bound element in viewport coordinates."""

    def __init__(self, initial: BoundingBox = ZERO_BOX) -> None:
        super().__init__(initial)


class SizeObserver(Observable[Size]):
    """Size of the bound element; {0, 0} before first layout."""

    def __init__(self, initial: Size = ZERO_SIZE) -> None:
        super().__init__(initial)


class ViewportObserver(Observable[Size]):
    """Size of the visible window."""

    def __init__(self, initial: Size | None = None) -> None:
        if initial is None:
            initial = Size(DEFAULT_VIEWPORT_WIDTH, DEFAULT_VIEWPORT_HEIGHT)
        super().__init__(initial)

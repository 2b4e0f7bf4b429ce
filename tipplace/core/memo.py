"""
Dependency-tuple memoization. A value is recomputed only when one of its
declared dependencies changes (identity or equality).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_UNSET = object()


def _same(a: Any, b: Any) -> bool:
    return a is b or bool(a == b)


def deps_changed(prev: tuple | None, deps: tuple) -> bool:
    """True if deps differ from prev in length or in any element."""
    if prev is None or len(prev) != len(deps):
        return True
    return not all(_same(a, b) for a, b in zip(prev, deps))


class Memo(Generic[T]):
    """Caches the last computed value together with the deps it was computed from."""

    def __init__(self) -> None:
        self._deps: tuple | None = None
        self._value: Any = _UNSET
        self.computations = 0

    def __call__(self, compute: Callable[[], T], deps: tuple) -> T:
        if self._value is _UNSET or deps_changed(self._deps, deps):
            self._value = compute()
            self._deps = deps
            self.computations += 1
        return self._value

    def reset(self) -> None:
        self._deps = None
        self._value = _UNSET

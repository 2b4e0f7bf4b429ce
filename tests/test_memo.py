"""
Dependency-tuple memoization.
"""

from __future__ import annotations

from tipplace.core.memo import Memo, deps_changed
from tipplace.core.types import Size


def test_deps_changed() -> None:
    assert deps_changed(None, (1,))
    assert deps_changed((1,), (1, 2))
    assert deps_changed((1, 2), (1, 3))
    assert not deps_changed((1, Size(1, 2)), (1, Size(1, 2)))


def test_memo_recomputes_only_on_change() -> None:
    memo: Memo[int] = Memo()
    calls: list[int] = []

    def compute() -> int:
        calls.append(1)
        return len(calls)

    assert memo(compute, (Size(1, 1),)) == 1
    assert memo(compute, (Size(1, 1),)) == 1
    assert memo(compute, (Size(2, 1),)) == 2
    assert memo.computations == 2


def test_memo_uses_identity_for_functions() -> None:
    memo: Memo[str] = Memo()

    def a() -> str:
        return "a"

    def b() -> str:
        return "b"

    assert memo(a, (a,)) == "a"
    assert memo(b, (a,)) == "a"
    assert memo(b, (b,)) == "b"


def test_memo_reset() -> None:
    memo: Memo[int] = Memo()
    memo(lambda: 1, ())
    memo.reset()
    assert memo(lambda: 2, ()) == 2

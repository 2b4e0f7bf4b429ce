"""
Candidate generation: the four canonical overlay placements around a trigger.
Deterministic; returned in CANDIDATE_ORDER. See: docs/ALGORITHM.md P1.
"""

from __future__ import annotations

from tipplace.core.config import CANDIDATE_ORDER
from tipplace.core.types import BoundingBox, Candidate, Location, Side, Size


def candidate_location(
    side: Side,
    trigger_box: BoundingBox,
    content_size: Size,
    margin: float,
) -> Location:
    """Origin of the content box for one side, before any correction."""
    center = trigger_box.center
    if side == "top":
        return Location(
            center.x - content_size.width / 2,
            trigger_box.top - content_size.height - margin,
        )
    if side == "right":
        return Location(
            trigger_box.right + margin,
            center.y - content_size.height / 2,
        )
    if side == "left":
        return Location(
            trigger_box.left - content_size.width - margin,
            center.y - content_size.height / 2,
        )
    if side == "bottom":
        return Location(
            center.x - content_size.width / 2,
            trigger_box.bottom + margin,
        )
    raise ValueError(f"Unknown side: {side!r}")


def generate_candidates(
    trigger_box: BoundingBox,
    content_size: Size,
    margin: float,
    order: tuple[str, ...] = CANDIDATE_ORDER,
) -> list[Candidate]:
    """All candidates in priority order (top, right, left, bottom by default)."""
    out: list[Candidate] = []
    for side in order:
        origin = candidate_location(side, trigger_box, content_size, margin)  # type: ignore[arg-type]
        out.append(Candidate(side=side, origin=origin, box=BoundingBox(origin, content_size)))  # type: ignore[arg-type]
    return out

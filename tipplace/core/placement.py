# tipplace/core/placement.py
"""
Placement engine: pick the overlay origin for a trigger, content size and viewport.
First fully contained candidate wins; otherwise the first candidate whose facing
edge fits is shifted along its secondary axis; otherwise ViewportTooSmall.
Pure and stateless. See: docs/ALGORITHM.md.
"""

from __future__ import annotations

import logging

from tipplace.core.candidates import generate_candidates
from tipplace.core.config import CORRECTION_ORDER, PLACEMENT_DEBUG
from tipplace.core.error_codes import ViewportTooSmall
from tipplace.core.geometry import (
    is_bottom_contained,
    is_contained,
    is_left_contained,
    is_right_contained,
    is_top_contained,
)
from tipplace.core.types import BoundingBox, Candidate, Location, PlacementResult, Size

logger = logging.getLogger(__name__)


def _horizontal_shift(bbox: BoundingBox, viewport_size: Size, margin: float) -> Location | None:
    """x shift for the first violated left/right edge (left wins); None if both fit."""
    if not is_left_contained(bbox, viewport_size, margin):
        return Location(-bbox.left + margin, 0.0)
    if not is_right_contained(bbox, viewport_size, margin):
        return Location(-(bbox.right - viewport_size.width) + margin, 0.0)
    return None


def _vertical_shift(bbox: BoundingBox, viewport_size: Size, margin: float) -> Location | None:
    """y shift for the first violated top/bottom edge (top wins); None if both fit."""
    if not is_top_contained(bbox, viewport_size, margin):
        return Location(0.0, -bbox.top + margin)
    if not is_bottom_contained(bbox, viewport_size, margin):
        return Location(0.0, -(bbox.bottom - viewport_size.height) + margin)
    return None


# Primary-axis check per side: only the edge facing away from the trigger.
_FACING_EDGE_CHECK = {
    "top": is_top_contained,
    "bottom": is_bottom_contained,
    "left": is_left_contained,
    "right": is_right_contained,
}


def _correct(candidate: Candidate, viewport_size: Size, margin: float) -> Location | None:
    """
    Secondary-axis correction for a candidate whose facing edge is contained.
    top/bottom are corrected horizontally, left/right vertically.
    """
    bbox = candidate.box
    if not _FACING_EDGE_CHECK[candidate.side](bbox, viewport_size, margin):
        return None
    if candidate.side in ("top", "bottom"):
        return _horizontal_shift(bbox, viewport_size, margin)
    return _vertical_shift(bbox, viewport_size, margin)


def run_placement(
    trigger_box: BoundingBox,
    content_size: Size,
    viewport_size: Size,
    margin: float,
) -> PlacementResult:
    """
    Full placement with side and correction details.
    Raises ViewportTooSmall when no candidate fits even after correction.
    """
    candidates = generate_candidates(trigger_box, content_size, margin)

    for cand in candidates:
        if PLACEMENT_DEBUG:
            logger.debug("candidate %s at %s contained=%s", cand.side, cand.origin,
                         is_contained(cand.box, viewport_size, margin))
        if is_contained(cand.box, viewport_size, margin):
            logger.debug("placed %s at %s", cand.side, cand.origin)
            return PlacementResult(
                trigger_box=trigger_box,
                content_size=content_size,
                viewport_size=viewport_size,
                margin=margin,
                side=cand.side,
                origin=cand.origin,
            )

    by_side = {c.side: c for c in candidates}
    for side in CORRECTION_ORDER:
        cand = by_side[side]
        shift = _correct(cand, viewport_size, margin)
        if shift is None:
            continue
        origin = cand.origin + shift
        logger.debug("placed %s at %s after shift %s", cand.side, origin, shift)
        return PlacementResult(
            trigger_box=trigger_box,
            content_size=content_size,
            viewport_size=viewport_size,
            margin=margin,
            side=cand.side,
            origin=origin,
            corrected=True,
            shift=shift,
            warnings=[f"No candidate fully contained; {cand.side} shifted by {shift}."],
        )

    raise ViewportTooSmall(viewport_size, content_size)


def compute_origin(
    trigger_box: BoundingBox,
    content_size: Size,
    viewport_size: Size,
    margin: float,
) -> Location:
    """Origin (top-left) for the overlay content. See run_placement."""
    return run_placement(trigger_box, content_size, viewport_size, margin).origin

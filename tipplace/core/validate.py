# tipplace/core/validate.py
"""
Validate a placed overlay against the viewport and trigger. Return (ok, min_clearance_px).
Uses shapely coverage of the margin-inset viewport, so a box whose edge lies exactly
on the inset boundary counts as inside. See: docs/ALGORITHM.md P2.
"""

from __future__ import annotations

from tipplace.core.geometry import box_to_polygon, overlap_area, viewport_polygon
from tipplace.core.types import BoundingBox, PlacementResult, Size


def min_edge_clearance(bbox: BoundingBox, viewport_size: Size) -> float:
    """Smallest distance from the box to any viewport edge (negative when outside)."""
    return min(
        bbox.top,
        bbox.left,
        viewport_size.height - bbox.bottom,
        viewport_size.width - bbox.right,
    )


def validate_overlay_box(
    bbox: BoundingBox,
    viewport_size: Size,
    margin: float,
) -> tuple[bool, float]:
    """
    True if bbox lies inside the viewport shrunk by margin.
    Also returns the min clearance from bbox to the viewport edges.
    """
    inset = viewport_polygon(viewport_size, inset=margin)
    if inset.is_empty:
        return False, min_edge_clearance(bbox, viewport_size)
    ok = bool(inset.covers(box_to_polygon(bbox)))
    return ok, min_edge_clearance(bbox, viewport_size)


def placement_metrics(result: PlacementResult) -> dict[str, float | bool]:
    """Metrics block for reports: containment, clearance and trigger overlap."""
    ok, clearance = validate_overlay_box(result.box, result.viewport_size, result.margin)
    return {
        "contained": ok,
        "min_clearance_px": clearance,
        "trigger_overlap_px2": overlap_area(result.box, result.trigger_box),
    }

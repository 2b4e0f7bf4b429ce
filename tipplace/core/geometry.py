# tipplace/core/geometry.py
"""
Geometry helpers: viewport containment predicates and shapely conversions.
Containment is >= 0 on the low edges and strictly < viewport size on the high
edges. See: docs/ALGORITHM.md P0.
"""

from __future__ import annotations

from shapely.geometry import Polygon, box

from tipplace.core.types import BoundingBox, Size


def is_top_contained(bbox: BoundingBox, viewport_size: Size, margin: float) -> bool:
    return 0 <= bbox.top - margin


def is_bottom_contained(bbox: BoundingBox, viewport_size: Size, margin: float) -> bool:
    return bbox.bottom + margin < viewport_size.height


def is_left_contained(bbox: BoundingBox, viewport_size: Size, margin: float) -> bool:
    return 0 <= bbox.left - margin


def is_right_contained(bbox: BoundingBox, viewport_size: Size, margin: float) -> bool:
    return bbox.right + margin < viewport_size.width


def is_vertically_contained(bbox: BoundingBox, viewport_size: Size, margin: float) -> bool:
    return (
        is_top_contained(bbox, viewport_size, margin)
        and is_bottom_contained(bbox, viewport_size, margin)
    )


def is_horizontally_contained(bbox: BoundingBox, viewport_size: Size, margin: float) -> bool:
    return (
        is_left_contained(bbox, viewport_size, margin)
        and is_right_contained(bbox, viewport_size, margin)
    )


def is_contained(bbox: BoundingBox, viewport_size: Size, margin: float) -> bool:
    """True if bbox keeps at least margin clearance from every viewport edge."""
    return (
        is_vertically_contained(bbox, viewport_size, margin)
        and is_horizontally_contained(bbox, viewport_size, margin)
    )


def box_to_polygon(bbox: BoundingBox) -> Polygon:
    """Rectangle polygon for a bounding box (y grows downward, as on screen)."""
    return box(bbox.left, bbox.top, bbox.right, bbox.bottom)


def viewport_polygon(viewport_size: Size, inset: float = 0.0) -> Polygon:
    """Viewport rectangle, optionally shrunk by inset on every side. Empty if nothing is left."""
    w = viewport_size.width - 2 * inset
    h = viewport_size.height - 2 * inset
    if w <= 0 or h <= 0:
        return Polygon()
    return box(inset, inset, inset + w, inset + h)


def overlap_area(a: BoundingBox, b: BoundingBox) -> float:
    """Intersection area of two boxes; 0.0 if they only touch."""
    inter = box_to_polygon(a).intersection(box_to_polygon(b))
    return 0.0 if inter.is_empty else float(inter.area)

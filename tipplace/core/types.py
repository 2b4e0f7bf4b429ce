# tipplace/core/types.py
"""
Dataclasses for points, sizes, boxes, candidates, placement results and config.
See: docs/ALGORITHM.md.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from tipplace.core.config import DEFAULT_MARGIN, HIDE_ON_NO_HOVER, SHOW_ON_HOVER


Side = Literal["top", "right", "left", "bottom"]
Phase = Literal["hidden", "measuring", "visible"]


@dataclass(frozen=True)
class Location:
    """A point in viewport coordinates."""
    x: float
    y: float

    def __add__(self, other: Location) -> Location:
        return Location(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True)
class Size:
    """Width and height, both >= 0."""
    width: float
    height: float

    @property
    def is_zero(self) -> bool:
        """True for the {0, 0} size reported before first layout."""
        return self.width == 0 and self.height == 0

    def __str__(self) -> str:
        return f"{self.width:g}x{self.height:g}"


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box anchored at its top-left origin."""
    origin: Location
    size: Size

    @classmethod
    def of(cls, x: float, y: float, width: float, height: float) -> BoundingBox:
        return cls(Location(x, y), Size(width, height))

    @property
    def top(self) -> float:
        return self.origin.y

    @property
    def left(self) -> float:
        return self.origin.x

    @property
    def bottom(self) -> float:
        return self.origin.y + self.size.height

    @property
    def right(self) -> float:
        return self.origin.x + self.size.width

    @property
    def center(self) -> Location:
        return Location(
            self.left + self.size.width / 2,
            self.top + self.size.height / 2,
        )


ZERO_SIZE = Size(0.0, 0.0)
ZERO_BOX = BoundingBox(Location(0.0, 0.0), ZERO_SIZE)


@dataclass(frozen=True)
class Candidate:
    """One of the four canonical placements around the trigger. See docs/ALGORITHM.md P1."""
    side: Side
    origin: Location
    box: BoundingBox


@dataclass(frozen=True)
class TooltipConfig:
    """Per-tooltip options; defaults come from config."""
    margin: float = DEFAULT_MARGIN
    show_on_hover: bool = SHOW_ON_HOVER
    hide_on_no_hover: bool = HIDE_ON_NO_HOVER


@dataclass
class PlacementResult:
    """
    Full placement output. Serializes to placement.json.
    shift is the corrective offset applied to the candidate (zero if none).
    """
    # input
    trigger_box: BoundingBox
    content_size: Size
    viewport_size: Size
    margin: float

    # result
    side: Side
    origin: Location
    corrected: bool = False
    shift: Location = Location(0.0, 0.0)
    warnings: list[str] = field(default_factory=list)

    @property
    def box(self) -> BoundingBox:
        return BoundingBox(self.origin, self.content_size)


@dataclass
class Scenario:
    """A single placement problem as loaded from JSON or CLI flags."""
    trigger_box: BoundingBox
    viewport_size: Size
    content_size: Size | None = None
    content_text: str | None = None
    margin: float = DEFAULT_MARGIN
    name: str = "scenario"

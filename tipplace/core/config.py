# tipplace/core/config.py
"""
Central configuration for tooltip placement and visibility.
All tunable values live here; no magic numbers in other modules.
See: docs/ALGORITHM.md.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Placement -----
DEFAULT_MARGIN: float = 16.0
"""Distance kept between overlay and trigger, and between overlay and viewport edges."""

CANDIDATE_ORDER: tuple[str, ...] = ("top", "right", "left", "bottom")
"""Priority order for fully contained candidates. See ALGORITHM P1."""

CORRECTION_ORDER: tuple[str, ...] = ("top", "bottom", "left", "right")
"""Order in which partially contained candidates are shifted back on screen. See ALGORITHM P2."""

# ----- Visibility -----
SHOW_ON_HOVER: bool = True
"""Hover start makes the overlay visible."""

HIDE_ON_NO_HOVER: bool = True
"""Hover end hides the overlay."""

# ----- Overlay layer -----
OFF_SCREEN_X: float = -1e5
OFF_SCREEN_Y: float = -1e5
"""Where the overlay is mounted while its size is still unknown."""

OVERLAY_Z_INDEX: int = 99
OVERLAY_POSITION: str = "fixed"

# ----- Viewport -----
DEFAULT_VIEWPORT_WIDTH: float = 800.0
DEFAULT_VIEWPORT_HEIGHT: float = 600.0
"""Used until a viewport observer reports the real window size."""

# ----- Text content measurement -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_FONT_SIZE_PT: float = 12.0
CONTENT_PADDING_PX: float = 6.0
"""Padding added on each side of measured text content."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 600

# ----- Sweep -----
SWEEP_STEP_PX: float = 40.0
"""Grid step when sweeping trigger positions across a viewport."""

DEFAULT_TRIGGER_WIDTH: float = 50.0
DEFAULT_TRIGGER_HEIGHT: float = 20.0

# ----- Debug flags -----
PLACEMENT_DEBUG: bool = os.environ.get("PLACEMENT_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every candidate evaluation. Set env PLACEMENT_DEBUG=1 to enable."""

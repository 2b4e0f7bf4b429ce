"""
Matplotlib PNG rendering: after.png (viewport, trigger, overlay) and debug.png
(adds the margin inset and all four candidates). Screen coordinates: y grows down.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import IO

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from tipplace.core.candidates import generate_candidates
from tipplace.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from tipplace.core.geometry import box_to_polygon, viewport_polygon
from tipplace.core.types import BoundingBox, PlacementResult, Size

SIDE_COLORS: dict[str, str] = {
    "top": "tab:blue",
    "right": "tab:green",
    "left": "tab:purple",
    "bottom": "tab:red",
}


def set_axes_to_viewport(ax: plt.Axes, viewport_size: Size, pad_frac: float = 0.05) -> None:
    """Set limits from the viewport with a small border; y axis inverted; hide axes."""
    dx = max(1.0, viewport_size.width * pad_frac)
    dy = max(1.0, viewport_size.height * pad_frac)
    ax.set_xlim(-dx, viewport_size.width + dx)
    ax.set_ylim(viewport_size.height + dy, -dy)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])
    ax.axis("off")
    return fig, ax


def _box_xy(bbox: BoundingBox) -> np.ndarray:
    return np.array(box_to_polygon(bbox).exterior.coords)


def _draw_box(ax: plt.Axes, bbox: BoundingBox, **kwargs) -> None:
    xy = _box_xy(bbox)
    ax.fill(xy[:, 0], xy[:, 1], **kwargs)


def _outline_box(ax: plt.Axes, bbox: BoundingBox, **kwargs) -> None:
    xy = _box_xy(bbox)
    ax.plot(xy[:, 0], xy[:, 1], **kwargs)


def _draw_scene(ax: plt.Axes, result: PlacementResult, label: str | None) -> None:
    viewport = BoundingBox.of(0, 0, result.viewport_size.width, result.viewport_size.height)
    _draw_box(ax, viewport, facecolor="white", edgecolor="black", linewidth=1)
    _draw_box(ax, result.trigger_box, facecolor="lightgray", edgecolor="dimgray", linewidth=1, label="trigger")
    _draw_box(
        ax, result.box,
        facecolor="lightyellow", edgecolor=SIDE_COLORS.get(result.side, "black"),
        linewidth=2, label=f"overlay ({result.side})",
    )
    if label:
        c = result.box.center
        ax.text(c.x, c.y, label, ha="center", va="center", fontsize=8, zorder=6)


def _save(fig: plt.Figure, output: str | Path | IO[bytes], **kwargs) -> None:
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output, dpi=100, facecolor="white", format="png", **kwargs)
    plt.close(fig)


def render_placement(
    result: PlacementResult,
    output: str | Path | IO[bytes],
    label: str | None = None,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render viewport, trigger and placed overlay. output may be a path or a binary file object."""
    fig, ax = _new_fig(width_px * scale, height_px * scale)
    _draw_scene(ax, result, label)
    set_axes_to_viewport(ax, result.viewport_size)
    _save(fig, output)


def render_debug(
    result: PlacementResult,
    output: str | Path | IO[bytes],
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render scene plus margin inset and every candidate box (dashed)."""
    w, h = width_px * scale, height_px * scale
    fig = plt.figure(figsize=(w / 100.0, h / 100.0), dpi=100, constrained_layout=False)
    # Leave bottom margin so legend does not overlap the image
    ax = fig.add_axes([0.05, 0.08, 0.9, 0.88])
    ax.axis("off")
    _draw_scene(ax, result, None)

    inset = viewport_polygon(result.viewport_size, inset=result.margin)
    if not inset.is_empty:
        xy = np.array(inset.exterior.coords)
        ax.plot(xy[:, 0], xy[:, 1], linestyle=":", linewidth=1, color="gray", label="margin")

    for cand in generate_candidates(result.trigger_box, result.content_size, result.margin):
        _outline_box(ax, cand.box, linestyle="--", linewidth=1, color=SIDE_COLORS[cand.side], label=f"candidate {cand.side}")

    set_axes_to_viewport(ax, result.viewport_size)
    leg = ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.02), ncol=4, fontsize=8)
    _save(fig, output, bbox_inches="tight", bbox_extra_artists=[leg])

# tipplace/core/batch.py
"""
Batch and sweep modes.
Batch: run placement on a directory of scenario .json files.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/ with placement.json and images.
Sweep: move one trigger across a viewport grid and record which side wins at each cell.
Output: reports/sweep_<run_name>/sweep.csv and sweep.png.
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from tipplace.core.config import (
    DEFAULT_MARGIN,
    DEFAULT_TRIGGER_HEIGHT,
    DEFAULT_TRIGGER_WIDTH,
    REPORTS_DIR,
    SWEEP_STEP_PX,
)
from tipplace.core.error_codes import ScenarioError, TooltipError, ViewportTooSmall
from tipplace.core.io import load_scenario
from tipplace.core.placement import run_placement
from tipplace.core.render import render_debug, render_placement
from tipplace.core.reporting import ensure_report_dir, write_placement_json, write_run_metadata_json
from tipplace.core.text_metrics import measure_content_size
from tipplace.core.types import BoundingBox, PlacementResult, Scenario, Size
from tipplace.core.validate import placement_metrics

logger = logging.getLogger(__name__)

SIDE_CODES: dict[str, int] = {"top": 0, "right": 1, "left": 2, "bottom": 3, "error": 4}


def scenario_content_size(scenario: Scenario) -> Size:
    """Explicit content size, or the measured size of the content text."""
    if scenario.content_size is not None:
        return scenario.content_size
    return measure_content_size(scenario.content_text or "")


def place_scenario(scenario: Scenario) -> PlacementResult:
    """Run placement for a scenario. Raises ViewportTooSmall like run_placement."""
    return run_placement(
        scenario.trigger_box,
        scenario_content_size(scenario),
        scenario.viewport_size,
        scenario.margin,
    )


def _write_csv(path: Path, rows: list[dict]) -> None:
    if not rows:
        return
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)


def run_batch(
    run_name: str,
    batch_dir: Path,
    repo_root: Path | None = None,
    limit: int | None = None,
    output_dir: str = REPORTS_DIR,
    render: bool = True,
) -> Path:
    """
    Run placement on every *.json scenario in batch_dir.
    Returns report directory containing index.csv and cases/<case_id>/.
    """
    root = repo_root or Path.cwd().resolve()
    if not batch_dir.is_dir():
        raise ValueError(f"Batch directory not found: {batch_dir}")
    report_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir)
    cases_dir = report_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)

    files = sorted(batch_dir.glob("*.json"))
    if limit is not None:
        files = files[:limit]
    rows: list[dict] = []
    for i, path in enumerate(files):
        case_id = f"case_{i:04d}_{path.stem}"
        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        t0 = time.perf_counter()
        row = {
            "case_id": case_id, "scenario_source": str(path.name), "side": "", "origin_x": "",
            "origin_y": "", "corrected": "", "contained": "", "error": "", "duration_ms": 0,
        }
        try:
            scenario = load_scenario(path)
            result = place_scenario(scenario)
        except TooltipError as e:
            logger.warning("case %s failed: %s", case_id, e)
            row.update(side="error", error=e.error_key, duration_ms=int((time.perf_counter() - t0) * 1000))
            rows.append(row)
            continue
        duration_ms = int((time.perf_counter() - t0) * 1000)
        write_placement_json(case_dir, result)
        write_run_metadata_json(case_dir, run_name, path.name, scenario.margin)
        if render:
            render_placement(result, case_dir / "after.png", label=scenario.content_text)
            render_debug(result, case_dir / "debug.png")
        row.update(
            side=result.side,
            origin_x=round(result.origin.x, 2),
            origin_y=round(result.origin.y, 2),
            corrected=result.corrected,
            contained=placement_metrics(result)["contained"],
            duration_ms=duration_ms,
        )
        rows.append(row)
    _write_csv(report_dir / "index.csv", rows)
    return report_dir


def sweep_sides(
    content_size: Size,
    viewport_size: Size,
    margin: float = DEFAULT_MARGIN,
    trigger_size: Size = Size(DEFAULT_TRIGGER_WIDTH, DEFAULT_TRIGGER_HEIGHT),
    step: float = SWEEP_STEP_PX,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Place the trigger's top-left corner at every grid point inside the viewport.
    Returns (xs, ys, codes) where codes[row, col] is a SIDE_CODES value.
    """
    if step <= 0:
        raise ScenarioError(f"sweep step must be positive, got {step:g}")
    xs = np.arange(0.0, max(viewport_size.width - trigger_size.width, 0.0) + 1e-9, step)
    ys = np.arange(0.0, max(viewport_size.height - trigger_size.height, 0.0) + 1e-9, step)
    codes = np.full((len(ys), len(xs)), SIDE_CODES["error"], dtype=int)
    for r, y in enumerate(ys):
        for c, x in enumerate(xs):
            trigger_box = BoundingBox.of(float(x), float(y), trigger_size.width, trigger_size.height)
            try:
                result = run_placement(trigger_box, content_size, viewport_size, margin)
            except ViewportTooSmall:
                continue
            codes[r, c] = SIDE_CODES[result.side]
    return xs, ys, codes


def run_sweep(
    run_name: str,
    content_size: Size,
    viewport_size: Size,
    margin: float = DEFAULT_MARGIN,
    trigger_size: Size = Size(DEFAULT_TRIGGER_WIDTH, DEFAULT_TRIGGER_HEIGHT),
    step: float = SWEEP_STEP_PX,
    repo_root: Path | None = None,
    output_dir: str = REPORTS_DIR,
) -> Path:
    """Write sweep.csv (one row per grid cell) and sweep.png (side map). Returns report dir."""
    root = repo_root or Path.cwd().resolve()
    xs, ys, codes = sweep_sides(content_size, viewport_size, margin, trigger_size, step)
    report_dir = ensure_report_dir(root, f"sweep_{run_name}", output_dir=output_dir)
    names = {v: k for k, v in SIDE_CODES.items()}
    rows = [
        {"trigger_x": float(x), "trigger_y": float(y), "side": names[int(codes[r, c])]}
        for r, y in enumerate(ys)
        for c, x in enumerate(xs)
    ]
    _write_csv(report_dir / "sweep.csv", rows)

    fig, ax = plt.subplots(figsize=(6, 6 * viewport_size.height / max(viewport_size.width, 1.0)))
    cmap = plt.get_cmap("tab10", len(SIDE_CODES))
    ax.imshow(codes, cmap=cmap, vmin=-0.5, vmax=len(SIDE_CODES) - 0.5, origin="upper", aspect="auto")
    ax.set_title(f"Winning side, content {content_size}, margin {margin:g}")
    ax.set_xlabel("trigger x")
    ax.set_ylabel("trigger y")
    handles = [plt.Rectangle((0, 0), 1, 1, color=cmap(code)) for code in SIDE_CODES.values()]
    ax.legend(handles, list(SIDE_CODES), loc="upper right", fontsize=7)
    fig.savefig(report_dir / "sweep.png", dpi=100, facecolor="white")
    plt.close(fig)
    write_run_metadata_json(report_dir, run_name, "sweep", margin)
    return report_dir

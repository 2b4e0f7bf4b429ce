# tipplace/core/reporting.py
"""
Create reports/<run_name>/ and write placement.json (exact schema), run_metadata.json.
See: docs/ALGORITHM.md (report schema).
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from tipplace.core.config import (
    CANDIDATE_ORDER,
    CORRECTION_ORDER,
    DEFAULT_MARGIN,
    HIDE_ON_NO_HOVER,
    OFF_SCREEN_X,
    OFF_SCREEN_Y,
    OVERLAY_Z_INDEX,
    REPORTS_DIR,
    SHOW_ON_HOVER,
)
from tipplace.core.types import BoundingBox, Location, PlacementResult, Size
from tipplace.core.validate import placement_metrics

SCHEMA_VERSION = "1.0"


def _xy(loc: Location) -> dict:
    return {"x": float(loc.x), "y": float(loc.y)}


def _wh(size: Size) -> dict:
    return {"width": float(size.width), "height": float(size.height)}


def _box(bbox: BoundingBox) -> dict:
    return {**_xy(bbox.origin), **_wh(bbox.size)}


def placement_to_dict(result: PlacementResult) -> dict:
    """Exact structure for placement.json."""
    return {
        "schema_version": SCHEMA_VERSION,
        "input": {
            "trigger_box": _box(result.trigger_box),
            "content_size": _wh(result.content_size),
            "viewport_size": _wh(result.viewport_size),
            "margin": result.margin,
        },
        "result": {
            "side": result.side,
            "origin": _xy(result.origin),
            "box": _box(result.box),
            "corrected": result.corrected,
            "shift": _xy(result.shift),
        },
        "metrics": placement_metrics(result),
        "warnings": list(result.warnings),
    }


def run_metadata_dict(run_name: str, scenario_source: str, margin: float) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "scenario_source": scenario_source,
        "margin": margin,
        "config": {
            "DEFAULT_MARGIN": DEFAULT_MARGIN,
            "CANDIDATE_ORDER": list(CANDIDATE_ORDER),
            "CORRECTION_ORDER": list(CORRECTION_ORDER),
            "SHOW_ON_HOVER": SHOW_ON_HOVER,
            "HIDE_ON_NO_HOVER": HIDE_ON_NO_HOVER,
            "OFF_SCREEN": [OFF_SCREEN_X, OFF_SCREEN_Y],
            "OVERLAY_Z_INDEX": OVERLAY_Z_INDEX,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placement_json(report_dir: Path, result: PlacementResult) -> Path:
    """Write placement.json to report_dir. Returns path to file."""
    path = report_dir / "placement.json"
    path.write_text(json.dumps(placement_to_dict(result), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    scenario_source: str,
    margin: float,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, scenario_source, margin)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path

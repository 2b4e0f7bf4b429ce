"""
Validate PlacementResult serializes to placement schema shape; required keys exist.
Smoke test: run CLI placement end-to-end into a temp repo root.
"""

from __future__ import annotations

import json
from pathlib import Path

from tipplace.core.placement import run_placement
from tipplace.core.reporting import (
    SCHEMA_VERSION,
    ensure_report_dir,
    placement_to_dict,
    write_placement_json,
    write_run_metadata_json,
)
from tipplace.core.runner import main
from tipplace.core.types import BoundingBox, Size

REQUIRED_KEYS = [
    "schema_version",
    ("input", "trigger_box"),
    ("input", "content_size"),
    ("input", "viewport_size"),
    ("input", "margin"),
    ("result", "side"),
    ("result", "origin"),
    ("result", "box"),
    ("result", "corrected"),
    ("result", "shift"),
    ("metrics", "contained"),
    ("metrics", "min_clearance_px"),
    ("metrics", "trigger_overlap_px2"),
    "warnings",
]


def _result():
    return run_placement(BoundingBox.of(100, 100, 50, 20), Size(80, 40), Size(800, 600), 16)


def test_placement_schema_required_keys_exist() -> None:
    data = placement_to_dict(_result())
    for key in REQUIRED_KEYS:
        if isinstance(key, tuple):
            obj = data
            for k in key:
                assert k in obj, f"Missing key: {key}"
                obj = obj[k]
        else:
            assert key in data, f"Missing key: {key}"
    assert data["schema_version"] == SCHEMA_VERSION


def test_placement_dict_values() -> None:
    data = placement_to_dict(_result())
    assert data["result"]["side"] == "top"
    assert data["result"]["origin"] == {"x": 85.0, "y": 44.0}
    assert data["result"]["box"] == {"x": 85.0, "y": 44.0, "width": 80.0, "height": 40.0}
    assert data["metrics"]["contained"] is True
    assert data["metrics"]["min_clearance_px"] == 44.0
    assert data["metrics"]["trigger_overlap_px2"] == 0.0


def test_write_reports(tmp_path: Path) -> None:
    report_dir = ensure_report_dir(tmp_path, "unit")
    assert report_dir == (tmp_path / "reports" / "unit").resolve()
    p = write_placement_json(report_dir, _result())
    m = write_run_metadata_json(report_dir, "unit", "cli", 16)
    loaded = json.loads(p.read_text(encoding="utf-8"))
    assert loaded["result"]["side"] == "top"
    meta = json.loads(m.read_text(encoding="utf-8"))
    assert meta["run_name"] == "unit"
    assert meta["config"]["CANDIDATE_ORDER"] == ["top", "right", "left", "bottom"]


def test_cli_smoke_run(tmp_path: Path) -> None:
    code = main([
        "--trigger", "100,10,50,20", "--content", "80,40", "--viewport", "800,120",
        "--run-name", "smoke", "--repo-root", str(tmp_path), "--no-render",
    ])
    assert code == 0
    data = json.loads((tmp_path / "reports" / "smoke" / "placement.json").read_text(encoding="utf-8"))
    assert data["result"]["side"] == "bottom"
    assert data["result"]["origin"] == {"x": 85.0, "y": 46.0}


def test_cli_viewport_too_small_exits_2(tmp_path: Path) -> None:
    code = main([
        "--trigger", "20,10,10,10", "--content", "80,40", "--viewport", "50,30",
        "--repo-root", str(tmp_path), "--no-render",
    ])
    assert code == 2


def test_cli_bad_value_exits_2(tmp_path: Path) -> None:
    assert main(["--viewport", "800", "--repo-root", str(tmp_path), "--no-render"]) == 2


def test_cli_sweep_zero_step_exits_2(tmp_path: Path) -> None:
    code = main([
        "--viewport", "400,300", "--sweep", "--sweep-step", "0",
        "--repo-root", str(tmp_path), "--no-render",
    ])
    assert code == 2

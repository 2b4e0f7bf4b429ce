# tipplace/core/runner.py
"""
CLI entrypoint: build or load a scenario, run placement, render, export.
Also dispatches batch (--batch-dir) and sweep (--sweep) modes.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from tipplace.core.config import (
    DEFAULT_MARGIN,
    REPORTS_DIR,
    SWEEP_STEP_PX,
)
from tipplace.core.error_codes import ScenarioError, TooltipError, user_message
from tipplace.core.io import load_scenario, parse_box, parse_size
from tipplace.core.render import render_debug, render_placement
from tipplace.core.reporting import ensure_report_dir, write_placement_json, write_run_metadata_json
from tipplace.core.types import Scenario

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tooltip placement around a trigger inside a viewport.")
    p.add_argument("--trigger", type=str, default="100,100,50,20", help="Trigger box 'x,y,width,height'")
    p.add_argument("--content", type=str, default="80,40", help="Content size 'width,height'")
    p.add_argument("--text", type=str, default=None, help="Text content; measured instead of --content")
    p.add_argument("--viewport", type=str, default="800,600", help="Viewport size 'width,height'")
    p.add_argument("--margin", type=float, default=DEFAULT_MARGIN, help="Margin (px)")
    p.add_argument("--scenario", type=str, default=None, help="Scenario JSON path (overrides flags)")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of scenario .json files")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    p.add_argument("--sweep", action="store_true", help="Sweep the trigger across the viewport grid")
    p.add_argument("--sweep-step", type=float, default=SWEEP_STEP_PX, dest="sweep_step", help="Sweep grid step (px)")
    p.add_argument("--no-render", action="store_true", dest="no_render", help="Skip PNG output")
    return p.parse_args(argv)


def _scenario_from_args(args: argparse.Namespace, repo_root: Path) -> Scenario:
    if args.scenario:
        return load_scenario(args.scenario, repo_root=repo_root)
    if args.margin < 0:
        raise ScenarioError("margin must be non-negative")
    return Scenario(
        trigger_box=parse_box(args.trigger, "trigger"),
        viewport_size=parse_size(args.viewport, "viewport"),
        content_size=None if args.text is not None else parse_size(args.content, "content"),
        content_text=args.text,
        margin=args.margin,
        name=args.run_name,
    )


def _run(args: argparse.Namespace) -> None:
    from tipplace.core.batch import place_scenario, run_batch, run_sweep, scenario_content_size

    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    if args.batch_dir:
        batch_dir = Path(args.batch_dir)
        if not batch_dir.is_absolute():
            batch_dir = repo_root / batch_dir
        out = run_batch(
            run_name=args.run_name,
            batch_dir=batch_dir,
            repo_root=repo_root,
            limit=args.batch_limit,
            output_dir=args.output_dir,
            render=not args.no_render,
        )
        print(out / "index.csv")
        return

    scenario = _scenario_from_args(args, repo_root)

    if args.sweep:
        out = run_sweep(
            run_name=args.run_name,
            content_size=scenario_content_size(scenario),
            viewport_size=scenario.viewport_size,
            margin=scenario.margin,
            trigger_size=scenario.trigger_box.size,
            step=args.sweep_step,
            repo_root=repo_root,
            output_dir=args.output_dir,
        )
        print(out / "sweep.csv")
        print(out / "sweep.png")
        return

    result = place_scenario(scenario)
    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [write_placement_json(report_dir, result)]
    write_run_metadata_json(report_dir, args.run_name, args.scenario or "cli", scenario.margin)
    if not args.no_render:
        after_path = report_dir / "after.png"
        debug_path = report_dir / "debug.png"
        render_placement(result, after_path, label=scenario.content_text)
        render_debug(result, debug_path)
        paths += [after_path, debug_path]

    for p in paths:
        print(p)
    print("Side used:", result.side, "(corrected)" if result.corrected else "")
    print("Origin:", result.origin)


def main(argv: list[str] | None = None) -> int:
    log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, log_level_name, logging.INFO))
    args = _parse_args(argv)
    try:
        _run(args)
    except TooltipError as e:
        logger.error("%s (%s)", user_message(e.error_key), e)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

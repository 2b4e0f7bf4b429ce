"""
Load placement scenarios from JSON and parse compact CLI values.

Scenario JSON:
    {
      "name": "near_top",
      "trigger": {"x": 100, "y": 10, "width": 50, "height": 20},
      "content": {"width": 80, "height": 40}      # or {"text": "Hello"}
      "viewport": {"width": 800, "height": 120},
      "margin": 16                                 # optional
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tipplace.core.config import DEFAULT_MARGIN
from tipplace.core.error_codes import ScenarioError
from tipplace.core.types import BoundingBox, Scenario, Size


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _floats(text: str, n: int, what: str) -> list[float]:
    parts = [s.strip() for s in (text or "").split(",")]
    if len(parts) != n:
        raise ScenarioError(f"{what} needs {n} comma-separated numbers, got {text!r}")
    try:
        return [float(s) for s in parts]
    except ValueError as e:
        raise ScenarioError(f"{what} is not numeric: {text!r}") from e


def parse_size(text: str, what: str = "size") -> Size:
    """'800,600' -> Size(800, 600). Negative values are rejected."""
    w, h = _floats(text, 2, what)
    if w < 0 or h < 0:
        raise ScenarioError(f"{what} must be non-negative: {text!r}")
    return Size(w, h)


def parse_box(text: str, what: str = "box") -> BoundingBox:
    """'100,100,50,20' -> BoundingBox at (100, 100) sized 50x20."""
    x, y, w, h = _floats(text, 4, what)
    if w < 0 or h < 0:
        raise ScenarioError(f"{what} size must be non-negative: {text!r}")
    return BoundingBox.of(x, y, w, h)


def _number(obj: dict[str, Any], key: str, where: str) -> float:
    if key not in obj:
        raise ScenarioError(f"Missing {where}.{key}")
    try:
        return float(obj[key])
    except (TypeError, ValueError) as e:
        raise ScenarioError(f"{where}.{key} is not numeric: {obj[key]!r}") from e


def _size_from(obj: Any, where: str) -> Size:
    if not isinstance(obj, dict):
        raise ScenarioError(f"{where} must be an object")
    w, h = _number(obj, "width", where), _number(obj, "height", where)
    if w < 0 or h < 0:
        raise ScenarioError(f"{where} size must be non-negative")
    return Size(w, h)


def scenario_from_dict(data: dict[str, Any], name: str = "scenario") -> Scenario:
    """Build a Scenario from decoded JSON. Raises ScenarioError on missing or bad fields."""
    if not isinstance(data, dict):
        raise ScenarioError("Scenario must be a JSON object")
    trigger = data.get("trigger")
    size = _size_from(trigger, "trigger")
    trigger_box = BoundingBox.of(_number(trigger, "x", "trigger"), _number(trigger, "y", "trigger"), size.width, size.height)
    viewport_size = _size_from(data.get("viewport"), "viewport")

    content = data.get("content")
    if not isinstance(content, dict):
        raise ScenarioError("content must be an object")
    content_text = content.get("text")
    content_size = None if content_text is not None else _size_from(content, "content")

    margin = float(data.get("margin", DEFAULT_MARGIN))
    if margin < 0:
        raise ScenarioError("margin must be non-negative")
    return Scenario(
        trigger_box=trigger_box,
        viewport_size=viewport_size,
        content_size=content_size,
        content_text=str(content_text) if content_text is not None else None,
        margin=margin,
        name=str(data.get("name", name)),
    )


def load_scenario(path: str | Path, repo_root: Path | None = None) -> Scenario:
    """Read a scenario JSON file. Name defaults to the file stem."""
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Scenario file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ScenarioError(f"Invalid JSON in {resolved}: {e}") from e
    return scenario_from_dict(data, name=resolved.stem)


def scenario_to_dict(scenario: Scenario) -> dict[str, Any]:
    """Inverse of scenario_from_dict, for writing scenario files."""
    tb = scenario.trigger_box
    content: dict[str, Any]
    if scenario.content_text is not None:
        content = {"text": scenario.content_text}
    else:
        cs = scenario.content_size or Size(0.0, 0.0)
        content = {"width": cs.width, "height": cs.height}
    return {
        "name": scenario.name,
        "trigger": {"x": tb.left, "y": tb.top, "width": tb.size.width, "height": tb.size.height},
        "content": content,
        "viewport": {"width": scenario.viewport_size.width, "height": scenario.viewport_size.height},
        "margin": scenario.margin,
    }

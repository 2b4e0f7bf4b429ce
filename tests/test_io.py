"""
Scenario loading and CLI value parsing.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tipplace.core.error_codes import ScenarioError
from tipplace.core.io import load_scenario, parse_box, parse_size, scenario_from_dict, scenario_to_dict
from tipplace.core.types import BoundingBox, Size


def test_parse_size_and_box() -> None:
    assert parse_size("800,600") == Size(800, 600)
    assert parse_size(" 80 , 40 ") == Size(80, 40)
    assert parse_box("100,100,50,20") == BoundingBox.of(100, 100, 50, 20)


@pytest.mark.parametrize("text", ["800", "a,b", "1,2,3", "-1,5"])
def test_parse_size_rejects_bad_values(text: str) -> None:
    with pytest.raises(ScenarioError):
        parse_size(text)


def test_parse_box_rejects_negative_size() -> None:
    with pytest.raises(ScenarioError):
        parse_box("0,0,-5,5")


def test_load_scenario(tmp_path: Path) -> None:
    path = tmp_path / "near_top.json"
    path.write_text(json.dumps({
        "trigger": {"x": 100, "y": 10, "width": 50, "height": 20},
        "content": {"width": 80, "height": 40},
        "viewport": {"width": 800, "height": 120},
    }))
    sc = load_scenario(path)
    assert sc.name == "near_top"
    assert sc.trigger_box == BoundingBox.of(100, 10, 50, 20)
    assert sc.content_size == Size(80, 40)
    assert sc.content_text is None
    assert sc.viewport_size == Size(800, 120)
    assert sc.margin == 16


def test_text_scenario_roundtrip() -> None:
    data = {
        "name": "hello",
        "trigger": {"x": 1, "y": 2, "width": 3, "height": 4},
        "content": {"text": "Hello"},
        "viewport": {"width": 300, "height": 200},
        "margin": 8,
    }
    sc = scenario_from_dict(data)
    assert sc.content_size is None
    assert sc.content_text == "Hello"
    assert scenario_from_dict(scenario_to_dict(sc)) == sc


@pytest.mark.parametrize("data", [
    {},
    {"trigger": {"x": 0, "y": 0, "width": 1}, "content": {"width": 1, "height": 1}, "viewport": {"width": 1, "height": 1}},
    {"trigger": {"x": 0, "y": 0, "width": 1, "height": 1}, "content": "text", "viewport": {"width": 1, "height": 1}},
    {"trigger": {"x": 0, "y": 0, "width": 1, "height": 1}, "content": {"width": 1, "height": 1}, "viewport": {"width": "x", "height": 1}},
    {"trigger": {"x": 0, "y": 0, "width": 1, "height": 1}, "content": {"width": 1, "height": 1}, "viewport": {"width": 1, "height": 1}, "margin": -1},
])
def test_bad_scenarios_raise(data: dict) -> None:
    with pytest.raises(ScenarioError):
        scenario_from_dict(data)


def test_invalid_json_and_missing_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ScenarioError):
        load_scenario(bad)
    with pytest.raises(FileNotFoundError):
        load_scenario(tmp_path / "missing.json")

"""
Candidate generation: positions and priority order of the four sides.
"""

from __future__ import annotations

from tipplace.core.candidates import candidate_location, generate_candidates
from tipplace.core.types import BoundingBox, Location, Size

TRIGGER = BoundingBox.of(100, 100, 50, 20)
CONTENT = Size(80, 40)


def test_candidate_locations() -> None:
    assert candidate_location("top", TRIGGER, CONTENT, 16) == Location(85, 44)
    assert candidate_location("right", TRIGGER, CONTENT, 16) == Location(166, 90)
    assert candidate_location("left", TRIGGER, CONTENT, 16) == Location(4, 90)
    assert candidate_location("bottom", TRIGGER, CONTENT, 16) == Location(85, 136)


def test_generate_candidates_order_and_boxes() -> None:
    cands = generate_candidates(TRIGGER, CONTENT, 16)
    assert [c.side for c in cands] == ["top", "right", "left", "bottom"]
    for c in cands:
        assert c.box.origin == c.origin
        assert c.box.size == CONTENT


def test_candidates_keep_margin_from_trigger() -> None:
    by_side = {c.side: c.box for c in generate_candidates(TRIGGER, CONTENT, 16)}
    assert TRIGGER.top - by_side["top"].bottom == 16
    assert by_side["right"].left - TRIGGER.right == 16
    assert TRIGGER.left - by_side["left"].right == 16
    assert by_side["bottom"].top - TRIGGER.bottom == 16

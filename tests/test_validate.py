# tests/test_validate.py
from dataclasses import replace

from floodpaint.config import DEFAULTS
from floodpaint.levels import parse_board
from floodpaint.mapgen.validate import is_valid, validate

VALID = """
G(2) B _
_    _ _
R(1) _ _
"""

def fails(text, cfg=None):
    return validate(parse_board(text, "G"), cfg)

def test_valid_board_passes_everything():
    b = parse_board(VALID, "G")
    before = b.copy()
    assert validate(b) == []
    assert is_valid(b)
    assert b == before  # the post-paint replay uses a scratch copy

def test_dimension_bounds():
    b = parse_board(VALID, "G")
    assert "dimensions_in_bounds" in validate(b, replace(DEFAULTS, max_cells=8))

def test_single_goal_cell():
    assert "single_goal_cell" in fails("G(2) B _\n_ _ _\nR(1) _ G")

def test_needs_empty_cell():
    out = fails("G(2) B\nR(1) Y")
    assert "has_empty_cell" in out and "goal_reaches_empty" in out

def test_wall_ratio():
    assert "wall_ratio_ok" in fails("G(2) B _\n_ | |\nR(1) _ |")
    assert "wall_ratio_ok" not in fails("G(2) B _\n_ | |\nR(1) _ _")

def test_dot_caps():
    assert "dots_within_caps" in fails("G(6) B _\n_ _ _\nR(1) _ _")
    assert "dots_within_caps" in fails(VALID, replace(DEFAULTS, max_total_dots=2))

def test_needs_active_dot():
    assert "any_active_dot" in fails("G B _\n_ _ _\nR _ _")

def test_goal_sealed_by_walls():
    out = fails("G(2) | _\n| B _\n_ _ _")
    assert "goal_has_open_neighbor" in out and "goal_reaches_empty" in out

def test_goal_boxed_in_by_tiles():
    out = fails("G(2) B |\nR | _\n| _ _")
    assert "goal_has_open_neighbor" not in out
    assert "goal_reaches_empty" in out

def test_already_solved():
    out = fails("G(1) _\n_ _")
    assert "not_solved" in out and "has_non_goal_tile" in out

def test_goal_must_paint_immediately():
    out = fails("G(2) _ B\n_ _ _\nR(1) _ _")
    assert "goal_can_paint" in out and "play_continues_after_paint" in out
    assert "legal_move_available" not in out

def test_single_move_toys_are_rejected():
    out = fails("G(1) B\n_ _")
    assert "goal_can_paint" not in out
    assert out == ["play_continues_after_paint"]

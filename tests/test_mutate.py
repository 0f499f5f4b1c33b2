# tests/test_mutate.py
from floodpaint.config import DEFAULTS
from floodpaint.levels import parse_board
from floodpaint.mapgen.mutate import (
    ADD_TILE, ADD_WALL, REVERSE_PAINT, REVERSE_RELOCATE,
    add_non_goal_tile, add_wall, apply_random_mutation, reverse_paint, reverse_relocate,
)
from floodpaint.rng import PMRandom
from floodpaint.tiles import EMPTY, WALL, colored

def rng(seed=3):
    return PMRandom.from_seed(seed)

def test_reverse_paint_recolors_goal_region():
    b = parse_board("G(1) G G\n_ _ _", "G")
    m = reverse_paint(b, rng(), DEFAULTS)
    assert m.kind == REVERSE_PAINT and m.cells == 2
    assert b.get(0, 0) == colored("G", 2)
    assert b.count_goal_cells() == 1
    # both recolored cells share one non-goal color and carry no dots
    assert b.get(0, 1) == b.get(0, 2)
    assert b.get(0, 1).color != "G" and b.get(0, 1).dots == 0

def test_reverse_paint_respects_dot_cap():
    b = parse_board("G(5) G\n_ _", "G")
    reverse_paint(b, rng(), DEFAULTS)
    assert b.get(0, 0) == colored("G", 5)

def test_reverse_paint_bootstraps_next_to_goal():
    b = parse_board("G(0) _\n_ _", "G")
    m = reverse_paint(b, rng(), DEFAULTS)
    assert m.target in ((0, 1), (1, 0))
    placed = b.get(*m.target)
    assert placed.is_paintable and placed.color != "G" and placed.dots == 0
    # goal keeps a dot after it spends one re-painting this tile
    assert b.get(0, 0) == colored("G", 2)

def test_bootstrap_never_fills_last_empty():
    b = parse_board("G(1) B\n_ B", "G")
    before = b.copy()
    assert reverse_paint(b, rng(), DEFAULTS) is None
    assert b == before

def test_reverse_paint_needs_goal():
    b = parse_board("B(1) _\n_ _", "G")
    assert reverse_paint(b, rng(), DEFAULTS) is None

def test_reverse_relocate_adds_dot():
    b = parse_board("B(1) _\n| |", "G")
    m = reverse_relocate(b, rng(), DEFAULTS)
    assert m.kind == REVERSE_RELOCATE and m.source == (0, 0) and m.target == (0, 1)
    assert b.get(0, 1) == colored("B", 2)
    assert b.get(0, 0) == EMPTY

    capped = parse_board("B(5) _\n| |", "G")
    reverse_relocate(capped, rng(), DEFAULTS)
    assert capped.get(0, 1) == colored("B", 5)

def test_reverse_relocate_on_full_board():
    b = parse_board("B(1) R\nY G(2)", "G")
    assert reverse_relocate(b, rng(), DEFAULTS) is None

def test_add_wall_prefers_far_cells_and_stops_at_cap():
    b = parse_board("_ _ _\n_ G(1) _\n_ _ _", "G")
    corners = {(0, 0), (0, 2), (2, 0), (2, 2)}
    r = rng()
    for _ in range(2):
        m = add_wall(b, r, DEFAULTS)
        assert m.kind == ADD_WALL and m.target in corners
        assert b.get(*m.target) == WALL
    # floor(9 * 0.25) = 2
    assert add_wall(b, r, DEFAULTS) is None
    assert b.count_walls() == 2

def test_add_non_goal_tile():
    b = parse_board("G(1) _\n| |", "G")
    m = add_non_goal_tile(b, rng(), DEFAULTS)
    assert m.kind == ADD_TILE and m.target == (0, 1)
    assert b.get(0, 1).color != "G"
    assert add_non_goal_tile(b, rng(), DEFAULTS) is None

def test_random_mutation_is_deterministic():
    text = "G(2) B _ _\n_ _ _ _\nR(1) _ _ _"
    a, b = parse_board(text, "G"), parse_board(text, "G")
    ra, rb = rng(99), rng(99)
    for _ in range(20):
        assert apply_random_mutation(a, ra, DEFAULTS) == apply_random_mutation(b, rb, DEFAULTS)
    assert a == b

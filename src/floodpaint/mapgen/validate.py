# src/floodpaint/mapgen/validate.py
# Playability predicates for a generated candidate. Each one is independent;
# a candidate is accepted only when none of them fail.

from __future__ import annotations

from collections import deque
from typing import Callable, List, Optional, Tuple

from ..config import GeneratorConfig, DEFAULTS
from ..grid import Board, RC
from ..engine.moves import (
    flood_fill, has_active_dot, is_game_won, legal_move_exists,
)


def dimensions_in_bounds(b: Board, cfg: GeneratorConfig) -> bool:
    return cfg.dimensions_ok(b.rows, b.cols)


def single_goal_cell(b: Board, cfg: GeneratorConfig) -> bool:
    return b.count_goal_cells() == 1


def has_empty_cell(b: Board, cfg: GeneratorConfig) -> bool:
    return any(cell.is_empty for row in b.cells for cell in row)


def wall_ratio_ok(b: Board, cfg: GeneratorConfig) -> bool:
    return b.count_walls() <= cfg.wall_cap(b.rows, b.cols)


def dots_within_caps(b: Board, cfg: GeneratorConfig) -> bool:
    total = 0
    for row in b.cells:
        for cell in row:
            if cell.is_paintable:
                if cell.dots < 0 or cell.dots > cfg.max_dots:
                    return False
                total += cell.dots
    return total <= cfg.max_total_dots


def any_active_dot(b: Board, cfg: GeneratorConfig) -> bool:
    return has_active_dot(b)


def goal_has_open_neighbor(b: Board, cfg: GeneratorConfig) -> bool:
    g = b.find_goal()
    if g is None:
        return False
    return any(not b.cells[r][c].is_wall for r, c in b.neighbors(*g))


def goal_reaches_empty(b: Board, cfg: GeneratorConfig) -> bool:
    g = b.find_goal()
    if g is None:
        return False
    seen = {g}
    frontier = deque([g])
    while frontier:
        r, c = frontier.popleft()
        if b.cells[r][c].is_empty:
            return True
        for nb in b.neighbors(r, c):
            if nb not in seen and not b.cells[nb[0]][nb[1]].is_wall:
                seen.add(nb)
                frontier.append(nb)
    return False


def not_solved(b: Board, cfg: GeneratorConfig) -> bool:
    return not is_game_won(b)


def goal_paint_targets(b: Board) -> List[RC]:
    """Non-goal colored neighbors the goal cell could paint right now."""
    g = b.find_goal()
    if g is None:
        return []
    goal = b.cells[g[0]][g[1]]
    if goal.dots <= 0:
        return []
    return [(r, c) for r, c in b.neighbors(*g)
            if b.cells[r][c].is_paintable and b.cells[r][c].color != b.goal_color]


def goal_can_paint(b: Board, cfg: GeneratorConfig) -> bool:
    return bool(goal_paint_targets(b))


def legal_move_available(b: Board, cfg: GeneratorConfig) -> bool:
    return legal_move_exists(b)


def play_continues_after_paint(b: Board, cfg: GeneratorConfig) -> bool:
    # Replays the goal's paint on a scratch copy; the candidate is untouched.
    g = b.find_goal()
    for r, c in goal_paint_targets(b):
        scratch = b.copy()
        flood_fill(scratch, r, c, scratch.cells[r][c].color, b.goal_color)
        goal = scratch.cells[g[0]][g[1]]
        scratch.cells[g[0]][g[1]] = goal.with_dots(max(0, goal.dots - 1))
        if legal_move_exists(scratch) and has_active_dot(scratch):
            return True
    return False


def has_non_goal_tile(b: Board, cfg: GeneratorConfig) -> bool:
    return b.count_colored_non_goal() >= 1


Predicate = Callable[[Board, GeneratorConfig], bool]

PREDICATES: Tuple[Tuple[str, Predicate], ...] = (
    ("dimensions_in_bounds", dimensions_in_bounds),
    ("single_goal_cell", single_goal_cell),
    ("has_empty_cell", has_empty_cell),
    ("wall_ratio_ok", wall_ratio_ok),
    ("dots_within_caps", dots_within_caps),
    ("any_active_dot", any_active_dot),
    ("goal_has_open_neighbor", goal_has_open_neighbor),
    ("goal_reaches_empty", goal_reaches_empty),
    ("not_solved", not_solved),
    ("goal_can_paint", goal_can_paint),
    ("legal_move_available", legal_move_available),
    ("play_continues_after_paint", play_continues_after_paint),
    ("has_non_goal_tile", has_non_goal_tile),
)


def validate(board: Board, cfg: Optional[GeneratorConfig] = None) -> List[str]:
    """Names of the failing predicates (empty when the board is acceptable)."""
    cfg = cfg or DEFAULTS
    return [name for name, pred in PREDICATES if not pred(board, cfg)]


def is_valid(board: Board, cfg: Optional[GeneratorConfig] = None) -> bool:
    cfg = cfg or DEFAULTS
    return all(pred(board, cfg) for _, pred in PREDICATES)

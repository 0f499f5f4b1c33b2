# src/floodpaint/mapgen/mutate.py
# Reverse operators. Each one undoes a forward move (or adds an obstacle) on
# the board in place and returns a Mutation record, or returns None without
# touching the board.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import GeneratorConfig
from ..grid import Board, RC, manhattan
from ..rng import PMRandom
from ..tiles import EMPTY, WALL, colored

REVERSE_PAINT = "reverse_paint"
REVERSE_RELOCATE = "reverse_relocate"
ADD_WALL = "add_wall"
ADD_TILE = "add_tile"


@dataclass(frozen=True)
class Mutation:
    kind: str
    source: Optional[RC] = None
    target: Optional[RC] = None
    cells: int = 1               # cells whose content changed color/kind


def pick_non_goal_color(rng: PMRandom, cfg: GeneratorConfig, goal: str) -> str:
    pool = [c for c in cfg.palette if c != goal]
    return rng.choice(pool)


def reverse_paint(board: Board, rng: PMRandom, cfg: GeneratorConfig) -> Optional[Mutation]:
    """
    Undo a paint from the goal cell: the goal gets its dot back and a
    goal-colored region (minus one anchor) returns to a non-goal color.
    With no multi-cell region, bootstrap one non-goal tile next to the goal.
    """
    g = board.find_goal()
    if g is None:
        return None
    goal = board.cells[g[0]][g[1]]
    goal_color = board.goal_color

    for t in board.colored_positions():
        if not board.cells[t[0]][t[1]].has_color(goal_color):
            continue
        comp = board.connected_component(t[0], t[1], goal_color)
        if len(comp) > 1:
            other = pick_non_goal_color(rng, cfg, goal_color)
            for q in comp:
                if q != t:
                    board.cells[q[0]][q[1]] = colored(other, 0)
            goal = board.cells[g[0]][g[1]]
            board.cells[g[0]][g[1]] = goal.with_dots(min(cfg.max_dots, goal.dots + 1))
            return Mutation(REVERSE_PAINT, source=g, target=t, cells=len(comp) - 1)

    # Bootstrap, but never fill the last empty cell
    spots = board.empty_neighbors(*g)
    if not spots or len(board.cells_of_kind(EMPTY.kind)) < 2:
        return None
    p = rng.choice(spots)
    board.cells[p[0]][p[1]] = colored(pick_non_goal_color(rng, cfg, goal_color), 0)
    # Goal must keep a dot after spending one on this paint
    dots = min(cfg.max_dots, max(goal.dots + 1, 2))
    board.cells[g[0]][g[1]] = goal.with_dots(dots)
    return Mutation(REVERSE_PAINT, source=g, target=p)


def reverse_relocate(board: Board, rng: PMRandom, cfg: GeneratorConfig) -> Optional[Mutation]:
    movable = board.colored_positions()
    if not movable:
        return None
    start = rng.below(len(movable))
    for k in range(len(movable)):
        frm = movable[(start + k) % len(movable)]
        spots = board.empty_neighbors(*frm)
        if not spots:
            continue
        to = rng.choice(spots)
        src = board.cells[frm[0]][frm[1]]
        board.cells[to[0]][to[1]] = src.with_dots(min(cfg.max_dots, src.dots + 1))
        board.cells[frm[0]][frm[1]] = EMPTY
        return Mutation(REVERSE_RELOCATE, source=frm, target=to)
    return None


def add_wall(board: Board, rng: PMRandom, cfg: GeneratorConfig) -> Optional[Mutation]:
    empties = board.cells_of_kind(EMPTY.kind)
    if not empties:
        return None
    if board.count_walls() >= cfg.wall_cap(board.rows, board.cols):
        return None
    g = board.find_goal()
    far = [p for p in empties if g is None or manhattan(g, p) > 1]
    p = rng.choice(far or empties)
    board.cells[p[0]][p[1]] = WALL
    return Mutation(ADD_WALL, target=p)


def add_non_goal_tile(board: Board, rng: PMRandom, cfg: GeneratorConfig) -> Optional[Mutation]:
    empties = board.cells_of_kind(EMPTY.kind)
    if not empties:
        return None
    reachable = [p for p in empties
                 if any(not board.cells[r][c].is_wall for r, c in board.neighbors(*p))]
    p = rng.choice(reachable or empties)
    board.cells[p[0]][p[1]] = colored(pick_non_goal_color(rng, cfg, board.goal_color), 0)
    return Mutation(ADD_TILE, target=p)


def apply_random_mutation(board: Board, rng: PMRandom, cfg: GeneratorConfig) -> Optional[Mutation]:
    pick = rng.percent()
    if pick < cfg.reverse_paint_pct:
        return reverse_paint(board, rng, cfg)
    if pick < cfg.reverse_paint_pct + cfg.reverse_relocate_pct:
        return reverse_relocate(board, rng, cfg)
    return add_wall(board, rng, cfg)

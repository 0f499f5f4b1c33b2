# src/floodpaint/mapgen/template.py
# Starting boards for one generation attempt.

from __future__ import annotations

from ..config import GeneratorConfig
from ..grid import Board
from ..rng import PMRandom
from ..tiles import colored
from .mutate import pick_non_goal_color, reverse_paint


def small_template(rows: int, cols: int, goal_color: str, rng: PMRandom, cfg: GeneratorConfig) -> Board:
    """
    Fixed pattern for 4-cell boards: a 2-dot goal at a random cell with one
    or both orthogonal neighbors non-goal, the rest empty.
    """
    b = Board.empty(rows, cols, goal_color)
    positions = list(b.positions())
    g = rng.choice(positions)
    b.set(g[0], g[1], colored(goal_color, 2))
    nbrs = b.neighbors(*g)
    if rng.percent() < 50:
        targets = [rng.choice(nbrs)]
    else:
        targets = nbrs[:2]
    first = pick_non_goal_color(rng, cfg, goal_color)
    for i, p in enumerate(targets):
        color = first if i == 0 or rng.percent() < 50 else pick_non_goal_color(rng, cfg, goal_color)
        b.set(p[0], p[1], colored(color, 0))
    return b


def cluster_template(rows: int, cols: int, goal_color: str, rng: PMRandom, cfg: GeneratorConfig) -> Board:
    """
    Grow one connected cluster of goal-colored tiles (1..3 dots each) from a
    random cell, then undo 3..8 paints from the anchor. The first reverse
    paint recolors the whole cluster except its first cell in row-major
    order, which stays as the anchor; later ones place tiles next to it.

    Every non-goal tile touches the anchor and the anchor holds a dot for
    each paint, so the template is always solvable.
    """
    b = Board.empty(rows, cols, goal_color)
    # Keep two cells free so the bootstrap paint has room
    n_tiles = min(rows * cols - 2, max(3, (rows * cols) // 4))
    cluster = [rng.choice(list(b.positions()))]
    while len(cluster) < n_tiles:
        edge = []
        for p in cluster:
            for nb in b.neighbors(*p):
                if nb not in cluster and nb not in edge:
                    edge.append(nb)
        cluster.append(rng.choice(edge))
    for r, c in cluster:
        b.set(r, c, colored(goal_color, 1 + rng.below(min(3, cfg.max_dots))))

    for _ in range(3 + rng.below(6)):
        reverse_paint(b, rng, cfg)
    return b


def build_template(rows: int, cols: int, goal_color: str, rng: PMRandom, cfg: GeneratorConfig) -> Board:
    if rows * cols == 4:
        return small_template(rows, cols, goal_color, rng, cfg)
    return cluster_template(rows, cols, goal_color, rng, cfg)

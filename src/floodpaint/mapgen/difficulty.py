# src/floodpaint/mapgen/difficulty.py
from ..grid import Board, manhattan


def difficulty_score(board: Board) -> int:
    """
    Heuristic used only as the synthesis stopping threshold:
      4*walls + 4*non-goal tiles + min(15, dots) + min(10, mean goal distance)
    """
    score = 4 * board.count_walls()
    non_goal = board.colored_positions(include_goal=False)
    score += 4 * len(non_goal)
    score += min(15, board.total_dots())
    g = board.find_goal()
    if g is not None and non_goal:
        dist = sum(manhattan(g, p) for p in non_goal)
        score += min(10, dist // len(non_goal))
    return score

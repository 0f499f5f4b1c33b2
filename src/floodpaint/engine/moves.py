# src/floodpaint/engine/moves.py
# Forward move rules shared by live play, the validator and the solver.

from __future__ import annotations

from collections import deque
from typing import List, Tuple

from ..grid import Board, RC, is_adjacent
from ..tiles import EMPTY

Move = Tuple[int, int, int, int]  # from_r, from_c, to_r, to_c


class InvalidMoveError(ValueError):
    """Move rejected at the call boundary (bad coordinates or not adjacent)."""


def flood_fill(board: Board, r: int, c: int, from_color: str, to_color: str) -> List[RC]:
    """
    Repaint the 4-connected ``from_color`` region containing (r,c) to
    ``to_color``. Dots are kept. Returns the repainted positions.
    """
    if from_color == to_color or not board.get(r, c).has_color(from_color):
        return []
    painted: List[RC] = []
    seen = {(r, c)}
    frontier = deque([(r, c)])
    while frontier:
        cr, cc = frontier.popleft()
        cell = board.cells[cr][cc]
        board.cells[cr][cc] = cell.with_color(to_color)
        painted.append((cr, cc))
        for nr, nc in board.neighbors(cr, cc):
            if (nr, nc) not in seen and board.cells[nr][nc].has_color(from_color):
                seen.add((nr, nc))
                frontier.append((nr, nc))
    return painted


def move_tile(board: Board, from_r: int, from_c: int, to_r: int, to_c: int) -> bool:
    """
    Apply one player action. Returns True if the board changed.

    - Empty destination: the tile relocates and spends a dot.
    - Differently colored destination: its region is painted with the
      source color and the source spends a dot.
    - No dots, wall destination, or same color: ignored (False).
    """
    if not board.in_bounds(from_r, from_c) or not board.in_bounds(to_r, to_c):
        raise InvalidMoveError(
            f"Invalid move. Tile indexes outside of board: ({from_r},{from_c})->({to_r},{to_c})")
    if not is_adjacent((from_r, from_c), (to_r, to_c)):
        raise InvalidMoveError(
            f"Invalid move. Tiles not orthogonally adjacent: ({from_r},{from_c})->({to_r},{to_c})")

    src = board.cells[from_r][from_c]
    dst = board.cells[to_r][to_c]
    if src.dots < 1 or dst.is_wall:
        return False

    if dst.is_empty:
        board.cells[to_r][to_c] = src.with_dots(src.dots - 1)
        board.cells[from_r][from_c] = EMPTY
        return True
    if dst.color == src.color:
        return False

    flood_fill(board, to_r, to_c, dst.color, src.color)
    board.cells[from_r][from_c] = src.with_dots(src.dots - 1)
    return True


def is_game_won(board: Board) -> bool:
    for row in board.cells:
        for cell in row:
            if cell.is_paintable and cell.color != board.goal_color:
                return False
    return True


def has_active_dot(board: Board) -> bool:
    return any(cell.is_paintable and cell.dots > 0 for row in board.cells for cell in row)


def is_game_over(board: Board) -> bool:
    return is_game_won(board) or not has_active_dot(board)


def legal_moves(board: Board) -> List[Move]:
    out: List[Move] = []
    for r, c in board.positions():
        cell = board.cells[r][c]
        if not cell.is_paintable or cell.dots <= 0:
            continue
        for nr, nc in board.neighbors(r, c):
            nb = board.cells[nr][nc]
            if nb.is_empty or (nb.is_paintable and nb.color != cell.color):
                out.append((r, c, nr, nc))
    return out


def legal_move_exists(board: Board) -> bool:
    for r, c in board.positions():
        cell = board.cells[r][c]
        if not cell.is_paintable or cell.dots <= 0:
            continue
        for nr, nc in board.neighbors(r, c):
            nb = board.cells[nr][nc]
            if nb.is_empty or (nb.is_paintable and nb.color != cell.color):
                return True
    return False

# src/floodpaint/engine/game.py
# Session object the UI/controller drives. Keeps a pristine copy for replays.

from __future__ import annotations

from typing import Optional

from ..grid import Board
from ..tiles import Cell
from . import moves


class GameNotStartedError(RuntimeError):
    pass


class PuzzleGame:
    def __init__(self) -> None:
        self._board: Optional[Board] = None
        self._initial: Optional[Board] = None

    def start_game(self, board: Board) -> None:
        if board.rows < 1:
            raise ValueError("Invalid parameters. Must be at least one row.")
        if board.cols < 1:
            raise ValueError("Invalid parameters. Must be at least one column.")
        self._initial = board.copy()
        self._board = board.copy()

    def restart(self) -> None:
        self._started()
        self._board = self._initial.copy()

    def is_game_started(self) -> bool:
        return self._board is not None

    def _started(self) -> Board:
        if self._board is None:
            raise GameNotStartedError("Game has not been started")
        return self._board

    @property
    def board(self) -> Board:
        return self._started()

    @property
    def rows(self) -> int:
        return self._board.rows if self._board is not None else -1

    @property
    def cols(self) -> int:
        return self._board.cols if self._board is not None else -1

    @property
    def goal_color(self) -> Optional[str]:
        return self._board.goal_color if self._board is not None else None

    def tile_at(self, row: int, col: int) -> Cell:
        return self._started().get(row, col)

    def move_tile(self, from_r: int, from_c: int, to_r: int, to_c: int) -> bool:
        return moves.move_tile(self._started(), from_r, from_c, to_r, to_c)

    def is_game_won(self) -> bool:
        return moves.is_game_won(self._started())

    def is_game_over(self) -> bool:
        return moves.is_game_over(self._started())

    def has_legal_move(self) -> bool:
        return moves.legal_move_exists(self._started())

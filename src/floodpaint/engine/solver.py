# src/floodpaint/engine/solver.py
# Exhaustive breadth-first search over whole-board states.

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Tuple

from ..config import DEFAULTS
from ..grid import Board
from .moves import Move, is_game_won, legal_moves, move_tile

logger = logging.getLogger(__name__)


@dataclass
class SolveResult:
    solvable: bool
    explored: int = 0            # states expanded
    visited: int = 0             # distinct states seen
    moves: List[Move] = field(default_factory=list)
    capped: bool = False         # gave up at max_states

    def __bool__(self) -> bool:
        return self.solvable


def _path_to(parents: Dict[str, Tuple[Optional[str], Optional[Move]]], key: str) -> List[Move]:
    path: List[Move] = []
    cur: Optional[str] = key
    while cur is not None:
        prev, mv = parents[cur]
        if mv is not None:
            path.append(mv)
        cur = prev
    path.reverse()
    return path


def solve(board: Board, max_states: int = DEFAULTS.solver_max_states) -> SolveResult:
    """
    Search for a move sequence that wins ``board``.

    A board that is already won proves nothing about required play and is
    reported unsolvable. Hitting ``max_states`` expansions without a win is
    also reported unsolvable (``capped=True``); this can be a false negative.
    """
    if is_game_won(board):
        return SolveResult(False)

    start_key = board.state_key()
    parents: Dict[str, Tuple[Optional[str], Optional[Move]]] = {start_key: (None, None)}
    queue: Deque[Tuple[Board, str]] = deque([(board.copy(), start_key)])
    explored = 0

    while queue and explored < max_states:
        current, cur_key = queue.popleft()
        explored += 1
        for mv in legal_moves(current):
            nxt = current.copy()
            move_tile(nxt, *mv)
            key = nxt.state_key()
            if key in parents:
                continue
            parents[key] = (cur_key, mv)
            if is_game_won(nxt):
                logger.debug("solved after %d expansions, %d states", explored, len(parents))
                return SolveResult(True, explored, len(parents), _path_to(parents, key))
            queue.append((nxt, key))

    capped = bool(queue)
    if capped:
        logger.debug("solver cap reached: %d expansions, %d states", explored, len(parents))
    return SolveResult(False, explored, len(parents), capped=capped)


def is_solvable(board: Board, max_states: int = DEFAULTS.solver_max_states) -> bool:
    return solve(board, max_states).solvable

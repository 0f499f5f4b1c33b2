# src/floodpaint/mapgen/generator.py
# Level synthesis: template -> mutate -> repair -> prove solvable -> done.
# All randomness comes from the PMRandom built from the constructor seed, so
# equal seeds give equal levels.

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import GeneratorConfig, DEFAULTS
from ..engine.moves import is_game_won
from ..engine.solver import SolveResult, solve
from ..grid import Board
from ..levels import dumps_level
from ..rng import PMRandom
from .difficulty import difficulty_score
from .mutate import add_non_goal_tile, apply_random_mutation, reverse_paint, reverse_relocate
from .template import build_template
from .validate import is_valid, validate

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Synthesis broke one of its own invariants (a generator bug, not bad input)."""


class Phase(Enum):
    TEMPLATE = "template"
    MUTATING = "mutating"
    REPAIRING = "repairing"
    PROVING = "proving"
    DONE = "done"


@dataclass
class GenerationResult:
    board: Board
    seed: int
    score: int
    target: int
    accepted: int        # mutations accepted on the final attempt
    restarts: int        # fresh templates after too many rejections
    retries: int         # solvability retries
    solve: SolveResult

    @property
    def proven(self) -> bool:
        return self.solve.solvable


class LevelGenerator:
    def __init__(self, seed: int, config: Optional[GeneratorConfig] = None) -> None:
        self.seed = seed
        self.cfg = config or DEFAULTS
        self.rng = PMRandom.from_seed(seed)
        self.phase = Phase.DONE

    # ---------- public API ----------

    def generate(self, rows: int, cols: int, goal_color: str,
                 target_difficulty: Optional[int] = None) -> GenerationResult:
        cfg = self.cfg
        if not cfg.dimensions_ok(rows, cols):
            raise ValueError(f"Invalid grid dimensions {rows}x{cols}")
        if goal_color not in cfg.palette:
            raise ValueError(f"Unsupported goal color {goal_color!r}")
        target = cfg.default_target(rows, cols) if target_difficulty is None else target_difficulty

        board, accepted, restarts = self._mutate(rows, cols, goal_color, target)
        board = self._repair(board)
        board, result, retries = self._prove(board, rows, cols, goal_color)

        self._enter(Phase.DONE)
        score = difficulty_score(board)
        logger.info("generated %dx%d level (seed=%d score=%d accepted=%d restarts=%d proven=%s)",
                    rows, cols, self.seed, score, accepted, restarts, result.solvable)
        return GenerationResult(board, self.seed, score, target, accepted, restarts, retries, result)

    def generate_level(self, rows: int, cols: int, goal_color: str,
                       target_difficulty: Optional[int] = None) -> Board:
        return self.generate(rows, cols, goal_color, target_difficulty).board

    def generate_level_json(self, rows: int, cols: int, goal_color: str,
                            target_difficulty: Optional[int] = None) -> str:
        return dumps_level(self.generate_level(rows, cols, goal_color, target_difficulty))

    # ---------- phases ----------

    def _enter(self, phase: Phase) -> None:
        logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _acceptable(self, board: Board) -> bool:
        return is_valid(board, self.cfg) and not is_game_won(board)

    def _template(self, rows: int, cols: int, goal_color: str) -> Board:
        self._enter(Phase.TEMPLATE)
        board = build_template(rows, cols, goal_color, self.rng, self.cfg)
        if is_game_won(board):
            raise GenerationError("Starting template should not be already solved")
        return board

    def _mutate(self, rows: int, cols: int, goal_color: str, target: int):
        cfg = self.cfg
        current = self._template(rows, cols, goal_color)
        self._enter(Phase.MUTATING)
        rejects = accepted = restarts = guard = 0

        while (difficulty_score(current) < target or accepted < 1) and guard < cfg.iteration_guard:
            guard += 1
            candidate = current.copy()
            if apply_random_mutation(candidate, self.rng, cfg) is not None and self._acceptable(candidate):
                current = candidate
                rejects = 0
                accepted += 1
            else:
                rejects += 1

            if rejects >= cfg.max_rejects:
                restarts += 1
                logger.debug("restart #%d after %d rejections", restarts, rejects)
                current = self._template(rows, cols, goal_color)
                self._enter(Phase.MUTATING)
                rejects = 0
                accepted = 0

        if guard >= cfg.iteration_guard:
            logger.debug("iteration guard hit (%d), accepted=%d", guard, accepted)
        return current, accepted, restarts

    def _repair(self, board: Board) -> Board:
        self._enter(Phase.REPAIRING)
        repaired = self._try_repair(board)
        if repaired is not None:
            return repaired
        if is_game_won(board):
            raise GenerationError("Generated level is already solved after repair")
        raise GenerationError("Repair could not produce a valid level: "
                              + ", ".join(validate(board, self.cfg)))

    def _try_repair(self, board: Board) -> Optional[Board]:
        if self._acceptable(board):
            return board
        logger.debug("repairing: %s", ", ".join(validate(board, self.cfg)))
        for _ in range(self.cfg.repair_rounds):
            for op in (reverse_paint, add_non_goal_tile, reverse_relocate):
                candidate = board.copy()
                if op(candidate, self.rng, self.cfg) is not None and self._acceptable(candidate):
                    return candidate
        return None

    def _retry_candidate(self, rows: int, cols: int, goal_color: str) -> Optional[Board]:
        candidate = self._template(rows, cols, goal_color)
        for _ in range(self.cfg.retry_mutations):
            trial = candidate.copy()
            if apply_random_mutation(trial, self.rng, self.cfg) is not None and self._acceptable(trial):
                candidate = trial
        self._enter(Phase.REPAIRING)
        return self._try_repair(candidate)

    def _prove(self, board: Board, rows: int, cols: int, goal_color: str):
        cfg = self.cfg
        self._enter(Phase.PROVING)
        best, best_result = board, solve(board, cfg.solver_max_states)
        retries = 0
        while not best_result.solvable and retries < cfg.solvability_retries:
            retries += 1
            logger.debug("not proven solvable (explored=%d capped=%s), retry %d",
                         best_result.explored, best_result.capped, retries)
            candidate = self._retry_candidate(rows, cols, goal_color)
            self._enter(Phase.PROVING)
            if candidate is None:
                continue
            result = solve(candidate, cfg.solver_max_states)
            # Keep the first of equally ranked candidates
            if _proof_rank(result) > _proof_rank(best_result):
                best, best_result = candidate, result

        if best_result.capped:
            # Accept anyway: the state cap can reject solvable boards
            logger.warning("accepting level not proven solvable after %d retries (explored=%d)",
                           retries, best_result.explored)
        elif not best_result.solvable:
            logger.warning("accepting level the solver refuted after %d retries (explored=%d)",
                           retries, best_result.explored)
        return best, best_result, retries


def _proof_rank(result: SolveResult) -> int:
    # proven > stopped at the state cap > fully searched without a win
    if result.solvable:
        return 2
    return 1 if result.capped else 0

# src/floodpaint/config.py
# Generator limits and budgets. One frozen instance is shared by default;
# derive variants with dataclasses.replace().

from dataclasses import dataclass
from typing import Tuple

PALETTE: Tuple[str, ...] = ("G", "B", "R", "Y", "P")


@dataclass(frozen=True)
class GeneratorConfig:
    palette: Tuple[str, ...] = PALETTE

    # Structural
    min_rows: int = 2
    min_cols: int = 2
    max_cells: int = 49          # up to 7x7
    max_wall_ratio: float = 0.25

    # Dots
    max_dots: int = 5
    max_total_dots: int = 20

    # Mutation draw, percent (remainder goes to add-wall)
    reverse_paint_pct: int = 50
    reverse_relocate_pct: int = 30

    # Budgets
    max_rejects: int = 120
    iteration_guard: int = 5000
    repair_rounds: int = 100
    solver_max_states: int = 100_000
    solvability_retries: int = 3
    retry_mutations: int = 5

    def dimensions_ok(self, rows: int, cols: int) -> bool:
        return rows >= self.min_rows and cols >= self.min_cols and rows * cols <= self.max_cells

    def wall_cap(self, rows: int, cols: int) -> int:
        # floor(rows*cols*ratio)
        return int(rows * cols * self.max_wall_ratio)

    def default_target(self, rows: int, cols: int) -> int:
        # For 5x5: max(15, 25+6) = 31 points
        return max(15, rows * cols + 6)


# Global defaults (callers may pass their own)
DEFAULTS = GeneratorConfig()

# src/floodpaint/grid.py
from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .tiles import Cell, EMPTY, COLOR_KIND, WALL_KIND

RC = Tuple[int, int]

# Orthogonal steps: up, down, left, right
DIRS: Tuple[RC, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def manhattan(a: RC, b: RC) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def is_adjacent(a: RC, b: RC) -> bool:
    return manhattan(a, b) == 1


@dataclass
class Board:
    rows: int
    cols: int
    goal_color: str
    cells: List[List[Cell]]

    @classmethod
    def empty(cls, rows: int, cols: int, goal_color: str) -> "Board":
        if rows < 1 or cols < 1:
            raise ValueError(f"Invalid board size {rows}x{cols}")
        cells = [[EMPTY for _ in range(cols)] for _ in range(rows)]
        return cls(rows=rows, cols=cols, goal_color=goal_color, cells=cells)

    # ---------- access ----------

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _check(self, r: int, c: int) -> None:
        if not self.in_bounds(r, c):
            raise IndexError(f"Tile ({r},{c}) outside {self.rows}x{self.cols} board")

    def get(self, r: int, c: int) -> Cell:
        self._check(r, c)
        return self.cells[r][c]

    def set(self, r: int, c: int, cell: Cell) -> None:
        self._check(r, c)
        self.cells[r][c] = cell

    # ---------- copies ----------

    def copy(self) -> "Board":
        """Independent copy: new row lists (cells are immutable values)."""
        return Board(self.rows, self.cols, self.goal_color, [list(row) for row in self.cells])

    def shallow_copy(self) -> "Board":
        """Shares row lists with the original. Only for read-only checks."""
        return Board(self.rows, self.cols, self.goal_color, list(self.cells))

    # ---------- iteration ----------

    def positions(self) -> Iterator[RC]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def neighbors(self, r: int, c: int) -> List[RC]:
        out = []
        for dr, dc in DIRS:
            nr, nc = r + dr, c + dc
            if self.in_bounds(nr, nc):
                out.append((nr, nc))
        return out

    def cells_of_kind(self, kind: str) -> List[RC]:
        return [(r, c) for r, c in self.positions() if self.cells[r][c].kind == kind]

    def colored_positions(self, include_goal: bool = True) -> List[RC]:
        out = []
        for r, c in self.positions():
            cell = self.cells[r][c]
            if cell.kind == COLOR_KIND and (include_goal or cell.color != self.goal_color):
                out.append((r, c))
        return out

    def empty_neighbors(self, r: int, c: int) -> List[RC]:
        return [(nr, nc) for nr, nc in self.neighbors(r, c) if self.cells[nr][nc].is_empty]

    # ---------- counts ----------

    def count_walls(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.kind == WALL_KIND)

    def count_goal_cells(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell.has_color(self.goal_color))

    def count_colored_non_goal(self) -> int:
        return len(self.colored_positions(include_goal=False))

    def total_dots(self) -> int:
        return sum(cell.dots for row in self.cells for cell in row if cell.kind == COLOR_KIND)

    def find_goal(self) -> Optional[RC]:
        # First goal-colored cell in row-major order (the anchor while generating)
        for r, c in self.positions():
            if self.cells[r][c].has_color(self.goal_color):
                return (r, c)
        return None

    def connected_component(self, r: int, c: int, color: str) -> List[RC]:
        """All cells 4-connected to (r,c) through cells of ``color`` (BFS)."""
        if not self.in_bounds(r, c) or not self.cells[r][c].has_color(color):
            return []
        out: List[RC] = []
        seen = {(r, c)}
        frontier = deque([(r, c)])
        while frontier:
            cur = frontier.popleft()
            out.append(cur)
            for nb in self.neighbors(*cur):
                if nb not in seen and self.cells[nb[0]][nb[1]].has_color(color):
                    seen.add(nb)
                    frontier.append(nb)
        return out

    def state_key(self) -> str:
        """Row-major content key: E, W, or color+dots per cell."""
        parts = []
        for row in self.cells:
            for cell in row:
                if cell.kind == COLOR_KIND:
                    parts.append(f"{cell.color}{cell.dots}")
                else:
                    parts.append("E" if cell.is_empty else "W")
        return ",".join(parts)

    def as_matrix(self) -> List[List[str]]:
        return [[str(cell) for cell in row] for row in self.cells]

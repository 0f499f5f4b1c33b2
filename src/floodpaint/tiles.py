# src/floodpaint/tiles.py
# Cell values. A cell is one immutable tagged value: EMPTY, WALL or COLOR.

from dataclasses import dataclass
from typing import Optional

EMPTY_KIND = "empty"
WALL_KIND = "wall"
COLOR_KIND = "color"


@dataclass(frozen=True)
class Cell:
    """One grid position's content.

    Only COLOR cells carry a color and dots; EMPTY and WALL always hold
    ``color=None`` and ``dots=0``. Cells never change in place, so boards can
    share them freely between copies.
    """
    kind: str
    color: Optional[str] = None
    dots: int = 0

    @property
    def is_empty(self) -> bool:
        return self.kind == EMPTY_KIND

    @property
    def is_wall(self) -> bool:
        return self.kind == WALL_KIND

    @property
    def is_paintable(self) -> bool:
        return self.kind == COLOR_KIND

    def has_color(self, color: str) -> bool:
        return self.kind == COLOR_KIND and self.color == color

    def with_dots(self, dots: int) -> "Cell":
        return colored(self.color, dots)

    def with_color(self, color: str) -> "Cell":
        return colored(color, self.dots)

    def __str__(self) -> str:
        if self.kind == EMPTY_KIND:
            return "_"
        if self.kind == WALL_KIND:
            return "|"
        return f"{self.color}({self.dots})" if self.dots > 0 else self.color


EMPTY = Cell(EMPTY_KIND)
WALL = Cell(WALL_KIND)


def colored(color: str, dots: int = 0) -> Cell:
    if not color:
        raise ValueError("Must have a color.")
    if dots < 0:
        raise ValueError("Number of dots cannot be negative.")
    return Cell(COLOR_KIND, color, dots)

# src/floodpaint/levels.py
# Level JSON (the format the level loader and the generator share) and a
# compact text notation for boards:  _ empty, | wall, G color, G(2) with dots.

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional, Sequence

from .grid import Board
from .tiles import Cell, EMPTY, WALL, colored


class LevelFormatError(ValueError):
    pass


# ---------- JSON ----------

def cell_to_dict(cell: Cell) -> Dict[str, Any]:
    if cell.is_empty:
        return {"type": "empty"}
    if cell.is_wall:
        return {"type": "wall"}
    return {"color": cell.color, "dots": cell.dots}


def cell_from_dict(d: Optional[Dict[str, Any]]) -> Cell:
    if d is None:
        return EMPTY
    if not isinstance(d, dict):
        raise LevelFormatError(f"Tile must be an object, got {d!r}")
    kind = d.get("type")
    if kind == "empty":
        return EMPTY
    if kind == "wall":
        return WALL
    if kind is not None:
        raise LevelFormatError(f"Unknown tile type {kind!r}")
    color = d.get("color")
    if not color or not isinstance(color, str):
        raise LevelFormatError(f"Tile has no type and no color: {d!r}")
    dots = d.get("dots")
    try:
        return colored(color, 0 if dots is None else int(dots))
    except (TypeError, ValueError) as e:
        raise LevelFormatError(f"Bad tile {d!r}: {e}") from e


def level_to_dict(board: Board) -> Dict[str, Any]:
    return {
        "goalColor": board.goal_color,
        "rows": board.rows,
        "cols": board.cols,
        "tiles": [[cell_to_dict(cell) for cell in row] for row in board.cells],
    }


def level_from_dict(d: Dict[str, Any]) -> Board:
    if not isinstance(d, dict):
        raise LevelFormatError(f"Level must be an object, got {type(d).__name__}")
    for key in ("goalColor", "rows", "cols", "tiles"):
        if key not in d:
            raise LevelFormatError(f"Level is missing {key!r}")
    try:
        rows, cols = int(d["rows"]), int(d["cols"])
    except (TypeError, ValueError) as e:
        raise LevelFormatError(f"Invalid level size: {e}") from e
    tiles = d["tiles"]
    if rows < 1 or cols < 1:
        raise LevelFormatError(f"Invalid level size {rows}x{cols}")
    if len(tiles) != rows:
        raise LevelFormatError(f"Expected {rows} rows of tiles, got {len(tiles)}")
    board = Board.empty(rows, cols, d["goalColor"])
    for r, row in enumerate(tiles):
        if len(row) > cols:
            raise LevelFormatError(f"Row {r} has {len(row)} tiles, expected {cols}")
        # Missing trailing cells load as empty
        for c, t in enumerate(row):
            board.cells[r][c] = cell_from_dict(t)
    return board


def dumps_level(board: Board, indent: Optional[int] = 2) -> str:
    return json.dumps(level_to_dict(board), indent=indent)


def loads_level(text: str) -> Board:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LevelFormatError(f"Level is not valid JSON: {e}") from e
    if isinstance(data, list):
        if not data:
            raise LevelFormatError("Level pack is empty")
        data = data[0]
    return level_from_dict(data)


def load_level_pack(path: str) -> List[Board]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    return [level_from_dict(d) for d in data]


def dump_level_pack(levels: Sequence[Board], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump([level_to_dict(b) for b in levels], f, indent=2)
        f.write("\n")


# ---------- text notation ----------

_TOKEN = re.compile(r"^([A-Za-z])(?:\((\d+)\))?$")


def parse_cell(token: str) -> Cell:
    if token == "_":
        return EMPTY
    if token == "|":
        return WALL
    m = _TOKEN.match(token)
    if not m:
        raise LevelFormatError(f"Cannot parse tile {token!r}")
    return colored(m.group(1), int(m.group(2) or 0))


def parse_board(text: str, goal_color: str) -> Board:
    """
    Build a board from rows of whitespace-separated tokens, e.g.
        G(1) B
        _    _
    """
    lines = [ln.split() for ln in text.strip().splitlines() if ln.strip()]
    if not lines:
        raise LevelFormatError("Board text is empty")
    cols = len(lines[0])
    for i, toks in enumerate(lines):
        if len(toks) != cols:
            raise LevelFormatError(f"Row {i} has {len(toks)} tiles, expected {cols}")
    board = Board.empty(len(lines), cols, goal_color)
    for r, toks in enumerate(lines):
        for c, tok in enumerate(toks):
            board.cells[r][c] = parse_cell(tok)
    return board


def format_board(board: Board) -> str:
    mat = board.as_matrix()
    width = max(len(s) for row in mat for s in row)
    return "\n".join(" ".join(s.ljust(width) for s in row).rstrip() for row in mat)

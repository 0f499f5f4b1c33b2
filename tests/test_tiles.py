from dataclasses import FrozenInstanceError

import pytest

from floodpaint.tiles import EMPTY, WALL, colored

def test_kinds():
    assert EMPTY.is_empty and not EMPTY.is_wall and not EMPTY.is_paintable
    assert WALL.is_wall and not WALL.is_empty and not WALL.is_paintable
    g = colored("G", 2)
    assert g.is_paintable and g.has_color("G") and not g.has_color("B")
    assert not EMPTY.has_color("G")

def test_invalid_cells():
    with pytest.raises(ValueError):
        colored("G", -1)
    with pytest.raises(ValueError):
        colored("", 1)

def test_cells_are_values():
    g = colored("G", 2)
    assert g.with_dots(1) == colored("G", 1)
    assert g.with_color("B") == colored("B", 2)
    assert g == colored("G", 2)  # unchanged
    with pytest.raises(FrozenInstanceError):
        g.dots = 5

def test_str_notation():
    assert str(EMPTY) == "_"
    assert str(WALL) == "|"
    assert str(colored("B")) == "B"
    assert str(colored("R", 3)) == "R(3)"

# tests/test_levels.py
import json

import pytest

from floodpaint.grid import Board
from floodpaint.levels import (
    LevelFormatError, cell_from_dict, cell_to_dict, dump_level_pack, dumps_level,
    format_board, level_from_dict, level_to_dict, load_level_pack, loads_level,
    parse_board, parse_cell,
)
from floodpaint.tiles import EMPTY, WALL, colored

def sample():
    return parse_board("G(2) B |\n_ _ R(1)", "G")

def test_level_dict_layout():
    d = level_to_dict(parse_board("G(1) |\n_ B", "G"))
    assert d == {
        "goalColor": "G",
        "rows": 2,
        "cols": 2,
        "tiles": [
            [{"color": "G", "dots": 1}, {"type": "wall"}],
            [{"type": "empty"}, {"color": "B", "dots": 0}],
        ],
    }

def test_json_round_trip():
    b = sample()
    assert loads_level(dumps_level(b)) == b
    assert loads_level(dumps_level(b, indent=None)) == b

@pytest.mark.parametrize("d,expected", [
    (None, EMPTY),
    ({"type": "empty"}, EMPTY),
    ({"type": "wall"}, WALL),
    ({"color": "B", "dots": 3}, colored("B", 3)),
    ({"color": "R"}, colored("R", 0)),
    ({"color": "Y", "dots": None}, colored("Y", 0)),
])
def test_cell_from_dict(d, expected):
    assert cell_from_dict(d) == expected

@pytest.mark.parametrize("d", [
    {"type": "lava"},
    {"dots": 2},
    {"color": "", "dots": 1},
    {"color": "B", "dots": -1},
    {"color": "B", "dots": [1]},
    {"color": "B", "dots": "many"},
    {"color": 3},
    "wall",
    ["G", 1],
])
def test_bad_cells(d):
    with pytest.raises(LevelFormatError):
        cell_from_dict(d)

def test_cell_to_dict():
    assert cell_to_dict(colored("P", 4)) == {"color": "P", "dots": 4}

def test_short_rows_pad_with_empty():
    b = level_from_dict({"goalColor": "G", "rows": 2, "cols": 3,
                         "tiles": [[{"color": "G", "dots": 1}], [None, {"type": "wall"}]]})
    assert b.get(0, 1) == EMPTY and b.get(0, 2) == EMPTY
    assert b.get(1, 0) == EMPTY and b.get(1, 1) == WALL

@pytest.mark.parametrize("d", [
    {"rows": 1, "cols": 1, "tiles": [[None]]},
    {"goalColor": "G", "rows": 0, "cols": 1, "tiles": []},
    {"goalColor": "G", "rows": 2, "cols": 1, "tiles": [[None]]},
    {"goalColor": "G", "rows": 1, "cols": 1, "tiles": [[None, None]]},
    {"goalColor": "G", "rows": "two", "cols": 1, "tiles": [[None]]},
    {"goalColor": "G", "rows": 1, "cols": 1, "tiles": [["wall"]]},
    [{"goalColor": "G"}],
])
def test_bad_levels(d):
    with pytest.raises(LevelFormatError):
        level_from_dict(d)

def test_loads_level_errors_and_packs():
    with pytest.raises(LevelFormatError):
        loads_level("{not json")
    with pytest.raises(LevelFormatError):
        loads_level("[]")
    with pytest.raises(LevelFormatError):
        loads_level("5")
    with pytest.raises(LevelFormatError):
        loads_level('{"goalColor": "G", "rows": 1, "cols": 1, "tiles": [["wall"]]}')
    pack = json.dumps([level_to_dict(sample()), level_to_dict(Board.empty(2, 2, "B"))])
    assert loads_level(pack) == sample()

def test_pack_files(tmp_path):
    path = tmp_path / "pack.json"
    levels = [sample(), parse_board("G(1) B\n_ _", "G")]
    dump_level_pack(levels, str(path))
    assert load_level_pack(str(path)) == levels

    single = tmp_path / "one.json"
    single.write_text(dumps_level(sample()), encoding="utf-8")
    assert load_level_pack(str(single)) == [sample()]

def test_text_notation():
    b = sample()
    assert b.get(0, 0) == colored("G", 2)
    assert b.get(0, 2) == WALL
    assert format_board(b) == "G(2) B    |\n_    _    R(1)"
    assert parse_board(format_board(b), "G") == b

@pytest.mark.parametrize("token", ["GG", "G(", "G(x)", "3", ""])
def test_bad_tokens(token):
    with pytest.raises(LevelFormatError):
        parse_cell(token)

def test_bad_board_text():
    with pytest.raises(LevelFormatError):
        parse_board("  \n ", "G")
    with pytest.raises(LevelFormatError):
        parse_board("G B\n_", "G")

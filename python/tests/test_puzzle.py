"""Puzzle model tests: validation and JSON persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.engine.gamestate.state import TokenPositions
from backend.engine.walls.layout import WallLayout
from backend.models.board import Direction, Position
from backend.models.puzzle import (
    InvalidPuzzleError,
    Puzzle,
    Target,
    load_puzzle,
    save_puzzle,
)


def _puzzle(**overrides) -> Puzzle:
    fields = {
        "walls": WallLayout.from_lists(6, 5, [[], [2], [], [], [], []], [[], [], [1], [], []]),
        "tokens": TokenPositions.from_tuples([(0, 0), (1, 0), (1, 2), (1, 4)]),
        "target": Target(Position(2, 2), token=0),
    }
    fields.update(overrides)
    return Puzzle(**fields)


# -- validation ---------------------------------------------------------------


def test_valid_puzzle_passes() -> None:
    _puzzle().validate()


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"walls": WallLayout.from_lists(6, 5, [[]] * 5, [[]] * 5)}, "Wall layout"),
        ({"walls": WallLayout.from_lists(6, 5, [[9]] + [[]] * 5, [[]] * 5)}, "Wall layout"),
        ({"tokens": TokenPositions([])}, "At least one token"),
        ({"tokens": TokenPositions.from_tuples([(0, 0), (6, 0)])}, "outside"),
        ({"tokens": TokenPositions.from_tuples([(0, 0), (0, 0)])}, "same cell"),
        ({"target": Target(Position(2, 2), token=4)}, "does not exist"),
        ({"target": Target(Position(2, 5), token=0)}, "outside the board"),
    ],
    ids=["wall-rows", "wall-index", "no-tokens", "token-off-board", "shared-cell",
         "target-token", "target-cell"],
)
def test_invalid_puzzles(overrides: dict, message: str) -> None:
    with pytest.raises(InvalidPuzzleError, match=message):
        _puzzle(**overrides).validate()


def test_invalid_puzzle_is_a_value_error() -> None:
    assert issubclass(InvalidPuzzleError, ValueError)


# -- targets ------------------------------------------------------------------


def test_target_for_one_token() -> None:
    positions = TokenPositions.from_tuples([(0, 0), (2, 2)])

    assert Target(Position(2, 2), token=1).is_reached(positions)
    assert not Target(Position(2, 2), token=0).is_reached(positions)


def test_wildcard_target() -> None:
    positions = TokenPositions.from_tuples([(0, 0), (2, 2)])

    assert Target(Position(2, 2)).is_reached(positions)
    assert not Target(Position(1, 1)).is_reached(positions)


# -- persistence --------------------------------------------------------------


def test_save_then_load(tmp_path: Path) -> None:
    puzzle = _puzzle()
    path = tmp_path / "nested" / "puzzle.json"

    save_puzzle(puzzle, path)

    assert load_puzzle(path) == puzzle
    data = json.loads(path.read_text())
    assert data["right_walls"][1] == [2]
    assert data["target"] == {"token": 0, "row": 2, "col": 2}


def test_load_wildcard_and_default_walls(tmp_path: Path) -> None:
    path = tmp_path / "open.json"
    path.write_text(json.dumps({
        "height": 3,
        "width": 4,
        "tokens": [[0, 0]],
        "target": {"token": None, "row": 2, "col": 3},
    }))

    puzzle = load_puzzle(path)

    assert puzzle.walls == WallLayout.empty(3, 4)
    assert puzzle.target.token is None
    puzzle.validate()


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[1, 2, 3]",
        json.dumps({"height": 3, "width": 3, "tokens": [[0, 0]]}),
        json.dumps({"height": "x", "width": 3, "tokens": [], "target": {"row": 0, "col": 0}}),
    ],
    ids=["syntax", "not-object", "no-target", "bad-height"],
)
def test_malformed_files(tmp_path: Path, content: str) -> None:
    path = tmp_path / "broken.json"
    path.write_text(content)

    with pytest.raises(InvalidPuzzleError):
        load_puzzle(path)


def _description(**overrides) -> dict:
    data = _puzzle().to_dict()
    data.update(overrides)
    return data


@pytest.mark.parametrize(
    "overrides",
    [
        {"right_walls": []},
        {"bottom_walls": []},
    ],
    ids=["no-wall-rows", "no-wall-cols"],
)
def test_explicit_empty_wall_lists_are_not_defaulted(overrides: dict) -> None:
    puzzle = Puzzle.from_dict(_description(**overrides))

    with pytest.raises(InvalidPuzzleError, match="Wall layout"):
        puzzle.validate()


@pytest.mark.parametrize(
    "overrides",
    [
        {"right_walls": [["a"], [], [], [], [], []]},
        {"bottom_walls": [[], [None], [], [], []]},
        {"right_walls": [1, 2, 3, 4, 5, 6]},
        {"target": [0, 4]},
        {"target": "0,4"},
        {"tokens": [[0, 0, 0]]},
    ],
    ids=["string-wall", "null-wall", "flat-walls", "target-list", "target-string",
         "token-triple"],
)
def test_wrongly_typed_fields_are_invalid(overrides: dict) -> None:
    with pytest.raises(InvalidPuzzleError, match="Malformed"):
        Puzzle.from_dict(_description(**overrides))


def test_numeric_strings_are_accepted() -> None:
    data = _description(right_walls=[[], ["2"], [], [], [], []])

    assert Puzzle.from_dict(data) == _puzzle()


def test_undecodable_file(tmp_path: Path) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(InvalidPuzzleError):
        load_puzzle(path)


def test_direction_codes() -> None:
    assert [d.code for d in (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT)] == [
        0, 1, 2, 3,
    ]

"""Wall layout tests: validity and the wall stop in each direction."""

from __future__ import annotations

import pytest

from backend.engine.walls.layout import WallLayout
from backend.models.board import Direction, Position


@pytest.fixture
def layout() -> WallLayout:
    # Row 0 has walls right of columns 1 and 2; column 0 has walls below
    # rows 1 and 2.
    return WallLayout.from_lists(
        6, 5,
        [[1, 2], [], [], [], [], []],
        [[1, 2], [], [], [], []],
    )


# -- validity -----------------------------------------------------------------


def test_layout_is_valid(layout: WallLayout) -> None:
    assert layout.is_valid()


def test_empty_layout_is_valid() -> None:
    assert WallLayout.empty(3, 4).is_valid()


@pytest.mark.parametrize(
    "right, bottom",
    [
        ([[]] * 5, [[]] * 5),            # one row missing
        ([[]] * 6, [[]] * 4),            # one column missing
        ([[5]] + [[]] * 5, [[]] * 5),    # column index == width
        ([[]] * 6, [[6]] + [[]] * 4),    # row index == height
        ([[-1]] + [[]] * 5, [[]] * 5),   # negative index
    ],
    ids=["rows", "cols", "col-range", "row-range", "negative"],
)
def test_invalid_layouts(right: list[list[int]], bottom: list[list[int]]) -> None:
    assert not WallLayout.from_lists(6, 5, right, bottom).is_valid()


# -- wall stops ---------------------------------------------------------------


@pytest.mark.parametrize(
    "position, up, down, right, left",
    [
        # clear row and column: every slide reaches the edge
        (Position(2, 2), 0, 5, 4, 0),
        (Position(0, 0), 0, 1, 1, 0),
        (Position(0, 3), 0, 5, 4, 3),
        (Position(3, 0), 3, 5, 4, 0),
        # boxed in horizontally between two walls
        (Position(0, 2), 0, 5, 2, 2),
        # boxed in vertically between two walls
        (Position(2, 0), 2, 2, 4, 0),
    ],
)
def test_next_wall(
    layout: WallLayout, position: Position, up: int, down: int, right: int, left: int
) -> None:
    assert layout.next_wall(position, Direction.UP) == up
    assert layout.next_wall(position, Direction.DOWN) == down
    assert layout.next_wall(position, Direction.RIGHT) == right
    assert layout.next_wall(position, Direction.LEFT) == left


def test_wall_on_own_side_stops_immediately(layout: WallLayout) -> None:
    # The wall right of (0, 1) sits between columns 1 and 2.
    assert layout.next_wall(Position(0, 1), Direction.RIGHT) == 1
    assert layout.next_wall(Position(0, 2), Direction.LEFT) == 2


# -- builders -----------------------------------------------------------------


def test_from_segments_matches_lists(layout: WallLayout) -> None:
    built = WallLayout.from_segments(
        6, 5, right=[(0, 1), (0, 2)], bottom=[(1, 0), (2, 0)]
    )
    assert built == layout


def test_from_segments_rejects_outside_rows() -> None:
    with pytest.raises(ValueError):
        WallLayout.from_segments(3, 3, right=[(3, 0)])


def test_to_lists_round_trip(layout: WallLayout) -> None:
    right, bottom = layout.to_lists()
    assert right[0] == [1, 2]
    assert bottom[0] == [1, 2]
    assert WallLayout.from_lists(6, 5, right, bottom) == layout

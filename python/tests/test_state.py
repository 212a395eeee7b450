"""Token snapshot tests: nearest blocking token, copy-on-write updates."""

from __future__ import annotations

import pytest

from backend.engine.gamestate.state import TokenPositions
from backend.models.board import Direction, Position


@pytest.fixture
def positions() -> TokenPositions:
    return TokenPositions.from_tuples([(0, 0), (0, 3), (0, 2), (3, 0)])


@pytest.mark.parametrize(
    "position, up, down, right, left",
    [
        (Position(0, 0), None, 2, 1, None),
        (Position(0, 5), None, None, None, 4),
        (Position(4, 0), 4, None, None, None),
        (Position(3, 0), 1, None, None, None),
    ],
)
def test_nearest_other(
    positions: TokenPositions,
    position: Position,
    up: int | None,
    down: int | None,
    right: int | None,
    left: int | None,
) -> None:
    assert positions.nearest_other(position, Direction.UP) == up
    assert positions.nearest_other(position, Direction.DOWN) == down
    assert positions.nearest_other(position, Direction.RIGHT) == right
    assert positions.nearest_other(position, Direction.LEFT) == left


def test_update_leaves_receiver_untouched(positions: TokenPositions) -> None:
    moved = positions.update(1, Position(5, 3))

    assert moved.get(1) == Position(5, 3)
    assert positions.get(1) == Position(0, 3)
    assert [moved.get(i) for i in (0, 2, 3)] == [positions.get(i) for i in (0, 2, 3)]


def test_equality_and_hash_follow_the_ordered_cells(positions: TokenPositions) -> None:
    same = TokenPositions.from_tuples([(0, 0), (0, 3), (0, 2), (3, 0)])
    swapped = TokenPositions.from_tuples([(0, 3), (0, 0), (0, 2), (3, 0)])

    assert same == positions
    assert hash(same) == hash(positions)
    assert swapped != positions
    assert len({positions, same, swapped}) == 2


@pytest.mark.parametrize("token", [4, -1, 100])
def test_unknown_token_is_a_programming_error(
    positions: TokenPositions, token: int
) -> None:
    with pytest.raises(IndexError):
        positions.get(token)
    with pytest.raises(IndexError):
        positions.update(token, Position(5, 5))


def test_occupant(positions: TokenPositions) -> None:
    assert positions.occupant(Position(0, 2)) == 2
    assert positions.occupant(Position(5, 5)) is None


def test_is_distinct() -> None:
    assert TokenPositions.from_tuples([(0, 0), (1, 1)]).is_distinct()
    assert not TokenPositions.from_tuples([(1, 1), (1, 1)]).is_distinct()

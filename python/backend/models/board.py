"""Value types shared by the puzzle model and the engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    # -- wire codes -----------------------------------------------------------

    @property
    def code(self) -> int:
        """Integer code used when moves are handed to other programs."""
        return _CODES[self]

    @property
    def decreasing(self) -> bool:
        """True if sliding this way lowers the row or column index."""
        return self in (Direction.UP, Direction.LEFT)

    @property
    def vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


_CODES: dict[Direction, int] = {
    Direction.UP: 0,
    Direction.LEFT: 1,
    Direction.DOWN: 2,
    Direction.RIGHT: 3,
}


class Position(NamedTuple):
    """A grid cell; compares and hashes like the plain ``(row, col)`` tuple."""

    row: int
    col: int

    def axis(self, direction: Direction) -> int:
        """Return the coordinate that changes when sliding in *direction*."""
        return self.row if direction.vertical else self.col

    def with_axis(self, direction: Direction, value: int) -> Position:
        if direction.vertical:
            return Position(value, self.col)
        return Position(self.row, value)

    def in_bounds(self, height: int, width: int) -> bool:
        return 0 <= self.row < height and 0 <= self.col < width


@dataclass(frozen=True)
class Move:
    """One slide: *token* travels in *direction* until something stops it."""

    token: int
    direction: Direction

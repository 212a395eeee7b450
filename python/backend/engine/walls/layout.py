"""Wall segments of a board and the slide limits they impose."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from backend.models.board import Direction, Position


@dataclass(frozen=True)
class WallLayout:
    """Immutable wall configuration of a ``height`` x ``width`` board.

    ``right_walls[row]`` holds the columns that have a wall on their right
    side, ``bottom_walls[col]`` the rows that have a wall below them.
    """

    height: int
    width: int
    right_walls: tuple[frozenset[int], ...]
    bottom_walls: tuple[frozenset[int], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_lists(
        cls,
        height: int,
        width: int,
        right_walls: Sequence[Iterable[int]],
        bottom_walls: Sequence[Iterable[int]],
    ) -> WallLayout:
        """Build a layout from per-row / per-column index lists.

        Example::

            WallLayout.from_lists(6, 5, [[], [2], [], [], [], []],
                                  [[], [], [1], [], []])
        """
        return cls(
            height=height,
            width=width,
            right_walls=tuple(frozenset(cols) for cols in right_walls),
            bottom_walls=tuple(frozenset(rows) for rows in bottom_walls),
        )

    @classmethod
    def empty(cls, height: int, width: int) -> WallLayout:
        return cls.from_lists(height, width, [[]] * height, [[]] * width)

    @classmethod
    def from_segments(
        cls,
        height: int,
        width: int,
        right: Iterable[tuple[int, int]] = (),
        bottom: Iterable[tuple[int, int]] = (),
    ) -> WallLayout:
        """Build a layout from flat ``(row, col)`` wall segment lists.

        Segments outside the board raise ``ValueError``; they cannot be
        attached to any row or column.
        """
        rights: list[set[int]] = [set() for _ in range(height)]
        bottoms: list[set[int]] = [set() for _ in range(width)]
        for row, col in right:
            if not 0 <= row < height:
                raise ValueError(f"Right wall ({row}, {col}) is outside the board.")
            rights[row].add(col)
        for row, col in bottom:
            if not 0 <= col < width:
                raise ValueError(f"Bottom wall ({row}, {col}) is outside the board.")
            bottoms[col].add(row)
        return cls.from_lists(height, width, rights, bottoms)

    # -- validation -----------------------------------------------------------

    def is_valid(self) -> bool:
        return (
            self.height > 0
            and self.width > 0
            and len(self.right_walls) == self.height
            and len(self.bottom_walls) == self.width
            and all(0 <= c < self.width for cols in self.right_walls for c in cols)
            and all(0 <= r < self.height for rows in self.bottom_walls for r in rows)
        )

    # -- queries --------------------------------------------------------------

    def edge(self, direction: Direction) -> int:
        """Last row/column reachable in *direction* on an empty board."""
        if direction.decreasing:
            return 0
        return self.height - 1 if direction.vertical else self.width - 1

    def next_wall(self, position: Position, direction: Direction) -> int:
        """Row/column where a slide from *position* is stopped by a wall.

        Falls back to the board edge when no wall is in the way.
        """
        if direction.vertical:
            walls = self.bottom_walls[position.col]
        else:
            walls = self.right_walls[position.row]
        start = position.axis(direction)

        # A wall stored at index i sits between cells i and i + 1.
        if direction.decreasing:
            before = [i for i in walls if i < start]
            return max(before) + 1 if before else self.edge(direction)
        after = [i for i in walls if i >= start]
        return min(after) if after else self.edge(direction)

    def has_right_wall(self, row: int, col: int) -> bool:
        return col in self.right_walls[row]

    def has_bottom_wall(self, row: int, col: int) -> bool:
        return row in self.bottom_walls[col]

    # -- serialisation --------------------------------------------------------

    def to_lists(self) -> tuple[list[list[int]], list[list[int]]]:
        return (
            [sorted(cols) for cols in self.right_walls],
            [sorted(rows) for rows in self.bottom_walls],
        )

"""Immutable snapshot of where every token stands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from backend.models.board import Direction, Position


class TokenPositions:
    """Ordered token cells, indexed by token id.

    Equal snapshots hash equally, so they can key the solver's visited set.
    Instances are never modified; ``update`` returns a new snapshot.
    """

    __slots__ = ("_positions", "_hash")

    def __init__(self, positions: Iterable[Position]) -> None:
        self._positions: tuple[Position, ...] = tuple(positions)
        self._hash = hash(self._positions)

    @classmethod
    def from_tuples(cls, cells: Iterable[tuple[int, int]]) -> TokenPositions:
        return cls(Position(row, col) for row, col in cells)

    # -- access ---------------------------------------------------------------

    def get(self, token: int) -> Position:
        """Return the cell of *token*; unknown ids are a programming error."""
        if not 0 <= token < len(self._positions):
            raise IndexError(
                f"Token {token} does not exist ({len(self._positions)} tokens)."
            )
        return self._positions[token]

    def update(self, token: int, position: Position) -> TokenPositions:
        self.get(token)
        positions = list(self._positions)
        positions[token] = position
        return TokenPositions(positions)

    def occupant(self, position: Position) -> int | None:
        for token, cell in enumerate(self._positions):
            if cell == position:
                return token
        return None

    # -- queries --------------------------------------------------------------

    def nearest_other(self, position: Position, direction: Direction) -> int | None:
        """Row/column where a slide from *position* is stopped by a token.

        Only tokens on the same line and strictly ahead of *position* count.
        Returns the index of the cell just before the closest one, or
        ``None`` if the line ahead is clear.
        """
        vertical = direction.vertical
        decreasing = direction.decreasing
        line, start = (position.col, position.row) if vertical else position
        nearest: int | None = None
        for row, col in self._positions:
            other_line, i = (col, row) if vertical else (row, col)
            if other_line != line:
                continue
            if decreasing:
                if i < start and (nearest is None or i > nearest):
                    nearest = i
            elif i > start and (nearest is None or i < nearest):
                nearest = i

        if nearest is None:
            return None
        return nearest + 1 if decreasing else nearest - 1

    def is_distinct(self) -> bool:
        return len(set(self._positions)) == len(self._positions)

    def as_tuples(self) -> list[tuple[int, int]]:
        return [(p.row, p.col) for p in self._positions]

    # -- dunder ---------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenPositions):
            return NotImplemented
        return self._hash == other._hash and self._positions == other._positions

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        cells = ", ".join(f"({p.row}, {p.col})" for p in self._positions)
        return f"TokenPositions([{cells}])"

"""Sliding physics: where a token ends up when it is pushed."""

from __future__ import annotations

from backend.engine.gamestate.state import TokenPositions
from backend.engine.walls.layout import WallLayout
from backend.models.board import Direction, Position

# Order in which directions are tried when expanding a state.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.RIGHT,
    Direction.LEFT,
)


class MovementRules:
    """Combines the fixed walls with the live token positions.

    Wall stops never change for a board, so they are looked up once per
    cell and direction.  Token stops depend on the snapshot passed in and
    are computed on every call.
    """

    __slots__ = ("walls", "_wall_stops")

    def __init__(self, walls: WallLayout) -> None:
        self.walls = walls
        cells = [
            Position(r, c) for r in range(walls.height) for c in range(walls.width)
        ]
        self._wall_stops: dict[Direction, list[int]] = {
            direction: [walls.next_wall(cell, direction) for cell in cells]
            for direction in DIRECTIONS
        }

    def destination(
        self, token: int, positions: TokenPositions, direction: Direction
    ) -> Position | None:
        """Return where *token* stops when slid in *direction*.

        ``None`` means the token cannot move that way at all.
        """
        position = positions.get(token)
        wall = self._wall_stops[direction][position.row * self.walls.width + position.col]
        blocker = positions.nearest_other(position, direction)
        edge = self.walls.edge(direction)

        # The tightest limit wins: the largest index when moving towards 0.
        if direction.decreasing:
            stop = max(wall, edge) if blocker is None else max(wall, blocker, edge)
        else:
            stop = min(wall, edge) if blocker is None else min(wall, blocker, edge)
        if stop == position.axis(direction):
            return None
        return position.with_axis(direction, stop)

    def valid_moves(
        self, token: int, positions: TokenPositions
    ) -> list[tuple[Direction, Position]]:
        moves: list[tuple[Direction, Position]] = []
        for direction in DIRECTIONS:
            target = self.destination(token, positions, direction)
            if target is not None:
                moves.append((direction, target))
        return moves

"""Core gameplay logic: applies slides and checks the win condition."""

from __future__ import annotations

from backend.engine.gameplay.rules import MovementRules
from backend.engine.gamestate.state import TokenPositions
from backend.models.board import Direction, Move
from backend.models.puzzle import Puzzle


class GamePlay:
    """Replays moves on one puzzle, starting from its initial tokens."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.rules = MovementRules(puzzle.walls)
        self.positions: TokenPositions = puzzle.tokens
        self.moves: int = 0

    # -- movement -------------------------------------------------------------

    def move(self, token: int, direction: Direction) -> bool:
        """Slide *token* in *direction*.

        Returns True if the token actually moved.
        """
        destination = self.rules.destination(token, self.positions, direction)
        if destination is None:
            return False
        self.positions = self.positions.update(token, destination)
        self.moves += 1
        return True

    def apply(self, move: Move) -> bool:
        return self.move(move.token, move.direction)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.puzzle.target.is_reached(self.positions)

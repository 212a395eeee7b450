"""Builds puzzles: the classic 16×16 board and seeded random boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamestate.state import TokenPositions
from backend.engine.walls.layout import WallLayout
from backend.models.board import Position
from backend.models.puzzle import Puzzle, Target

logger = logging.getLogger(__name__)

CLASSIC_SIZE = 16

# Walls of the classic 16×16 board: columns with a wall on their right,
# listed per row, and rows with a wall below them, listed per column.
CLASSIC_RIGHT_WALLS: list[list[int]] = [
    [4], [9], [6], [], [2, 8], [12], [4, 13], [6, 8],
    [6, 8, 9], [4], [13], [], [6, 12], [5, 9], [2], [5, 10],
]
CLASSIC_BOTTOM_WALLS: list[list[int]] = [
    [2, 9], [], [3], [4, 14], [8], [5], [2, 12], [6, 8],
    [4, 6, 8], [13], [0, 7], [], [11], [5, 12], [9], [2, 8],
]
CLASSIC_TOKENS: list[tuple[int, int]] = [(0, 0), (0, 15), (15, 0), (15, 15)]


class GameGenerator:
    """Creates puzzles — all methods are static."""

    @staticmethod
    def classic(target: Target | None = None) -> Puzzle:
        """Return the classic board with four tokens in the corners."""
        walls = WallLayout.from_lists(
            CLASSIC_SIZE, CLASSIC_SIZE, CLASSIC_RIGHT_WALLS, CLASSIC_BOTTOM_WALLS
        )
        if target is None:
            target = Target(position=Position(8, 6), token=0)
        return Puzzle(
            walls=walls,
            tokens=TokenPositions.from_tuples(CLASSIC_TOKENS),
            target=target,
        )

    @staticmethod
    def generate(
        height: int,
        width: int,
        num_tokens: int = 4,
        num_walls: int | None = None,
        seed: int | None = None,
    ) -> Puzzle:
        """Return a random valid puzzle.

        Tokens and the target cell are all distinct, so the puzzle is never
        solved from the start.  The target token is always token 0.  A
        random puzzle may still be unsolvable.
        """
        cells = height * width
        if num_tokens < 1 or num_tokens + 1 > cells:
            raise ValueError(
                f"Cannot place {num_tokens} tokens and a target on a "
                f"{height}×{width} board."
            )
        if num_walls is None:
            num_walls = (height + width) // 2

        rng = random.Random(seed)
        right = [
            (rng.randrange(height), rng.randrange(width - 1))
            for _ in range(num_walls)
            if width > 1
        ]
        bottom = [
            (rng.randrange(height - 1), rng.randrange(width))
            for _ in range(num_walls)
            if height > 1
        ]
        walls = WallLayout.from_segments(height, width, right=right, bottom=bottom)

        picked = rng.sample(range(cells), num_tokens + 1)
        positions = [Position(*divmod(i, width)) for i in picked]
        puzzle = Puzzle(
            walls=walls,
            tokens=TokenPositions(positions[:-1]),
            target=Target(position=positions[-1], token=0),
        )
        logger.debug(
            "generated %d×%d puzzle with %d tokens, %d wall segments (seed=%s)",
            height,
            width,
            num_tokens,
            len(right) + len(bottom),
            seed,
        )
        return puzzle

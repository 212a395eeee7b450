"""Best-first search for the shortest slide sequence."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field

from backend.engine.gameplay.rules import MovementRules
from backend.engine.gamestate.state import TokenPositions
from backend.engine.history.path import PathHistory, SharedPathHistory, Step
from backend.models.board import Move
from backend.models.puzzle import Puzzle, Target

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Cost:
    """Fewer moves first; among equal move counts, fewer token switches."""

    moves: int = 0
    switches: int = 0

    def after(self, token: int, previous: int | None) -> Cost:
        switched = previous is not None and previous != token
        return Cost(self.moves + 1, self.switches + int(switched))


@dataclass
class Solution:
    steps: list[Step]
    cost: Cost
    explored: int = field(default=0, compare=False)

    @property
    def moves(self) -> list[Move]:
        return [step.move for step in self.steps]

    def __len__(self) -> int:
        return len(self.steps)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        puzzle: Puzzle, history: type[PathHistory] = SharedPathHistory
    ) -> Solution | None:
        """Return the shortest solution for *puzzle*, or ``None`` if unsolvable.

        The puzzle is validated first; ``InvalidPuzzleError`` is raised
        before any search happens.  *history* picks the backend that records
        the path of each queued node.
        """
        puzzle.validate()
        return Solver.search(
            MovementRules(puzzle.walls), puzzle.tokens, puzzle.target, history
        )

    @staticmethod
    def search(
        rules: MovementRules,
        start: TokenPositions,
        target: Target,
        history: type[PathHistory] = SharedPathHistory,
    ) -> Solution | None:
        """Run the search on already validated inputs.

        States are marked as seen when they are queued, so each one is
        expanded at most once.  Since every move costs exactly one, the
        first goal popped has the minimum number of moves.  The switch
        count only breaks ties along the first path that reached a state;
        a later, equally short path with fewer switches is not revisited.
        """
        seen: set[TokenPositions] = {start}
        # The counter keeps equal costs in insertion order.
        counter = itertools.count()
        queue: list[tuple[Cost, int, PathHistory]] = [
            (Cost(), next(counter), history.empty())
        ]

        while queue:
            cost, _, path = heapq.heappop(queue)
            last = path.last()
            current = last.positions if last is not None else start

            if target.is_reached(current):
                logger.info(
                    "found solution in %d moves (%d token switches), %d positions explored",
                    cost.moves,
                    cost.switches,
                    len(seen),
                )
                return Solution(steps=path.to_sequence(), cost=cost, explored=len(seen))

            previous = last.move.token if last is not None else None
            for token in range(len(current)):
                for direction, destination in rules.valid_moves(token, current):
                    following = current.update(token, destination)
                    if following in seen:
                        continue
                    seen.add(following)
                    heapq.heappush(
                        queue,
                        (
                            cost.after(token, previous),
                            next(counter),
                            path.append(Move(token, direction), following),
                        ),
                    )

        logger.info("could not find a solution, %d positions explored", len(seen))
        return None

    @staticmethod
    def hint(puzzle: Puzzle) -> Move | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        solution = Solver.solve(puzzle)
        if solution is None or not solution.steps:
            return None
        return solution.moves[0]

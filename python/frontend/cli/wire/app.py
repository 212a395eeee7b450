"""Machine-readable frontend: prints the answer as one JSON object.

Moves use the integer direction codes (up 0, left 1, down 2, right 3) so
other programs can replay them without knowing the enum names.
"""

from __future__ import annotations

import json

from backend.engine.gamesolver.solver import Solution
from backend.models.puzzle import Puzzle


def solution_to_dict(solution: Solution | None) -> dict:
    if solution is None:
        return {"solved": False, "moves": []}
    return {
        "solved": True,
        "moves": [
            {"token": move.token, "direction": move.direction.code}
            for move in solution.moves
        ],
        "switches": solution.cost.switches,
        "explored": solution.explored,
    }


def run(puzzle: Puzzle, solution: Solution | None, replay: bool = False) -> None:
    """Print *solution* for *puzzle*; *replay* has no effect here."""
    payload = {"puzzle": puzzle.to_dict(), **solution_to_dict(solution)}
    print(json.dumps(payload))

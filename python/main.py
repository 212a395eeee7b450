#!/usr/bin/env python3
"""Sliding Tokens solver.

Usage::

    python main.py                          # classic 16×16 board, rich output
    python main.py puzzle.json -f vanilla   # solve a puzzle file
    python main.py --random --seed 7 --size 6x6 --tokens 3
    python main.py puzzle.json --token 2 --row 4 --col 9 --replay
    python main.py --random --seed 3 --save board.json -f json
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator.generator import GameGenerator  # noqa: E402
from backend.engine.gamesolver.solver import Solver  # noqa: E402
from backend.engine.history.path import HISTORY_BACKENDS  # noqa: E402
from backend.models.board import Position  # noqa: E402
from backend.models.puzzle import (  # noqa: E402
    InvalidPuzzleError,
    Puzzle,
    Target,
    load_puzzle,
    save_puzzle,
)

EXIT_NO_SOLUTION = 1
EXIT_INVALID = 2


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    json = "json"


class History(StrEnum):
    shared = "shared"
    flat = "flat"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.json: "frontend.cli.wire.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_size(raw: str) -> tuple[int, int]:
    try:
        height, width = (int(part) for part in raw.lower().split("x"))
    except ValueError:
        raise typer.BadParameter(f"Expected HEIGHTxWIDTH, got {raw!r}.")
    if height < 1 or width < 1:
        raise typer.BadParameter("Board dimensions must be positive.")
    return height, width


def _load(
    puzzle_file: Optional[Path], random_board: bool, seed: Optional[int], size: str, tokens: int
) -> Puzzle:
    if puzzle_file is not None:
        return load_puzzle(puzzle_file)
    if random_board:
        height, width = _parse_size(size)
        try:
            return GameGenerator.generate(height, width, num_tokens=tokens, seed=seed)
        except ValueError as exc:
            raise InvalidPuzzleError(str(exc)) from exc
    return GameGenerator.classic()


def _retarget(
    puzzle: Puzzle, token: Optional[int], any_token: bool, row: Optional[int], col: Optional[int]
) -> Puzzle:
    current = puzzle.target
    if token is None and not any_token and row is None and col is None:
        return puzzle
    return puzzle.with_target(
        Target(
            position=Position(
                current.position.row if row is None else row,
                current.position.col if col is None else col,
            ),
            token=None if any_token else (current.token if token is None else token),
        )
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle_file: Optional[Path] = typer.Argument(
        None,
        exists=True, dir_okay=False, readable=True,
        help="Puzzle JSON file. Omit for the classic board.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="How to print the result.",
    ),
    random_board: bool = typer.Option(
        False, "--random",
        help="Solve a randomly generated puzzle instead.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    size: str = typer.Option(
        "8x8", "--size",
        help="Board size for --random, as HEIGHTxWIDTH.",
    ),
    tokens: int = typer.Option(
        4, "--tokens",
        min=1,
        help="Number of tokens for --random.",
    ),
    token: Optional[int] = typer.Option(
        None, "--token",
        help="Override the target token.",
    ),
    any_token: bool = typer.Option(
        False, "--any-token",
        help="Accept any token on the target cell.",
    ),
    row: Optional[int] = typer.Option(None, "--row", help="Override the target row."),
    col: Optional[int] = typer.Option(None, "--col", help="Override the target column."),
    history: History = typer.Option(
        History.shared, "--history",
        help="Path history backend used by the search.",
    ),
    replay: bool = typer.Option(
        False, "--replay",
        help="Draw the board after every move.",
    ),
    save: Optional[Path] = typer.Option(
        None, "--save",
        dir_okay=False,
        help="Write the puzzle (after target overrides) to this JSON file.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """Find the shortest slide sequence that brings a token to its target."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        puzzle = _load(puzzle_file, random_board, seed, size, tokens)
        puzzle = _retarget(puzzle, token, any_token, row, col)
        if save is not None:
            puzzle.validate()
            save_puzzle(puzzle, save)
        solution = Solver.solve(puzzle, history=HISTORY_BACKENDS[history.value])
    except InvalidPuzzleError as exc:
        typer.echo(f"Invalid puzzle: {exc}", err=True)
        raise typer.Exit(code=EXIT_INVALID)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(puzzle, solution, replay=replay)

    if solution is None:
        raise typer.Exit(code=EXIT_NO_SOLUTION)


if __name__ == "__main__":
    app()

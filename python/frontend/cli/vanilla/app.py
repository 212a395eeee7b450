"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) to draw the board with its walls and
the solver's move list.
"""

from __future__ import annotations

import sys

from backend.engine.gamesolver.solver import Solution
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamestate.state import TokenPositions
from backend.models.board import Direction, Position
from backend.models.puzzle import Puzzle


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_TOKEN_COLOURS = ["\033[31;1m", "\033[34;1m", "\033[32;1m", "\033[33;1m"]

ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


def _token_colour(token: int) -> str:
    return _TOKEN_COLOURS[token % len(_TOKEN_COLOURS)]


# -- board rendering ----------------------------------------------------------


def render_board(puzzle: Puzzle, positions: TokenPositions | None = None) -> str:
    """Return an ANSI-coloured text drawing of *puzzle*.

    Walls are drawn as ``|`` and ``---``; tokens by their id, the target
    cell as ``*`` while it is empty.
    """
    if positions is None:
        positions = puzzle.tokens
    walls = puzzle.walls
    target = puzzle.target.position

    lines: list[str] = ["+" + "---+" * puzzle.width]
    for r in range(puzzle.height):
        row = "|"
        below = "+"
        for c in range(puzzle.width):
            token = positions.occupant(Position(r, c))
            if token is not None:
                glyph = f"{_token_colour(token)}{token % 10}{_R}"
                if (r, c) == (target.row, target.col):
                    glyph = f"{_BOLD}[{_R}{glyph}{_BOLD}]{_R}"
                else:
                    glyph = f" {glyph} "
            elif (r, c) == (target.row, target.col):
                glyph = f" {_Y}*{_R} "
            else:
                glyph = f" {_DIM}·{_R} "
            right = c == puzzle.width - 1 or walls.has_right_wall(r, c)
            row += glyph + ("|" if right else " ")
            bottom = r == puzzle.height - 1 or walls.has_bottom_wall(r, c)
            below += ("---" if bottom else "   ") + "+"
        lines.append(row)
        lines.append(below)
    return "\n".join(lines)


def format_moves(solution: Solution) -> list[str]:
    lines: list[str] = []
    for i, step in enumerate(solution.steps, 1):
        token = step.move.token
        cell = step.positions.get(token)
        lines.append(
            f"  {i:>3}. {_token_colour(token)}token {token}{_R} "
            f"{ARROWS[step.move.direction]} {step.move.direction.value:<5} "
            f"{_DIM}→ ({cell.row}, {cell.col}){_R}"
        )
    return lines


# -- public entry point -------------------------------------------------------


def run(puzzle: Puzzle, solution: Solution | None, replay: bool = False) -> None:
    """Print the puzzle and the solver's answer."""
    target = puzzle.target
    who = "any token" if target.token is None else f"token {target.token}"
    print(
        f"  {_C}=== Sliding Tokens ({puzzle.height}×{puzzle.width}) ==={_R}"
    )
    print(f"  Goal: {who} to ({target.position.row}, {target.position.col})")
    print()
    print(render_board(puzzle))
    print()

    if solution is None:
        print(f"  {_RED}No solution.{_R}")
        return
    if not solution.steps:
        print(f"  {_G}Already solved!{_R}")
        return

    print(
        f"  {_G}Solved in {solution.cost.moves} moves{_R} "
        f"{_DIM}({solution.cost.switches} token switches, "
        f"{solution.explored} positions explored){_R}"
    )
    print()
    if not replay:
        print("\n".join(format_moves(solution)))
        sys.stdout.flush()
        return

    game = GamePlay(puzzle)
    for line, step in zip(format_moves(solution), solution.steps):
        game.apply(step.move)
        print(line)
        print(render_board(puzzle, game.positions))
        print()
    sys.stdout.flush()

"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver.solver import Solution
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamestate.state import TokenPositions
from backend.models.board import Direction, Position
from backend.models.puzzle import Puzzle

console = Console()

TOKEN_STYLES = ["bold red", "bold blue", "bold green", "bold yellow"]

ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}


def _token_style(token: int) -> str:
    return TOKEN_STYLES[token % len(TOKEN_STYLES)]


# -- board rendering ----------------------------------------------------------


def render_board(puzzle: Puzzle, positions: TokenPositions | None = None) -> Text:
    """Return a Rich Text drawing of the grid, walls included."""
    if positions is None:
        positions = puzzle.tokens
    walls = puzzle.walls
    target = puzzle.target.position

    last_col = puzzle.width - 1
    text = Text(style="bright_blue")
    text.append("┌" + "────" * last_col + "───┐\n")
    for r in range(puzzle.height):
        text.append("│")
        for c in range(puzzle.width):
            token = positions.occupant(Position(r, c))
            on_target = (r, c) == (target.row, target.col)
            if token is not None:
                style = _token_style(token) + (" reverse" if on_target else "")
                text.append(f" {token % 10} ", style=style)
            elif on_target:
                text.append(" ★ ", style="bold yellow")
            else:
                text.append(" · ", style="dim")
            text.append("│" if c == last_col or walls.has_right_wall(r, c) else " ")
        text.append("\n")
        if r == puzzle.height - 1:
            continue
        text.append("│")
        for c in range(puzzle.width):
            text.append("───" if walls.has_bottom_wall(r, c) else "   ")
            text.append("│" if c == last_col else " ")
        text.append("\n")
    text.append("└" + "────" * last_col + "───┘")
    return text


def _moves_table(solution: Solution) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Token", justify="center")
    table.add_column("Move", justify="left")
    table.add_column("Lands on", justify="right", style="dim")

    for i, step in enumerate(solution.steps, 1):
        token = step.move.token
        cell = step.positions.get(token)
        table.add_row(
            str(i),
            Text(str(token), style=_token_style(token)),
            f"{ARROWS[step.move.direction]} {step.move.direction.value}",
            f"({cell.row}, {cell.col})",
        )
    return table


# -- public entry point -------------------------------------------------------


def run(puzzle: Puzzle, solution: Solution | None, replay: bool = False) -> None:
    """Draw the puzzle and the solver's answer."""
    target = puzzle.target
    who = "any token" if target.token is None else f"token {target.token}"

    goal = Text()
    goal.append("  Goal: ", style="dim")
    goal.append(who, style="bold")
    goal.append(f" → ({target.position.row}, {target.position.col})", style="bold yellow")

    panel = Panel(
        Group(Align.center(render_board(puzzle)), Text(""), Align.center(goal)),
        title=f"[bold cyan]Sliding Tokens  {puzzle.height}×{puzzle.width}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))

    if solution is None:
        console.print(Align.center(Text("No solution.", style="bold red")))
        return
    if not solution.steps:
        console.print(Align.center(Text("Already solved!", style="bold green")))
        return

    summary = Text()
    summary.append(f"Solved in {solution.cost.moves} moves", style="bold green")
    summary.append(
        f"  ({solution.cost.switches} token switches, "
        f"{solution.explored} positions explored)",
        style="dim",
    )
    console.print(Align.center(summary))
    console.print(Align.center(_moves_table(solution)))

    if replay:
        game = GamePlay(puzzle)
        for i, step in enumerate(solution.steps, 1):
            game.apply(step.move)
            console.print(
                Align.center(
                    Panel(
                        render_board(puzzle, game.positions),
                        title=f"[cyan]move {i}/{len(solution)}[/cyan]",
                        border_style="cyan",
                    )
                )
            )

"""Puzzle definition, validation and JSON persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from backend.engine.gamestate.state import TokenPositions
from backend.engine.walls.layout import WallLayout
from backend.models.board import Position


class InvalidPuzzleError(ValueError):
    """The puzzle description cannot be searched (bad walls, tokens or target)."""


@dataclass(frozen=True)
class Target:
    """Cell to reach; ``token=None`` accepts any token on it."""

    position: Position
    token: int | None = None

    def is_reached(self, positions: TokenPositions) -> bool:
        if self.token is None:
            return positions.occupant(self.position) is not None
        return positions.get(self.token) == self.position


@dataclass(frozen=True)
class Puzzle:
    walls: WallLayout
    tokens: TokenPositions
    target: Target

    @property
    def height(self) -> int:
        return self.walls.height

    @property
    def width(self) -> int:
        return self.walls.width

    def with_target(self, target: Target) -> Puzzle:
        return Puzzle(walls=self.walls, tokens=self.tokens, target=target)

    # -- validation -----------------------------------------------------------

    def validate(self) -> None:
        """Raise ``InvalidPuzzleError`` unless the puzzle can be searched."""
        if not self.walls.is_valid():
            raise InvalidPuzzleError(
                f"Wall layout does not fit a {self.height}×{self.width} board: "
                f"expected {self.height} rows of right walls and {self.width} "
                f"columns of bottom walls with in-range indices."
            )
        if len(self.tokens) == 0:
            raise InvalidPuzzleError("At least one token is required.")
        for token, position in enumerate(self.tokens):
            if not position.in_bounds(self.height, self.width):
                raise InvalidPuzzleError(
                    f"Token {token} at ({position.row}, {position.col}) is "
                    f"outside the {self.height}×{self.width} board."
                )
        if not self.tokens.is_distinct():
            raise InvalidPuzzleError("Two tokens share the same cell.")

        target = self.target
        if target.token is not None and not 0 <= target.token < len(self.tokens):
            raise InvalidPuzzleError(
                f"Target token {target.token} does not exist "
                f"({len(self.tokens)} tokens)."
            )
        if not target.position.in_bounds(self.height, self.width):
            raise InvalidPuzzleError(
                f"Target ({target.position.row}, {target.position.col}) is "
                f"outside the board."
            )

    # -- (de)serialisation ----------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict) -> Puzzle:
        try:
            height = int(data["height"])
            width = int(data["width"])
            right_walls = data["right_walls"] if "right_walls" in data else [[]] * height
            bottom_walls = data["bottom_walls"] if "bottom_walls" in data else [[]] * width
            walls = WallLayout.from_lists(
                height,
                width,
                [[int(col) for col in row] for row in right_walls],
                [[int(row) for row in col] for col in bottom_walls],
            )
            tokens = TokenPositions.from_tuples(
                (int(row), int(col)) for row, col in data["tokens"]
            )
            raw_target = data["target"]
            if not isinstance(raw_target, dict):
                raise TypeError(f"target must be an object, got {raw_target!r}")
            token = raw_target.get("token")
            target = Target(
                position=Position(int(raw_target["row"]), int(raw_target["col"])),
                token=None if token is None else int(token),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise InvalidPuzzleError(f"Malformed puzzle description: {exc!r}") from exc
        return cls(walls=walls, tokens=tokens, target=target)

    def to_dict(self) -> dict:
        right_walls, bottom_walls = self.walls.to_lists()
        return {
            "height": self.height,
            "width": self.width,
            "right_walls": right_walls,
            "bottom_walls": bottom_walls,
            "tokens": [list(cell) for cell in self.tokens.as_tuples()],
            "target": {
                "token": self.target.token,
                "row": self.target.position.row,
                "col": self.target.position.col,
            },
        }


# -- persistence --------------------------------------------------------------


def load_puzzle(filepath: Path) -> Puzzle:
    try:
        data = json.loads(filepath.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidPuzzleError(f"{filepath} is not valid UTF-8 JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidPuzzleError(f"{filepath} must contain a JSON object.")
    return Puzzle.from_dict(data)


def save_puzzle(puzzle: Puzzle, filepath: Path) -> None:
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(json.dumps(puzzle.to_dict(), indent=2) + "\n", encoding="utf-8")

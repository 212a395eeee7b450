"""Append-only move histories.

The solver keeps one history per queued node.  Most of those histories
share a long common prefix, so the backend used for large searches links
each step to its parent instead of copying the prefix.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, Self

from backend.engine.gamestate.state import TokenPositions
from backend.models.board import Move


class Step(NamedTuple):
    move: Move
    positions: TokenPositions


class PathHistory(Protocol):
    """What the solver needs from a history backend."""

    @classmethod
    def empty(cls) -> Self: ...

    def append(self, move: Move, positions: TokenPositions) -> Self: ...

    def last(self) -> Step | None: ...

    def to_sequence(self) -> list[Step]: ...

    def __len__(self) -> int: ...


class FlatPathHistory:
    """History backed by a tuple that is copied on every append."""

    __slots__ = ("_steps",)

    def __init__(self, steps: tuple[Step, ...] = ()) -> None:
        self._steps = steps

    @classmethod
    def empty(cls) -> FlatPathHistory:
        return cls()

    def append(self, move: Move, positions: TokenPositions) -> FlatPathHistory:
        return FlatPathHistory(self._steps + (Step(move, positions),))

    def last(self) -> Step | None:
        return self._steps[-1] if self._steps else None

    def to_sequence(self) -> list[Step]:
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"FlatPathHistory(len={len(self)})"


class SharedPathHistory:
    """History stored as a chain of nodes pointing at their predecessor.

    Appending creates one node and leaves the receiver untouched, so any
    number of branches can grow from the same prefix.  A node lives as long
    as some history (or queued search node) still reaches it.
    """

    __slots__ = ("_step", "_parent", "_length")

    def __init__(
        self,
        step: Step | None = None,
        parent: SharedPathHistory | None = None,
    ) -> None:
        self._step = step
        self._parent = parent
        self._length = 0 if parent is None else parent._length + 1

    @classmethod
    def empty(cls) -> SharedPathHistory:
        return cls()

    def append(self, move: Move, positions: TokenPositions) -> SharedPathHistory:
        return SharedPathHistory(Step(move, positions), self)

    def last(self) -> Step | None:
        return self._step

    def to_sequence(self) -> list[Step]:
        steps: list[Step] = []
        node: SharedPathHistory | None = self
        while node is not None and node._step is not None:
            steps.append(node._step)
            node = node._parent
        steps.reverse()
        return steps

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"SharedPathHistory(len={len(self)})"


HISTORY_BACKENDS: dict[str, type[PathHistory]] = {
    "shared": SharedPathHistory,
    "flat": FlatPathHistory,
}

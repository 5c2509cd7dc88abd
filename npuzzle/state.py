"""Board states of the sliding puzzle and the moves between them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Pos:
    """A cell position on the board, row first."""

    y: int
    x: int


class State:
    """An immutable arrangement of tiles; ``0`` marks the empty slot."""

    __slots__ = ("values",)

    def __init__(self, grid: Iterable[Iterable[int]]) -> None:
        self.values: tuple[tuple[int, ...], ...] = tuple(tuple(row) for row in grid)

    def empty_slot(self) -> Pos | None:
        """Return the position of the first empty slot, or None if there is none."""
        for y, row in enumerate(self.values):
            for x, value in enumerate(row):
                if value == 0:
                    return Pos(y, x)
        return None

    def neighbors(self) -> list[State]:
        """Return the states reachable in one move: blank up, down, left, right."""
        slot = self.empty_slot()
        if slot is None:
            raise ValueError("grid has no empty slot")
        targets = []
        if slot.y > 0:
            targets.append(Pos(slot.y - 1, slot.x))
        if slot.y < len(self.values) - 1:
            targets.append(Pos(slot.y + 1, slot.x))
        if slot.x > 0:
            targets.append(Pos(slot.y, slot.x - 1))
        if slot.x < len(self.values[slot.y]) - 1:
            targets.append(Pos(slot.y, slot.x + 1))
        return [self._swapped(slot, target) for target in targets]

    def _swapped(self, a: Pos, b: Pos) -> State:
        rows = [list(row) for row in self.values]
        rows[a.y][a.x], rows[b.y][b.x] = rows[b.y][b.x], rows[a.y][a.x]
        return State(rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self.values == other.values

    def __hash__(self) -> int:
        return hash(self.values)

    def __str__(self) -> str:
        return "".join(
            "".join(f" {value}" for value in row) + "\n" for row in self.values
        )

    def __repr__(self) -> str:
        return f"State({[list(row) for row in self.values]!r})"
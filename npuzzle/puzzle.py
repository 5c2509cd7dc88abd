"""Puzzle files, the spiral goal, solvability and an A* solver."""

from __future__ import annotations

import heapq
import itertools
import re
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from npuzzle.state import State

Heuristic = Callable[[State, State], int]

_HEADERS = {
    "# This puzzle is solvable": True,
    "# This puzzle is unsolvable": False,
}
_SIZE_LINE = re.compile(r"\s*([+-]?\d+)\s*")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class PuzzleFormatError(ValueError):
    """Raised when a puzzle file does not follow the expected format."""


@dataclass
class PuzzleFile:
    """The contents of a parsed puzzle file."""

    grid: list[list[int]]
    solvable: bool
    size: int


@dataclass
class Solution:
    """A shortest path found by the solver, from start to goal inclusive."""

    distance: int
    path: list[State] = field(default_factory=list)
    expanded: int = 0


def manhattan(current: State, goal: State) -> int:
    """Sum of the distances of every tile from its place in the goal."""
    targets: dict[int, tuple[int, int]] = {}
    for y, row in enumerate(goal.values):
        for x, value in enumerate(row):
            targets.setdefault(value, (y, x))
    total = 0
    for y, row in enumerate(current.values):
        for x, value in enumerate(row):
            if value != 0 and value in targets:
                ty, tx = targets[value]
                total += abs(y - ty) + abs(x - tx)
    return total


def solve(start: State, goal: State, heuristic: Heuristic = manhattan) -> Solution:
    """Find a shortest sequence of moves from start to goal with A*."""
    distances = {start: 0}
    fathers: dict[State, State] = {}
    closed: set[State] = set()
    order = itertools.count()
    queue = [(heuristic(start, goal), next(order), start)]
    while queue:
        _, _, state = heapq.heappop(queue)
        if state in closed:
            continue
        closed.add(state)
        if state == goal:
            break
        step = distances[state] + 1
        for neighbor in state.neighbors():
            if neighbor in closed:
                continue
            if neighbor not in distances or step < distances[neighbor]:
                distances[neighbor] = step
                fathers[neighbor] = state
                heapq.heappush(
                    queue, (step + heuristic(neighbor, goal), next(order), neighbor)
                )
    if goal not in closed:
        raise ValueError("goal state cannot be reached from the start state")
    path = [goal]
    while path[-1] != start:
        path.append(fathers[path[-1]])
    path.reverse()
    return Solution(distance=distances[goal], path=path, expanded=len(closed))


def parity(grid: Sequence[Sequence[int]]) -> bool:
    """Return the permutation parity used to decide whether two grids connect."""
    tiles = [value for row in grid for value in row if value != 0]
    inversions = sum(
        1 for i, a in enumerate(tiles) for b in tiles[i + 1 :] if a > b
    )
    if len(grid) % 2 != 0:
        return inversions % 2 == 1
    row_from_bottom = 0
    for row in reversed(grid):
        row_from_bottom += 1
        if 0 in row:
            break
    return (inversions + row_from_bottom) % 2 == 1


def _leading_ints(line: str) -> list[int]:
    values = []
    pos = 0
    while match := _LEADING_INT.match(line, pos):
        values.append(int(match.group(1)))
        pos = match.end()
    return values


def parse_puzzle(path: str | PathLike[str]) -> PuzzleFile:
    """Read and validate a puzzle file; raise PuzzleFormatError if malformed."""
    text = Path(path).read_text(encoding="utf-8")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    header = lines[0] if lines else ""
    if not header:
        raise PuzzleFormatError("missing header line")
    if header not in _HEADERS:
        raise PuzzleFormatError(f"unknown header: {header!r}")
    solvable = _HEADERS[header]
    size_line = lines[1] if len(lines) > 1 else ""
    match = _SIZE_LINE.fullmatch(size_line)
    if not size_line or match is None:
        raise PuzzleFormatError(f"invalid size line: {size_line!r}")
    size = int(match.group(1))
    grid = [_leading_ints(line) for line in lines[2:]]
    if len(grid) != size:
        raise PuzzleFormatError(f"expected {size} rows, found {len(grid)}")
    if any(len(row) != size for row in grid):
        raise PuzzleFormatError(f"every row must hold {size} values")
    seen: set[int] = set()
    for value in (v for row in grid for v in row):
        if value in seen:
            raise PuzzleFormatError(f"duplicate value {value}")
        seen.add(value)
    if 0 not in seen:
        raise PuzzleFormatError("grid has no empty slot")
    return PuzzleFile(grid=grid, solvable=solvable, size=size)


def _spiral(n: int) -> Iterator[tuple[int, int]]:
    top, bottom, left, right = 0, n - 1, 0, n - 1
    while top <= bottom and left <= right:
        for x in range(left, right + 1):
            yield top, x
        top += 1
        for y in range(top, bottom + 1):
            yield y, right
        right -= 1
        for x in range(right, left - 1, -1):
            yield bottom, x
        bottom -= 1
        for y in range(bottom, top - 1, -1):
            yield y, left
        left += 1


def spiral_goal(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Build the goal grid: tiles in order along a clockwise spiral, blank last."""
    n = len(grid)
    values = sorted(value for row in grid for value in row if value != 0)
    values.append(0)
    goal = [[-1] * n for _ in range(n)]
    for (y, x), value in zip(_spiral(n), values):
        goal[y][x] = value
    return goal


def _report(solution: Solution, start: State, goal: State) -> None:
    print("Start : ")
    print(start)
    print("Dest : ")
    print(goal)
    print(f"Distance : {solution.distance}")
    print("Chemin parcouru : ")
    print(goal)
    print()
    for step, state in enumerate(reversed(solution.path[:-1]), start=1):
        print(state)
        print()
        print(step)
        print()


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle named on the command line and print the path."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Necessite un fichier d'entree contenant la grille")
        return 1
    path = args[0]
    try:
        puzzle = parse_puzzle(path)
    except (OSError, UnicodeDecodeError, PuzzleFormatError):
        print(f"Fichier non conforme : {path}", file=sys.stderr)
        return 1

    start = State(puzzle.grid)
    goal = State(spiral_goal(puzzle.grid))
    print(start, end="")
    print()
    print()
    print(goal, end="")

    if parity(start.values) != parity(goal.values):
        print("Grille non solvable")
        return 0

    _report(solve(start, goal, manhattan), start, goal)
    return 0


if __name__ == "__main__":
    sys.exit(main())
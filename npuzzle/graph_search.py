"""Counting, breadth-first walks, Dijkstra and A* over small graphs and grids."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter, deque
from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from npuzzle.puzzle import manhattan
from npuzzle.state import State

Node = TypeVar("Node", bound=Hashable)
Graph = Mapping[Node, Sequence[tuple[Node, int]]]


@dataclass
class PathResult:
    """A cheapest path, from start to destination inclusive, and its cost."""

    distance: int
    path: list = field(default_factory=list)


def count_items(items: Iterable[Hashable]) -> dict:
    """Return how many times each distinct item occurs."""
    return dict(Counter(items))


def _line_neighbors(value: int, low: int, high: int) -> Iterator[int]:
    if value > low:
        yield value - 1
    if value < high:
        yield value + 1


def bfs_visit_order(start: int, low: int, high: int) -> list[int]:
    """Breadth-first walk over the integers low..high; return the visit order."""
    visited: list[int] = []
    seen: set[int] = set()
    queue = deque([start])
    while queue:
        value = queue.popleft()
        if value in seen:
            continue
        seen.add(value)
        visited.append(value)
        queue.extend(n for n in _line_neighbors(value, low, high) if n not in seen)
    return visited


def bfs_distances(start: int, low: int, high: int) -> dict[int, int]:
    """Breadth-first distances from start to every integer in low..high."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        value = queue.popleft()
        for neighbor in _line_neighbors(value, low, high):
            if neighbor not in distances:
                distances[neighbor] = distances[value] + 1
                queue.append(neighbor)
    return distances


def _best_first(
    start: Node,
    dest: Node,
    edges: Callable[[Node], Iterable[tuple[Node, int]]],
    estimate: Callable[[Node], int],
) -> PathResult:
    distances = {start: 0}
    fathers: dict = {}
    order = itertools.count()
    queue = [(estimate(start), next(order), 0, start)]
    while queue:
        _, _, dist, node = heapq.heappop(queue)
        if node == dest:
            break
        if dist > distances[node]:
            continue
        for neighbor, weight in edges(node):
            step = distances[node] + weight
            if neighbor not in distances or step < distances[neighbor]:
                distances[neighbor] = step
                fathers[neighbor] = node
                heapq.heappush(
                    queue, (step + estimate(neighbor), next(order), step, neighbor)
                )
    else:
        raise ValueError("destination cannot be reached from the start")
    path = [dest]
    while path[-1] != start:
        path.append(fathers[path[-1]])
    path.reverse()
    return PathResult(distance=distances[dest], path=path)


def dijkstra(graph: Graph, start: Node, dest: Node) -> PathResult:
    """Cheapest path in a weighted graph given as node -> [(neighbor, weight)]."""
    return _best_first(start, dest, lambda node: graph.get(node, ()), lambda _: 0)


def astar(
    graph: Graph,
    start: Node,
    dest: Node,
    heuristic: Callable[[Node, Node], int],
) -> PathResult:
    """A* search in a weighted graph, guided by heuristic(node, dest)."""
    return _best_first(
        start,
        dest,
        lambda node: graph.get(node, ()),
        lambda node: heuristic(node, dest),
    )


def _grid_moves(state: State) -> Iterator[tuple[State, int]]:
    slot = state.empty_slot()
    if slot is None:
        return
    rows = state.values
    for dy, dx in ((0, -1), (0, 1), (-1, 0), (1, 0)):
        y, x = slot.y + dy, slot.x + dx
        if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
            grid = [list(row) for row in rows]
            grid[slot.y][slot.x], grid[y][x] = grid[y][x], grid[slot.y][slot.x]
            yield State(grid), 1


def grid_astar(start: State | Sequence[Sequence[int]], goal: State | Sequence[Sequence[int]]) -> PathResult:
    """Shortest sequence of sliding moves between two boards, by A* on Manhattan distance."""
    start_state = start if isinstance(start, State) else State(start)
    goal_state = goal if isinstance(goal, State) else State(goal)
    return _best_first(
        start_state,
        goal_state,
        _grid_moves,
        lambda node: manhattan(node, goal_state),
    )


def sample_graph() -> dict[int, list[tuple[int, int]]]:
    """A small undirected weighted graph on the nodes 1..8."""
    return {
        1: [(2, 2), (3, 5), (4, 1)],
        2: [(1, 2), (5, 2), (6, 4)],
        3: [(1, 5), (6, 1)],
        4: [(1, 1), (6, 7)],
        5: [(2, 2), (7, 3)],
        6: [(2, 4), (3, 1), (4, 7), (7, 2)],
        7: [(5, 3), (6, 2), (8, 1)],
        8: [(7, 1)],
    }
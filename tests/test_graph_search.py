import pytest

from npuzzle.graph_search import (
    PathResult,
    astar,
    bfs_distances,
    bfs_visit_order,
    count_items,
    dijkstra,
    grid_astar,
    sample_graph,
)
from npuzzle.puzzle import solve
from npuzzle.state import State


def _path_cost(graph, path):
    total = 0
    for a, b in zip(path, path[1:]):
        weights = [w for n, w in graph[a] if n == b]
        assert weights, f"{a} -> {b} is not an edge"
        total += min(weights)
    return total


def test_count_items_covers_every_character():
    text = "aaabbccccdddddd"
    counts = count_items(text)
    assert sorted(counts) == ["a", "b", "c", "d"]
    assert sum(counts.values()) == len(text)


def test_count_items_empty():
    assert count_items([]) == {}


def test_bfs_visit_order_from_middle():
    assert bfs_visit_order(2, 0, 5) == [2, 1, 3, 0, 4, 5]


def test_bfs_visit_order_visits_each_once():
    order = bfs_visit_order(4, 0, 9)
    assert order[0] == 4
    assert sorted(order) == list(range(10))


def test_bfs_distances_values():
    assert bfs_distances(4, 0, 5) == {4: 0, 3: 1, 5: 1, 2: 2, 1: 3, 0: 4}


def test_bfs_distances_neighbours_differ_by_one():
    distances = bfs_distances(7, 0, 12)
    assert sorted(distances) == list(range(13))
    assert distances[7] == 0
    for value in range(12):
        assert abs(distances[value] - distances[value + 1]) == 1


def test_dijkstra_on_sample_graph():
    result = dijkstra(sample_graph(), 1, 8)
    assert result == PathResult(distance=8, path=[1, 2, 5, 7, 8])


@pytest.mark.parametrize("start, dest", [(1, 8), (3, 5), (8, 4), (6, 1)])
def test_dijkstra_path_cost_matches_distance(start, dest):
    graph = sample_graph()
    result = dijkstra(graph, start, dest)
    assert result.path[0] == start
    assert result.path[-1] == dest
    assert _path_cost(graph, result.path) == result.distance


def test_dijkstra_same_node():
    result = dijkstra(sample_graph(), 3, 3)
    assert result.distance == 0
    assert result.path == [3]


def test_dijkstra_unreachable_raises():
    graph = {1: [(2, 1)], 2: [(1, 1)], 3: []}
    with pytest.raises(ValueError):
        dijkstra(graph, 1, 3)


def test_dijkstra_node_without_entry_raises():
    with pytest.raises(ValueError):
        dijkstra({1: [(2, 1)]}, 1, 5)


@pytest.mark.parametrize("start, dest", [(1, 8), (2, 7), (4, 5)])
def test_astar_zero_heuristic_agrees_with_dijkstra(start, dest):
    graph = sample_graph()
    expected = dijkstra(graph, start, dest)
    result = astar(graph, start, dest, lambda node, goal: 0)
    assert result.distance == expected.distance
    assert _path_cost(graph, result.path) == result.distance


def test_astar_with_difference_heuristic_gives_valid_path():
    graph = sample_graph()
    result = astar(graph, 1, 8, lambda node, goal: goal - node)
    assert result.path[0] == 1
    assert result.path[-1] == 8
    assert _path_cost(graph, result.path) == result.distance
    assert result.distance >= dijkstra(graph, 1, 8).distance


def test_grid_astar_one_move():
    start = State([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    goal = start.neighbors()[0]
    result = grid_astar(start, goal)
    assert result.path == [start, goal]
    assert result.distance == len(result.path) - 1


def test_grid_astar_training_board():
    start = State([[7, 2, 1], [4, 6, 0], [5, 8, 3]])
    goal = State([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    result = grid_astar(start, goal)
    assert result.path[0] == start
    assert result.path[-1] == goal
    assert result.distance == len(result.path) - 1
    for a, b in zip(result.path, result.path[1:]):
        assert b in a.neighbors()
    assert result.distance == solve(start, goal).distance


def test_grid_astar_accepts_plain_grids():
    grid = [[1, 2], [0, 3]]
    target = [[1, 2], [3, 0]]
    result = grid_astar(grid, target)
    assert result.path[0] == State(grid)
    assert result.path[-1] == State(target)
    assert result.distance == solve(State(grid), State(target)).distance


def test_grid_astar_unreachable_raises():
    with pytest.raises(ValueError):
        grid_astar(State([[1, 2], [3, 0]]), State([[2, 1], [3, 0]]))


def test_sample_graph_is_symmetric():
    graph = sample_graph()
    assert sorted(graph) == list(range(1, 9))
    for node, edges in graph.items():
        for neighbor, weight in edges:
            assert (node, weight) in graph[neighbor]
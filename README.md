# npuzzle

Solves the N-puzzle, the sliding tile game, with an A* search guided by the
Manhattan distance. The goal is the "snail" layout. The tiles run in sorted
order clockwise from the top-left corner and spiral inwards. The empty slot
is placed last in the spiral.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Puzzle files

A puzzle file starts with one of two header lines:

```
# This puzzle is solvable
# This puzzle is unsolvable
```

The second line holds the size and nothing else. The rows come after it, and
`0` is the empty slot:

```
# This puzzle is solvable
3
1 2 3
0 4 6
7 5 8
```

A file is rejected with `PuzzleFormatError` in any of these cases:

- the header is missing or unknown;
- the size line is not a single integer;
- the number of rows differs from the size;
- a row does not hold exactly `size` values;
- a value appears more than once;
- no value is `0`.

The header is read into `PuzzleFile.solvable`. It is not used to decide
solvability.

## Command line

```
npuzzle puzzle.txt
```

The command takes exactly one file. It first prints the starting grid and then
the goal grid. If the parities of the two grids differ, it prints
`Grille non solvable` and stops. Otherwise it solves the puzzle and prints:

- the start grid;
- the goal grid;
- the number of moves;
- the path, one numbered step at a time, going from the goal back to the start.

All of these messages are in French. The command exits with status 1 in two
cases:

- the number of arguments is wrong;
- the file cannot be read or is malformed. In this case it prints
  `Fichier non conforme : <path>` on standard error.

## Library use

```python
from npuzzle.puzzle import parse_puzzle, spiral_goal, parity, solve, manhattan
from npuzzle.state import State

puzzle = parse_puzzle("puzzle.txt")
start = State(puzzle.grid)
goal = State(spiral_goal(puzzle.grid))

if parity(start.values) == parity(goal.values):
    solution = solve(start, goal, manhattan)
    print(solution.distance)
    for state in solution.path:
        print(state)
```

### `npuzzle.state`

`State` holds an immutable grid, stored in `values` as a tuple of tuples. It is
hashable and compares by its grid. `str(state)` prints each row as the values
with a space before each one.

- `State.empty_slot()` returns the `Pos(y, x)` of the first `0`, or `None` if
  there is none.
- `State.neighbors()` returns the states one move away, in the order up, down,
  left, right. It raises `ValueError` if the grid has no empty slot.

### `npuzzle.puzzle`

- `parse_puzzle(path)` returns a `PuzzleFile` with `grid`, `solvable` and
  `size`.
- `spiral_goal(grid)` builds the snail goal from the tiles of `grid`.
- `parity(grid)` returns the parity used to decide whether two grids connect.
  It counts inversions, and for grids with an even number of rows it adds the
  row of the empty slot counted from the bottom.
- `manhattan(current, goal)` is the heuristic.
- `solve(start, goal, heuristic=manhattan)` returns a `Solution` with three
  fields:
  - `distance`, the number of moves;
  - `path`, the states from start to goal inclusive;
  - `expanded`, the number of states closed.

  It raises `ValueError` if the goal cannot be reached.
- `main(argv=None)` is the command-line entry point.

### `npuzzle.graph_search`

This module holds small search routines.

- `count_items(items)` counts occurrences of each item.
- `bfs_visit_order(start, low, high)` walks the integers `low..high`
  breadth-first and returns the order in which they are visited.
- `bfs_distances(start, low, high)` returns the breadth-first distance from
  `start` to each of those integers.
- `dijkstra(graph, start, dest)` searches a weighted graph given as
  `node -> [(neighbor, weight), ...]` and returns a `PathResult` with
  `distance` and `path`.
- `astar(graph, start, dest, heuristic)` does the same, guided by
  `heuristic(node, dest)`.
- `grid_astar(start, goal)` runs A* with the Manhattan heuristic between two
  boards. The boards may be given as `State` objects or as nested lists.
- `sample_graph()` returns a small undirected weighted graph on the nodes 1 to 8.

The three path searches raise `ValueError` when the destination is unreachable.

## What it does not do

- It does not generate random puzzles; it only reads puzzle files.
- Manhattan distance is the only heuristic provided.
- The command has no options, so you cannot choose the heuristic or the goal
  layout from the command line.
"""N-puzzle solver: board states, puzzle files, a spiral goal and A* search."""

__version__ = "0.1.0"
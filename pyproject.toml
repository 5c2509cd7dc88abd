[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "npuzzle"
version = "0.1.0"
description = "Solve the N-puzzle (sliding tile puzzle) towards a spiral goal with A* and the Manhattan heuristic"
requires-python = ">=3.10"
dependencies = []
keywords = ["n-puzzle", "sliding puzzle", "a-star", "dijkstra", "search", "manhattan"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
npuzzle = "npuzzle.puzzle:main"

[tool.hatch.build.targets.wheel]
packages = ["npuzzle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wisp"
version = "0.1.0"
description = "Generate random grid mazes and solve them with breadth-first or depth-first search."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "bfs", "dfs", "pathfinding", "maze-generator", "search"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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
wisp = "wisp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wisp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

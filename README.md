# wisp

wisp generates a random square maze and solves it with either a
breadth-first or a depth-first search. It then prints the maze with the path
it found.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
wisp -bfs <maze_file>
wisp -dfs <maze_file>
```

The command needs exactly two arguments. The first chooses the search and
must be `-bfs` or `-dfs`. The second one must be there, but the command does
not read it (see below). If the arguments are wrong, the command prints a
usage or error message and exits with status 1.

Each run generates a new random 25×25 maze, seeded from the current time and
process id. The search starts at cell (1, 1) and ends at cell (23, 23). The
output has this form:

```
===== BFT =====
Total Steps Taken <cells expanded>
Found Path Steps: <path length>
=== Solution ===
<the maze, one line per row>
```

With `-dfs` the first line is `=== DFT ===` instead. If the search does not
reach the end, the command prints `No path found`.

What the maze characters mean:

| Char | Meaning        |
|------|----------------|
| `#`  | wall           |
| `S`  | start          |
| `E`  | end            |
| `.`  | path cell      |
| ` `  | open cell      |

## Library use

```python
import random

from wisp.generator import generate_maze
from wisp.parser import parse_maze, format_maze
from wisp.search import bfs, dfs, retrace_path

maze = parse_maze(
    "#####\n"
    "#S  #\n"
    "# # #\n"
    "#  E#\n"
    "#####\n"
)
result = bfs(maze)            # SearchResult(found=..., steps=...); truthy if found
if result:
    length = retrace_path(maze.end, maze)
print(format_maze(maze))

random_maze = generate_maze(25, random.Random(42))
```

- `wisp.maze.Maze(width, height, walls=False)` is a grid of `Vertex` cells,
  at most 100×100. It has `cell(x, y)`, `neighbours(vertex)`, iteration over
  all cells, and `reset_visited()`, which clears the search state so you can
  run another search on the same maze.
- `wisp.parser.parse_maze(text)` and `load_maze(path)` read mazes in the
  format above. They raise `MazeLoadError` in these cases: the file cannot be
  opened, the lines have different lengths, the maze is larger than 100×100,
  or there is no `S` or no `E`.
- `format_maze(maze)` returns the rendered maze as a string.
  `print_maze(maze, file=None)` writes it to a stream, or to standard output
  if no stream is given.
- `wisp.generator.generate_maze(size, rng=None)` carves a square maze by
  recursive backtracking. It raises `ValueError` unless `3 <= size <= 100`.
  If you give no `rng`, it seeds one with `random_seed()`.
- `wisp.search.bfs(maze)` and `dfs(maze)` return a `SearchResult`.
  `retrace_path(end, maze)` marks the path with `on_path` and returns its
  length, or 0 if the end does not lead back to the start.

## Limitations

The `wisp` command ignores its maze file argument. It always solves a freshly
generated maze. To solve a maze from a file, call `load_maze` and a search
function from Python.
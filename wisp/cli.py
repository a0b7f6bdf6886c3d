"""Command-line entry point: generate a maze and solve it."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from wisp.generator import generate_maze
from wisp.parser import print_maze
from wisp.search import bfs, dfs, retrace_path

PROGRAM = "wisp"
MAZE_SIZE = 25

_SEARCHES = {
    "-bfs": ("===== BFT =====", bfs),
    "-dfs": ("=== DFT ===", dfs),
}


def validate_input(argv: Sequence[str]) -> str:
    """Check the arguments and return the chosen search flag."""
    if len(argv) != 2:
        raise ValueError(f"Usage: {PROGRAM} (-bfs|-dfs) <maze_file>")
    if argv[0] not in _SEARCHES:
        raise ValueError("Invalid search type. Use -bfs or -dfs.")
    return argv[0]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver and print the result; return the exit status."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    try:
        flag = validate_input(args)
    except ValueError as exc:
        print(exc)
        return 1

    title, search = _SEARCHES[flag]
    maze = generate_maze(MAZE_SIZE)
    maze.reset_visited()

    result = search(maze)
    if not result:
        print("No path found")
        return 0

    path_steps = retrace_path(maze.end, maze)
    print(title)
    print(f"Total Steps Taken {result.steps}")
    print(f"Found Path Steps: {path_steps}")
    print("=== Solution ===")
    print_maze(maze)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
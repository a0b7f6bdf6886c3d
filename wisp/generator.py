"""Random maze generation by recursive backtracking."""

from __future__ import annotations

import os
import random
import time
from typing import Iterator, Optional, Tuple

from wisp.maze import DIRECTIONS, MAX_HEIGHT, MAX_WIDTH, Maze, Vertex

_MASK64 = (1 << 64) - 1


def _wrap64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value >= 1 << 63 else value


def random_seed() -> int:
    """Mix the current time and process id into a signed 64-bit seed."""
    now = int(time.time())
    pid = os.getpid()
    seed = _wrap64(now ^ pid)
    iterations = pid % 15 + 5
    shift = now % 63 + 1
    for i in range(iterations):
        if i % 2 == 0:
            seed ^= seed >> shift
        else:
            seed = _wrap64(seed ^ (seed << shift))
    return seed


def _enter(vertex: Vertex, rng: random.Random) -> Tuple[Vertex, Iterator[Tuple[int, int]]]:
    vertex.visited = True
    vertex.is_wall = False
    directions = list(DIRECTIONS)
    rng.shuffle(directions)
    return vertex, iter(directions)


def carve_from(maze: Maze, x: int, y: int, rng: random.Random) -> None:
    """Carve passages two cells at a time, depth first, starting at (x, y)."""
    stack = [_enter(maze.cell(x, y), rng)]
    while stack:
        current, directions = stack[-1]
        for dx, dy in directions:
            nx, ny = current.x + 2 * dx, current.y + 2 * dy
            if not (0 <= nx < maze.width and 0 <= ny < maze.height):
                continue
            neighbour = maze.grid[ny][nx]
            between = maze.grid[current.y + dy][current.x + dx]
            if neighbour.visited or between.visited:
                continue
            neighbour.visited = True
            neighbour.is_wall = False
            between.is_wall = False
            stack.append(_enter(neighbour, rng))
            break
        else:
            stack.pop()


def generate_maze(size: int, rng: Optional[random.Random] = None) -> Maze:
    """Generate a square maze with its start at (1, 1) and end at the opposite corner."""
    if not 3 <= size <= min(MAX_WIDTH, MAX_HEIGHT):
        raise ValueError(f"maze size must be between 3 and {min(MAX_WIDTH, MAX_HEIGHT)}")
    if rng is None:
        rng = random.Random(random_seed())
    maze = Maze(size, size, walls=True)
    start_x = rng.randrange(maze.width)
    start_y = rng.randrange(maze.height)
    carve_from(maze, start_x, start_y, rng)
    maze.start = maze.grid[1][1]
    maze.end = maze.grid[size - 2][size - 2]
    maze.reset_visited()
    return maze
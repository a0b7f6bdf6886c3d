"""Breadth-first and depth-first solvers and path reconstruction."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

from wisp.maze import Maze, Vertex


@dataclass(frozen=True)
class SearchResult:
    """Whether the end was reached and how many cells were expanded on the way."""

    found: bool
    steps: int

    def __bool__(self) -> bool:
        return self.found


def _require_start(maze: Maze) -> Vertex:
    if maze.start is None:
        raise ValueError("maze has no start cell")
    return maze.start


def _expand(maze: Maze, current: Vertex) -> Iterator[Vertex]:
    for neighbour in maze.neighbours(current):
        if not neighbour.visited and not neighbour.is_wall:
            neighbour.visited = True
            neighbour.parent = current
            yield neighbour


def bfs(maze: Maze) -> SearchResult:
    """Search from start to end breadth first, recording parent links."""
    start = _require_start(maze)
    start.visited = True
    queue = deque([start])
    steps = 0
    while queue:
        current = queue.popleft()
        if current is maze.end:
            return SearchResult(True, steps)
        queue.extend(_expand(maze, current))
        steps += 1
    return SearchResult(False, steps)


def dfs(maze: Maze) -> SearchResult:
    """Search from start to end depth first, recording parent links."""
    start = _require_start(maze)
    start.visited = True
    stack = [start]
    steps = 0
    while stack:
        current = stack.pop()
        if current is maze.end:
            return SearchResult(True, steps)
        stack.extend(_expand(maze, current))
        steps += 1
    return SearchResult(False, steps)


def retrace_path(end: Optional[Vertex], maze: Optional[Maze]) -> int:
    """Mark the path from ``end`` back to the start; return its length, or 0 if none."""
    if end is None or maze is None:
        return 0
    steps = 0
    current: Optional[Vertex] = end
    while current is not None and current is not maze.start:
        current.on_path = True
        current = current.parent
        steps += 1
    if current is None:
        return 0
    current.on_path = True
    return steps
"""Grid maze model shared by the parser, generator and solvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

MAX_WIDTH = 100
MAX_HEIGHT = 100

# Up, down, left, right: the order in which neighbours are explored.
DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass(eq=False)
class Vertex:
    """One cell of the maze grid."""

    x: int
    y: int
    is_wall: bool = False
    visited: bool = False
    on_path: bool = False
    parent: Optional["Vertex"] = None


class Maze:
    """A rectangular grid of vertices with optional start and end cells."""

    def __init__(self, width: int, height: int, *, walls: bool = False) -> None:
        if not 0 <= width <= MAX_WIDTH:
            raise ValueError(f"maze width must be between 0 and {MAX_WIDTH}, got {width}")
        if not 0 <= height <= MAX_HEIGHT:
            raise ValueError(f"maze height must be between 0 and {MAX_HEIGHT}, got {height}")
        self.width = width
        self.height = height
        self.grid = [
            [Vertex(x, y, is_wall=walls) for x in range(width)] for y in range(height)
        ]
        self.start: Optional[Vertex] = None
        self.end: Optional[Vertex] = None

    def __iter__(self) -> Iterator[Vertex]:
        for row in self.grid:
            yield from row

    def cell(self, x: int, y: int) -> Vertex:
        """Return the vertex at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} maze")
        return self.grid[y][x]

    def neighbours(self, vertex: Vertex) -> Iterator[Vertex]:
        """Yield the in-bounds orthogonal neighbours of ``vertex``."""
        for dx, dy in DIRECTIONS:
            nx, ny = vertex.x + dx, vertex.y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield self.grid[ny][nx]

    def reset_visited(self) -> None:
        """Clear the visited flag and parent link of every cell."""
        for vertex in self:
            vertex.visited = False
            vertex.parent = None
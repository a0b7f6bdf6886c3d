"""Reading mazes from text and drawing them back out."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, TextIO, Union

from wisp.maze import MAX_HEIGHT, MAX_WIDTH, Maze


class MazeLoadError(ValueError):
    """Raised when a maze description cannot be read or is malformed."""


def _split_rows(text: str) -> List[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.split("\r", 1)[0] for line in lines]


def parse_maze(text: str) -> Maze:
    """Build a maze from text where '#' is a wall, 'S' the start and 'E' the end."""
    rows = _split_rows(text)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise MazeLoadError("Inconsistent line lengths")
    if width > MAX_WIDTH:
        raise MazeLoadError(f"Maze is wider than {MAX_WIDTH} cells")
    if len(rows) > MAX_HEIGHT:
        raise MazeLoadError(f"Maze is taller than {MAX_HEIGHT} cells")

    maze = Maze(width, len(rows))
    for row, line in zip(maze.grid, rows):
        for vertex, char in zip(row, line):
            vertex.is_wall = char == "#"
            if char == "S":
                maze.start = vertex
            elif char == "E":
                maze.end = vertex

    problems = []
    if maze.start is None:
        problems.append("Maze has no start point 'S'")
    if maze.end is None:
        problems.append("Maze has no end point 'E'")
    if problems:
        raise MazeLoadError("; ".join(problems))
    return maze


def load_maze(path: Union[str, Path]) -> Maze:
    """Read and parse a maze file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MazeLoadError(f"Error opening file {path}: {exc.strerror}") from exc
    return parse_maze(text)


def format_maze(maze: Maze) -> str:
    """Render a maze, marking the solution path with '.'."""
    lines = []
    for row in maze.grid:
        chars = []
        for vertex in row:
            if vertex is maze.start:
                chars.append("S")
            elif vertex is maze.end:
                chars.append("E")
            elif vertex.is_wall:
                chars.append("#")
            elif vertex.on_path:
                chars.append(".")
            else:
                chars.append(" ")
        lines.append("".join(chars) + "\n")
    return "".join(lines)


def print_maze(maze: Maze, file: Optional[TextIO] = None) -> None:
    """Write the rendered maze to ``file`` (standard output by default)."""
    (file if file is not None else sys.stdout).write(format_maze(maze))
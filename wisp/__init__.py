"""Random maze generation, maze text parsing, and breadth-first / depth-first solving."""

__version__ = "0.1.0"
__all__ = ["cli", "generator", "maze", "parser", "search"]
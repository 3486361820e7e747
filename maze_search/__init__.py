"""Maze Search: grid maze loading and path search strategies."""

from .config import Settings, configure_logging, get_settings
from .core import (
    CellCounts,
    CellRole,
    InvariantViolation,
    MalformedInputError,
    MazeCell,
    MazeGrid,
    SolveResult,
    cell_counts,
    solve,
    solve_astar,
    solve_bfs,
    solve_dfs,
    solve_dijkstra,
)

__version__ = "1.0.0"

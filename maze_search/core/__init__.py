# Core module
from .maze_grid import CellCounts, CellRole, MazeCell, MazeGrid, cell_counts
from .maze_parser import (
    MalformedInputError,
    ParsedMaze,
    parse_maze_lines,
    parse_maze_text,
    validate_maze_text,
)
from .frontiers import FIFOFrontier, LIFOFrontier, PriorityFrontier
from .solvers import (
    STRATEGIES,
    InvariantViolation,
    SolveResult,
    manhattan_distance,
    solve,
    solve_astar,
    solve_bfs,
    solve_dfs,
    solve_dijkstra,
)

__all__ = [
    "CellCounts",
    "CellRole",
    "MazeCell",
    "MazeGrid",
    "cell_counts",
    "MalformedInputError",
    "ParsedMaze",
    "parse_maze_lines",
    "parse_maze_text",
    "validate_maze_text",
    "FIFOFrontier",
    "LIFOFrontier",
    "PriorityFrontier",
    "STRATEGIES",
    "InvariantViolation",
    "SolveResult",
    "manhattan_distance",
    "solve",
    "solve_astar",
    "solve_bfs",
    "solve_dfs",
    "solve_dijkstra",
]

"""
Maze Search Grid Model

Holds a rectangular maze as rows of typed cells:
- Cell roles (wall, passage and the marks a search leaves behind)
- Adjacency queries in a fixed order
- Start/destination positions
- Reset between searches and cell counting after one

Start is always row 1, column 0 and destination is always row height-2,
column width-1, i.e. the openings in the outer wall ring.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .maze_parser import MalformedInputError, parse_maze_lines, parse_maze_text

logger = logging.getLogger(__name__)


class CellRole(Enum):
    """Roles a cell can take, keyed by their display character."""
    WALL = "#"
    PASSAGE = " "
    SOLUTION = "@"
    FRONTIER = "F"
    VISITED = "V"

    @classmethod
    def from_char(cls, char: str) -> "CellRole":
        """Convert an input character to a CellRole."""
        mapping = {
            "#": cls.WALL,
            " ": cls.PASSAGE,
        }
        role = mapping.get(char)
        if role is None:
            raise MalformedInputError(f"Character '{char}' is not a wall or passage")
        return role

    @property
    def char(self) -> str:
        return self.value

    @property
    def is_passable(self) -> bool:
        """Everything but walls can be walked through."""
        return self is not CellRole.WALL


# right, down, up, left
NEIGHBOR_OFFSETS = ((0, 1), (1, 0), (-1, 0), (0, -1))


class MazeCell:
    """One grid position. Compares and hashes by (row, col)."""

    __slots__ = ("row", "col", "role", "priority")

    def __init__(self, row: int, col: int, role: CellRole):
        self.row = row
        self.col = col
        self.role = role
        # only used by the cost-ordered searches
        self.priority = math.inf

    @property
    def key(self) -> tuple[int, int]:
        return (self.row, self.col)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeCell):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"MazeCell(row={self.row}, col={self.col}, role={self.role.name})"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col, "role": self.role.name}


@dataclass(frozen=True)
class CellCounts:
    """Role tallies read off a grid after a search."""
    solution: int
    visited: int
    frontier: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "solution": self.solution,
            "visited": self.visited,
            "frontier": self.frontier,
        }


class MazeGrid:
    """
    Rectangular maze grid owned by at most one search at a time.

    Example usage:
        grid = MazeGrid.from_text(maze_text)
        result = solve_bfs(grid)
        print(grid.visualize())
        print(cell_counts(grid))
        grid.reset()
    """

    def __init__(self, lines: Iterable[str]):
        """
        Build the grid from maze rows.

        Args:
            lines: Ordered rows of the maze, one character per cell.

        Raises:
            MalformedInputError: If the rows do not form a valid maze.
        """
        parsed = parse_maze_lines(lines)
        self._rows: list[list[MazeCell]] = [
            [MazeCell(y, x, CellRole.from_char(char)) for x, char in enumerate(line)]
            for y, line in enumerate(parsed.lines)
        ]
        # same cell objects, so role changes show through
        self._view: tuple[tuple[MazeCell, ...], ...] = tuple(tuple(row) for row in self._rows)
        self.height: int = parsed.height
        self.width: int = parsed.width

        self.start: MazeCell = self._rows[1][0]
        self.destination: MazeCell = self._rows[self.height - 2][self.width - 1]

        if self.start.role is CellRole.WALL:
            logger.warning(f"Start cell {self.start.key} is a wall")
        if self.destination.role is CellRole.WALL:
            logger.warning(f"Destination cell {self.destination.key} is a wall")

    @classmethod
    def from_text(cls, maze_text: str) -> "MazeGrid":
        """Build a grid from newline-separated maze text."""
        return cls(parse_maze_text(maze_text).lines)

    @property
    def rows(self) -> tuple[tuple[MazeCell, ...], ...]:
        """Read-only view of the rows."""
        return self._view

    def cells(self) -> Iterator[MazeCell]:
        """Iterate over every cell in row-major order."""
        for row in self._rows:
            yield from row

    def get_cell(self, row: int, col: int) -> MazeCell:
        """Get the cell at a position."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.height}x{self.width} grid")
        return self._rows[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def neighbors(self, cell: MazeCell) -> list[MazeCell]:
        """
        Get the passable cells adjacent to a cell.

        Order is always right, down, up, left. Walls and out of bounds
        positions are skipped. Cells already marked by a search are
        returned; callers track what they have seen themselves.
        """
        neighbors = []
        for dr, dc in NEIGHBOR_OFFSETS:
            row, col = cell.row + dr, cell.col + dc
            if self.in_bounds(row, col) and self._rows[row][col].role.is_passable:
                neighbors.append(self._rows[row][col])
        return neighbors

    def is_destination(self, cell: MazeCell) -> bool:
        return cell.row == self.destination.row and cell.col == self.destination.col

    @property
    def is_dirty(self) -> bool:
        """True once a search has left marks on the grid."""
        return any(
            cell.role not in (CellRole.WALL, CellRole.PASSAGE) or cell.priority != math.inf
            for cell in self.cells()
        )

    def reset(self) -> None:
        """Return every non-wall cell to a bare passage."""
        for cell in self.cells():
            if cell.role is not CellRole.WALL:
                cell.role = CellRole.PASSAGE
            cell.priority = math.inf

    def visualize(self) -> str:
        """
        Generate ASCII visualization of the grid.

        Returns:
            Rows of role characters joined by newlines.
        """
        return "\n".join("".join(cell.role.char for cell in row) for row in self._rows)

    def get_maze_info(self) -> dict:
        """Get maze metadata."""
        return {
            "width": self.width,
            "height": self.height,
            "start": {"row": self.start.row, "col": self.start.col},
            "destination": {"row": self.destination.row, "col": self.destination.col},
        }


def cell_counts(grid: MazeGrid) -> CellCounts:
    """
    Count cells by search role.

    A solution cell was also visited on the way, so it counts toward
    both tallies.
    """
    solution = visited = frontier = 0
    for cell in grid.cells():
        if cell.role is CellRole.SOLUTION:
            solution += 1
            visited += 1
        elif cell.role is CellRole.VISITED:
            visited += 1
        elif cell.role is CellRole.FRONTIER:
            frontier += 1
    return CellCounts(solution=solution, visited=visited, frontier=frontier)


# Sample mazes for testing
CORRIDOR_MAZE = "\n".join([
    "#####",
    "    #",
    "### #",
    "#    ",
    "#####",
])

TUTORIAL_MAZE = "\n".join([
    "#########",
    "      # #",
    "# ### # #",
    "#   #   #",
    "### #####",
    "#   #   #",
    "# ##### #",
    "#        ",
    "#########",
])

DISCONNECTED_MAZE = "\n".join([
    "#######",
    "   #  #",
    "## #  #",
    "#  #   ",
    "#######",
])

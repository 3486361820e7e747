"""Shared maze fixtures text and path checks for the test suite."""

from collections import deque
from typing import Optional

from maze_search.core.maze_grid import MazeCell, MazeGrid

# Fully open interior, several shortest paths from (1, 0) to (3, 4)
OPEN_MAZE = "\n".join([
    "#####",
    "    #",
    "#   #",
    "#    ",
    "#####",
])


def shortest_path_cells(maze_text: str) -> Optional[int]:
    """Count the cells on a shortest start-to-destination path, straight from the text."""
    lines = maze_text.split("\n")
    height, width = len(lines), len(lines[0])
    start, goal = (1, 0), (height - 2, width - 1)
    distance = {start: 1}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        if (row, col) == goal:
            return distance[goal]
        for nr, nc in ((row + 1, col), (row - 1, col), (row, col + 1), (row, col - 1)):
            if 0 <= nr < height and 0 <= nc < width and lines[nr][nc] == " " and (nr, nc) not in distance:
                distance[(nr, nc)] = distance[(row, col)] + 1
                queue.append((nr, nc))
    return None


def assert_valid_path(grid: MazeGrid, path: list[MazeCell]) -> None:
    """Check a path is a simple chain of adjacent cells from start to destination."""
    assert path[0] == grid.start
    assert path[-1] == grid.destination
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert abs(a.row - b.row) + abs(a.col - b.col) == 1

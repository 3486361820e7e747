"""
Maze Search strategies

Each strategy walks a MazeGrid from its start cell to its destination
cell and leaves its trace on the grid:
- VISITED for cells it explored
- FRONTIER for cells it discovered but never expanded
- SOLUTION for the cells of the path it settled on

Every strategy also returns a SolveResult so callers do not have to scan
the grid to learn whether a path was found.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Literal, Optional

from ..config import get_settings
from .frontiers import FIFOFrontier, LIFOFrontier, PriorityFrontier
from .maze_grid import CellRole, MazeCell, MazeGrid

logger = logging.getLogger(__name__)

EDGE_COST = 1.0


class InvariantViolation(RuntimeError):
    """Exception raised when a search reaches a state it cannot continue from."""

    pass


@dataclass
class SolveResult:
    """Outcome of one search run."""
    strategy: str
    status: Literal["found", "exhausted"]
    path: list[MazeCell] = field(default_factory=list)
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.status == "found"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "strategy": self.strategy,
            "status": self.status,
            "path": [list(cell.key) for cell in self.path],
            "expanded": self.expanded,
        }


ParentMap = dict[tuple[int, int], Optional[MazeCell]]


def manhattan_distance(a: MazeCell, b: MazeCell) -> float:
    """Grid distance with 4-directional moves."""
    return float(abs(a.row - b.row) + abs(a.col - b.col))


def _require_clean(grid: MazeGrid, name: str) -> None:
    if grid.is_dirty:
        raise InvariantViolation(
            f"{name}: grid still carries marks from an earlier search; call reset() first"
        )


def _start_blocked(grid: MazeGrid, name: str) -> bool:
    if grid.start.role is CellRole.WALL:
        logger.warning(f"{name}: start cell {grid.start.key} is a wall, nothing to search")
        return True
    return False


def _mark_path(current: Optional[MazeCell], parents: ParentMap) -> list[MazeCell]:
    """Walk parent pointers back to the start, marking each cell as solution."""
    path = []
    while current is not None:
        current.role = CellRole.SOLUTION
        path.append(current)
        current = parents[current.key]
    path.reverse()
    return path


def _found(name: str, path: list[MazeCell], expanded: int) -> SolveResult:
    logger.info(f"{name}: reached destination, path of {len(path)} cells after {expanded} expansions")
    return SolveResult(strategy=name, status="found", path=path, expanded=expanded)


def _exhausted(name: str, expanded: int) -> SolveResult:
    logger.info(f"{name}: frontier exhausted after {expanded} expansions, no path")
    return SolveResult(strategy=name, status="exhausted", expanded=expanded)


def solve_bfs(grid: MazeGrid) -> SolveResult:
    """
    Breadth-first search.

    Explores in order of distance from the start, so the path found is a
    shortest one.
    """
    name = "bfs"
    _require_clean(grid, name)
    if _start_blocked(grid, name):
        return _exhausted(name, 0)

    start = grid.start
    frontier: FIFOFrontier[MazeCell] = FIFOFrontier()
    frontier.push(start)
    visited = {start.key}
    parents: ParentMap = {start.key: None}
    expanded = 0

    while frontier:
        current = frontier.pop()
        current.role = CellRole.VISITED

        if grid.is_destination(current):
            return _found(name, _mark_path(current, parents), expanded)

        expanded += 1
        for neighbor in grid.neighbors(current):
            if neighbor.key in visited:
                continue
            visited.add(neighbor.key)
            parents[neighbor.key] = current
            neighbor.role = CellRole.FRONTIER
            frontier.push(neighbor)

    return _exhausted(name, expanded)


def solve_dfs(grid: MazeGrid) -> SolveResult:
    """
    Depth-first search with an explicit stack of the live path.

    Always steps into the first unvisited neighbor (right, down, up,
    left) and backtracks at dead ends. The stack left behind on success is
    the path. Finds a path if there is one, not necessarily the shortest.

    Raises:
        InvariantViolation: If the stack is popped while empty.
    """
    name = "dfs"
    _require_clean(grid, name)
    if _start_blocked(grid, name):
        return _exhausted(name, 0)

    start = grid.start
    stack: LIFOFrontier[MazeCell] = LIFOFrontier()
    stack.push(start)
    start.role = CellRole.VISITED
    visited = {start.key}
    current = start

    while not grid.is_destination(current):
        for neighbor in grid.neighbors(current):
            if neighbor.key not in visited:
                visited.add(neighbor.key)
                neighbor.role = CellRole.VISITED
                stack.push(neighbor)
                current = neighbor
                break
        else:
            # dead end, backtrack
            try:
                dead_end = stack.pop()
                logger.debug(f"{name}: backtracking from {dead_end.key}")
                if not stack:
                    return _exhausted(name, len(visited))
                current = stack.peek()
            except IndexError as e:
                raise InvariantViolation(f"{name}: backtracked past the start cell") from e

    path = stack.items()
    for cell in path:
        cell.role = CellRole.SOLUTION
    # every visited cell but the destination had its neighbors scanned
    return _found(name, path, len(visited) - 1)


def _solve_by_cost(
    grid: MazeGrid,
    name: str,
    heuristic: Callable[[MazeCell, MazeCell], float],
) -> SolveResult:
    """
    Best-first search on accumulated cost plus a heuristic estimate.

    cell.priority holds the cheapest known cost from the start. Frontier
    entries are keyed (cost + heuristic, cost), so among equal estimates
    the cheaper entry wins and remaining ties go to the earlier insert.
    """
    _require_clean(grid, name)
    if _start_blocked(grid, name):
        return _exhausted(name, 0)

    destination = grid.destination
    start = grid.start
    start.priority = 0.0

    frontier: PriorityFrontier[MazeCell] = PriorityFrontier(key=lambda cell: cell.key)
    frontier.push((heuristic(start, destination), start.priority), start)
    visited = {start.key}
    parents: ParentMap = {start.key: None}
    expanded = 0

    while frontier:
        current = frontier.pop()
        visited.add(current.key)
        current.role = CellRole.VISITED

        if grid.is_destination(current):
            return _found(name, _mark_path(current, parents), expanded)

        expanded += 1
        for neighbor in grid.neighbors(current):
            if neighbor.key in visited:
                continue
            cost = current.priority + EDGE_COST
            if cost < neighbor.priority:
                logger.debug(f"{name}: relaxing {neighbor.key} from {neighbor.priority} to {cost}")
                neighbor.priority = cost
                parents[neighbor.key] = current
                neighbor.role = CellRole.FRONTIER
                frontier.push((cost + heuristic(neighbor, destination), cost), neighbor)

    return _exhausted(name, expanded)


def _no_heuristic(cell: MazeCell, destination: MazeCell) -> float:
    return 0.0


def solve_dijkstra(grid: MazeGrid) -> SolveResult:
    """Uniform-cost search: frontier ordered by cost from the start."""
    return _solve_by_cost(grid, "dijkstra", _no_heuristic)


def solve_astar(grid: MazeGrid) -> SolveResult:
    """A* search with the Manhattan distance to the destination as heuristic."""
    return _solve_by_cost(grid, "astar", manhattan_distance)


STRATEGIES: dict[str, Callable[[MazeGrid], SolveResult]] = {
    "bfs": solve_bfs,
    "dfs": solve_dfs,
    "dijkstra": solve_dijkstra,
    "astar": solve_astar,
}


def solve(grid: MazeGrid, strategy: Optional[str] = None) -> SolveResult:
    """
    Run a strategy by name.

    Args:
        grid: Grid to search. It is mutated in place.
        strategy: One of STRATEGIES. Defaults to the configured strategy.

    Returns:
        SolveResult of the run.

    Raises:
        ValueError: If the strategy name is unknown.
        InvariantViolation: If the grid is marked from an earlier search
            and auto reset is disabled.
    """
    settings = get_settings()
    name = (strategy or settings.default_strategy).strip().lower()
    solver = STRATEGIES.get(name)
    if solver is None:
        raise ValueError(
            f"Unknown strategy '{strategy}'. Must be one of: {', '.join(STRATEGIES)}"
        )

    if grid.is_dirty and settings.auto_reset:
        logger.debug(f"{name}: resetting grid marked by an earlier search")
        grid.reset()

    logger.info(f"{name}: solving {grid.height}x{grid.width} maze")
    return solver(grid)


if __name__ == "__main__":
    from ..config import configure_logging
    from .maze_grid import TUTORIAL_MAZE, cell_counts

    configure_logging()
    grid = MazeGrid.from_text(TUTORIAL_MAZE)
    for strategy_name in STRATEGIES:
        result = solve(grid, strategy_name)
        print(f"\n{strategy_name}: {result.status}, counts {cell_counts(grid).to_dict()}")
        print(grid.visualize())

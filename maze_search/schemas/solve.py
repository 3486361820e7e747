"""Solve report schemas for renderers and summaries."""

from typing import Literal

from pydantic import BaseModel, Field

from ..core.maze_grid import CellCounts, MazeCell, MazeGrid, cell_counts
from ..core.solvers import SolveResult


class CellPosition(BaseModel):
    """Schema for a position in the maze."""

    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)

    @classmethod
    def from_cell(cls, cell: MazeCell) -> "CellPosition":
        return cls(row=cell.row, col=cell.col)


class CellCountsResponse(BaseModel):
    """Schema for cell role tallies after a search."""

    solution: int = Field(..., ge=0)
    visited: int = Field(..., ge=0)
    frontier: int = Field(..., ge=0)

    @classmethod
    def from_counts(cls, counts: CellCounts) -> "CellCountsResponse":
        return cls(**counts.to_dict())


class SolveSummary(BaseModel):
    """Schema for the report of one search run."""

    strategy: str
    status: Literal["found", "exhausted"]
    path: list[CellPosition]
    path_length: int = Field(..., ge=0)
    counts: CellCountsResponse
    expanded: int = Field(..., ge=0)

    @classmethod
    def from_result(cls, result: SolveResult, grid: MazeGrid) -> "SolveSummary":
        """Build a summary from a result and the grid it was run on."""
        return cls(
            strategy=result.strategy,
            status=result.status,
            path=[CellPosition.from_cell(cell) for cell in result.path],
            path_length=len(result.path),
            counts=CellCountsResponse.from_counts(cell_counts(grid)),
            expanded=result.expanded,
        )

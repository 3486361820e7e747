from .solve import CellCountsResponse, CellPosition, SolveSummary

__all__ = ["CellCountsResponse", "CellPosition", "SolveSummary"]

"""
Maze Parser for Maze Search.

Validates the plain-text maze format before a grid is built from it.

Maze Format:
    # = Wall (impassable)
      = Passage (a single space)

The characters @ (solution), F (frontier) and V (visited) are reserved
for rendering a grid after a search and are rejected in input.
"""

from dataclasses import dataclass
from typing import Iterable, Optional


class MalformedInputError(ValueError):
    """Exception raised when maze text cannot be turned into a grid."""

    pass


WALL_CHAR = "#"
PASSAGE_CHAR = " "
RESERVED_CHARS = {"@", "F", "V"}
VALID_CHARS = {WALL_CHAR, PASSAGE_CHAR}

MIN_SIZE = 3


@dataclass
class ParsedMaze:
    """Validated maze rows ready to be turned into a grid."""

    lines: list[str]
    width: int
    height: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "lines": list(self.lines),
            "width": self.width,
            "height": self.height,
        }


def split_maze_text(maze_text: str) -> list[str]:
    """
    Split maze text into rows.

    Only line endings are removed. Leading and trailing spaces are
    passages and are kept. A single trailing newline is tolerated.
    """
    lines = maze_text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return lines


def parse_maze_lines(lines: Iterable[str]) -> ParsedMaze:
    """
    Validate maze rows.

    Args:
        lines: Ordered rows of the maze, one character per cell.

    Returns:
        ParsedMaze with the rows and the grid dimensions.

    Raises:
        MalformedInputError: If the rows are ragged, the grid is smaller
            than 3x3 or a row holds a character outside the alphabet.
    """
    lines = list(lines)

    if not lines or all(len(line) == 0 for line in lines):
        raise MalformedInputError("Maze text is empty")

    height = len(lines)
    width = len(lines[0])

    for y, line in enumerate(lines):
        if len(line) != width:
            raise MalformedInputError(
                f"Row {y} has length {len(line)}, expected {width} "
                f"(all rows must be the same length)"
            )

    if height < MIN_SIZE or width < MIN_SIZE:
        raise MalformedInputError(
            f"Maze is {height}x{width}; it must be at least {MIN_SIZE}x{MIN_SIZE}"
        )

    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char in RESERVED_CHARS:
                raise MalformedInputError(
                    f"Reserved character '{char}' at row {y}, column {x}. "
                    f"Search markers may not appear in input"
                )
            if char not in VALID_CHARS:
                raise MalformedInputError(
                    f"Invalid character '{char}' at row {y}, column {x}. "
                    f"Valid characters: '{WALL_CHAR}' (wall), '{PASSAGE_CHAR}' (passage)"
                )

    return ParsedMaze(lines=lines, width=width, height=height)


def parse_maze_text(maze_text: str) -> ParsedMaze:
    """
    Parse maze text.

    Args:
        maze_text: Newline-separated rows of the maze.

    Returns:
        ParsedMaze with the rows and the grid dimensions.

    Raises:
        MalformedInputError: If the maze is invalid.
    """
    if not maze_text:
        raise MalformedInputError("Maze text is empty")
    return parse_maze_lines(split_maze_text(maze_text))


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except MalformedInputError as e:
        return False, str(e)

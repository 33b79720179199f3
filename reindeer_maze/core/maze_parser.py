"""
Maze Parser for Reindeer Maze.

Loads and validates maze text from strings or the filesystem.

Maze Format:
    S = Start position
    E = End (goal)
    # = Wall (impassable)
    . = Open path
"""

import logging
from pathlib import Path
from typing import Optional

from .maze import (
    CellType,
    InvalidCellError,
    Maze,
    MazeParseError,
    MazeValidationError,
)

logger = logging.getLogger(__name__)

VALID_CHARS = {cell.value for cell in CellType}


def parse_maze_text(maze_text: str) -> Maze:
    """
    Parse maze text into a Maze.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        Maze built from the text.

    Raises:
        MazeParseError: If the maze text is empty.
        MazeValidationError: If the maze is invalid.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    lines = [line.rstrip("\r") for line in maze_text.strip("\r\n").split("\n")]

    rows = []
    for row, line in enumerate(lines):
        cells = []
        for col, char in enumerate(line):
            try:
                cells.append(CellType.from_char(char))
            except InvalidCellError:
                raise InvalidCellError(
                    f"Invalid character {char!r} at position ({row}, {col}). "
                    f"Valid characters: {', '.join(sorted(VALID_CHARS))}"
                ) from None
        rows.append(cells)

    return Maze(rows)


def load_maze_file(file_path: Path | str) -> Maze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.

    Returns:
        Maze built from the file contents.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the maze cannot be read or parsed.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    maze = parse_maze_text(maze_text)
    logger.info(f"Loaded {maze.height}x{maze.width} maze from {file_path}")
    return maze


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Args:
        maze_text: Multi-line string representing the maze grid.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except (MazeParseError, MazeValidationError) as e:
        return False, str(e)

"""
Reindeer Maze model.

Immutable grid of cells plus the direction type used by the search engine.

Maze Format:
    S = Start position
    E = End (goal)
    # = Wall (impassable)
    . = Open path
"""

from enum import Enum
from typing import Iterable, Optional


class MazeParseError(Exception):
    """Exception raised when maze text cannot be read."""

    pass


class MazeValidationError(Exception):
    """Exception raised when a maze is structurally invalid."""

    pass


class InvalidCellError(MazeValidationError):
    """A character that does not map to any cell type."""

    pass


class JaggedMazeError(MazeValidationError):
    """Rows of unequal length."""

    pass


class MissingMarkerError(MazeValidationError):
    """No start or no end cell."""

    pass


class DuplicateMarkerError(MazeValidationError):
    """More than one start or end cell."""

    pass


class CellType(Enum):
    """Types of cells in the maze."""
    OPEN = "."
    WALL = "#"
    START = "S"
    END = "E"

    @classmethod
    def from_char(cls, char: str) -> "CellType":
        """Convert character to CellType."""
        try:
            return cls(char)
        except ValueError:
            raise InvalidCellError(f"Invalid character {char!r}") from None


class Direction(Enum):
    """Facing directions."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dr, dc) for this direction."""
        return _DELTAS[self]

    def turn_right(self) -> "Direction":
        """Direction after a 90 degree clockwise turn."""
        return _RIGHT_TURNS[self]

    def turn_left(self) -> "Direction":
        """Direction after a 90 degree counter-clockwise turn."""
        return _LEFT_TURNS[self]

    @classmethod
    def parse(cls, value: "str | Direction") -> "Direction":
        """Accept a Direction or its case-insensitive name."""
        if isinstance(value, Direction):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid direction '{value}'. "
                f"Must be one of: {', '.join(d.value for d in cls)}"
            ) from None


_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}

_RIGHT_TURNS = {
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
    Direction.NORTH: Direction.EAST,
}

_LEFT_TURNS = {after: before for before, after in _RIGHT_TURNS.items()}


class Maze:
    """
    Rectangular grid of cells with exactly one start and one end.

    The grid is frozen into tuples on construction; there are no mutation
    operations, so a Maze can be shared between solvers.

    Example usage:
        maze = Maze([
            [CellType.WALL, CellType.WALL, CellType.WALL, CellType.WALL],
            [CellType.WALL, CellType.START, CellType.END, CellType.WALL],
            [CellType.WALL, CellType.WALL, CellType.WALL, CellType.WALL],
        ])
        maze.start  # (1, 1)
    """

    def __init__(self, rows: Iterable[Iterable[CellType]]):
        """
        Initialize maze from rows of cells.

        Args:
            rows: Iterable of rows, each an iterable of CellType.

        Raises:
            MazeParseError: If there are no rows or no columns.
            JaggedMazeError: If rows have different lengths.
            MissingMarkerError: If the start or end cell is absent.
            DuplicateMarkerError: If the start or end cell appears twice.
        """
        self._grid: tuple[tuple[CellType, ...], ...] = tuple(tuple(row) for row in rows)

        if not self._grid:
            raise MazeParseError("Maze has no rows")

        self.height: int = len(self._grid)
        self.width: int = len(self._grid[0])

        if self.width == 0:
            raise MazeParseError("Maze has no columns")

        start_pos: Optional[tuple[int, int]] = None
        end_pos: Optional[tuple[int, int]] = None

        for row, cells in enumerate(self._grid):
            if len(cells) != self.width:
                raise JaggedMazeError(
                    f"Row {row} has length {len(cells)}, expected {self.width}"
                )

            for col, cell in enumerate(cells):
                if cell == CellType.START:
                    if start_pos is not None:
                        raise DuplicateMarkerError(
                            f"Multiple start positions found: "
                            f"first at {start_pos}, second at {(row, col)}"
                        )
                    start_pos = (row, col)
                elif cell == CellType.END:
                    if end_pos is not None:
                        raise DuplicateMarkerError(
                            f"Multiple end positions found: "
                            f"first at {end_pos}, second at {(row, col)}"
                        )
                    end_pos = (row, col)

        if start_pos is None:
            raise MissingMarkerError("Maze must have a start position (S)")
        if end_pos is None:
            raise MissingMarkerError("Maze must have an end position (E)")

        self._start = start_pos
        self._end = end_pos

    @property
    def start(self) -> tuple[int, int]:
        """(row, col) of the start cell."""
        return self._start

    @property
    def end(self) -> tuple[int, int]:
        """(row, col) of the end cell."""
        return self._end

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell_at(self, row: int, col: int) -> CellType:
        """
        Get cell type at position.

        Raises:
            IndexError: If (row, col) lies outside the grid.
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Position {(row, col)} is outside the maze")
        return self._grid[row][col]

    def is_passable(self, row: int, col: int) -> bool:
        """True if the position is inside the grid and not a wall."""
        return self.in_bounds(row, col) and self._grid[row][col] != CellType.WALL

    def render(self) -> str:
        """Render the maze back to its text format."""
        return "\n".join("".join(cell.value for cell in row) for row in self._grid)

    def get_maze_info(self) -> dict:
        """Get maze metadata."""
        return {
            "width": self.width,
            "height": self.height,
            "start": {"row": self._start[0], "col": self._start[1]},
            "end": {"row": self._end[0], "col": self._end[1]},
        }

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Maze(height={self.height}, width={self.width}, start={self._start}, end={self._end})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

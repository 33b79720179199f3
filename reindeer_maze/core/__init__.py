# Core module
from .maze import (
    CellType,
    Direction,
    DuplicateMarkerError,
    InvalidCellError,
    JaggedMazeError,
    Maze,
    MazeParseError,
    MazeValidationError,
    MissingMarkerError,
)
from .maze_parser import load_maze_file, parse_maze_text, validate_maze_text
from .search import STEP_COST, TURN_COST, MazeSolver, SearchFrontier, SolveResult, State

__all__ = [
    "CellType",
    "Direction",
    "DuplicateMarkerError",
    "InvalidCellError",
    "JaggedMazeError",
    "Maze",
    "MazeParseError",
    "MazeValidationError",
    "MissingMarkerError",
    "load_maze_file",
    "parse_maze_text",
    "validate_maze_text",
    "STEP_COST",
    "TURN_COST",
    "MazeSolver",
    "SearchFrontier",
    "SolveResult",
    "State",
]

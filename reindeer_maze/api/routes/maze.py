"""Maze routes for scoring and validating mazes."""

import logging

from fastapi import APIRouter, HTTPException

from reindeer_maze.config import get_settings
from reindeer_maze.core.maze import MazeParseError, MazeValidationError
from reindeer_maze.core.maze_parser import parse_maze_text, validate_maze_text
from reindeer_maze.core.search import MazeSolver
from reindeer_maze.schemas.maze import (
    MazeSolveRequest,
    MazeSolveResponse,
    MazeValidateRequest,
    MazeValidateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maze", tags=["Mazes"])


@router.post(
    "/solve",
    response_model=MazeSolveResponse,
)
def solve_maze(request: MazeSolveRequest) -> MazeSolveResponse:
    """Find the lowest score and the number of cells on any lowest-score route.

    Costs and starting direction fall back to the configured defaults.
    An unreachable end is a normal result with ``reachable`` set to false.
    """
    # Plain def: FastAPI runs the CPU-bound search in its threadpool.
    settings = get_settings()

    # Every cell is one character, so this bounds the grid before parsing.
    grid_data = request.grid_data
    cell_chars = len(grid_data) - grid_data.count("\n") - grid_data.count("\r")
    if cell_chars > settings.max_maze_cells:
        raise HTTPException(
            status_code=413,
            detail=(
                f"Maze has {cell_chars} cells, "
                f"limit is {settings.max_maze_cells}"
            ),
        )

    try:
        maze = parse_maze_text(request.grid_data)
    except (MazeParseError, MazeValidationError) as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )

    solver = MazeSolver(
        maze,
        step_cost=settings.step_cost if request.step_cost is None else request.step_cost,
        turn_cost=settings.turn_cost if request.turn_cost is None else request.turn_cost,
        facing=request.facing or settings.facing,
    )
    result = solver.solve()

    logger.info(
        f"Solved {maze.height}x{maze.width} maze: "
        f"score={result.score} tiles={result.tile_count}"
    )

    return MazeSolveResponse(**result.to_dict(), **maze.get_maze_info())


@router.post(
    "/validate",
    response_model=MazeValidateResponse,
)
def validate_maze(request: MazeValidateRequest) -> MazeValidateResponse:
    """Check maze text without solving it."""
    valid, error = validate_maze_text(request.grid_data)
    return MazeValidateResponse(valid=valid, error=error)

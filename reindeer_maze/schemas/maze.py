"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    row: int
    col: int


class MazeSolveRequest(BaseModel):
    """Schema for a lowest-score search request."""

    grid_data: str = Field(..., min_length=1)
    facing: Optional[str] = Field(
        None,
        pattern="^(north|south|east|west)$",
        description="Starting direction (defaults to the configured direction)",
    )
    step_cost: Optional[int] = Field(None, ge=0)
    turn_cost: Optional[int] = Field(None, ge=0)


class MazeSolveResponse(BaseModel):
    """Schema for a lowest-score search result."""

    reachable: bool
    score: Optional[int] = None
    tiles: int = Field(..., ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    start: MazePosition
    end: MazePosition


class MazeValidateRequest(BaseModel):
    """Schema for validating maze text."""

    grid_data: str


class MazeValidateResponse(BaseModel):
    """Schema for maze validation result."""

    valid: bool
    error: Optional[str] = None

"""Application configuration using Pydantic settings."""

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reindeer_maze import __version__
from reindeer_maze.core.maze import Direction
from reindeer_maze.core.search import STEP_COST, TURN_COST

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Reindeer Maze"
    app_version: str = __version__
    debug: bool = False
    log_level: str = "INFO"

    # Search
    step_cost: int = STEP_COST
    turn_cost: int = TURN_COST
    initial_direction: str = Direction.EAST.value

    # API
    max_maze_cells: int = 250_000

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    @field_validator("step_cost", "turn_cost")
    @classmethod
    def validate_cost(cls, v: int) -> int:
        """Reject negative move costs."""
        if v < 0:
            raise ValueError("Move costs must be non-negative")
        return v

    @field_validator("initial_direction")
    @classmethod
    def validate_direction(cls, v: str) -> str:
        """Normalize the starting direction name."""
        return Direction.parse(v).value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def facing(self) -> Direction:
        return Direction(self.initial_direction)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Set up root logging for the API and the CLI."""
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

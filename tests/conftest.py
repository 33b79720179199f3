"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from reindeer_maze.config import get_settings
from reindeer_maze.main import app


# First sample maze: lowest score 7036, 45 cells on lowest-score routes
SMALL_MAZE = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

# Second sample maze: lowest score 11048, 64 cells on lowest-score routes
LARGER_MAZE = """#################
#...#...#...#..E#
#.#.#.#.#.#.#.#.#
#.#.#.#...#...#.#
#.#.#.#.###.#.#.#
#...#.#.#.....#.#
#.#.#.#.#.#####.#
#.#...#.#.#.....#
#.#.#####.#.###.#
#.#.#.......#...#
#.#.###.#####.###
#.#.#...#.....#.#
#.#.#.#####.###.#
#.#.#.........#.#
#.#.#.#########.#
#S#.............#
#################"""

# End cell sealed off from the start
WALLED_MAZE = """#######
#S..#E#
#######"""

# Two equal-cost corridors, one reached by turning left, one by turning right
TWIN_CORRIDOR_MAZE = """#######
#.....#
#.###.#
#S###E#
#.###.#
#.....#
#######"""


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def small_maze_text() -> str:
    return SMALL_MAZE


@pytest.fixture
def larger_maze_text() -> str:
    return LARGER_MAZE

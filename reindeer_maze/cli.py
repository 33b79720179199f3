#!/usr/bin/env python3
"""
Command line entry point for Reindeer Maze.

Usage:
    reindeer-maze <maze-file>

Prints the lowest score on the first line and the number of cells on any
lowest-score route on the second.
"""

import sys
from typing import Optional

from reindeer_maze.config import configure_logging, get_settings
from reindeer_maze.core.maze import MazeParseError, MazeValidationError
from reindeer_maze.core.maze_parser import load_maze_file
from reindeer_maze.core.search import MazeSolver

USAGE = "Usage: reindeer-maze <maze-file>"


def main(argv: Optional[list[str]] = None) -> int:
    """Run the solver on a maze file and return the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    settings = get_settings()

    configure_logging(settings)

    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    try:
        maze = load_maze_file(args[0])
    except (FileNotFoundError, MazeParseError, MazeValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    solver = MazeSolver(
        maze,
        step_cost=settings.step_cost,
        turn_cost=settings.turn_cost,
        facing=settings.facing,
    )

    score = solver.lowest_score()
    if score is None:
        print("No path from start to end")
        return 1

    print(score)
    print(solver.best_seat_count())
    return 0


if __name__ == "__main__":
    sys.exit(main())

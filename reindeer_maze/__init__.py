"""Reindeer Maze: lowest-score routes through a turn-costly grid maze."""

__version__ = "1.0.0"

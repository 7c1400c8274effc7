"""Solutions to the 2020 Advent of Code puzzles, one module per day."""

__version__ = "1.0.0"
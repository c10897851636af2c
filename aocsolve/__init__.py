"""Solvers for the 2024 Advent of Code puzzles, days 1 to 8."""

__version__ = "0.1.0"
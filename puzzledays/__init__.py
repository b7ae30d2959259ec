"""Solvers for eleven days of grid, list and number puzzles, one module per day."""

__version__ = "0.1.0"
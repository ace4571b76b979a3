"""Solvers for a collection of seasonal programming puzzles."""

__version__ = "0.1.0"
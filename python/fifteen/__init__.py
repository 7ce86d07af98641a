"""Fifteen puzzle: solvability check and A* hint solver."""

__version__ = "0.1.0"

"""Game logic."""

from .engine import GameEngine, GameResult
from .finder import BruteForceTripleFinder, SimpleTripleFinder, TripleFinder
from .table import Table

__all__ = [
    "BruteForceTripleFinder",
    "GameEngine",
    "GameResult",
    "SimpleTripleFinder",
    "Table",
    "TripleFinder",
]

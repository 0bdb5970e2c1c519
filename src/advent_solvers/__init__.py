"""Command-line solvers for small structured-text puzzles."""

from .registry import SOLVERS, PartAnswer, PuzzleResult, solve
from .version import __version__

__all__ = ["SOLVERS", "PartAnswer", "PuzzleResult", "solve", "__version__"]

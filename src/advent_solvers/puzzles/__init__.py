"""Puzzle parsers and solvers, one module per day."""

from . import bingo, diagnostic, dive, sonar

__all__ = ["bingo", "diagnostic", "dive", "sonar"]

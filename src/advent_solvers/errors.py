"""Error taxonomy shared by the solvers and the CLI."""

from __future__ import annotations

from typing import Optional


class PuzzleError(Exception):
    """Base class for every failure a solver run can surface."""

    exit_code = 1


class InputReadError(PuzzleError):
    """Reading the raw input failed (I/O or decoding)."""

    exit_code = 1


class ParseError(PuzzleError):
    """The input text does not match the puzzle's format."""

    exit_code = 2

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        fragment: Optional[str] = None,
    ) -> None:
        self.message = message
        self.line_number = line_number
        self.fragment = fragment
        super().__init__(str(self))

    def __str__(self) -> str:
        location = ""
        if self.line_number is not None:
            location = f"line {self.line_number}: "
        if self.fragment is not None:
            return f"{location}{self.message} ({self.fragment!r})"
        return f"{location}{self.message}"


class UnknownPuzzleError(PuzzleError):
    exit_code = 2


class PuzzleInputFault(PuzzleError):
    """An invariant broke mid-computation; the puzzle input is malformed."""

    exit_code = 3


class InsufficientDataError(PuzzleInputFault):
    pass


class FilterExhaustedError(PuzzleInputFault):
    pass


class AmbiguousWinnerError(PuzzleInputFault):
    pass


class NoWinnerError(PuzzleInputFault):
    pass

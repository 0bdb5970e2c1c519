"""Sonar Sweep: count how often depth measurements increase."""

from __future__ import annotations

import logging
from typing import List, Sequence

from ..errors import InsufficientDataError, ParseError

logger = logging.getLogger(__name__)

WINDOW_SIZE = 3


def parse(text: str) -> List[int]:
    numbers: List[int] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            numbers.append(int(stripped))
        except ValueError:
            raise ParseError(
                "expected an integer", line_number=line_number, fragment=stripped
            ) from None
    logger.debug("Parsed %d depth measurements", len(numbers))
    return numbers


def count_increases(numbers: Sequence[int]) -> int:
    """Count adjacent pairs where the later value is strictly greater."""
    if not numbers:
        raise InsufficientDataError("at least one measurement is required")
    return sum(1 for a, b in zip(numbers, numbers[1:]) if b > a)


def window_sums(numbers: Sequence[int], size: int = WINDOW_SIZE) -> List[int]:
    # [1, 2, 3, 4, 5, 6] -> [6, 9, 12, 15] for size 3
    if size < 1:
        raise ValueError("window size must be positive")
    if len(numbers) < size:
        raise InsufficientDataError(
            f"at least {size} measurements are required, got {len(numbers)}"
        )
    return [sum(numbers[i : i + size]) for i in range(len(numbers) - size + 1)]


def count_window_increases(numbers: Sequence[int], size: int = WINDOW_SIZE) -> int:
    return count_increases(window_sums(numbers, size))

"""Helpers for rectangular grids of values."""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def transpose(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """Return the columns of a rectangular grid as rows.

    The width is taken from the first row; an empty grid yields an empty list.
    """
    if not grid:
        return []
    m = len(grid)
    n = len(grid[0])
    cols: List[List[T]] = []
    for j in range(n):
        cols.append([grid[i][j] for i in range(m)])
    return cols

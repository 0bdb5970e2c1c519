"""Binary Diagnostic: power consumption and life support ratings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from ..errors import FilterExhaustedError, ParseError
from ..grid import transpose

logger = logging.getLogger(__name__)

Row = Tuple[int, ...]
DigitSelector = Callable[[Sequence[Row], int], int]


@dataclass(frozen=True)
class DiagnosticReport:
    gamma_rate: int
    epsilon_rate: int
    power_consumption: int
    oxygen_generator_rating: int
    co2_scrubber_rating: int
    life_support_rating: int


def parse_row(line: str, line_number: int | None = None) -> Row:
    bits: List[int] = []
    for char in line:
        if char == "0":
            bits.append(0)
        elif char == "1":
            bits.append(1)
        else:
            raise ParseError(
                "unknown character in bit string", line_number=line_number, fragment=char
            )
    return tuple(bits)


def parse(text: str) -> List[Row]:
    """Parse newline separated bit strings; all rows must share one width."""
    rows: List[Row] = []
    width = None
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        row = parse_row(stripped, line_number)
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise ParseError(
                f"expected {width} bits, got {len(row)}",
                line_number=line_number,
                fragment=stripped,
            )
        rows.append(row)
    if not rows:
        raise ParseError("diagnostic report is empty")
    logger.debug("Parsed %d rows of width %d", len(rows), width)
    return rows


def _zero_balance(bits: Sequence[int]) -> int:
    """Return -1, 0 or 1 as the zero count is below, at or above half the bits."""
    half = len(bits) // 2
    zeroes = sum(1 for bit in bits if bit == 0)
    return (zeroes > half) - (zeroes < half)


def _majority(bits: Sequence[int]) -> int:
    # ties go to 1
    return 0 if _zero_balance(bits) > 0 else 1


def _minority(bits: Sequence[int]) -> int:
    # ties go to 0
    return 1 if _zero_balance(bits) > 0 else 0


def most_common_bit(rows: Sequence[Row], column: int) -> int:
    return _majority([row[column] for row in rows])


def least_common_bit(rows: Sequence[Row], column: int) -> int:
    return _minority([row[column] for row in rows])


def bits_to_int(bits: Sequence[int]) -> int:
    return int("".join(str(bit) for bit in bits), 2)


def gamma_epsilon(rows: Sequence[Row]) -> Tuple[int, int]:
    gamma_bits = [_majority(column) for column in transpose(rows)]
    epsilon_bits = [1 - bit for bit in gamma_bits]
    return bits_to_int(gamma_bits), bits_to_int(epsilon_bits)


def filter_rating(rows: Sequence[Row], selector: DigitSelector) -> int:
    """Narrow the rows column by column until exactly one remains.

    Raises :class:`FilterExhaustedError` if no row survives a column, or if
    several rows are still left once every column has been used.
    """
    if not rows:
        raise FilterExhaustedError("no rows to filter")
    remaining = list(rows)
    for column in range(len(rows[0])):
        if len(remaining) == 1:
            break
        selected = selector(remaining, column)
        remaining = [row for row in remaining if row[column] == selected]
        if not remaining:
            raise FilterExhaustedError(
                f"filtering on bit {selected} at column {column} left no rows"
            )
    if len(remaining) != 1:
        raise FilterExhaustedError(
            f"expected exactly one row after filtering, got {len(remaining)}"
        )
    return bits_to_int(remaining[0])


def analyze(rows: Sequence[Row]) -> DiagnosticReport:
    gamma, epsilon = gamma_epsilon(rows)
    oxygen = filter_rating(rows, most_common_bit)
    co2 = filter_rating(rows, least_common_bit)
    report = DiagnosticReport(
        gamma_rate=gamma,
        epsilon_rate=epsilon,
        power_consumption=gamma * epsilon,
        oxygen_generator_rating=oxygen,
        co2_scrubber_rating=co2,
        life_support_rating=oxygen * co2,
    )
    logger.debug("Diagnostic report: %s", report)
    return report

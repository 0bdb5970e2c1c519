"""Dive!: plot a submarine course from movement commands."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, List

from ..errors import ParseError

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    FORWARD = "forward"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Command:
    direction: Direction
    amount: int


@dataclass
class Position:
    horizontal: int = 0
    depth: int = 0

    @property
    def product(self) -> int:
        return self.horizontal * self.depth


def parse_command(line: str, line_number: int | None = None) -> Command:
    """Parse a single ``"<forward|up|down> <amount>"`` line."""
    tokens = line.split()
    if len(tokens) != 2:
        raise ParseError(
            "expected '<forward|up|down> <amount>'",
            line_number=line_number,
            fragment=line,
        )
    word, amount = tokens
    try:
        direction = Direction(word)
    except ValueError:
        raise ParseError(
            "unknown command word", line_number=line_number, fragment=word
        ) from None
    # ASCII only: str.isdigit also accepts characters such as "²" that int() rejects
    if not (amount.isascii() and amount.isdigit()):
        raise ParseError(
            "amount must be an unsigned integer", line_number=line_number, fragment=amount
        )
    return Command(direction=direction, amount=int(amount))


def parse(text: str) -> List[Command]:
    commands = [
        parse_command(line.strip(), line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    logger.debug("Parsed %d commands", len(commands))
    return commands


def plot_course(commands: Iterable[Command]) -> Position:
    """Move horizontally on forward, change depth directly on up/down."""
    position = Position()
    for command in commands:
        if command.direction is Direction.FORWARD:
            position.horizontal += command.amount
        elif command.direction is Direction.UP:
            position.depth -= command.amount
        else:
            position.depth += command.amount
    return position


def plot_course_with_aim(commands: Iterable[Command]) -> Position:
    """Up/down steer the aim; forward moves and dives by ``aim * amount``."""
    aim = 0
    position = Position()
    for command in commands:
        if command.direction is Direction.FORWARD:
            position.horizontal += command.amount
            position.depth += aim * command.amount
        elif command.direction is Direction.UP:
            aim -= command.amount
        else:
            aim += command.amount
    return position

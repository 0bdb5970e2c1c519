"""Giant Squid: adjudicate a bingo game against a fixed draw sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..errors import AmbiguousWinnerError, NoWinnerError, ParseError
from ..grid import transpose

logger = logging.getLogger(__name__)

BOARD_SIZE = 5


@dataclass(frozen=True)
class Board:
    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_lines(cls, lines: Sequence[str], first_line_number: int | None = None) -> "Board":
        """Build a board from ``BOARD_SIZE`` lines of whitespace separated numbers."""
        if len(lines) != BOARD_SIZE:
            raise ParseError(
                f"board needs {BOARD_SIZE} lines, got {len(lines)}",
                line_number=first_line_number,
            )
        rows: List[Tuple[int, ...]] = []
        seen = set()
        for offset, line in enumerate(lines):
            line_number = None if first_line_number is None else first_line_number + offset
            try:
                row = tuple(int(token) for token in line.split())
            except ValueError:
                raise ParseError(
                    "board rows must be integers", line_number=line_number, fragment=line
                ) from None
            if len(row) != BOARD_SIZE:
                raise ParseError(
                    f"board row needs {BOARD_SIZE} numbers, got {len(row)}",
                    line_number=line_number,
                    fragment=line,
                )
            for number in row:
                if number in seen:
                    raise ParseError(
                        f"number {number} repeats within a board",
                        line_number=line_number,
                        fragment=line,
                    )
                seen.add(number)
            rows.append(row)
        return cls(rows=tuple(rows))

    def numbers(self) -> List[int]:
        return [number for row in self.rows for number in row]

    def has_winning_row(self, drawn: Sequence[int]) -> bool:
        marked = set(drawn)
        return any(all(number in marked for number in row) for row in self.rows)

    def has_winning_column(self, drawn: Sequence[int]) -> bool:
        marked = set(drawn)
        return any(all(number in marked for number in col) for col in transpose(self.rows))

    def is_winner(self, drawn: Sequence[int]) -> bool:
        return self.has_winning_row(drawn) or self.has_winning_column(drawn)

    def unmarked_sum(self, drawn: Sequence[int]) -> int:
        marked = set(drawn)
        return sum(number for number in self.numbers() if number not in marked)

    def score(self, drawn: Sequence[int]) -> int:
        """Sum of unmarked numbers times the last number drawn."""
        if not drawn:
            raise ValueError("cannot score a board before any number is drawn")
        return self.unmarked_sum(drawn) * drawn[-1]


@dataclass
class WinEvent:
    boards: List[Board]
    drawn: List[int]


@dataclass
class Game:
    """Remaining boards plus the numbers drawn so far.

    Boards that win are removed by :meth:`pop_winners`; ``drawn`` only grows.
    """

    boards: List[Board]
    drawn: List[int] = field(default_factory=list)

    def draw(self, number: int) -> None:
        self.drawn.append(number)

    def winning_boards(self) -> List[Board]:
        return [board for board in self.boards if board.is_winner(self.drawn)]

    def pop_winners(self) -> List[Board]:
        winners: List[Board] = []
        remaining: List[Board] = []
        for board in self.boards:
            (winners if board.is_winner(self.drawn) else remaining).append(board)
        self.boards = remaining
        return winners


def parse_draws(line: str, line_number: int | None = None) -> List[int]:
    draws: List[int] = []
    for token in line.split(","):
        token = token.strip()
        try:
            draws.append(int(token))
        except ValueError:
            raise ParseError(
                "draws must be comma separated integers",
                line_number=line_number,
                fragment=token,
            ) from None
    return draws


def parse(text: str) -> Tuple[List[Board], List[int]]:
    """Split the input into the draw sequence and the list of boards."""
    lines = [
        (line_number, line.strip())
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    if not lines:
        raise ParseError("bingo input is empty")
    draws_line_number, draws_line = lines[0]
    draws = parse_draws(draws_line, draws_line_number)

    board_lines = lines[1:]
    if not board_lines:
        raise ParseError("no boards found after the draw sequence")
    boards: List[Board] = []
    for start in range(0, len(board_lines), BOARD_SIZE):
        chunk = board_lines[start : start + BOARD_SIZE]
        boards.append(Board.from_lines([line for _, line in chunk], chunk[0][0]))
    logger.debug("Parsed %d draws and %d boards", len(draws), len(boards))
    return boards, draws


def solve_first_winning(boards: Sequence[Board], draws: Sequence[int]) -> int:
    game = Game(boards=list(boards))
    for number in draws:
        game.draw(number)
        winners = game.pop_winners()
        if not winners:
            continue
        if len(winners) > 1:
            raise AmbiguousWinnerError(
                f"{len(winners)} boards won together on draw {number}"
            )
        logger.debug("First winner after %d draws", len(game.drawn))
        return winners[0].score(game.drawn)
    raise NoWinnerError("no board won after all draws")


def solve_last_winning(boards: Sequence[Board], draws: Sequence[int]) -> int:
    """Play every draw and score the board that wins last.

    Several boards can win on the same draw, so each win is kept with the draw
    list at that moment and only the final event is scored.
    """
    game = Game(boards=list(boards))
    events: List[WinEvent] = []
    for number in draws:
        game.draw(number)
        winners = game.pop_winners()
        if winners:
            events.append(WinEvent(boards=winners, drawn=list(game.drawn)))

    if not events:
        raise NoWinnerError("no board won after all draws")
    last = events[-1]
    if len(last.boards) != 1:
        raise AmbiguousWinnerError(
            f"{len(last.boards)} boards won together on the last winning draw"
        )
    logger.debug("Last winner after %d draws", len(last.drawn))
    return last.boards[0].score(last.drawn)

"""Day number to solver dispatch with a uniform result shape."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from .errors import UnknownPuzzleError
from .puzzles import bingo, diagnostic, dive, sonar

logger = logging.getLogger(__name__)


@dataclass
class PartAnswer:
    part: int
    answer: int
    details: Dict[str, int] = field(default_factory=dict)


@dataclass
class PuzzleResult:
    day: int
    title: str
    parts: List[PartAnswer]


@dataclass(frozen=True)
class PuzzleSolver:
    day: int
    title: str
    solve: Callable[[str], List[PartAnswer]]


def _solve_sonar(text: str) -> List[PartAnswer]:
    numbers = sonar.parse(text)
    return [
        PartAnswer(part=1, answer=sonar.count_increases(numbers)),
        PartAnswer(part=2, answer=sonar.count_window_increases(numbers)),
    ]


def _solve_dive(text: str) -> List[PartAnswer]:
    commands = dive.parse(text)
    answers: List[PartAnswer] = []
    for part, plot in enumerate((dive.plot_course, dive.plot_course_with_aim), start=1):
        position = plot(commands)
        answers.append(
            PartAnswer(
                part=part,
                answer=position.product,
                details={"horizontal": position.horizontal, "depth": position.depth},
            )
        )
    return answers


def _solve_diagnostic(text: str) -> List[PartAnswer]:
    report = diagnostic.analyze(diagnostic.parse(text))
    return [
        PartAnswer(
            part=1,
            answer=report.power_consumption,
            details={"gamma_rate": report.gamma_rate, "epsilon_rate": report.epsilon_rate},
        ),
        PartAnswer(
            part=2,
            answer=report.life_support_rating,
            details={
                "oxygen_generator_rating": report.oxygen_generator_rating,
                "co2_scrubber_rating": report.co2_scrubber_rating,
            },
        ),
    ]


def _solve_bingo(text: str) -> List[PartAnswer]:
    boards, draws = bingo.parse(text)
    return [
        PartAnswer(part=1, answer=bingo.solve_first_winning(boards, draws)),
        PartAnswer(part=2, answer=bingo.solve_last_winning(boards, draws)),
    ]


SOLVERS: Dict[int, PuzzleSolver] = {
    1: PuzzleSolver(day=1, title="Sonar Sweep", solve=_solve_sonar),
    2: PuzzleSolver(day=2, title="Dive!", solve=_solve_dive),
    3: PuzzleSolver(day=3, title="Binary Diagnostic", solve=_solve_diagnostic),
    4: PuzzleSolver(day=4, title="Giant Squid", solve=_solve_bingo),
}


def solve(day: int, text: str) -> PuzzleResult:
    """Parse ``text`` and compute every part of the puzzle for ``day``."""
    solver = SOLVERS.get(day)
    if solver is None:
        known = ", ".join(str(d) for d in sorted(SOLVERS))
        raise UnknownPuzzleError(f"No solver for day {day} (known days: {known})")
    parts = solver.solve(text)
    for part in parts:
        logger.debug("Day %d part %d: %d %s", day, part.part, part.answer, part.details)
    return PuzzleResult(day=solver.day, title=solver.title, parts=parts)

from __future__ import annotations

import pytest

from advent_solvers.errors import ParseError
from advent_solvers.puzzles.dive import (
    Command,
    Direction,
    parse,
    parse_command,
    plot_course,
    plot_course_with_aim,
)


def test_parse_example(dive_example):
    commands = parse(dive_example)
    assert len(commands) == 6
    assert commands[0] == Command(Direction.FORWARD, 5)
    assert commands[3] == Command(Direction.UP, 3)


def test_plot_course_example(dive_example):
    position = plot_course(parse(dive_example))
    assert (position.horizontal, position.depth) == (15, 10)
    assert position.product == 150


def test_plot_course_with_aim_example(dive_example):
    position = plot_course_with_aim(parse(dive_example))
    assert (position.horizontal, position.depth) == (15, 60)
    assert position.product == 900


def test_commands_apply_in_order():
    # aim only affects forward moves that come after it
    commands = parse("forward 3\ndown 2\nforward 1\n")
    assert plot_course_with_aim(commands).depth == 2


@pytest.mark.parametrize(
    "line, fragment",
    [
        ("backward 3", "backward"),
        ("forward x", "x"),
        ("forward -1", "-1"),
        ("forward", "forward"),
        ("up 1 2", "up 1 2"),
        ("forward ²", "²"),
    ],
)
def test_parse_command_rejects_malformed_lines(line, fragment):
    with pytest.raises(ParseError) as excinfo:
        parse_command(line, 7)
    assert excinfo.value.line_number == 7
    assert excinfo.value.fragment == fragment


def test_parse_reports_line_number():
    with pytest.raises(ParseError) as excinfo:
        parse("forward 1\n\nsideways 2\n")
    assert excinfo.value.line_number == 3


def test_empty_course_stays_at_origin():
    assert plot_course([]).product == 0
    assert plot_course_with_aim([]).product == 0

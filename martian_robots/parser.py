"""Parse the Martian Robots text input into grid and robot objects."""

import re
from typing import List, Optional, Tuple

from .errors import MalformedGridSpec, MalformedInstruction, MalformedRobotSpec
from .model.grid import GridArea
from .model.robot import Instruction, Orientation, Position, Robot

_WHITESPACE = re.compile(r"\s+")
_INTEGER = re.compile(r"-?\d+", re.ASCII)


def split_tokens(line: str, expected: Optional[int] = None) -> List[str]:
    """
    Split an input line into tokens.

    Lines with whitespace split on it ("12 3 N"); compact lines without
    any whitespace split into single characters ("11E"). When `expected`
    is given and the whitespace split yields another count, whitespace is
    dropped and the line is read in compact form ("1 1E", "32 N").
    """
    line = line.strip()
    if not line:
        return []
    if _WHITESPACE.search(line):
        tokens = _WHITESPACE.split(line)
        if expected is None or len(tokens) == expected:
            return tokens
        line = _WHITESPACE.sub("", line)
    return list(line)


def _to_int(token: str) -> int:
    """Convert a plain ASCII decimal token, rejecting `1_0` and non-ASCII digits."""
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"not a decimal integer: {token!r}")
    return int(token)


def _content_lines(text: str) -> List[Tuple[int, str]]:
    """Return (line_number, stripped_line) for every non-blank line."""
    return [
        (number, line.strip())
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def parse_grid_area(line: str, line_number: int = 1) -> GridArea:
    """Parse the `X Y` upper-right corner line."""
    tokens = split_tokens(line, expected=2)
    if len(tokens) != 2:
        raise MalformedGridSpec(
            f"expected 2 values for the grid corner, received {len(tokens)} in {line!r}",
            line_number
        )
    try:
        x, y = (_to_int(token) for token in tokens)
    except ValueError:
        raise MalformedGridSpec(f"grid corner must be integers, got {line!r}",
                                line_number) from None
    if x < 0 or y < 0:
        raise MalformedGridSpec(f"grid corner must not be negative, got {line!r}",
                                line_number)
    return GridArea.from_upper_right(x, y)


def parse_position(line: str, line_number: int = 1) -> Position:
    """Parse an `x y O` robot position line."""
    tokens = split_tokens(line, expected=3)
    if len(tokens) != 3:
        raise MalformedRobotSpec(
            f"expected 3 values for the robot position, received {len(tokens)} in {line!r}",
            line_number
        )
    x, y, symbol = tokens
    try:
        x, y = _to_int(x), _to_int(y)
    except ValueError:
        raise MalformedRobotSpec(f"robot coordinates must be integers, got {line!r}",
                                 line_number) from None
    try:
        orientation = Orientation.from_symbol(symbol)
    except ValueError:
        raise MalformedRobotSpec(f"unknown orientation {symbol!r}",
                                 line_number) from None
    return Position(x, y, orientation)


def parse_instructions(line: str, line_number: int = 1) -> Tuple[Instruction, ...]:
    """Parse an instruction string such as `FRRFLL`; whitespace is ignored."""
    instructions = []
    for symbol in _WHITESPACE.sub("", line):
        try:
            instructions.append(Instruction.from_symbol(symbol))
        except ValueError:
            raise MalformedInstruction(f"unknown instruction {symbol!r}",
                                       line_number) from None
    return tuple(instructions)


def parse_input(text: str) -> Tuple[GridArea, List[Robot]]:
    """
    Parse a complete simulation input, e.g.:

        5 3
        1 1 E
        RFRFRFRF
        3 2 N
        FRRFLLFFRRFLL

    Blank lines are skipped. Any malformed line aborts the whole parse.
    """
    lines = _content_lines(text)
    if not lines:
        raise MalformedGridSpec("input is empty, expected a grid corner line")

    (grid_number, grid_line), body = lines[0], lines[1:]
    area = parse_grid_area(grid_line, grid_number)

    robots = []
    for index in range(0, len(body), 2):
        position_number, position_line = body[index]
        position = parse_position(position_line, position_number)
        if index + 1 >= len(body):
            raise MalformedRobotSpec("robot position has no instruction line",
                                     position_number)
        instruction_number, instruction_line = body[index + 1]
        instructions = parse_instructions(instruction_line, instruction_number)
        robots.append(Robot(
            position=position,
            instructions=instructions,
            robot_id=len(robots) + 1
        ))

    return area, robots

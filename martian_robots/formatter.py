"""Output text formatting for Martian Robots."""

from typing import Iterable

from .model.robot import Position, Robot


def format_position(position: Position) -> str:
    """Render `x y O`, the same shape the position parser reads."""
    return f"{position.x} {position.y} {position.orientation.value}"


def format_robot(robot: Robot) -> str:
    line = format_position(robot.position)
    if robot.lost:
        line += " LOST"
    return line.strip()


def format_output(robots: Iterable[Robot]) -> str:
    """One line per robot in input order, no trailing newline."""
    return "\n".join(format_robot(robot) for robot in robots)

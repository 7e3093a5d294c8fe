"""Exception hierarchy for Martian Robots input handling."""

from typing import Optional


class MartianRobotsError(ValueError):
    """Base class for errors raised while reading simulation input."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedGridSpec(MartianRobotsError):
    """Grid line is missing, has the wrong token count or bad values."""


class MalformedRobotSpec(MartianRobotsError):
    """Robot position line is malformed or has no instruction line."""


class MalformedInstruction(MartianRobotsError):
    """Instruction string contains a symbol outside F, L and R."""

"""Martian Robots: replay robots across a bounded grid with scent protection."""

from .errors import (MartianRobotsError, MalformedGridSpec,
                     MalformedRobotSpec, MalformedInstruction)
from .pipeline import process_input

__version__ = "0.1.0"

__all__ = [
    'MartianRobotsError',
    'MalformedGridSpec',
    'MalformedRobotSpec',
    'MalformedInstruction',
    'process_input',
]

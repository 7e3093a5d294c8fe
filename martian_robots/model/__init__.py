"""Model package for the Martian Robots simulation."""

from .state import RobotSnapshot, SimulationState
from .grid import GridArea, ScentTrail, is_within_bounds
from .robot import Instruction, Orientation, Position, Robot
from .interpreter import apply_instruction, turn_left, turn_right
from .engine import SimulationEngine, run_simulation

__all__ = [
    'RobotSnapshot',
    'SimulationState',
    'GridArea',
    'ScentTrail',
    'is_within_bounds',
    'Instruction',
    'Orientation',
    'Position',
    'Robot',
    'apply_instruction',
    'turn_left',
    'turn_right',
    'SimulationEngine',
    'run_simulation',
]

"""Single-instruction state transitions for Martian Robots."""

from typing import Dict, Tuple

from .grid import GridArea, ScentTrail, is_within_bounds
from .robot import Instruction, Orientation, Position


# (left, right) neighbours of each orientation
ROTATIONS: Dict[Orientation, Tuple[Orientation, Orientation]] = {
    Orientation.NORTH: (Orientation.WEST, Orientation.EAST),
    Orientation.EAST: (Orientation.NORTH, Orientation.SOUTH),
    Orientation.SOUTH: (Orientation.EAST, Orientation.WEST),
    Orientation.WEST: (Orientation.SOUTH, Orientation.NORTH),
}

# Unit step (dx, dy) for each orientation
OFFSETS: Dict[Orientation, Tuple[int, int]] = {
    Orientation.NORTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, -1),
    Orientation.WEST: (-1, 0),
}


def turn_left(orientation: Orientation) -> Orientation:
    return ROTATIONS[orientation][0]


def turn_right(orientation: Orientation) -> Orientation:
    return ROTATIONS[orientation][1]


def next_coordinates(position: Position) -> Tuple[int, int]:
    """Cell one step ahead of the robot."""
    dx, dy = OFFSETS[position.orientation]
    return position.x + dx, position.y + dy


def apply_instruction(instruction: Instruction,
                      position: Position,
                      area: GridArea,
                      scents: ScentTrail) -> Tuple[Position, bool]:
    """
    Compute the robot's position after one instruction.

    Returns (new_position, fell_off). A FORWARD that leaves the grid is
    ignored when the current cell carries a scent; otherwise the robot
    ends up on the off-grid cell and fell_off is True. Recording the
    scent for the current cell is left to the caller.
    """
    if instruction is Instruction.LEFT:
        return Position(position.x, position.y, turn_left(position.orientation)), False

    if instruction is Instruction.RIGHT:
        return Position(position.x, position.y, turn_right(position.orientation)), False

    if instruction is Instruction.FORWARD:
        nx, ny = next_coordinates(position)
        if is_within_bounds(area, nx, ny):
            return Position(nx, ny, position.orientation), False

        # Another robot already fell from this cell: refuse the move
        if scents.has_scent(position.x, position.y):
            return position, False

        return Position(nx, ny, position.orientation), True

    raise ValueError(f"Unsupported instruction: {instruction!r}")

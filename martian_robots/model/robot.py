"""Robot, position and instruction types for the Martian Robots simulation."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Sequence, Tuple


class Orientation(Enum):
    """Compass direction a robot is facing."""
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Orientation":
        """Look up orientation by its single-letter symbol."""
        return cls(symbol)


class Instruction(Enum):
    """Commands a robot understands."""
    FORWARD = "F"
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Instruction":
        """Look up instruction by its single-letter symbol."""
        return cls(symbol)


@dataclass(frozen=True)
class Position:
    """Grid coordinate plus facing direction."""
    x: int
    y: int
    orientation: Orientation

    @property
    def coordinates(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class Robot:
    """
    A single robot with its instruction queue.

    `lost` flips to True at most once, when the robot walks off the grid
    from an unscented cell. `trail` holds every position the robot has
    occupied, starting with where it was placed.
    """
    position: Position
    instructions: Tuple[Instruction, ...] = ()
    lost: bool = False
    robot_id: int = 0
    trail: List[Position] = field(default_factory=list)

    def __post_init__(self):
        self.instructions = tuple(self.instructions)
        if not self.trail:
            self.trail = [self.position]

    @classmethod
    def create(cls, x: int, y: int, orientation: Orientation,
               instructions: Sequence[Instruction] = (),
               robot_id: int = 0) -> "Robot":
        return cls(
            position=Position(x, y, orientation),
            instructions=tuple(instructions),
            robot_id=robot_id
        )

    def copy(self) -> "Robot":
        """Return an independent copy (trail list included)."""
        return replace(self, trail=list(self.trail))

    def move_to(self, position: Position) -> None:
        """Update position and extend the trail."""
        self.position = position
        self.trail.append(position)

    def mark_lost(self) -> None:
        """Put the robot in its terminal lost state at its last grid cell."""
        self.lost = True

    def __repr__(self) -> str:
        status = " LOST" if self.lost else ""
        return (f"Robot(id={self.robot_id}, pos=({self.position.x}, "
                f"{self.position.y}, {self.position.orientation.value}){status})")

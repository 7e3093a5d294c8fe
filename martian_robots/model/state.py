"""State snapshot dataclasses for the Martian Robots simulation."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple


@dataclass(frozen=True)
class RobotSnapshot:
    """Immutable snapshot of a robot after a simulation step."""
    robot_id: int
    x: int
    y: int
    orientation: str  # "N", "E", "S", "W"
    lost: bool
    trail: Tuple[Tuple[int, int], ...] = ()  # visited cells, in order


@dataclass
class SimulationState:
    """Complete snapshot of the run after `step` robots have been simulated."""
    step: int
    robots: List[RobotSnapshot]
    scents: FrozenSet[Tuple[int, int]]
    metrics: Dict[str, float]  # lost count, ignored moves, etc.

    @property
    def latest(self) -> Optional[RobotSnapshot]:
        """Robot simulated in this step, None before the first step."""
        if self.step == 0:
            return None
        return self.robots[self.step - 1]

    def to_csv_row(self) -> Optional[Dict]:
        """Convert the latest robot to CSV-compatible format."""
        robot = self.latest
        if robot is None:
            return None
        return {
            "step": self.step,
            "robot_id": robot.robot_id,
            "x": robot.x,
            "y": robot.y,
            "orientation": robot.orientation,
            "lost": robot.lost,
            "scents": len(self.scents)
        }

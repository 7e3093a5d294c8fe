"""Simulation engine for Martian Robots."""

import logging
from typing import Dict, Iterable, List

from .grid import GridArea, ScentTrail
from .interpreter import apply_instruction
from .robot import Instruction, Robot
from .state import RobotSnapshot, SimulationState

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Replays robots one after another on a shared grid.

    Implements:
    1. Per-run scent trail shared by all robots
    2. Strictly ordered robot processing (one robot per step)
    3. Instruction replay until the instructions run out or the robot is lost
    4. State snapshot generation

    The robots passed in are copied; callers keep their originals.
    """

    def __init__(self, area: GridArea, robots: Iterable[Robot]):
        self.area = area
        self.robots: List[Robot] = [robot.copy() for robot in robots]
        self.scents = ScentTrail()
        self.current_step = 0

        # Metrics tracking
        self.lost_count = 0
        self.instructions_executed = 0
        self.ignored_moves = 0

    def step(self) -> SimulationState:
        """
        Simulate the next robot in input order.

        Scents recorded here are visible to every robot simulated later.
        """
        if self.is_finished():
            raise RuntimeError("All robots have already been simulated")

        robot = self.robots[self.current_step]
        self._run_robot(robot)
        self.current_step += 1
        return self._create_state_snapshot()

    def _run_robot(self, robot: Robot) -> None:
        for instruction in robot.instructions:
            if robot.lost:
                break

            old_position = robot.position
            new_position, fell_off = apply_instruction(
                instruction, old_position, self.area, self.scents
            )
            self.instructions_executed += 1

            if fell_off:
                # Lost robots are reported at the last cell they held
                self.scents.record(old_position.x, old_position.y)
                robot.mark_lost()
                self.lost_count += 1
                logger.debug("Robot %d lost moving from (%d, %d) to (%d, %d)",
                             robot.robot_id, old_position.x, old_position.y,
                             new_position.x, new_position.y)
            elif instruction is Instruction.FORWARD and new_position == old_position:
                self.ignored_moves += 1
                logger.debug("Robot %d ignored move off scented cell (%d, %d)",
                             robot.robot_id, old_position.x, old_position.y)
            elif new_position != old_position:
                robot.move_to(new_position)

    def _create_state_snapshot(self) -> SimulationState:
        """Create immutable snapshot of current simulation state."""
        robot_snapshots = [
            RobotSnapshot(
                robot_id=r.robot_id,
                x=r.position.x,
                y=r.position.y,
                orientation=r.position.orientation.value,
                lost=r.lost,
                trail=tuple(p.coordinates for p in r.trail)
            )
            for r in self.robots
        ]

        metrics = {
            'simulated': self.current_step,
            'total_robots': len(self.robots),
            'lost': self.lost_count,
            'scents': len(self.scents),
            'instructions_executed': self.instructions_executed,
            'ignored_moves': self.ignored_moves,
        }

        return SimulationState(
            step=self.current_step,
            robots=robot_snapshots,
            scents=self.scents.cells(),
            metrics=metrics
        )

    def is_finished(self) -> bool:
        """Check if every robot has been simulated."""
        return self.current_step >= len(self.robots)

    def run(self) -> List[Robot]:
        """Simulate all remaining robots and return them in input order."""
        while not self.is_finished():
            self.step()
        logger.info("Simulated %d robots: %d lost, %d scents",
                    len(self.robots), self.lost_count, len(self.scents))
        return self.robots

    def get_summary(self) -> Dict:
        """Get summary statistics for the simulation."""
        return {
            'robots_simulated': self.current_step,
            'robots_total': len(self.robots),
            'robots_lost': self.lost_count,
            'scents_recorded': len(self.scents),
            'instructions_executed': self.instructions_executed,
            'ignored_moves': self.ignored_moves,
        }


def run_simulation(area: GridArea, robots: Iterable[Robot]) -> List[Robot]:
    """Replay every robot in order and return their final states."""
    return SimulationEngine(area, robots).run()

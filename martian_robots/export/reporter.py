"""Summary report generation for Martian Robots."""

from pathlib import Path
from typing import Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import SimulationState


class Reporter:
    """Generates summary statistics and formatted text report."""

    def __init__(self, input_name: str, config_path: Optional[str] = None):
        self.input_name = input_name
        self.config_path = config_path
        self.step_metrics: List[Dict] = []
        self.protected_robots = 0
        self._prev_ignored = 0

    def update(self, state: "SimulationState") -> None:
        """Accumulate metrics per step."""
        self.step_metrics.append(state.metrics.copy())

        # A robot saved by a scent ignored at least one move during its step
        ignored = state.metrics.get('ignored_moves', 0)
        if ignored > self._prev_ignored:
            self.protected_robots += 1
        self._prev_ignored = ignored

    def generate_summary(self, final_state: "SimulationState",
                         output_dir: Path,
                         csv_enabled: bool,
                         snapshot_enabled: bool,
                         gif_enabled: bool) -> str:
        """Returns formatted text report."""
        metrics = final_state.metrics
        total = int(metrics.get('total_robots', 0))
        lost = int(metrics.get('lost', 0))
        lost_pct = (lost / total * 100) if total > 0 else 0

        lines = [
            "",
            "=" * 60,
            "             MARTIAN ROBOTS SIMULATION REPORT",
            "=" * 60,
            f"Input:         {self.input_name}",
            f"Configuration: {self.config_path or '(defaults)'}",
            "",
            "SIMULATION METRICS",
            "-" * 40,
            f"Robots Simulated:      {int(metrics.get('simulated', 0))} / {total}",
            f"Robots Lost:           {lost} ({lost_pct:.1f}%)",
            f"Scents Recorded:       {len(final_state.scents)}",
            f"Instructions Executed: {int(metrics.get('instructions_executed', 0))}",
            f"Moves Ignored (scent): {int(metrics.get('ignored_moves', 0))}",
            f"Robots Saved by Scent: {self.protected_robots}",
            "",
            "SCENTED CELLS",
            "-" * 40,
        ]
        if final_state.scents:
            lines.extend(f"  ({x}, {y})" for x, y in sorted(final_state.scents))
        else:
            lines.append("  (none)")

        lines.extend(["", "OUTPUT FILES", "-" * 40])

        if csv_enabled:
            lines.append(f"CSV Log:    {output_dir / 'simulation_log.csv'}")
        else:
            lines.append("CSV Log:    (disabled)")

        if snapshot_enabled:
            lines.append(f"Snapshot:   {output_dir / 'final_state.png'}")
        else:
            lines.append("Snapshot:   (disabled)")

        if gif_enabled:
            lines.append(f"Animation:  {output_dir / 'simulation.gif'}")
        else:
            lines.append("Animation:  (disabled)")

        lines.append("=" * 60)

        return "\n".join(lines)

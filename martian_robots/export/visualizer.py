"""Visualization and export for Martian Robots."""

import io
from pathlib import Path
from typing import List, TYPE_CHECKING

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from PIL import Image

if TYPE_CHECKING:
    from ..model.grid import GridArea
    from ..model.state import SimulationState


# Arrow direction (dx, dy) drawn for each orientation symbol
_HEADINGS = {'N': (0, 0.3), 'E': (0.3, 0), 'S': (0, -0.3), 'W': (-0.3, 0)}


class Visualizer:
    """
    Draws the grid, scented cells and robot trails using matplotlib.

    Supports:
    - Single PNG snapshots
    - Animated GIF compilation (one frame per simulated robot)
    """

    COLORS = {
        'floor': '#ECF0F1',     # Light gray
        'scent': '#F39C12',     # Orange
        'trail': '#3498DB',     # Blue
        'active': '#27AE60',    # Green
        'lost': '#E74C3C',      # Red
        'pending': '#95A5A6',   # Gray
    }

    def __init__(self, area: "GridArea"):
        self.area = area
        self.frames: List[Image.Image] = []

    def _create_figure(self, state: "SimulationState") -> plt.Figure:
        """Create matplotlib figure for state visualization."""
        area = self.area
        aspect = area.width / area.height
        fig_height = 6
        fig_width = max(6, fig_height * aspect)
        fig, ax = plt.subplots(figsize=(fig_width, fig_height))

        # Base layer: floor with scented cells tinted; [row, col] = [y, x]
        base = np.ones((area.height, area.width, 3))
        base[:, :] = to_rgb(self.COLORS['floor'])
        scent_rgb = to_rgb(self.COLORS['scent'])
        for sx, sy in state.scents:
            if area.contains(sx, sy):
                base[sy - area.bottom, sx - area.left] = scent_rgb

        extent = [area.left - 0.5, area.right + 0.5,
                  area.bottom - 0.5, area.top + 0.5]
        ax.imshow(base, origin='lower', aspect='equal', extent=extent)

        # Robots simulated so far get trail, marker and heading arrow
        for index, robot in enumerate(state.robots):
            simulated = index < state.step
            if simulated and len(robot.trail) > 1:
                xs, ys = zip(*robot.trail)
                ax.plot(xs, ys, '-', color=self.COLORS['trail'],
                        linewidth=1, alpha=0.6)

            if robot.lost:
                color = self.COLORS['lost']
            elif simulated:
                color = self.COLORS['active']
            else:
                color = self.COLORS['pending']

            marker = 'x' if robot.lost else 'o'
            ax.plot(robot.x, robot.y, marker, color=color, markersize=8)
            dx, dy = _HEADINGS.get(robot.orientation, (0, 0))
            ax.arrow(robot.x, robot.y, dx, dy, color=color,
                     head_width=0.12, length_includes_head=True)
            ax.annotate(str(robot.robot_id), (robot.x, robot.y),
                        textcoords='offset points', xytext=(6, 6), fontsize=8)

        ax.set_title(f'Robots simulated: {state.step} / {len(state.robots)} | '
                     f'Lost: {int(state.metrics.get("lost", 0))} | '
                     f'Scents: {len(state.scents)}')
        ax.set_xlabel('X')
        ax.set_ylabel('Y')

        ax.set_xlim(area.left - 1.5, area.right + 1.5)
        ax.set_ylim(area.bottom - 1.5, area.top + 1.5)
        ax.set_xticks(range(area.left, area.right + 1))
        ax.set_yticks(range(area.bottom, area.top + 1))

        legend_elements = [
            plt.Line2D([0], [0], marker='o', color='w', label='Robot',
                       markerfacecolor=self.COLORS['active'], markersize=8),
            plt.Line2D([0], [0], marker='x', color=self.COLORS['lost'],
                       linestyle='None', label='Lost', markersize=8),
            plt.Line2D([0], [0], marker='s', color='w', label='Scent',
                       markerfacecolor=self.COLORS['scent'], markersize=8),
        ]
        ax.legend(handles=legend_elements, loc='upper right', fontsize=8)

        plt.tight_layout()
        return fig

    def buffer_frame(self, state: "SimulationState") -> None:
        """Store frame for GIF generation."""
        fig = self._create_figure(state)

        buf = io.BytesIO()
        fig.savefig(buf, format='png', dpi=80)
        buf.seek(0)
        img = Image.open(buf).copy()
        self.frames.append(img)
        buf.close()
        plt.close(fig)

    def save_snapshot(self, state: "SimulationState", output_path: Path) -> None:
        """Save single PNG image of current state."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig = self._create_figure(state)
        fig.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

    def generate_gif(self, output_path: Path, fps: int = 2) -> None:
        """Compile buffered frames into animated GIF."""
        if not self.frames:
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        duration = int(1000 / fps)  # milliseconds per frame

        self.frames[0].save(
            output_path,
            save_all=True,
            append_images=self.frames[1:],
            duration=duration,
            loop=0
        )

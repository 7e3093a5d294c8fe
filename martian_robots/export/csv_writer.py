"""CSV export of per-robot results for Martian Robots."""

import csv
from pathlib import Path
from typing import IO, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..model.state import SimulationState

FIELDNAMES = ['step', 'robot_id', 'x', 'y', 'orientation', 'lost', 'scents']


class CSVWriter:
    """
    Appends one row per simulated robot as the engine steps.

    Output format:
        step,robot_id,x,y,orientation,lost,scents
        1,1,1,1,E,False,0
        2,2,3,3,N,True,1
    """

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self._handle: Optional[IO[str]] = None
        self._writer: Optional[csv.DictWriter] = None
        self.rows_written = 0

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self) -> None:
        """Create the file and write the header."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = open(self.output_path, 'w', newline='')
        self._writer = csv.DictWriter(self._handle, fieldnames=FIELDNAMES)
        self._writer.writeheader()
        self.rows_written = 0

    def append(self, state: "SimulationState") -> None:
        """Write the row of the robot simulated in `state`."""
        if not self.is_open:
            self.open()
        row = state.to_csv_row()
        if row is None:
            return
        self._writer.writerow(row)
        self._handle.flush()
        self.rows_written += 1

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
            self._writer = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

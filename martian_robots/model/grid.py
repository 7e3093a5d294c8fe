"""Grid bounds and scent bookkeeping for the Martian Robots simulation."""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Set, Tuple

from ..errors import MalformedGridSpec


@dataclass(frozen=True)
class GridArea:
    """
    Inclusive rectangle robots are allowed to move in.

    Parsed grids always start at (0, 0); the upper-right corner comes
    from the first input line.
    """
    top: int
    right: int
    bottom: int = 0
    left: int = 0

    def __post_init__(self):
        if self.right < self.left or self.top < self.bottom:
            raise MalformedGridSpec(
                f"Grid bounds are inverted: left={self.left}, right={self.right}, "
                f"bottom={self.bottom}, top={self.top}"
            )

    @classmethod
    def from_upper_right(cls, x: int, y: int) -> "GridArea":
        return cls(top=y, right=x, bottom=0, left=0)

    @property
    def width(self) -> int:
        """Number of cell columns."""
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        """Number of cell rows."""
        return self.top - self.bottom + 1

    def contains(self, x: int, y: int) -> bool:
        return is_within_bounds(self, x, y)


def is_within_bounds(area: GridArea, x: int, y: int) -> bool:
    """Check if (x, y) lies inside the grid rectangle, edges included."""
    return area.left <= x <= area.right and area.bottom <= y <= area.top


class ScentTrail:
    """
    Cells from which a robot has already fallen off the grid.

    One trail belongs to one simulation run. Cells are only ever added,
    so membership grows monotonically while robots are processed.
    """

    def __init__(self):
        self._cells: Set[Tuple[int, int]] = set()

    def record(self, x: int, y: int) -> None:
        """Mark cell as scented."""
        self._cells.add((x, y))

    def has_scent(self, x: int, y: int) -> bool:
        return (x, y) in self._cells

    def cells(self) -> FrozenSet[Tuple[int, int]]:
        """Return an immutable copy of the scented cells."""
        return frozenset(self._cells)

    def __contains__(self, cell: Tuple[int, int]) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(sorted(self._cells))

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"ScentTrail({sorted(self._cells)})"

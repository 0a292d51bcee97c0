"""Cost grids read from text maps.

A map is a rectangle of digit characters, one row per line. Each digit is
the cost of entering that cell. The cell marked ``M`` is the start and the
cell marked ``G`` the goal; both cost nothing to enter. When a marker
occurs more than once the last occurrence counts, and a missing marker
places that end at the first cell.
"""

import io
import os
from dataclasses import dataclass
from typing import Union

from marvin.lines import read_lines

START_MARK = "M"
GOAL_MARK = "G"
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Grid:
    """A rectangular grid of cell costs stored row by row."""

    rows: int
    columns: int
    cells: str
    start: int
    goal: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise ValueError(
                f"grid must have at least one row and column, "
                f"got {self.rows}x{self.columns}"
            )
        if len(self.cells) != self.rows * self.columns:
            raise ValueError(
                f"expected {self.rows * self.columns} cells, got {len(self.cells)}"
            )
        bad = set(self.cells) - _DIGITS
        if bad:
            raise ValueError(f"grid cells must be digits, found {sorted(bad)!r}")
        for name, index in (("start", self.start), ("goal", self.goal)):
            if not 0 <= index < len(self.cells):
                raise ValueError(f"{name} index {index} lies outside the grid")

    @property
    def size(self) -> int:
        """Number of cells in the grid."""
        return len(self.cells)

    def cost(self, index: int) -> int:
        """Return the cost of entering the cell at index."""
        return int(self.cells[index])


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def parse_grid(text: str) -> Grid:
    """Build a grid from the text of a map.

    Raises ValueError for an empty map, rows of unequal length, or a cell
    that is neither a digit nor a marker.
    """
    lines = [_strip_newline(line) for line in read_lines(io.StringIO(text))]
    if not lines:
        raise ValueError("map is empty")
    columns = len(lines[0])
    if columns == 0:
        raise ValueError("first row of the map is empty")
    for number, line in enumerate(lines, start=1):
        if len(line) != columns:
            raise ValueError(
                f"row {number} has {len(line)} cells, expected {columns}"
            )
    raw = "".join(lines)
    start = max(raw.rfind(START_MARK), 0)
    goal = max(raw.rfind(GOAL_MARK), 0)
    cells = raw.replace(START_MARK, "0").replace(GOAL_MARK, "0")
    return Grid(rows=len(lines), columns=columns, cells=cells, start=start, goal=goal)


def load_grid(path: Union[str, "os.PathLike[str]"]) -> Grid:
    """Read and parse the map stored in a file."""
    with open(path, encoding="latin-1", newline="") as handle:
        return parse_grid(handle.read())
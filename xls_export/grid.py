"""
Grid Serializer
===============
Holds one worksheet as a sparse grid of typed cells and renders it as
delimited text lines.

The rendered rectangle always starts at absolute ``(0, 0)``: rows and
columns in front of the grid's start coordinate come out as empty fields.
Every field, the last one included, is followed by the delimiter.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .cells import CellValue, render_cell

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "\t"


@dataclass
class WorksheetGrid:
    """A named sparse grid keyed by zero-based ``(row, col)``.

    ``bounds`` is ``(start, end)`` where ``end`` is exclusive, or ``None``
    for a sheet without any cell.
    """
    name: str
    cells: dict = field(default_factory=dict)  # (row, col) -> CellValue
    bounds: Optional[tuple] = None

    @classmethod
    def from_cells(cls, name: str, cells: dict) -> "WorksheetGrid":
        """Build a grid and derive its bounding rectangle from *cells*."""
        if not cells:
            return cls(name=name)
        rows = [r for r, _c in cells]
        cols = [c for _r, c in cells]
        start = (min(rows), min(cols))
        end = (max(rows) + 1, max(cols) + 1)
        return cls(name=name, cells=dict(cells), bounds=(start, end))

    @property
    def is_empty(self) -> bool:
        return self.bounds is None

    @property
    def start(self):
        return self.bounds[0] if self.bounds else None

    @property
    def end(self):
        return self.bounds[1] if self.bounds else None

    def get(self, row: int, col: int) -> Optional[CellValue]:
        return self.cells.get((row, col))


def render_row(grid: WorksheetGrid, row: int, delimiter: str) -> str:
    """Render one row of *grid*, newline included."""
    _end_row, end_col = grid.end
    parts = []
    for col in range(end_col):
        parts.append(render_cell(grid.get(row, col)))
        parts.append(delimiter)
    parts.append("\n")
    return "".join(parts)


def serialize_grid(grid: WorksheetGrid, delimiter: str = DEFAULT_DELIMITER) -> Iterator[str]:
    """Yield the delimited text lines of *grid* in row order.

    An empty grid yields nothing.
    """
    if grid.is_empty:
        logger.debug(f"Sheet '{grid.name}' has no bounding rectangle")
        return
    end_row, _end_col = grid.end
    for row in range(end_row):
        yield render_row(grid, row, delimiter)

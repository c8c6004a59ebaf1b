"""
Grid model: decodes the raw field into cells and numbers the repair cells
per checkerboard color so they can serve as dense bipartite vertex ids.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import config as cfg
import wall_utils.logging as logging

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    requires_repair: bool
    partition_index: Optional[int] = None

    @property
    def color(self) -> int:
        return (self.row + self.col) % 2


@dataclass
class Grid:
    """
    Rectangular field of cells.

    positions_by_color[c][i] is the position of the repair cell of color c
    whose partition index is i.
    """
    height: int
    width: int
    cells: List[List[Cell]] = field(default_factory=list)
    positions_by_color: Tuple[List[Position], List[Position]] = field(default_factory=lambda: ([], []))

    @property
    def count_color0(self) -> int:
        return len(self.positions_by_color[0])

    @property
    def count_color1(self) -> int:
        return len(self.positions_by_color[1])

    @property
    def total_free_count(self) -> int:
        return self.count_color0 + self.count_color1

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def position_of(self, color: int, partition_index: int) -> Position:
        return self.positions_by_color[color][partition_index]


def build_grid(rows: Sequence[str], repair_marker: Optional[str] = None) -> Grid:
    """
    Decode rows of single-character markers into a Grid.

    Cells are visited in row-major order; each repair cell gets the next free
    index of its own color class, counters for color 0 and color 1 both start
    at 0. Rows are assumed to share one length.
    """
    marker = repair_marker if repair_marker is not None else cfg.SOLVER.RepairMarker

    height = len(rows)
    width = len(rows[0]) if height else 0
    grid = Grid(height=height, width=width)

    for r in range(height):
        line = rows[r]
        row_cells = []
        for c in range(width):
            if line[c] != marker:
                row_cells.append(Cell(r, c, False))
                continue
            color = (r + c) % 2
            bucket = grid.positions_by_color[color]
            row_cells.append(Cell(r, c, True, len(bucket)))
            bucket.append((r, c))
        grid.cells.append(row_cells)

    logger.debug(
        "Grid %dx%d decoded: %d repair cells (color0=%d, color1=%d)",
        height, width, grid.total_free_count, grid.count_color0, grid.count_color1,
    )
    return grid

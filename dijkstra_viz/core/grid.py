# dijkstra_viz/core/grid.py
#!/usr/bin/env python3
"""
Grid model: a fixed rows x cols array of cells with one start and one end marker.

Wall/start/end flags survive searches; distance, predecessor and display flags
are wiped by reset_search_state(). While `locked` is set (a search is running)
every mutating call is ignored.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from dijkstra_viz.core.types import Cell

logger = logging.getLogger(__name__)

Pos = Tuple[int, int]  # (row, col)

# up, down, left, right
DIR4: Tuple[Pos, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Grid:
    def __init__(self, rows: int, cols: int, start: Optional[Pos] = None, end: Optional[Pos] = None):
        if rows < 1 or cols < 1 or rows * cols < 2:
            raise ValueError(f"grid needs at least two cells, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.cells: List[List[Cell]] = [[Cell(r, c) for c in range(cols)] for r in range(rows)]
        self.locked = False

        if start is None or end is None:
            d_start, d_end = self._default_markers()
            start = d_start if start is None else start
            end = d_end if end is None else end
        if not self.in_bounds(*start):
            raise ValueError(f"start {start} out of bounds")
        if not self.in_bounds(*end):
            raise ValueError(f"end {end} out of bounds")
        if tuple(start) == tuple(end):
            raise ValueError("start and end must be different cells")

        self.start = self.cells[start[0]][start[1]]
        self.start.is_start = True
        self.end = self.cells[end[0]][end[1]]
        self.end.is_end = True

    def _default_markers(self) -> Tuple[Pos, Pos]:
        mid = self.rows // 2
        if self.cols >= 11:
            return (mid, 5), (mid, self.cols - 5)
        if self.cols > 1:
            return (mid, 0), (mid, self.cols - 1)
        # single column: stack them vertically
        return (0, 0), (self.rows - 1, 0)

    # ---------- structural queries ----------
    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> Optional[Cell]:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def neighbors(self, cell: Cell) -> List[Cell]:
        out: List[Cell] = []
        for dr, dc in DIR4:
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c):
                out.append(self.cells[r][c])
        return out

    # ---------- mutations ----------
    def toggle_wall(self, cell: Cell) -> bool:
        if self.locked or cell.is_start or cell.is_end:
            return False
        cell.is_wall = not cell.is_wall
        return True

    def relocate_start(self, cell: Cell) -> bool:
        if self.locked or cell.is_wall or cell.is_end:
            return False
        self.start.is_start = False
        cell.is_start = True
        self.start = cell
        return True

    def relocate_end(self, cell: Cell) -> bool:
        if self.locked or cell.is_wall or cell.is_start:
            return False
        self.end.is_end = False
        cell.is_end = True
        self.end = cell
        return True

    def reset_search_state(self) -> None:
        if self.locked:
            return
        for cell in self.iter_cells():
            cell.reset()

    def reset_all(self) -> None:
        if self.locked:
            return
        for cell in self.iter_cells():
            cell.is_wall = False
            cell.reset()

    # ---------- boundary events (row, col from the input layer) ----------
    def on_cell_toggle_wall(self, row: int, col: int) -> bool:
        cell = self.cell_at(row, col)
        if cell is None:
            logger.debug("ignoring wall toggle outside grid at (%d, %d)", row, col)
            return False
        return self.toggle_wall(cell)

    def on_move_start(self, row: int, col: int) -> bool:
        cell = self.cell_at(row, col)
        return self.relocate_start(cell) if cell is not None else False

    def on_move_end(self, row: int, col: int) -> bool:
        cell = self.cell_at(row, col)
        return self.relocate_end(cell) if cell is not None else False

    def wall_count(self) -> int:
        return sum(1 for c in self.iter_cells() if c.is_wall)

    def __repr__(self):
        return f"Grid({self.rows}x{self.cols}, start={self.start.pos}, end={self.end.pos})"

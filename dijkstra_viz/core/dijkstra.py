# dijkstra_viz/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple
import heapq
import logging

from dijkstra_viz.core.grid import Grid
from dijkstra_viz.core.types import Cell, StepResult, FOUND, NOT_FOUND, RUNNING

logger = logging.getLogger(__name__)


def reconstruct_path(grid: Grid) -> List[Cell]:
    """Mark the predecessor chain end -> start as path and return it start-first.

    The start cell itself is not flagged. A broken chain stops at the first
    missing predecessor and yields an empty list.
    """
    path: List[Cell] = []
    cur: Optional[Cell] = grid.end
    while cur is not None and cur != grid.start:
        cur.is_path = True
        path.append(cur)
        cur = cur.previous
    if cur is None:
        return []
    path.append(cur)
    path.reverse()
    return path


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"

    grid: Optional[Grid] = None
    open_pq: List[Tuple[float, int, Cell]] = field(default_factory=list)   # (dist, seq, cell)
    closed_set: set = field(default_factory=set)
    popped_count: int = 0
    seq: int = 0
    result: Optional[StepResult] = None
    _gen: Optional[Iterator[StepResult]] = None

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        if self.grid is None:
            return
        self._clear()
        self._gen = None

    def _clear(self) -> None:
        self.open_pq.clear()
        self.closed_set.clear()
        self.popped_count = 0
        self.seq = 0
        self.result = None

    def _push(self, cell: Cell) -> None:
        self.seq += 1
        heapq.heappush(self.open_pq, (cell.distance, self.seq, cell))

    def steps(self) -> Iterator[StepResult]:
        """Lazy, single-use sequence of search steps; the last one is terminal."""
        if self.grid is None:
            raise ValueError("DijkstraAlgo.init(grid) must be called first")
        grid = self.grid
        self._clear()
        for cell in grid.iter_cells():
            cell.reset()

        start, end = grid.start, grid.end
        start.distance = 0
        self._push(start)
        logger.debug("dijkstra from %s to %s", start.pos, end.pos)

        while self.open_pq:
            _, _, u = heapq.heappop(self.open_pq)
            if u in self.closed_set:
                continue  # stale entry from an earlier relaxation
            self.popped_count += 1

            if u == end:
                path = reconstruct_path(grid)
                self.result = StepResult(status=FOUND, current=u, path=path,
                                         metrics=self._metrics(path_len=u.distance))
                logger.debug("path found, length %d after %d pops", u.distance, self.popped_count)
                yield self.result
                return

            self.closed_set.add(u)
            u.visited = True
            u.current = True

            opened_now: List[Cell] = []
            for v in grid.neighbors(u):
                if v.is_wall or v in self.closed_set:
                    continue
                alt = u.distance + 1
                if alt < v.distance:
                    v.distance = alt
                    v.previous = u
                    self._push(v)
                    opened_now.append(v)

            try:
                yield StepResult(status=RUNNING, current=u, opened=opened_now,
                                 metrics=self._metrics())
            finally:
                u.current = False

        self.result = StepResult(status=NOT_FOUND, metrics=self._metrics())
        logger.debug("no path after %d pops", self.popped_count)
        yield self.result

    def step(self) -> StepResult:
        if self.result is not None:
            return self.result
        if self._gen is None:
            self._gen = self.steps()
        return next(self._gen)

    def run(self) -> StepResult:
        res = self.step()
        while not res.finished:
            res = self.step()
        return res

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_pq),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
        }

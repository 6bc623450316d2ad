# dijkstra_viz/core/runner.py
#!/usr/bin/env python3
"""
Drives a DijkstraAlgo step generator with a fixed pause between expansions.

Only one run may be active per runner. While it is active the grid is locked,
so wall toggles, marker moves and resets coming from the input side are ignored.
"""

import logging
import threading
from typing import Callable, Optional

from dijkstra_viz.core.dijkstra import DijkstraAlgo
from dijkstra_viz.core.grid import Grid
from dijkstra_viz.core.types import Cell, CANCELLED, ERROR

logger = logging.getLogger(__name__)

VisitedCallback = Callable[[Cell], None]
CompleteCallback = Callable[[str], None]


class SearchRunner:
    def __init__(self, grid: Grid,
                 on_cell_visited: Optional[VisitedCallback] = None,
                 on_search_complete: Optional[CompleteCallback] = None,
                 delay: float = 0.05):
        self.grid = grid
        self.on_cell_visited = on_cell_visited
        self.on_search_complete = on_search_complete
        self.delay = delay
        self.algo = DijkstraAlgo()
        self.last_result = None

        self._guard = threading.Lock()
        self._active = False
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def active(self) -> bool:
        return self._active

    def _claim(self) -> bool:
        with self._guard:
            if self._active:
                return False
            self._active = True
            self.grid.locked = True
            self.last_result = None
            self._stop.clear()
            return True

    def _release(self) -> None:
        with self._guard:
            self.grid.locked = False
            self._active = False

    def run_search(self) -> Optional[str]:
        """Blocking run. Returns the outcome, or None when a run is already active.

        An exception from the engine or a callback is reported to
        on_search_complete as ERROR and then re-raised.
        """
        if not self._claim():
            logger.debug("search already running; request ignored")
            return None
        return self._run_claimed(reraise=True)

    def start(self) -> bool:
        """Run on a background thread. False when a run is already active."""
        if not self._claim():
            logger.debug("search already running; request ignored")
            return False
        self._thread = threading.Thread(target=self._run_claimed, name="dijkstra-search", daemon=True)
        self._thread.start()
        return True

    def stop(self) -> None:
        self._stop.set()

    def join(self, timeout: Optional[float] = None) -> None:
        t = self._thread
        if t is not None:
            t.join(timeout)

    def _run_claimed(self, reraise: bool = False) -> str:
        grid = self.grid
        logger.debug("search started %s -> %s", grid.start.pos, grid.end.pos)
        gen = None
        error: Optional[Exception] = None
        outcome = CANCELLED
        try:
            self.algo.init(grid)
            gen = self.algo.steps()
            for res in gen:
                if res.finished:
                    self.last_result = res
                    outcome = res.status
                    break
                if self.on_cell_visited is not None:
                    self.on_cell_visited(res.current)
                if self.delay > 0:
                    # wait() returns early on stop()
                    self._stop.wait(self.delay)
                if self._stop.is_set():
                    break
            logger.debug("search finished: %s (%d cells popped)", outcome, self.algo.popped_count)
        except Exception as ex:
            logger.exception("search aborted")
            outcome = ERROR
            error = ex
        finally:
            if gen is not None:
                gen.close()
            self._release()

        if self.on_search_complete is not None:
            self.on_search_complete(outcome)
        if error is not None and reraise:
            raise error
        return outcome

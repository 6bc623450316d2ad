# dijkstra_viz/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import List, Optional, Dict, Any

INFINITY = inf

# run outcomes
FOUND = "found"
NOT_FOUND = "not_found"
CANCELLED = "cancelled"
ERROR = "error"
RUNNING = "running"


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    is_wall: bool = False
    is_start: bool = False
    is_end: bool = False
    # search-transient
    distance: float = INFINITY
    previous: Optional["Cell"] = None
    visited: bool = False
    current: bool = False
    is_path: bool = False

    def reset(self) -> None:
        self.distance = INFINITY
        self.previous = None
        self.visited = False
        self.current = False
        self.is_path = False

    @property
    def pos(self):
        return (self.row, self.col)

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.pos == other.pos

    def __hash__(self):
        return hash(self.pos)

    def __repr__(self):
        return f"Cell({self.row}, {self.col})"


@dataclass
class StepResult:
    status: str                   # "running" | "found" | "not_found"
    current: Optional[Cell] = None
    opened: List[Cell] = field(default_factory=list)
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status != RUNNING

# pathfinder/core/bfs.py
#!/usr/bin/env python3
"""
Breadth-first search, one cell visit per step() for animation.

Implements the algorithm API expected by the viewer and the search driver:
- init(grid, start) - reset() - step() -> StepResult

Frontier discipline:
- FIFO queue seeded with the start cell.
- Neighbors are enqueued without checking the visited set; duplicates are
  dropped when they are dequeued.
- The target check happens on dequeue, so the first target popped is at the
  minimum move count from start.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Set

from pathfinder.core.moves import neighbors4
from pathfinder.core.types import Cell, CellKind, Grid, StepResult


@dataclass
class BFSAlgo:
    name: str = "BFS"

    # Internal state
    grid: Optional[Grid] = None
    start: Optional[Cell] = None
    frontier: Deque[Cell] = field(default_factory=deque)
    visited: Set[Cell] = field(default_factory=set)
    order: List[Cell] = field(default_factory=list)
    popped_count: int = 0
    found_cell: Optional[Cell] = None
    done: bool = False
    exhausted: bool = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Optional[Cell] = None) -> None:
        """Bind to a grid; start defaults to the first START cell."""
        self.grid = grid
        self.start = start if start is not None else grid.locate(CellKind.START)
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the frontier with the start cell."""
        if self.grid is None or self.start is None:
            return
        self.frontier.clear()
        self.visited.clear()
        self.order.clear()
        self.popped_count = 0
        self.found_cell = None
        self.done = False
        self.exhausted = False
        self.frontier.append(self.start)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Dequeue until one new cell is visited or the search ends:
          - a TARGET cell ends the search as found,
          - an already visited cell is discarded,
          - anything else is marked, recorded, and its neighbors enqueued.
        """
        if self.grid is None or self.start is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="found", current=self.found_cell, metrics=self._metrics())

        if self.exhausted:
            return StepResult(status="exhausted", metrics=self._metrics())

        while self.frontier:
            u = self.frontier.popleft()
            self.popped_count += 1

            if self.grid.get(u) == CellKind.TARGET:
                self.done = True
                self.found_cell = u
                return StepResult(status="found", current=u, metrics=self._metrics())

            if u in self.visited:
                continue

            if self.grid.get(u) != CellKind.START:
                self.grid.set(u, CellKind.VISITED)
            self.visited.add(u)
            self.order.append(u)
            self.frontier.extend(neighbors4(self.grid, u))

            return StepResult(status="running", current=u, closed=[u], metrics=self._metrics())

        self.exhausted = True
        return StepResult(status="exhausted", metrics=self._metrics())

    def pending(self) -> List[Cell]:
        """Snapshot of the queue for overlays; built on demand, not per step."""
        return list(self.frontier)

    # -------------------- metrics --------------------

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "frontier_size": len(self.frontier),
            "visited_count": len(self.visited),
        }

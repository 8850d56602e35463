# pathfinder/core/dfs.py
#!/usr/bin/env python3
"""
Depth-first search with backtracking, one cell visit per step().

The recursion explore(c) -> explore(each neighbor) is unrolled onto an
explicit stack of frames (cell, remaining neighbors) so the viewer can pause
between visits. Visit order matches the recursive form exactly:
- a TARGET candidate ends the whole search immediately,
- a visited candidate is skipped (backtrack),
- a new cell is marked, recorded, and pushed with its neighbors in
  NEIGHBOR_ORDER; an empty frame is popped.

One visited set is shared by every branch, so a cell reached down one branch
is never explored again by a sibling.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from pathfinder.core.moves import neighbors4
from pathfinder.core.types import Cell, CellKind, Grid, StepResult

Frame = Tuple[Cell, List[Cell]]  # (cell, neighbors not yet explored)


@dataclass
class DFSAlgo:
    name: str = "DFS"

    grid: Optional[Grid] = None
    start: Optional[Cell] = None
    stack: List[Frame] = field(default_factory=list)
    visited: Set[Cell] = field(default_factory=set)
    order: List[Cell] = field(default_factory=list)
    started: bool = False
    backtracks: int = 0
    max_depth: int = 0
    found_cell: Optional[Cell] = None
    done: bool = False
    exhausted: bool = False

    def init(self, grid: Grid, start: Optional[Cell] = None) -> None:
        self.grid = grid
        self.start = start if start is not None else grid.locate(CellKind.START)
        self.reset()

    def reset(self) -> None:
        if self.grid is None or self.start is None:
            return
        self.stack.clear()
        self.visited.clear()
        self.order.clear()
        self.started = False
        self.backtracks = 0
        self.max_depth = 0
        self.found_cell = None
        self.done = False
        self.exhausted = False

    def _next_candidate(self) -> Optional[Cell]:
        if not self.started:
            self.started = True
            return self.start
        while self.stack:
            _, pending = self.stack[-1]
            if pending:
                return pending.pop(0)
            self.stack.pop()
            self.backtracks += 1
        return None

    def step(self) -> StepResult:
        if self.grid is None or self.start is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="found", current=self.found_cell, metrics=self._metrics())

        if self.exhausted:
            return StepResult(status="exhausted", metrics=self._metrics())

        while True:
            u = self._next_candidate()
            if u is None:
                self.exhausted = True
                return StepResult(status="exhausted", metrics=self._metrics())

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
            self.stack.append((u, neighbors4(self.grid, u)))
            self.max_depth = max(self.max_depth, len(self.stack))

            return StepResult(status="running", current=u, closed=[u], metrics=self._metrics())

    def pending(self) -> List[Cell]:
        """Cells on the current branch, bottom of the stack first."""
        return [c for c, _ in self.stack]

    def _metrics(self) -> dict:
        return {
            "algo": self.name,
            "stack_depth": len(self.stack),
            "max_depth": self.max_depth,
            "backtracks": self.backtracks,
            "visited_count": len(self.visited),
        }

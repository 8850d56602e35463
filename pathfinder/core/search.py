# pathfinder/core/search.py
#!/usr/bin/env python3
"""
Synchronous search driver used by the front-ends.

run_search() validates the grid, drives one engine's step() to a terminal
state, and hands the grid to the observer after every newly visited cell.
An observer returning ControlSignal.STOP ends the search as EXHAUSTED with
aborted=True; nothing is mutated after that point.
"""

import logging
from enum import Enum
from typing import Optional, Union

from pathfinder.core.bfs import BFSAlgo
from pathfinder.core.dfs import DFSAlgo
from pathfinder.core.types import (
    Cell,
    CellKind,
    ControlSignal,
    Grid,
    InvalidGrid,
    SearchOutcome,
    SearchResult,
    StepObserver,
)

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    BFS = "BFS"
    DFS = "DFS"

    @classmethod
    def parse(cls, label: str) -> "Algorithm":
        try:
            return cls(label.strip().upper())
        except ValueError:
            raise ValueError(f"unknown algorithm {label!r} (expected bfs or dfs)") from None


Algo = Union[BFSAlgo, DFSAlgo]


def make_algo(algorithm: Algorithm) -> Algo:
    if algorithm is Algorithm.BFS:
        return BFSAlgo(name="BFS")
    return DFSAlgo(name="DFS")


def locate_start(grid: Grid) -> Optional[Cell]:
    return grid.locate(CellKind.START)


def count_starts(grid: Grid) -> int:
    return grid.count(CellKind.START)


def validate_grid(grid: Grid) -> Cell:
    """Check search preconditions and return the start cell. Never mutates."""
    starts = count_starts(grid)
    if starts != 1:
        raise InvalidGrid(f"Must have one and only one starting point (S), found {starts}")
    if grid.count(CellKind.TARGET) == 0:
        raise InvalidGrid("Must have at least one target (T)")
    leftover = grid.count(CellKind.VISITED)
    if leftover:
        raise InvalidGrid(f"Grid already holds {leftover} explored cell(s) (x); search a fresh copy")
    start = locate_start(grid)
    if start is None:
        raise InvalidGrid("Must have one and only one starting point (S), found 0")
    return start


def run_search(grid: Grid, start: Cell, algorithm: Algorithm,
               observer: Optional[StepObserver] = None) -> SearchResult:
    expected = validate_grid(grid)
    if start != expected:
        raise InvalidGrid(f"start {start} is not the grid's start cell {expected}")

    algo = make_algo(algorithm)
    algo.init(grid, start)
    logger.info("%s search from %s on %dx%d grid", algo.name, start, grid.rows, grid.cols)

    steps = 0
    while True:
        res = algo.step()
        if res.status == "found":
            outcome = SearchOutcome.FOUND
            break
        if res.status == "exhausted":
            outcome = SearchOutcome.EXHAUSTED
            break

        steps += 1
        logger.debug("%s visit #%d at %s", algo.name, steps, res.current)
        if observer is not None and observer(grid) is ControlSignal.STOP:
            logger.warning("%s search stopped by observer after %d steps", algo.name, steps)
            return SearchResult(SearchOutcome.EXHAUSTED, start, list(algo.order),
                                steps=steps, aborted=True)

    logger.info("%s %s after %d visits", algo.name, outcome.value, steps)
    return SearchResult(outcome, start, list(algo.order), steps=steps)

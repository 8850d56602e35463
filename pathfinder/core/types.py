# pathfinder/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

Cell = Tuple[int, int]  # (row, col)


class PathfinderError(Exception):
    pass


class OutOfBounds(PathfinderError, IndexError):
    """A coordinate outside the grid was dereferenced (a model/engine defect)."""

    def __init__(self, cell: Cell, rows: int, cols: int):
        super().__init__(f"cell {cell} outside {rows}x{cols} grid")
        self.cell = cell


class InvalidGrid(PathfinderError, ValueError):
    """Malformed grid: bad shape, unknown symbol, or wrong start/target count."""


class CellKind(Enum):
    OPEN = "."
    BLOCKED = "#"
    START = "S"
    TARGET = "T"
    VISITED = "x"

    @classmethod
    def from_symbol(cls, ch: str) -> "CellKind":
        try:
            return cls(ch)
        except ValueError:
            raise InvalidGrid(f"unknown cell symbol {ch!r}") from None


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[CellKind]]        # [row][col]

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise InvalidGrid(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        if len(self.cells) != self.rows or any(len(r) != self.cols for r in self.cells):
            raise InvalidGrid("cells size mismatch")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        if not rows:
            raise InvalidGrid("grid has no rows")
        width = len(rows[0])
        for i, r in enumerate(rows):
            if len(r) != width:
                raise InvalidGrid(f"row {i + 1} has length {len(r)}, expected {width}")
        cells = [[CellKind.from_symbol(ch) for ch in r] for r in rows]
        return cls(len(rows), width, cells)

    def to_rows(self) -> List[str]:
        return ["".join(k.value for k in r) for r in self.cells]

    def copy(self) -> "Grid":
        return Grid(self.rows, self.cols, [list(r) for r in self.cells])

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.rows and 0 <= col < self.cols

    def get(self, c: Cell) -> CellKind:
        if not self.in_bounds(c):
            raise OutOfBounds(c, self.rows, self.cols)
        r, col = c
        return self.cells[r][col]

    def set(self, c: Cell, kind: CellKind) -> None:
        if not self.in_bounds(c):
            raise OutOfBounds(c, self.rows, self.cols)
        r, col = c
        self.cells[r][col] = kind

    def locate(self, kind: CellKind) -> Optional[Cell]:
        """First cell of `kind` in row-major order, or None."""
        for r, row in enumerate(self.cells):
            for col, k in enumerate(row):
                if k == kind:
                    return (r, col)
        return None

    def count(self, kind: CellKind) -> int:
        return sum(1 for row in self.cells for k in row if k == kind)


class SearchOutcome(Enum):
    FOUND = "found"
    EXHAUSTED = "exhausted"


class ControlSignal(Enum):
    CONTINUE = "continue"
    STOP = "stop"


# Called once per newly visited cell; returning None means CONTINUE.
StepObserver = Callable[[Grid], Optional[ControlSignal]]


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "found" | "exhausted"
    current: Optional[Cell] = None
    closed: List[Cell] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    outcome: SearchOutcome
    start: Cell
    visited: List[Cell] = field(default_factory=list)   # visit order, start included
    steps: int = 0
    aborted: bool = False

    @property
    def found(self) -> bool:
        return self.outcome is SearchOutcome.FOUND

    @property
    def marked(self) -> List[Cell]:
        """Cells the search flipped to VISITED (the start keeps its kind)."""
        return [c for c in self.visited if c != self.start]

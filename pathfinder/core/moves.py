# pathfinder/core/moves.py
#!/usr/bin/env python3
"""
Move generator shared by both engines.

Neighbor order is fixed: UP, LEFT, RIGHT, DOWN. DFS explores branches in
exactly this order, so changing it changes which path DFS finds first.
"""

from typing import List, Tuple

from pathfinder.core.types import Cell, CellKind, Grid

UP: Tuple[int, int] = (-1, 0)
LEFT: Tuple[int, int] = (0, -1)
RIGHT: Tuple[int, int] = (0, 1)
DOWN: Tuple[int, int] = (1, 0)

NEIGHBOR_ORDER: Tuple[Tuple[int, int], ...] = (UP, LEFT, RIGHT, DOWN)


def neighbors4(grid: Grid, c: Cell) -> List[Cell]:
    """Return in-bounds, non-blocked 4-connected neighbors of c in NEIGHBOR_ORDER."""
    r, col = c
    out: List[Cell] = []
    for dr, dc in NEIGHBOR_ORDER:
        n = (r + dr, col + dc)
        if grid.in_bounds(n) and grid.get(n) != CellKind.BLOCKED:
            out.append(n)
    return out

from collections import deque

import pytest

from pathfinder.core.types import CellKind, Grid


@pytest.fixture
def reachable():
    """Flood fill over non-blocked, non-target cells, independent of the engines."""
    def _reachable(grid: Grid, start):
        seen = {start}
        todo = deque([start])
        while todo:
            r, c = todo.popleft()
            for n in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                if n in seen or not grid.in_bounds(n):
                    continue
                if grid.get(n) in (CellKind.BLOCKED, CellKind.TARGET):
                    continue
                seen.add(n)
                todo.append(n)
        return seen
    return _reachable


@pytest.fixture
def walled():
    # T at (3, 4) is sealed off by (2, 4) and (3, 3)
    return Grid.from_rows([
        "S....",
        ".....",
        "...##",
        "...#T",
    ])

import pytest

from pathfinder.core.moves import NEIGHBOR_ORDER, neighbors4
from pathfinder.core.types import CellKind, Grid, InvalidGrid, OutOfBounds


def test_from_rows_and_back():
    g = Grid.from_rows(["S.#", ".xT"])
    assert (g.rows, g.cols) == (2, 3)
    assert g.get((0, 0)) == CellKind.START
    assert g.get((0, 2)) == CellKind.BLOCKED
    assert g.get((1, 1)) == CellKind.VISITED
    assert g.to_rows() == ["S.#", ".xT"]


@pytest.mark.parametrize("rows", [[], ["S..", "T."], ["S.Q"]])
def test_from_rows_rejects_malformed(rows):
    with pytest.raises(InvalidGrid):
        Grid.from_rows(rows)


def test_zero_size_grid_rejected():
    with pytest.raises(InvalidGrid):
        Grid(0, 3, [])


def test_bounds_checked_access():
    g = Grid.from_rows(["S.", ".T"])
    assert g.in_bounds((1, 1))
    assert not g.in_bounds((2, 0))
    assert not g.in_bounds((0, -1))
    with pytest.raises(OutOfBounds):
        g.get((2, 0))
    with pytest.raises(IndexError):
        g.set((0, 5), CellKind.OPEN)


def test_set_does_not_guard_start():
    g = Grid.from_rows(["S.T"])
    g.set((0, 0), CellKind.VISITED)
    assert g.get((0, 0)) == CellKind.VISITED


def test_locate_is_row_major():
    g = Grid.from_rows(["..S", "S.T"])
    assert g.locate(CellKind.START) == (0, 2)
    assert g.locate(CellKind.VISITED) is None
    assert g.count(CellKind.START) == 2


def test_copy_is_independent():
    g = Grid.from_rows(["S.T"])
    h = g.copy()
    h.set((0, 1), CellKind.VISITED)
    assert g.to_rows() == ["S.T"]
    assert h.to_rows() == ["SxT"]


def test_neighbor_order_is_up_left_right_down():
    assert NEIGHBOR_ORDER == ((-1, 0), (0, -1), (0, 1), (1, 0))
    g = Grid.from_rows(["...", ".S.", "..."])
    assert neighbors4(g, (1, 1)) == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_neighbors_skip_blocked_and_edges():
    g = Grid.from_rows(["S#", ".T"])
    assert neighbors4(g, (0, 0)) == [(1, 0)]
    # visited and target cells are still neighbors
    g.set((1, 0), CellKind.VISITED)
    assert neighbors4(g, (1, 1)) == [(1, 0)]

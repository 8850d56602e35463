import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from pathfinder.app import viewer  # noqa: E402
from pathfinder.core.maps import default_grid  # noqa: E402
from pathfinder.core.search import Algorithm  # noqa: E402
from pathfinder.core.types import CellKind  # noqa: E402


@pytest.fixture
def view():
    v = viewer.Viewer(default_grid(), algorithm=Algorithm.BFS, map_key="01_default")
    yield v
    pygame.quit()


def _step_until_done(v, limit=500):
    for _ in range(limit):
        v._do_step()
        if v.state in ("Found", "Exhausted"):
            return
    raise AssertionError("search did not finish")


def test_steps_to_found_and_draws(view):
    _step_until_done(view)
    assert view.state == "Found"
    assert view.grid.count(CellKind.VISITED) > 0
    assert view._last_metrics["visited_count"] == view._steps
    view._draw()


def test_reset_restores_pristine_grid(view):
    for _ in range(5):
        view._do_step()
    view._reset()
    assert view.grid.to_rows() == default_grid().to_rows()
    assert view.state == "Idle"
    assert view._steps == 0


def test_switch_map_and_algo(view):
    view._switch_algo(Algorithm.DFS)
    view._switch_map("03_walled_target")
    assert view.selected_map_key == "03_walled_target"
    assert view.btn_algo_d.selected and view.btn_map3.selected
    _step_until_done(view)
    assert view.state == "Exhausted"


def test_run_and_step_disabled_after_search_ends(view):
    assert view.btn_run.enabled and view.btn_step.enabled
    _step_until_done(view)
    assert not view.btn_run.enabled
    assert not view.btn_step.enabled

    clicks = []
    btn = viewer.UIButton("x", pygame.Rect(0, 0, 10, 10), lambda: clicks.append(1))
    btn.set_enabled(False)
    btn.handle_mouse(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1))
    assert clicks == []

    view._reset()
    assert view.btn_run.enabled and view.btn_step.enabled


def test_pending_overlay_comes_from_algo(view):
    view._do_step()
    assert view.algo.pending() == [(4, 1), (5, 0), (5, 2)]
    view._draw()

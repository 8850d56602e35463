import json

import pytest

from pathfinder.app import settings
from pathfinder.core.maps import DEFAULT_ROWS, default_grid, load_map
from pathfinder.core.search import Algorithm, run_search, validate_grid
from pathfinder.core.types import InvalidGrid, SearchOutcome


def test_default_grid_matches_bundled_map():
    assert load_map(settings.MAP_DIR / "01_default.json").to_rows() == DEFAULT_ROWS
    assert default_grid().to_rows() == DEFAULT_ROWS


@pytest.mark.parametrize("name,outcome", [
    ("01_default.json", SearchOutcome.FOUND),
    ("02_open_field.json", SearchOutcome.FOUND),
    ("03_walled_target.json", SearchOutcome.EXHAUSTED),
])
@pytest.mark.parametrize("algorithm", [Algorithm.BFS, Algorithm.DFS])
def test_bundled_maps(name, outcome, algorithm, reachable):
    grid = load_map(settings.MAP_DIR / name)
    start = validate_grid(grid)
    expected = reachable(grid, start)
    result = run_search(grid, start, algorithm)
    assert result.outcome is outcome
    if outcome is SearchOutcome.EXHAUSTED:
        assert set(result.visited) == expected


def _write(tmp_path, payload):
    p = tmp_path / "map.json"
    p.write_text(json.dumps(payload))
    return p


def test_load_map_checks_declared_size(tmp_path):
    p = _write(tmp_path, {"name": "bad", "width": 4, "rows": ["S.T"]})
    with pytest.raises(InvalidGrid):
        load_map(p)


@pytest.mark.parametrize("payload", [
    {"name": "no rows"},
    {"rows": "S.T"},
    {"rows": ["S.T", "."]},
])
def test_load_map_rejects_bad_rows(tmp_path, payload):
    with pytest.raises(InvalidGrid):
        load_map(_write(tmp_path, payload))

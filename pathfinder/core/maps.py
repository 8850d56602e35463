# pathfinder/core/maps.py
#!/usr/bin/env python3
import json
from pathlib import Path
from typing import List, Union

from pathfinder.core.types import Grid, InvalidGrid

DEFAULT_ROWS: List[str] = [
    "#.....T#",
    "#......#",
    "#.###..#",
    "#...#..#",
    "#.#.#..#",
    ".S..#..#",
    ".##.#..#",
    ".####.##",
]


def default_grid() -> Grid:
    return Grid.from_rows(DEFAULT_ROWS)


def load_map(path: Union[str, Path]) -> Grid:
    """Load {"name": ..., "rows": [...]} with optional width/height checks."""
    with open(path, "r") as f:
        data = json.load(f)
    try:
        rows = data["rows"]
    except (KeyError, TypeError):
        raise InvalidGrid(f"{path}: missing 'rows'") from None
    if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        raise InvalidGrid(f"{path}: 'rows' must be a list of strings")
    grid = Grid.from_rows(rows)
    if "height" in data and int(data["height"]) != grid.rows:
        raise InvalidGrid(f"{path}: height {data['height']} does not match {grid.rows} rows")
    if "width" in data and int(data["width"]) != grid.cols:
        raise InvalidGrid(f"{path}: width {data['width']} does not match {grid.cols} cols")
    return grid

# pathfinder/app/console.py
#!/usr/bin/env python3
"""
Terminal front-end: menu loop, interactive grid builder, and a step renderer.

    1. Explore path using BFS.
    2. Explore path using DFS.
    4. Quit

Pacing between visits comes from settings.resolve_delay(); it only affects
playback speed, never the outcome.
"""

import os
import sys
import time
from typing import Callable, List, Optional, Sequence

from pathfinder.app import settings
from pathfinder.core.maps import default_grid
from pathfinder.core.search import Algorithm, run_search, validate_grid
from pathfinder.core.types import CellKind, ControlSignal, Grid, InvalidGrid, StepObserver

Ask = Callable[[str], str]
Say = Callable[..., None]

INSTRUCTIONS = ("Use # to denote a blocked cell, a dot character (.) to denote open "
                "cell, T to denote the target and a S to denote start.")
SYMBOLS = {k.value for k in (CellKind.OPEN, CellKind.BLOCKED, CellKind.START, CellKind.TARGET)}


def render(grid: Grid) -> str:
    return "\n".join(" ".join(row) for row in grid.to_rows())


def clear_console() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def ask_int(prompt: str, ask: Ask = input, say: Say = print, minimum: Optional[int] = None) -> int:
    while True:
        raw = ask(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            say("Illegal integer format. Try again.")
            continue
        if minimum is not None and value < minimum:
            say(f"Value must be at least {minimum}. Try again.")
            continue
        return value


def build_grid(ask: Ask = input, say: Say = print) -> Grid:
    """Prompt for dimensions and rows; re-prompt until each row is well formed."""
    say(INSTRUCTIONS)
    rows = ask_int("Enter nRows: ", ask, say, minimum=1)
    cols = ask_int("Enter nColumns: ", ask, say, minimum=1)
    lines: List[str] = []
    for i in range(rows):
        row = ask(f"Enter row {i + 1}:")
        while len(row) != cols or not set(row) <= SYMBOLS:
            if len(row) != cols:
                row = ask(f"Invalid row length. Enter row {i + 1}:")
            else:
                row = ask(f"Invalid symbol. Enter row {i + 1}:")
        lines.append(row)
    return Grid.from_rows(lines)


def paced(observer: StepObserver, delay: float) -> StepObserver:
    def _observe(grid: Grid) -> Optional[ControlSignal]:
        signal = observer(grid)
        if delay > 0:
            time.sleep(delay)
        return signal
    return _observe


def console_observer(clear: Callable[[], None] = clear_console, say: Say = print) -> StepObserver:
    def _observe(grid: Grid) -> None:
        clear()
        say()
        say(render(grid))
        say()
    return _observe


def explore(grid: Grid, algorithm: Algorithm, observer: StepObserver, say: Say = print) -> Optional[bool]:
    """Validate and search; None means the grid was rejected."""
    try:
        start = validate_grid(grid)
    except InvalidGrid as ex:
        say(f"Invalid grid. {ex}")
        return None
    result = run_search(grid, start, algorithm, observer)
    if result.found:
        say("Solution was found. Crosses (x) indicate the nodes explored.")
    else:
        say("No solution found.")
    return result.found


def main(argv: Optional[Sequence[str]] = None, ask: Ask = input, say: Say = print,
         clear: Callable[[], None] = clear_console) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings.configure_logging(argv)
    say("Pathfinding Visualizer")

    while True:
        say()
        say("1. Explore path using BFS.")
        say("2. Explore path using DFS.")
        say("4. Quit")
        choice = ask_int("Enter choice: ", ask, say)
        if choice == 4:
            return 0
        if choice not in (1, 2):
            say("Enter valid choice.")
            continue
        algorithm = Algorithm.BFS if choice == 1 else Algorithm.DFS

        second = ask_int("1. Use default grid, 2. Make your own grid: ", ask, say)
        if second == 1:
            grid = default_grid()
        elif second == 2:
            grid = build_grid(ask, say)
        else:
            say("Enter valid option.")
            continue

        observer = paced(console_observer(clear, say), settings.resolve_delay(algorithm, argv))
        explore(grid, algorithm, observer, say)


if __name__ == "__main__":
    sys.exit(main())

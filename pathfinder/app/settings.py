# pathfinder/app/settings.py
"""
Runtime settings for the front-ends.

Each value is read from an environment variable and may be overridden on the
command line with --key=value:
    PATHFINDER_DELAY      / --delay=SECONDS     console pacing (per step)
    PATHFINDER_ALGO       / --algo=bfs|dfs      viewer's initial algorithm
    PATHFINDER_LOG_LEVEL  / --log-level=LEVEL   logging threshold
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from pathfinder.core.search import Algorithm

REPO_ROOT = Path(__file__).resolve().parents[2]
MAP_DIR = REPO_ROOT / "maps"

# Default pacing per visit: BFS 400 ms, DFS 200 ms.
DEFAULT_DELAY = {Algorithm.BFS: 0.4, Algorithm.DFS: 0.2}


def _lookup(key: str, env: str, argv: Optional[Sequence[str]] = None) -> Optional[str]:
    value = os.getenv(env)
    prefix = f"--{key}="
    for arg in (sys.argv[1:] if argv is None else argv):
        if arg.startswith(prefix):
            value = arg.split("=", 1)[1]
    return value


def resolve_delay(algorithm: Algorithm, argv: Optional[Sequence[str]] = None) -> float:
    raw = _lookup("delay", "PATHFINDER_DELAY", argv)
    if raw is None:
        return DEFAULT_DELAY[algorithm]
    try:
        return max(0.0, float(raw))
    except ValueError:
        logging.getLogger(__name__).warning("ignoring bad delay %r", raw)
        return DEFAULT_DELAY[algorithm]


def resolve_algo(argv: Optional[Sequence[str]] = None) -> Algorithm:
    raw = _lookup("algo", "PATHFINDER_ALGO", argv)
    return Algorithm.parse(raw) if raw else Algorithm.BFS


def resolve_log_level(argv: Optional[Sequence[str]] = None) -> int:
    raw = (_lookup("log-level", "PATHFINDER_LOG_LEVEL", argv) or "WARNING").upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(argv: Optional[Sequence[str]] = None) -> None:
    logging.basicConfig(
        level=resolve_log_level(argv),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

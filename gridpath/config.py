"""
Runtime configuration for the gridpath viewer.

Resolution order (later wins):
  1. defaults below
  2. environment: GRIDPATH_ROWS, GRIDPATH_COLS, GRIDPATH_START ("r,c"),
     GRIDPATH_FINISH, GRIDPATH_ALGORITHM, GRIDPATH_VISIT_MS, GRIDPATH_PATH_MS,
     GRIDPATH_SEED, GRIDPATH_LOG_LEVEL
  3. CLI: --rows=30 --start=15,2 --algorithm=astar ...

The search engine itself takes no configuration; only entry points read this.
"""

import logging
import os
import sys
from dataclasses import dataclass, replace
from typing import Dict, List, Mapping, Optional

from gridpath.core.search import ALGORITHMS
from gridpath.core.types import Coord, GridConfigError

# ---------- Defaults ----------
DEFAULT_ROWS = 30
DEFAULT_COLS = 40
DEFAULT_START: Coord = (15, 2)
DEFAULT_FINISH: Coord = (15, 37)
DEFAULT_ALGORITHM = "bfs"
VISIT_MS = 20     # delay between visited reveals
PATH_MS = 30      # delay between path reveals
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_PREFIX = "GRIDPATH_"


@dataclass(frozen=True)
class Settings:
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    start: Coord = DEFAULT_START
    finish: Coord = DEFAULT_FINISH
    algorithm: str = DEFAULT_ALGORITHM
    visit_ms: int = VISIT_MS
    path_ms: int = PATH_MS
    seed: Optional[int] = None
    log_level: str = "INFO"


def _parse_int(key: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise GridConfigError(f"{key}: expected an integer, got {raw!r}") from None


def _parse_coord(key: str, raw: str) -> Coord:
    parts = raw.replace(" ", "").split(",")
    if len(parts) != 2:
        raise GridConfigError(f"{key}: expected 'row,col', got {raw!r}")
    return (_parse_int(key, parts[0]), _parse_int(key, parts[1]))


_PARSERS = {
    "rows": _parse_int,
    "cols": _parse_int,
    "start": _parse_coord,
    "finish": _parse_coord,
    "algorithm": lambda key, raw: raw.strip().lower(),
    "visit_ms": _parse_int,
    "path_ms": _parse_int,
    "seed": _parse_int,
    "log_level": lambda key, raw: raw.strip().upper(),
}


def _from_env(environ: Mapping[str, str]) -> Dict[str, str]:
    out = {}
    for key in _PARSERS:
        raw = environ.get(ENV_PREFIX + key.upper())
        if raw:
            out[key] = raw
    return out


def _from_argv(argv: List[str]) -> Dict[str, str]:
    out = {}
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        key, raw = arg[2:].split("=", 1)
        key = key.replace("-", "_")
        if key in _PARSERS:
            out[key] = raw
    return out


def _validate(s: Settings) -> Settings:
    if s.rows < 1 or s.cols < 1:
        raise GridConfigError(f"grid must be at least 1x1, got {s.rows}x{s.cols}")
    for label, (r, c) in (("start", s.start), ("finish", s.finish)):
        if not (0 <= r < s.rows and 0 <= c < s.cols):
            raise GridConfigError(f"{label} {(r, c)} out of bounds for {s.rows}x{s.cols} grid")
    if s.algorithm not in ALGORITHMS:
        raise GridConfigError(f"algorithm: unknown {s.algorithm!r}; choose one of {', '.join(ALGORITHMS)}")
    if s.visit_ms < 0 or s.path_ms < 0:
        raise GridConfigError("playback delays must be >= 0")
    if not isinstance(logging.getLevelName(s.log_level), int):
        raise GridConfigError(f"log_level: unknown level {s.log_level!r}")
    return s


def load_config(argv: Optional[List[str]] = None,
                environ: Optional[Mapping[str, str]] = None) -> Settings:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    raw = _from_env(environ)
    raw.update(_from_argv(argv))
    values = {key: _PARSERS[key](key, val) for key, val in raw.items()}
    return _validate(replace(Settings(), **values))


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)

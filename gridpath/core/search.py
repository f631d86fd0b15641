#!/usr/bin/env python3
"""
One-call search: reset the grid, run an algorithm, rebuild the path.

The registry keys ("bfs", "dfs", "dijkstra", "astar") are what the config
layer and the viewer use to pick an algorithm.
"""

import logging
import time
from typing import Dict, Type, Union

from gridpath.core.astar import AStarAlgo
from gridpath.core.bfs import BFSAlgo
from gridpath.core.dfs import DFSAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.grid import reset_search
from gridpath.core.path import path_found, reconstruct_path
from gridpath.core.types import Grid, SearchResult

log = logging.getLogger(__name__)

Algo = Union[BFSAlgo, DFSAlgo, DijkstraAlgo, AStarAlgo]

ALGORITHMS: Dict[str, Type] = {
    "bfs": BFSAlgo,
    "dfs": DFSAlgo,
    "dijkstra": DijkstraAlgo,
    "astar": AStarAlgo,
}


class UnknownAlgorithmError(KeyError):
    pass


def make_algo(key: str) -> Algo:
    try:
        return ALGORITHMS[key.lower()]()
    except KeyError:
        raise UnknownAlgorithmError(
            f"unknown algorithm {key!r}; choose one of {', '.join(ALGORITHMS)}"
        ) from None


def run_search(grid: Grid, algorithm: str) -> SearchResult:
    algo = make_algo(algorithm)
    reset_search(grid)
    start, finish = grid.start_cell, grid.finish_cell

    t0 = time.perf_counter()
    visited = algo.run(grid, start, finish)
    elapsed = time.perf_counter() - t0

    path = reconstruct_path(grid, finish)
    if path_found(path, grid.start):
        status = "done"
    else:
        status = "no_path"
        path = []

    metrics = algo.metrics()
    metrics.update(
        visited_count=len(visited),
        path_len=len(path),
        time_ms=round(elapsed * 1000, 2),
    )
    log.info("%s %s: visited=%d path_len=%d (%.2fms)",
             algo.name, status, len(visited), len(path), elapsed * 1000)
    return SearchResult(status=status, visited=visited, path=path, metrics=metrics)

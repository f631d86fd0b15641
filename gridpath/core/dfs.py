#!/usr/bin/env python3
"""
Depth-first search.

LIFO stack of (coord, parent) entries. A cell may sit on the stack more than
once; it is finalized (visited flag, backlink, output) only on its first pop
and later copies are skipped. Neighbors are pushed up, left, down, right, so
the right neighbor is explored first. No shortest-path guarantee.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from gridpath.core.types import Cell, Coord, Grid

log = logging.getLogger(__name__)


@dataclass
class DFSAlgo:
    name: str = "DFS"

    popped_count: int = 0
    skipped_count: int = 0   # duplicate stack entries discarded on pop
    reached: bool = False

    def run(self, grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
        self.popped_count = 0
        self.skipped_count = 0
        self.reached = False
        visited: List[Cell] = []

        stack: List[Tuple[Cell, Optional[Coord]]] = [(start, None)]
        while stack:
            u, parent = stack.pop()
            self.popped_count += 1
            if u.is_visited:
                self.skipped_count += 1
                continue

            u.is_visited = True
            u.previous = parent
            visited.append(u)
            if u is finish:
                self.reached = True
                break

            for v in grid.neighbors(u):
                stack.append((v, u.coord))

        log.debug("%s: %d cells finalized, %d stale pops, reached=%s",
                  self.name, len(visited), self.skipped_count, self.reached)
        return visited

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "skipped": self.skipped_count,
        }


def dfs(grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
    return DFSAlgo().run(grid, start, finish)

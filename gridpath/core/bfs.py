#!/usr/bin/env python3
"""
Breadth-first search over a unit-cost grid.

FIFO frontier seeded with the start cell. Neighbors are marked visited when
they are discovered (not when dequeued) so no cell is ever enqueued twice.
Since every edge costs 1, cells are finalized in non-decreasing distance
order and the backlinks describe a shortest path.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import List

from gridpath.core.types import Cell, Grid

log = logging.getLogger(__name__)


@dataclass
class BFSAlgo:
    name: str = "BFS"

    popped_count: int = 0
    reached: bool = False

    def run(self, grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
        self.popped_count = 0
        self.reached = False
        visited: List[Cell] = []

        start.is_visited = True
        start.distance = 0
        queue = deque([start])

        while queue:
            u = queue.popleft()
            self.popped_count += 1
            visited.append(u)
            if u is finish:
                self.reached = True
                break

            for v in grid.neighbors(u):
                v.is_visited = True
                v.distance = u.distance + 1
                v.previous = u.coord
                queue.append(v)

        log.debug("%s: %d cells finalized, reached=%s", self.name, len(visited), self.reached)
        return visited

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
        }


def bfs(grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
    return BFSAlgo().run(grid, start, finish)

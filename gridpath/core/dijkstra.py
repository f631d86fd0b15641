#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from math import inf
from typing import List

from gridpath.core.types import Cell, Grid

log = logging.getLogger(__name__)


@dataclass
class DijkstraAlgo:
    """Dijkstra with a linear-scan frontier.

    The frontier holds every unvisited cell with a finite distance, in the
    order it was first reached. Selection takes the first minimum, so ties go
    to the earliest-discovered cell. Walls never enter the frontier.
    """
    name: str = "Dijkstra"

    popped_count: int = 0
    reached: bool = False

    def run(self, grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
        self.popped_count = 0
        self.reached = False
        visited: List[Cell] = []

        start.distance = 0
        frontier: List[Cell] = [start]

        while frontier:
            idx = self._pick_min(frontier)
            u = frontier.pop(idx)

            self.popped_count += 1
            u.is_visited = True
            visited.append(u)
            if u is finish:
                self.reached = True
                break

            for v in grid.neighbors(u):
                alt = u.distance + 1
                if alt < v.distance:
                    if v.distance == inf:
                        frontier.append(v)
                    v.distance = alt
                    v.previous = u.coord

        log.debug("%s: %d cells finalized, reached=%s", self.name, len(visited), self.reached)
        return visited

    @staticmethod
    def _pick_min(frontier: List[Cell]) -> int:
        best = 0
        for i in range(1, len(frontier)):
            if frontier[i].distance < frontier[best].distance:
                best = i
        return best

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
        }


def dijkstra(grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
    return DijkstraAlgo().run(grid, start, finish)

#!/usr/bin/env python3
"""
A* over a 4-connected unit-cost grid.

Heuristic:
- Manhattan distance to the finish. Never overestimates on a 4-connected
  grid with unit edges, so the first time the finish is closed its g is optimal.

Open list:
- Plain list scanned linearly; the first entry with the minimum f wins.
  No secondary key (h, g) is consulted.
- Each cell appears at most once. A better candidate g for a cell that is
  already open updates it in place and it keeps its position in the list.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Set

from gridpath.core.types import Cell, Coord, Grid

log = logging.getLogger(__name__)


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


@dataclass
class AStarAlgo:
    name: str = "A*"

    open_list: List[Cell] = field(default_factory=list)
    open_index: Dict[Coord, Cell] = field(default_factory=dict)
    closed_set: Set[Coord] = field(default_factory=set)
    popped_count: int = 0
    updated_count: int = 0   # open entries improved in place
    reached: bool = False

    # -------------------- lifecycle --------------------

    def _reset(self) -> None:
        self.open_list.clear()
        self.open_index.clear()
        self.closed_set.clear()
        self.popped_count = 0
        self.updated_count = 0
        self.reached = False

    # -------------------- main loop --------------------

    def run(self, grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
        self._reset()
        visited: List[Cell] = []

        start.g = start.h = start.f = 0
        finish.g = finish.h = finish.f = 0
        self._push(start)

        while self.open_list:
            u = self._pop_best()
            self.popped_count += 1
            self.closed_set.add(u.coord)
            u.is_visited = True
            visited.append(u)
            if u is finish:
                self.reached = True
                break

            for v in grid.neighbors(u):
                if v.coord in self.closed_set:
                    continue
                tentative = u.g + 1
                queued = self.open_index.get(v.coord)
                if queued is not None and queued.g <= tentative:
                    continue

                v.g = tentative
                v.h = manhattan(v, finish)
                v.f = v.g + v.h
                v.previous = u.coord
                if queued is None:
                    self._push(v)
                else:
                    self.updated_count += 1

        log.debug("%s: %d cells finalized, %d open updates, reached=%s",
                  self.name, len(visited), self.updated_count, self.reached)
        return visited

    # -------------------- open list --------------------

    def _push(self, c: Cell) -> None:
        self.open_list.append(c)
        self.open_index[c.coord] = c

    def _pop_best(self) -> Cell:
        best = 0
        for i in range(1, len(self.open_list)):
            if self.open_list[i].f < self.open_list[best].f:
                best = i
        c = self.open_list.pop(best)
        del self.open_index[c.coord]
        return c

    # -------------------- metrics --------------------

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_list),
            "closed_count": len(self.closed_set),
        }


def astar(grid: Grid, start: Cell, finish: Cell) -> List[Cell]:
    return AStarAlgo().run(grid, start, finish)

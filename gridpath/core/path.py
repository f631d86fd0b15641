#!/usr/bin/env python3
from typing import List

from gridpath.core.types import Cell, Coord, Grid


def reconstruct_path(grid: Grid, finish: Cell) -> List[Cell]:
    """Follow backlinks from `finish` and return the chain start -> finish.

    If the finish was never reached the chain is just [finish]; use
    path_found() before treating it as a route.
    """
    path: List[Cell] = []
    cur = finish
    while cur is not None:
        path.append(cur)
        cur = grid.cell_at(cur.previous) if cur.previous is not None else None
    path.reverse()
    return path


def path_found(path: List[Cell], start: Coord) -> bool:
    return bool(path) and path[0].coord == tuple(start)

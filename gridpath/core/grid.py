#!/usr/bin/env python3
"""
Grid construction and editing.

Every function here either builds a fresh Grid or edits wall state; none of
them search. Search scratch lives on the cells and is wiped by reset_search()
before every run.
"""

import logging
import random
from typing import Iterable, List, Optional

from gridpath.core.types import Cell, Coord, Grid, GridConfigError

log = logging.getLogger(__name__)


def _check_endpoint(label: str, c: Coord, rows: int, cols: int) -> None:
    r, col = c
    if not (0 <= r < rows and 0 <= col < cols):
        raise GridConfigError(f"{label} {c} out of bounds for {rows}x{cols} grid")


def make_grid(rows: int, cols: int, start: Coord, finish: Coord,
              walls: Optional[Iterable[Coord]] = None) -> Grid:
    """Build a fresh grid; fail fast on an ill-formed layout."""
    if rows < 1 or cols < 1:
        raise GridConfigError(f"grid must be at least 1x1, got {rows}x{cols}")
    start, finish = tuple(start), tuple(finish)
    _check_endpoint("start", start, rows, cols)
    _check_endpoint("finish", finish, rows, cols)

    wall_set = set()
    for w in walls or ():
        w = tuple(w)
        _check_endpoint("wall", w, rows, cols)
        if w == start or w == finish:
            raise GridConfigError(f"wall {w} overlaps an endpoint")
        wall_set.add(w)

    cells: List[List[Cell]] = []
    for r in range(rows):
        cells.append([
            Cell(r, c,
                 is_start=(r, c) == start,
                 is_finish=(r, c) == finish,
                 is_wall=(r, c) in wall_set)
            for c in range(cols)
        ])
    return Grid(rows, cols, cells, start, finish)


def wall_coords(grid: Grid) -> List[Coord]:
    return [cell.coord for cell in grid.iter_cells() if cell.is_wall]


def rebuild_grid(grid: Grid, start: Optional[Coord] = None,
                 finish: Optional[Coord] = None) -> Grid:
    """Fresh grid with the same walls; a wall under a moved endpoint is dropped."""
    start = tuple(start) if start is not None else grid.start
    finish = tuple(finish) if finish is not None else grid.finish
    walls = [w for w in wall_coords(grid) if w != start and w != finish]
    return make_grid(grid.rows, grid.cols, start, finish, walls)


def clear_walls(grid: Grid) -> Grid:
    return make_grid(grid.rows, grid.cols, grid.start, grid.finish)


def toggle_wall(grid: Grid, row: int, col: int) -> Grid:
    """Flip one cell's wall flag in place. Endpoints and out-of-range cells are left alone."""
    if not grid.in_bounds((row, col)):
        return grid
    cell = grid.cells[row][col]
    if cell.is_start or cell.is_finish:
        return grid
    cell.is_wall = not cell.is_wall
    return grid


def reset_search(grid: Grid) -> Grid:
    for cell in grid.iter_cells():
        cell.reset()
    return grid


def random_walls(rows: int, cols: int, start: Coord, finish: Coord,
                 seed: Optional[int] = None) -> Grid:
    """Random maze: a cell is a wall when round(u**2) == 1, i.e. u >= ~0.707.

    Roughly 30% of cells end up walled. Endpoints are never walls.
    """
    rng = random.Random(seed)
    start, finish = tuple(start), tuple(finish)
    walls: List[Coord] = []
    for r in range(rows):
        for c in range(cols):
            # draw for every cell so the layout only depends on the seed
            blocked = bool(round(rng.random() ** 2))
            if blocked and (r, c) != start and (r, c) != finish:
                walls.append((r, c))
    log.debug("random maze %dx%d seed=%s: %d walls", rows, cols, seed, len(walls))
    return make_grid(rows, cols, start, finish, walls)

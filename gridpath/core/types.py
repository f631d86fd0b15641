#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple, Optional, Dict, Any, Iterator

Coord = Tuple[int, int]  # (row, col)


class GridConfigError(ValueError):
    """Raised when a grid (or its configuration) is ill-formed."""


@dataclass(eq=False)
class Cell:
    row: int
    col: int
    is_start: bool = False
    is_finish: bool = False
    is_wall: bool = False
    is_visited: bool = False
    # search scratch, see reset()
    distance: float = inf
    g: int = 0
    h: int = 0
    f: int = 0
    previous: Optional[Coord] = None   # key into the owning grid, not a reference

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def reset(self) -> None:
        self.is_visited = False
        self.distance = inf
        self.g = self.h = self.f = 0
        self.previous = None

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


@dataclass
class Grid:
    rows: int
    cols: int
    cells: List[List[Cell]]            # [row][col]
    start: Coord
    finish: Coord

    def in_bounds(self, c: Coord) -> bool:
        row, col = c
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, c: Coord) -> Cell:
        row, col = c
        return self.cells[row][col]

    @property
    def start_cell(self) -> Cell:
        return self.cell_at(self.start)

    @property
    def finish_cell(self) -> Cell:
        return self.cell_at(self.finish)

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def neighbors(self, cell: Cell) -> List[Cell]:
        """Open, unvisited 4-neighbors in up, left, down, right order.

        The order is part of every algorithm's observable behaviour (DFS
        exploration order, open-list insertion order for the tie-breaks).
        """
        r, c = cell.row, cell.col
        candidates: List[Coord] = [
            (r - 1, c),
            (r, c - 1),
            (r + 1, c),
            (r, c + 1),
        ]
        out: List[Cell] = []
        for n in candidates:
            if not self.in_bounds(n):
                continue
            nb = self.cell_at(n)
            if nb.is_wall or nb.is_visited:
                continue
            out.append(nb)
        return out


@dataclass
class SearchResult:
    status: str                   # "done" | "no_path"
    visited: List[Cell] = field(default_factory=list)
    path: List[Cell] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.status == "done"

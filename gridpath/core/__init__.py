from .types import Cell, Coord, Grid, GridConfigError, SearchResult
from .grid import (make_grid, rebuild_grid, clear_walls, toggle_wall, reset_search,
                   random_walls, wall_coords)
from .bfs import BFSAlgo, bfs
from .dfs import DFSAlgo, dfs
from .dijkstra import DijkstraAlgo, dijkstra
from .astar import AStarAlgo, astar, manhattan
from .path import reconstruct_path, path_found
from .search import ALGORITHMS, UnknownAlgorithmError, make_algo, run_search

__all__ = [
    "Cell", "Coord", "Grid", "GridConfigError", "SearchResult",
    "make_grid", "rebuild_grid", "clear_walls", "toggle_wall", "reset_search",
    "random_walls", "wall_coords",
    "BFSAlgo", "bfs", "DFSAlgo", "dfs", "DijkstraAlgo", "dijkstra",
    "AStarAlgo", "astar", "manhattan",
    "reconstruct_path", "path_found",
    "ALGORITHMS", "UnknownAlgorithmError", "make_algo", "run_search",
]

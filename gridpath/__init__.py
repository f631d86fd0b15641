"""Grid pathfinding engine (BFS, DFS, Dijkstra, A*) with a pygame viewer."""

__version__ = "1.0.0"

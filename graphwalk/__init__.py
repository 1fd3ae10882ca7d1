"""Classic graph algorithms: traversals, bipartite checks, cycles, grids, shortest paths and routes."""

__version__ = "0.1.0"

__all__ = ["bipartite", "cli", "cycles", "grid", "routes", "shortest_paths", "traversal"]
"""Two-colouring of undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Graph = Sequence[Sequence[int]]


def _colour_bfs(graph: Graph) -> list[int] | None:
    colour = [-1] * len(graph)
    for root in range(len(graph)):
        if colour[root] != -1:
            continue
        colour[root] = 1
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for nxt in graph[node]:
                if colour[nxt] == -1:
                    colour[nxt] = 1 - colour[node]
                    queue.append(nxt)
                elif colour[nxt] == colour[node]:
                    return None
    return colour


def is_bipartite_bfs(graph: Graph) -> bool:
    """Whether the graph can be two-coloured, checked breadth-first."""
    return _colour_bfs(graph) is not None


def is_bipartite_dfs(graph: Graph) -> bool:
    """Whether the graph can be two-coloured, checked depth-first."""
    colour = [-1] * len(graph)
    for root in range(len(graph)):
        if colour[root] != -1:
            continue
        colour[root] = 0
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if colour[nxt] == -1:
                    colour[nxt] = 1 - colour[node]
                    stack.append((nxt, iter(graph[nxt])))
                    break
                if colour[nxt] == colour[node]:
                    return False
            else:
                stack.pop()
    return True


def build_teams(graph: Graph) -> list[int] | None:
    """Team 1 or 2 for every node so no edge joins teammates, or None."""
    colour = _colour_bfs(graph)
    if colour is None:
        return None
    return [c + 1 for c in colour]
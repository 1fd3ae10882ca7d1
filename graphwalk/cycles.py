"""Cycle detection and topological ordering."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Graph = Sequence[Sequence[int]]


class CycleError(ValueError):
    """Raised when a directed graph has a cycle and so no topological order."""


def has_cycle_bfs(graph: Graph) -> bool:
    """Whether an undirected graph contains a cycle, found breadth-first."""
    visited = [False] * len(graph)
    for root in range(len(graph)):
        if visited[root]:
            continue
        visited[root] = True
        queue = deque([(root, -1)])
        while queue:
            node, parent = queue.popleft()
            for nxt in graph[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    queue.append((nxt, node))
                elif nxt != parent:
                    return True
    return False


def find_undirected_cycle(graph: Graph) -> list[int] | None:
    """A cycle in an undirected graph, first node repeated at the end, or None."""
    n = len(graph)
    visited = [False] * n
    parent = [-1] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    parent[nxt] = node
                    stack.append((nxt, iter(graph[nxt])))
                    break
                if nxt != parent[node]:
                    cycle = [nxt]
                    current = node
                    while current != nxt:
                        cycle.append(current)
                        current = parent[current]
                    cycle.append(nxt)
                    return cycle
            else:
                stack.pop()
    return None


def find_directed_cycle(graph: Graph) -> list[int] | None:
    """A cycle in a directed graph, first node repeated at the end, or None."""
    n = len(graph)
    visited = [False] * n
    on_path = [False] * n
    parent = [-1] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = on_path[nxt] = True
                    parent[nxt] = node
                    stack.append((nxt, iter(graph[nxt])))
                    break
                if on_path[nxt]:
                    cycle = [nxt]
                    current = node
                    while current != nxt:
                        cycle.append(current)
                        current = parent[current]
                    cycle.append(nxt)
                    cycle.reverse()
                    return cycle
            else:
                on_path[node] = False
                stack.pop()
    return None


def topological_sort(graph: Graph) -> list[int]:
    """Nodes of a directed acyclic graph so every edge points forward."""
    n = len(graph)
    visited = [False] * n
    on_path = [False] * n
    finished: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = on_path[nxt] = True
                    stack.append((nxt, iter(graph[nxt])))
                    break
                if on_path[nxt]:
                    raise CycleError("graph has a cycle")
            else:
                on_path[node] = False
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished
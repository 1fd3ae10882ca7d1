"""Graph construction, traversal orders and connectivity queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import pairwise

Graph = Sequence[Sequence[int]]
Edge = tuple[int, int]


def _checked(n: int, edges: Iterable[Sequence[int]]) -> Iterable[Edge]:
    if n < 0:
        raise ValueError(f"number of nodes must be non-negative, got {n}")
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(
                f"invalid edge ({u}, {v}): nodes must be between 0 and {n - 1}"
            )
        yield u, v


def build_undirected(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Adjacency lists of an undirected graph with nodes 0..n-1."""
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in _checked(n, edges):
        graph[u].append(v)
        graph[v].append(u)
    return graph


def build_directed(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Adjacency lists of a directed graph with nodes 0..n-1."""
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in _checked(n, edges):
        graph[u].append(v)
    return graph


def adjacency_matrix(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Symmetric 0/1 adjacency matrix of an undirected graph."""
    matrix = [[0] * n for _ in range(n)]
    for u, v in _checked(n, edges):
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix


def describe_graph(n: int, edges: Iterable[Sequence[int]]) -> str:
    """Render the adjacency matrix and adjacency lists of an undirected graph."""
    if n <= 0:
        raise ValueError("number of nodes must be positive")
    edge_list = list(_checked(n, edges))
    matrix = adjacency_matrix(n, edge_list)
    graph = build_undirected(n, edge_list)

    lines = ["Adjacency Matrix (1 indicates edge, 0 indicates no edge):"]
    lines.append("   " + "".join(f"{i} " for i in range(n)))
    lines.extend(
        f"{i}: " + "".join(f"{cell} " for cell in row) for i, row in enumerate(matrix)
    )
    lines.append("")
    lines.append("Adjacency List (shows neighbors for each node):")
    lines.extend(
        f"Node {i} -> " + "".join(f"{v} " for v in neighbours)
        for i, neighbours in enumerate(graph)
    )
    return "\n".join(lines) + "\n"


def _dfs_from(graph: Graph, start: int, seen: set[int]) -> list[int]:
    seen.add(start)
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                stack.append(iter(graph[nxt]))
                break
        else:
            stack.pop()
    return order


def dfs_order(graph: Graph, start: int) -> list[int]:
    """Nodes reachable from start, in depth-first preorder."""
    return _dfs_from(graph, start, set())


def bfs_order(graph: Graph, start: int) -> list[int]:
    """Nodes reachable from start, in breadth-first order."""
    seen = {start}
    order = [start]
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                queue.append(nxt)
    return order


def components(graph: Graph) -> list[list[int]]:
    """Connected components, each in depth-first order, by smallest node."""
    seen: set[int] = set()
    return [
        _dfs_from(graph, node, seen) for node in range(len(graph)) if node not in seen
    ]


def connected_components(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Connected components of the undirected graph given by an edge list."""
    return components(build_undirected(n, edges))


def roads_to_build(graph: Graph) -> list[Edge]:
    """New roads that join all components, linking each to the next one."""
    leaders = [comp[0] for comp in components(graph)]
    return list(pairwise(leaders))


def message_route(graph: Graph) -> list[int] | None:
    """Shortest path by edge count from node 0 to the last node, or None."""
    n = len(graph)
    if n == 0:
        return None
    target = n - 1
    parent: dict[int, int | None] = {0: None}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for nxt in graph[node]:
            if nxt not in parent:
                parent[nxt] = node
                queue.append(nxt)
    if target not in parent:
        return None
    route = []
    current: int | None = target
    while current is not None:
        route.append(current)
        current = parent[current]
    route.reverse()
    return route
"""Weighted shortest and longest paths, with negative-cycle handling."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Iterator, Sequence

from .traversal import bfs_order, build_directed

WeightedEdge = tuple[int, int, int]
WeightedGraph = Sequence[Sequence[tuple[int, int]]]


class NegativeCycleError(ValueError):
    """Raised when a negative cycle makes shortest distances undefined."""


def _checked(n: int, edges: Iterable[Sequence[int]]) -> Iterator[WeightedEdge]:
    if n < 0:
        raise ValueError(f"number of nodes must be non-negative, got {n}")
    for u, v, w in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(
                f"invalid edge ({u}, {v}): nodes must be between 0 and {n - 1}"
            )
        yield u, v, w


def _require_nodes(n: int) -> None:
    if n <= 0:
        raise ValueError("number of nodes must be positive")


def weighted_graph(
    n: int, edges: Iterable[Sequence[int]], directed: bool = True
) -> list[list[tuple[int, int]]]:
    """Adjacency lists of (neighbour, weight) pairs for nodes 0..n-1."""
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in _checked(n, edges):
        graph[u].append((v, w))
        if not directed:
            graph[v].append((u, w))
    return graph


def _dijkstra(graph: WeightedGraph, source: int) -> tuple[list[float], list[int]]:
    dist: list[float] = [math.inf] * len(graph)
    parent = [-1] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, weight in graph[node]:
            candidate = d + weight
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                parent[nxt] = node
                heapq.heappush(heap, (candidate, nxt))
    return dist, parent


def dijkstra(graph: WeightedGraph, source: int) -> list[float]:
    """Distances from source over non-negative weights; math.inf if unreachable."""
    return _dijkstra(graph, source)[0]


def shortest_route(n: int, edges: Iterable[Sequence[int]]) -> list[int] | None:
    """Cheapest path from node 0 to node n-1 in an undirected graph, or None."""
    _require_nodes(n)
    dist, parent = _dijkstra(weighted_graph(n, edges, directed=False), 0)
    target = n - 1
    if dist[target] == math.inf:
        return None
    route = [target]
    while route[-1] != 0:
        route.append(parent[route[-1]])
    route.reverse()
    return route


def floyd_warshall(n: int, edges: Iterable[Sequence[int]]) -> list[list[float]]:
    """All-pairs distances of an undirected graph; math.inf if unreachable."""
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for u, v, w in _checked(n, edges):
        dist[u][v] = min(dist[u][v], w)
        dist[v][u] = min(dist[v][u], w)
    for i, row in enumerate(dist):
        row[i] = 0
    for via, via_row in enumerate(dist):
        for row in dist:
            through = row[via]
            if through == math.inf:
                continue
            row[:] = [min(a, through + b) for a, b in zip(row, via_row)]
    return dist


def flight_discount(n: int, edges: Iterable[Sequence[int]]) -> int | None:
    """Cheapest directed route 0 to n-1 with one edge at half price, or None."""
    _require_nodes(n)
    edge_list = list(_checked(n, edges))
    forward = dijkstra(weighted_graph(n, edge_list), 0)
    backward = dijkstra(weighted_graph(n, [(v, u, w) for u, v, w in edge_list]), n - 1)
    best = min(
        (forward[u] + backward[v] + w // 2 for u, v, w in edge_list),
        default=math.inf,
    )
    return None if best == math.inf else int(best)


def bellman_ford(n: int, edges: Iterable[Sequence[int]]) -> list[float]:
    """Distances from node 0 over a directed graph that may have negative weights.

    Raises NegativeCycleError if a negative cycle is reachable from node 0.
    """
    _require_nodes(n)
    edge_list = list(_checked(n, edges))
    dist: list[float] = [math.inf] * n
    dist[0] = 0
    for _ in range(n - 1):
        for u, v, w in edge_list:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    if any(dist[u] + w < dist[v] for u, v, w in edge_list):
        raise NegativeCycleError("negative cycle reachable from node 0")
    return dist


def high_score(n: int, edges: Iterable[Sequence[int]]) -> float | None:
    """Largest total weight of a directed route from 0 to n-1.

    None when the score can be made arbitrarily large, -math.inf when
    node n-1 cannot be reached.
    """
    _require_nodes(n)
    edge_list = list(_checked(n, edges))
    score: list[float] = [-math.inf] * n
    score[0] = 0
    for _ in range(n - 1):
        for u, v, w in edge_list:
            if score[u] + w > score[v]:
                score[v] = score[u] + w
    reverse = build_directed(n, [(v, u) for u, v, _ in edge_list])
    reaches_target = set(bfs_order(reverse, n - 1))
    if any(
        score[u] + w > score[v] and u in reaches_target for u, v, w in edge_list
    ):
        return None
    return score[n - 1]


def find_negative_cycle(n: int, edges: Iterable[Sequence[int]]) -> list[int] | None:
    """A negative cycle anywhere in a directed graph, first node repeated last."""
    source = n
    edge_list = list(_checked(n, edges)) + [(source, v, 0) for v in range(n)]
    dist: list[float] = [math.inf] * (n + 1)
    parent = [-1] * (n + 1)
    dist[source] = 0
    last: int | None = None
    for _ in range(n + 1):
        last = None
        for u, v, w in edge_list:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
                last = v
    if last is None:
        return None
    node = last
    for _ in range(n + 1):
        node = parent[node]
    cycle = [node]
    current = parent[node]
    while current != node:
        cycle.append(current)
        current = parent[current]
    cycle.append(node)
    cycle.reverse()
    return cycle
"""Route enumeration on directed graphs: k cheapest, longest, counting, statistics."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .shortest_paths import weighted_graph
from .traversal import build_directed

MOD = 10**9 + 7

Graph = Sequence[Sequence[int]]


@dataclass(frozen=True)
class RouteStats:
    """Cheapest price from the first to the last node and facts about such routes."""

    price: int
    routes: int
    min_flights: int
    max_flights: int


def _require_nodes(n: int) -> None:
    if n <= 0:
        raise ValueError("number of nodes must be positive")


def _postorder(graph: Graph, start: int, stop: int) -> list[int]:
    """Nodes reachable from start in depth-first postorder, not expanding stop."""
    if start == stop:
        return [start]
    seen = {start}
    order: list[int] = []
    stack = [(start, iter(graph[start]))]
    while stack:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt in seen:
                continue
            seen.add(nxt)
            if nxt == stop:
                order.append(nxt)
                continue
            stack.append((nxt, iter(graph[nxt])))
            break
        else:
            stack.pop()
            order.append(node)
    return order


def k_cheapest_routes(n: int, edges: Iterable[Sequence[int]], k: int) -> list[int]:
    """Prices of the k cheapest directed routes from node 0 to node n-1, ascending.

    Fewer than k prices are returned when fewer routes exist.
    """
    _require_nodes(n)
    if k <= 0:
        raise ValueError("k must be positive")
    graph = weighted_graph(n, edges)
    # Per node, a max-heap (negated) of the k cheapest prices found so far.
    kept: list[list[int]] = [[] for _ in range(n)]
    kept[0].append(0)
    heap = [(0, 0)]
    while heap:
        price, node = heapq.heappop(heap)
        if price > -kept[node][0]:
            continue
        for nxt, weight in graph[node]:
            candidate = price + weight
            prices = kept[nxt]
            if len(prices) < k:
                heapq.heappush(prices, -candidate)
            elif -prices[0] > candidate:
                heapq.heapreplace(prices, -candidate)
            else:
                continue
            heapq.heappush(heap, (candidate, nxt))
    return sorted(-p for p in kept[n - 1])


def longest_route(n: int, edges: Iterable[Sequence[int]]) -> list[int] | None:
    """Route from node 0 to node n-1 with most nodes in a directed acyclic graph."""
    _require_nodes(n)
    graph = build_directed(n, edges)
    target = n - 1
    length = [0] * n
    following = [-1] * n
    length[target] = 1
    for node in _postorder(graph, 0, target):
        if node == target:
            continue
        for nxt in graph[node]:
            reached = length[nxt]
            if reached and reached + 1 > length[node]:
                length[node] = reached + 1
                following[node] = nxt
    if length[0] == 0:
        return None
    route = [0]
    while route[-1] != target:
        route.append(following[route[-1]])
    return route


def count_routes(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Number of routes from node 0 to node n-1 in a directed acyclic graph, mod 1e9+7."""
    _require_nodes(n)
    graph = build_directed(n, edges)
    target = n - 1
    ways = [0] * n
    ways[target] = 1
    for node in _postorder(graph, 0, target):
        if node != target:
            ways[node] = sum(ways[nxt] for nxt in graph[node]) % MOD
    return ways[0]


def investigate(n: int, edges: Iterable[Sequence[int]]) -> RouteStats | None:
    """Cheapest price from 0 to n-1, the number of cheapest routes (mod 1e9+7)
    and the fewest and most flights among them; None if n-1 is unreachable."""
    _require_nodes(n)
    graph = weighted_graph(n, edges)
    dist: list[float] = [math.inf] * n
    routes = [0] * n
    fewest = [0] * n
    most = [0] * n
    dist[0] = 0
    routes[0] = 1
    heap = [(0, 0)]
    while heap:
        price, node = heapq.heappop(heap)
        if price > dist[node]:
            continue
        for nxt, weight in graph[node]:
            candidate = price + weight
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                routes[nxt] = routes[node]
                fewest[nxt] = fewest[node] + 1
                most[nxt] = most[node] + 1
                heapq.heappush(heap, (candidate, nxt))
            elif candidate == dist[nxt]:
                routes[nxt] = (routes[nxt] + routes[node]) % MOD
                fewest[nxt] = min(fewest[nxt], fewest[node] + 1)
                most[nxt] = max(most[nxt], most[node] + 1)
    target = n - 1
    if dist[target] == math.inf:
        return None
    return RouteStats(
        price=int(dist[target]),
        routes=routes[target],
        min_flights=fewest[target],
        max_flights=most[target],
    )
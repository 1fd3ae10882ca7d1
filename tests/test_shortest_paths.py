import math
import random

import pytest

from graphwalk.shortest_paths import (
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    find_negative_cycle,
    flight_discount,
    floyd_warshall,
    high_score,
    shortest_route,
    weighted_graph,
)


def _random_edges(seed, n, m, low=1, high=20):
    rng = random.Random(seed)
    return [
        (rng.randrange(n), rng.randrange(n), rng.randint(low, high)) for _ in range(m)
    ]


def test_weighted_graph_directed_and_undirected():
    assert weighted_graph(3, [(0, 2, 7)]) == [[(2, 7)], [], []]
    assert weighted_graph(3, [(0, 2, 7)], directed=False) == [[(2, 7)], [], [(0, 7)]]


def test_weighted_graph_rejects_bad_node():
    with pytest.raises(ValueError):
        weighted_graph(2, [(0, 2, 1)])


def test_dijkstra_single_edge_and_unreachable():
    graph = weighted_graph(3, [(0, 1, 7)])
    assert dijkstra(graph, 0) == [0, 7, math.inf]


@pytest.mark.parametrize("seed", range(5))
def test_dijkstra_satisfies_edge_inequality(seed):
    n = 8
    edges = _random_edges(seed, n, 20)
    dist = dijkstra(weighted_graph(n, edges), 0)
    assert dist[0] == 0
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w


@pytest.mark.parametrize("seed", range(5))
def test_bellman_ford_agrees_with_dijkstra(seed):
    n = 8
    edges = _random_edges(seed, n, 18)
    assert bellman_ford(n, edges) == dijkstra(weighted_graph(n, edges), 0)


@pytest.mark.parametrize("seed", range(5))
def test_floyd_warshall_agrees_with_dijkstra(seed):
    n = 7
    edges = _random_edges(seed, n, 12)
    matrix = floyd_warshall(n, edges)
    graph = weighted_graph(n, edges, directed=False)
    for source in range(n):
        assert matrix[source] == dijkstra(graph, source)


def test_floyd_warshall_keeps_cheapest_parallel_edge():
    matrix = floyd_warshall(3, [(0, 1, 9), (1, 0, 4)])
    assert matrix[0][1] == 4
    assert matrix[1][0] == 4
    assert matrix[0][2] == math.inf
    assert [matrix[i][i] for i in range(3)] == [0, 0, 0]


@pytest.mark.parametrize("seed", range(5))
def test_shortest_route_is_a_cheapest_path(seed):
    n = 8
    edges = _random_edges(seed, n, 16)
    route = shortest_route(n, edges)
    dist = dijkstra(weighted_graph(n, edges, directed=False), 0)
    assert (route is None) == (dist[n - 1] == math.inf)
    if route is not None:
        assert route[0] == 0 and route[-1] == n - 1
        weights = {}
        for u, v, w in edges:
            for key in ((u, v), (v, u)):
                weights[key] = min(weights.get(key, math.inf), w)
        total = sum(weights[pair] for pair in zip(route, route[1:]))
        assert total == dist[n - 1]


def test_shortest_route_impossible():
    assert shortest_route(3, [(0, 1, 5)]) is None


def test_flight_discount_halves_the_only_flight():
    assert flight_discount(2, [(0, 1, 10)]) == 5
    assert flight_discount(2, [(0, 1, 7)]) == 3


def test_flight_discount_unreachable():
    assert flight_discount(3, [(0, 1, 4), (2, 1, 4)]) is None


@pytest.mark.parametrize("seed", range(5))
def test_flight_discount_never_costs_more(seed):
    n = 6
    edges = _random_edges(seed, n, 14)
    full = dijkstra(weighted_graph(n, edges), 0)[n - 1]
    cheap = flight_discount(n, edges)
    assert (cheap is None) == (full == math.inf)
    if cheap is not None:
        assert cheap <= full


def test_bellman_ford_handles_negative_weights():
    edges = [(0, 1, 5), (1, 2, -3), (0, 2, 4)]
    dist = bellman_ford(3, edges)
    assert dist[0] == 0
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w
    assert dist[2] < 4


def test_bellman_ford_raises_on_negative_cycle():
    with pytest.raises(NegativeCycleError):
        bellman_ford(2, [(0, 1, 1), (1, 0, -2)])


def test_bellman_ford_ignores_unreachable_negative_cycle():
    dist = bellman_ford(3, [(1, 2, -5), (2, 1, 1)])
    assert dist == [0, math.inf, math.inf]


def test_high_score_picks_larger_parallel_edge():
    assert high_score(3, [(0, 2, 4), (0, 2, 9)]) == 9


def test_high_score_unbounded_when_cycle_reaches_target():
    assert high_score(3, [(0, 1, 1), (1, 0, 1), (1, 2, 1)]) is None


def test_high_score_ignores_cycle_that_misses_target():
    edges = [(0, 3, 4), (0, 1, 1), (1, 2, 1), (2, 1, 1)]
    assert high_score(4, edges) == 4


def test_high_score_unreachable_target():
    assert high_score(3, [(0, 1, 5)]) == -math.inf


def test_find_negative_cycle_returns_closed_negative_walk():
    edges = [(0, 1, 1), (1, 2, -5), (2, 0, 1), (2, 3, 2), (3, 4, 1)]
    cycle = find_negative_cycle(5, edges)
    assert cycle is not None
    assert cycle[0] == cycle[-1]
    weights = {(u, v): w for u, v, w in edges}
    assert all(pair in weights for pair in zip(cycle, cycle[1:]))
    assert sum(weights[pair] for pair in zip(cycle, cycle[1:])) < 0
    assert sorted(set(cycle)) == [0, 1, 2]


def test_find_negative_cycle_self_loop():
    assert find_negative_cycle(3, [(0, 1, 2), (1, 1, -1)]) == [1, 1]


def test_find_negative_cycle_none():
    assert find_negative_cycle(3, [(0, 1, -2), (1, 2, -2), (2, 0, 5)]) is None
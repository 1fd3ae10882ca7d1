import random

import pytest

from graphwalk.traversal import (
    adjacency_matrix,
    bfs_order,
    build_directed,
    build_undirected,
    components,
    connected_components,
    describe_graph,
    dfs_order,
    message_route,
    roads_to_build,
)


def _random_edges(n, m, seed):
    rng = random.Random(seed)
    return [(rng.randrange(n), rng.randrange(n)) for _ in range(m)]


def test_build_undirected_is_symmetric():
    edges = [(0, 1), (1, 2), (3, 0)]
    graph = build_undirected(4, edges)
    for u, v in edges:
        assert v in graph[u]
        assert u in graph[v]
    assert sum(len(a) for a in graph) == 2 * len(edges)


def test_build_directed_keeps_direction():
    graph = build_directed(3, [(0, 1), (1, 2)])
    assert graph[0] == [1]
    assert graph[2] == []


def test_build_rejects_out_of_range_node():
    with pytest.raises(ValueError):
        build_undirected(3, [(0, 3)])
    with pytest.raises(ValueError):
        build_directed(3, [(-1, 0)])


def test_adjacency_matrix_matches_lists():
    edges = _random_edges(6, 10, 1)
    matrix = adjacency_matrix(6, edges)
    graph = build_undirected(6, edges)
    for u in range(6):
        for v in range(6):
            assert matrix[u][v] == (1 if v in graph[u] else 0)
            assert matrix[u][v] == matrix[v][u]


def test_describe_graph_layout():
    text = describe_graph(2, [(0, 1)])
    lines = text.splitlines()
    assert lines[0] == "Adjacency Matrix (1 indicates edge, 0 indicates no edge):"
    assert lines[2] == "0: 0 1 "
    assert "Node 1 -> 0 " in lines


def test_describe_graph_rejects_empty():
    with pytest.raises(ValueError):
        describe_graph(0, [])


def test_dfs_goes_deep_first():
    graph = build_undirected(4, [(0, 1), (0, 2), (1, 3)])
    assert dfs_order(graph, 0) == [0, 1, 3, 2]


def test_bfs_goes_level_by_level():
    graph = build_undirected(4, [(0, 1), (0, 2), (1, 3)])
    assert bfs_order(graph, 0) == [0, 1, 2, 3]


@pytest.mark.parametrize("seed", range(5))
def test_dfs_and_bfs_reach_same_nodes(seed):
    graph = build_undirected(8, _random_edges(8, 7, seed))
    dfs = dfs_order(graph, 0)
    bfs = bfs_order(graph, 0)
    assert dfs[0] == bfs[0] == 0
    assert sorted(dfs) == sorted(bfs)
    assert len(set(dfs)) == len(dfs)


@pytest.mark.parametrize("seed", range(5))
def test_components_partition_nodes(seed):
    edges = _random_edges(9, 5, seed)
    comps = connected_components(9, edges)
    flat = [v for comp in comps for v in comp]
    assert sorted(flat) == list(range(9))
    where = {v: i for i, comp in enumerate(comps) for v in comp}
    for u, v in edges:
        assert where[u] == where[v]
    assert [c[0] for c in comps] == sorted(c[0] for c in comps)


def test_components_of_isolated_nodes():
    graph = build_undirected(3, [])
    assert components(graph) == [[0], [1], [2]]


@pytest.mark.parametrize("seed", range(5))
def test_roads_connect_everything(seed):
    n = 7
    edges = _random_edges(n, 4, seed)
    roads = roads_to_build(build_undirected(n, edges))
    assert len(roads) == len(connected_components(n, edges)) - 1
    assert len(connected_components(n, edges + roads)) == 1


def test_message_route_is_shortest_path():
    graph = build_undirected(5, [(0, 1), (1, 2), (2, 4), (0, 3), (3, 4)])
    route = message_route(graph)
    assert route[0] == 0 and route[-1] == 4
    assert len(route) == 3
    for a, b in zip(route, route[1:]):
        assert b in graph[a]


def test_message_route_impossible():
    graph = build_undirected(4, [(0, 1), (2, 3)])
    assert message_route(graph) is None
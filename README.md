# graphwalk

A small, dependency-free collection of classic graph algorithms, usable as a
library or from the command line.

Nodes are numbered from 0. Graphs are plain lists of adjacency lists;
weighted graphs hold `(neighbour, weight)` pairs. Unreachable distances are
reported as `math.inf`.

## Modules

- **`graphwalk.traversal`**: `build_undirected`, `build_directed` and
  `adjacency_matrix` from an edge list (bad node numbers raise `ValueError`);
  `describe_graph`, which renders the matrix and the adjacency lists as text;
  `dfs_order` and `bfs_order` from a start node; `components` and
  `connected_components`; `roads_to_build`, which links the first node of each
  component to the first node of the next; and `message_route`, a shortest
  route by edge count from node 0 to the last node, or `None`.
- **`graphwalk.bipartite`**: `is_bipartite_bfs`, `is_bipartite_dfs`, and
  `build_teams`, which gives every node team 1 or 2, or `None` when the graph
  cannot be two-coloured.
- **`graphwalk.cycles`**: `has_cycle_bfs` for undirected graphs;
  `find_undirected_cycle` and `find_directed_cycle`, which return a cycle with
  its first node repeated at the end, or `None`; and `topological_sort`, which
  raises `CycleError` when the graph has a cycle.
- **`graphwalk.grid`**: grids are sequences of strings of `.` (free) and `#`
  (wall) cells. `parse_grid` strips whitespace and skips blank lines;
  `count_rooms` counts connected regions of free cells; `labyrinth_path`
  returns the shortest move string (`L`, `R`, `U`, `D`) from `A` to `B`, or
  `None`; `monster_distances` gives the steps from the nearest `M` to each
  cell; `escape_monsters` returns moves that take `A` to the border before any
  monster can get there (an empty string if `A` already is on it), or `None`.
- **`graphwalk.shortest_paths`**: `weighted_graph`, `dijkstra`,
  `shortest_route` (undirected, node 0 to the last node), `floyd_warshall`
  (undirected, all pairs), `flight_discount` (directed, one edge at half
  price, rounded down), `bellman_ford` (raises `NegativeCycleError` when a
  negative cycle is reachable from node 0), `high_score` (largest route total;
  `None` when it is unbounded, `-math.inf` when the last node is unreachable)
  and `find_negative_cycle`.
- **`graphwalk.routes`**: `k_cheapest_routes` (the `k` cheapest route prices
  from node 0 to the last node, ascending), `longest_route` (most nodes, in a
  DAG), `count_routes` (number of routes in a DAG, modulo 1 000 000 007), and
  `investigate`, which returns a `RouteStats` with `price`, `routes`,
  `min_flights` and `max_flights` for the cheapest routes, or `None`.
- **`graphwalk.cli`**: `run(problem, text)` solves a named problem from its
  input text and returns the output; `main` is the command's entry point.

## Installation

```
pip install .
```

## Library use

```python
from graphwalk.traversal import build_undirected, bfs_order, connected_components
from graphwalk.shortest_paths import dijkstra, weighted_graph
from graphwalk.cycles import topological_sort, CycleError

edges = [(0, 1), (1, 2), (3, 4)]
print(connected_components(5, edges))   # [[0, 1, 2], [3, 4]]

graph = build_undirected(5, edges)
print(bfs_order(graph, 0))              # [0, 1, 2]

weighted = weighted_graph(3, [(0, 1, 5), (1, 2, 2), (0, 2, 9)], directed=True)
print(dijkstra(weighted, 0))            # [0, 5, 7]

try:
    topological_sort([[1], [0]])
except CycleError:
    print("no topological order")
```

## Command line

```
graphwalk PROBLEM [INPUT]
```

reads the problem's input from the file `INPUT`, or from standard input, and
prints the answer. Input is whitespace-separated: usually `n m` followed by
`m` edges `u v` (or `u v w` for weighted problems) with nodes numbered from 1.
`basics`, `dfs-bfs` and `components` number nodes from 0. `floyd-warshall`
starts with `n m q` and ends with `q` query pairs; `flight-routes` starts with
`n m k`. Grid problems (`rooms`, `labyrinth`, `monsters`) start with the
number of rows and columns, followed by the cells.

The problems are: `basics`, `bellman-ford`, `bipartite-bfs`,
`bipartite-dfs`, `components`, `cycle-bfs`, `cycle-finding`, `dfs-bfs`,
`dijkstra`, `flight-discount`, `flight-routes`, `floyd-warshall`,
`game-routes`, `high-score`, `investigation`, `labyrinth`, `longest-route`,
`message-route`, `monsters`, `roads`, `rooms`, `round-trip`, `round-trip-2`,
`shortest-route`, `teams`, `topological-sort`.

Invalid input is reported on standard error with exit status 1.

```
graphwalk --help
```

## Running the tests

```
pip install ".[test]"
pytest
```
"""Command-line front end: read a problem's input text and print its answer."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Sequence

from .bipartite import build_teams, is_bipartite_bfs, is_bipartite_dfs
from .cycles import (
    CycleError,
    find_directed_cycle,
    find_undirected_cycle,
    has_cycle_bfs,
    topological_sort,
)
from .grid import count_rooms, escape_monsters, labyrinth_path
from .routes import count_routes, investigate, k_cheapest_routes, longest_route
from .shortest_paths import (
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
from .traversal import (
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

_UNREACHABLE = 10**18
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


class _Tokens:
    """Whitespace-separated words of the input, read in order."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def edges(self, count: int, width: int, one_based: bool = True) -> list[tuple[int, ...]]:
        shift = 1 if one_based else 0
        result = []
        for _ in range(count):
            u, v, *rest = self.numbers(width)
            result.append((u - shift, v - shift, *rest))
        return result

    def grid(self) -> list[str]:
        rows, cols = self.numbers(2)
        cells = "".join(self._words)
        if len(cells) < rows * cols:
            raise ValueError("unexpected end of input")
        return [cells[r * cols:(r + 1) * cols] for r in range(rows)]


def _spaced(values: Iterable[object]) -> str:
    return "".join(f"{v} " for v in values)


def _counted_route(route: Sequence[int] | None, newline: str = "") -> str:
    if route is None:
        return "IMPOSSIBLE" + newline
    return f"{len(route)}\n" + _spaced(v + 1 for v in route)


def _undirected(tokens: _Tokens) -> list[list[int]]:
    n, m = tokens.numbers(2)
    return build_undirected(n, tokens.edges(m, 2))


def _directed(tokens: _Tokens) -> list[list[int]]:
    n, m = tokens.numbers(2)
    return build_directed(n, tokens.edges(m, 2))


def _weighted(tokens: _Tokens) -> tuple[int, list[tuple[int, ...]]]:
    n, m = tokens.numbers(2)
    return n, tokens.edges(m, 3)


def _unweighted(tokens: _Tokens) -> tuple[int, list[tuple[int, ...]]]:
    n, m = tokens.numbers(2)
    return n, tokens.edges(m, 2)


def _basics(tokens: _Tokens) -> str:
    n, m = tokens.numbers(2)
    if n <= 0 or m < 0:
        raise ValueError(
            "Invalid input: Number of nodes must be positive and edges must be non-negative"
        )
    return describe_graph(n, tokens.edges(m, 2, one_based=False))


def _dfs_bfs(tokens: _Tokens) -> str:
    n, m = tokens.numbers(2)
    if n <= 0:
        raise ValueError("number of nodes must be positive")
    graph = build_undirected(n, tokens.edges(m, 2, one_based=False))
    return "dfs : " + _spaced(dfs_order(graph, 0)) + "\nbfs : " + _spaced(bfs_order(graph, 0))


def _components(tokens: _Tokens) -> str:
    n, m = tokens.numbers(2)
    parts = connected_components(n, tokens.edges(m, 2, one_based=False))
    return "".join(
        f"component : {index}\n{_spaced(part)}\n" for index, part in enumerate(parts, 1)
    )


def _labyrinth(tokens: _Tokens) -> str:
    path = labyrinth_path(tokens.grid())
    return "NO" if path is None else f"YES\n{len(path)}\n{path}"


def _monsters(tokens: _Tokens) -> str:
    path = escape_monsters(tokens.grid())
    return "NO" if path is None else f"YES\n{len(path)}\n{path}"


def _roads(tokens: _Tokens) -> str:
    roads = roads_to_build(_undirected(tokens))
    return f"{len(roads)}\n" + "".join(f"{a + 1} {b + 1}\n" for a, b in roads)


def _bipartite(check: Callable[[list[list[int]]], bool]) -> Callable[[_Tokens], str]:
    def handler(tokens: _Tokens) -> str:
        graph = _undirected(tokens)
        return f"{int(bool(graph) and check(graph))}\n"

    return handler


def _teams(tokens: _Tokens) -> str:
    teams = build_teams(_undirected(tokens))
    return "IMPOSSIBLE" if teams is None else _spaced(teams)


def _cycle_bfs(tokens: _Tokens) -> str:
    found = has_cycle_bfs(_undirected(tokens))
    return f"cycle detected : {'yes' if found else 'no'}\n"


def _topological(tokens: _Tokens) -> str:
    try:
        order = topological_sort(_directed(tokens))
    except CycleError:
        return "IMPOSSIBLE"
    return _spaced(v + 1 for v in order)


def _dijkstra(tokens: _Tokens) -> str:
    n, edges = _weighted(tokens)
    if n <= 0:
        raise ValueError("number of nodes must be positive")
    dist = dijkstra(weighted_graph(n, edges), 0)
    return _spaced(_UNREACHABLE if d == math.inf else int(d) for d in dist) + "\n"


def _floyd(tokens: _Tokens) -> str:
    n, m, q = tokens.numbers(3)
    dist = floyd_warshall(n, tokens.edges(m, 3))
    lines = []
    for a, b in tokens.edges(q, 2):
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"invalid query ({a + 1}, {b + 1})")
        d = dist[a][b]
        lines.append("-1" if d == math.inf else str(int(d)))
    return "".join(f"{line}\n" for line in lines)


def _flight_discount(tokens: _Tokens) -> str:
    price = flight_discount(*_weighted(tokens))
    return str(_UNREACHABLE if price is None else price)


def _bellman_ford(tokens: _Tokens) -> str:
    try:
        dist = bellman_ford(*_weighted(tokens))
    except NegativeCycleError:
        return "negative cycle detected\n"
    return _spaced("INF" if d == math.inf else int(d) for d in dist)


def _high_score(tokens: _Tokens) -> str:
    score = high_score(*_weighted(tokens))
    if score is None:
        return "-1"
    return str(-_UNREACHABLE if score == -math.inf else int(score))


def _cycle_finding(tokens: _Tokens) -> str:
    cycle = find_negative_cycle(*_weighted(tokens))
    if cycle is None:
        return "NO\n"
    return "YES\n" + _spaced(v + 1 for v in cycle) + "\n"


def _flight_routes(tokens: _Tokens) -> str:
    n, m, k = tokens.numbers(3)
    return _spaced(k_cheapest_routes(n, tokens.edges(m, 3), k))


def _investigation(tokens: _Tokens) -> str:
    stats = investigate(*_weighted(tokens))
    if stats is None:
        return f"{_UNREACHABLE} 0 {_INT_MAX} {_INT_MIN}\n"
    return f"{stats.price} {stats.routes} {stats.min_flights} {stats.max_flights}\n"


PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "basics": _basics,
    "dfs-bfs": _dfs_bfs,
    "rooms": lambda t: str(count_rooms(t.grid())),
    "components": _components,
    "labyrinth": _labyrinth,
    "roads": _roads,
    "message-route": lambda t: _counted_route(message_route(_undirected(t))),
    "bipartite-bfs": _bipartite(is_bipartite_bfs),
    "teams": _teams,
    "bipartite-dfs": _bipartite(is_bipartite_dfs),
    "cycle-bfs": _cycle_bfs,
    "round-trip": lambda t: _counted_route(find_undirected_cycle(_undirected(t))),
    "monsters": _monsters,
    "dijkstra": _dijkstra,
    "shortest-route": lambda t: _counted_route(shortest_route(*_weighted(t)), "\n"),
    "floyd-warshall": _floyd,
    "flight-discount": _flight_discount,
    "bellman-ford": _bellman_ford,
    "high-score": _high_score,
    "cycle-finding": _cycle_finding,
    "flight-routes": _flight_routes,
    "round-trip-2": lambda t: _counted_route(find_directed_cycle(_directed(t))),
    "topological-sort": _topological,
    "longest-route": lambda t: _counted_route(longest_route(*_unweighted(t)), "\n"),
    "game-routes": lambda t: f"{count_routes(*_unweighted(t))}\n",
    "investigation": _investigation,
}


def run(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return the output."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return handler(_Tokens(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the graphwalk command."""
    parser = argparse.ArgumentParser(
        prog="graphwalk", description="Solve a graph problem read from a file or stdin."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    try:
        output = run(args.problem, text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(output if output.endswith("\n") else output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
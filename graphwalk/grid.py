"""Searches on character grids: rooms, labyrinth paths and monster escapes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Grid = Sequence[str]
Cell = tuple[int, int]

FREE = "."
START = "A"
GOAL = "B"
MONSTER = "M"

_MOVES = (("L", 0, -1), ("R", 0, 1), ("U", -1, 0), ("D", 1, 0))

# Maps each reached cell to the cell it was entered from and the move taken.
_Trail = dict[Cell, "tuple[Cell, str] | None"]


def parse_grid(lines: Iterable[str] | str) -> list[str]:
    """Rows of a grid, with whitespace removed and blank lines skipped."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    rows = ["".join(line.split()) for line in lines]
    rows = [row for row in rows if row]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _neighbours(grid: Grid, row: int, col: int) -> Iterator[tuple[str, int, int]]:
    for move, dr, dc in _MOVES:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
            yield move, r, c


def _locate(grid: Grid, mark: str) -> Cell:
    for r, row in enumerate(grid):
        c = row.find(mark)
        if c != -1:
            return r, c
    raise ValueError(f"grid has no {mark!r} cell")


def _trace(trail: _Trail, cell: Cell) -> str:
    moves = []
    step = trail[cell]
    while step is not None:
        cell, move = step
        moves.append(move)
        step = trail[cell]
    moves.reverse()
    return "".join(moves)


def count_rooms(grid: Grid) -> int:
    """Number of connected regions of free cells."""
    seen: set[Cell] = set()
    rooms = 0
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch != FREE or (r, c) in seen:
                continue
            rooms += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for _, nr, nc in _neighbours(grid, cr, cc):
                    if grid[nr][nc] == FREE and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return rooms


def labyrinth_path(grid: Grid) -> str | None:
    """Shortest move string (L, R, U, D) from A to B over free cells, or None."""
    start = _locate(grid, START)
    trail: _Trail = {start: None}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        if grid[row][col] == GOAL:
            return _trace(trail, (row, col))
        for move, nr, nc in _neighbours(grid, row, col):
            if grid[nr][nc] in (FREE, GOAL) and (nr, nc) not in trail:
                trail[(nr, nc)] = ((row, col), move)
                queue.append((nr, nc))
    return None


def monster_distances(grid: Grid) -> list[list[int | None]]:
    """Steps from the nearest monster to every cell, None where none can reach."""
    dist: list[list[int | None]] = [[None] * len(row) for row in grid]
    queue: deque[Cell] = deque()
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch == MONSTER:
                dist[r][c] = 0
                queue.append((r, c))
    while queue:
        row, col = queue.popleft()
        here = dist[row][col]
        assert here is not None
        for _, nr, nc in _neighbours(grid, row, col):
            if grid[nr][nc] == FREE and dist[nr][nc] is None:
                dist[nr][nc] = here + 1
                queue.append((nr, nc))
    return dist


def escape_monsters(grid: Grid) -> str | None:
    """Moves taking A to the border before any monster gets there, or None."""
    start = _locate(grid, START)
    rows = len(grid)
    cols = len(grid[0])

    def on_border(cell: Cell) -> bool:
        r, c = cell
        return r in (0, rows - 1) or c in (0, cols - 1)

    if on_border(start):
        return ""

    danger = monster_distances(grid)
    trail: _Trail = {start: None}
    queue = deque([(start, 0)])
    while queue:
        cell, steps = queue.popleft()
        row, col = cell
        if on_border(cell) and grid[row][col] == FREE:
            threat = danger[row][col]
            if threat is None or steps < threat:
                return _trace(trail, cell)
        for move, nr, nc in _neighbours(grid, row, col):
            if grid[nr][nc] == FREE and (nr, nc) not in trail:
                trail[(nr, nc)] = (cell, move)
                queue.append(((nr, nc), steps + 1))
    return None
"""Depth- and breadth-first searches on grids and graphs: knight moves, paths, islands, tours."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

KNIGHT_MOVES = ((1, 2), (1, -2), (2, 1), (2, -1), (-2, 1), (-2, -1), (-1, 2), (-1, -2))
_NEIGHBOURS = ((0, 1), (0, -1), (-1, 0), (1, 0))

Grid = Sequence[Sequence[Any]]


def knight_distances(rows: int, cols: int, x: int, y: int) -> list[list[int]]:
    """Fewest knight moves from square (x, y) to every square; -1 where unreachable.

    Squares are numbered from 1; the result is indexed from 0, so
    ``result[i - 1][j - 1]`` is the distance to square (i, j).
    """
    if rows < 1 or cols < 1:
        raise ValueError("board dimensions must be positive")
    if not (1 <= x <= rows and 1 <= y <= cols):
        raise ValueError(f"start square ({x}, {y}) is off the board")
    distances = [[-1] * cols for _ in range(rows)]
    distances[x - 1][y - 1] = 0
    queue = deque([(x - 1, y - 1)])
    while queue:
        cx, cy = queue.popleft()
        for dx, dy in KNIGHT_MOVES:
            nx, ny = cx + dx, cy + dy
            if 0 <= nx < rows and 0 <= ny < cols and distances[nx][ny] == -1:
                distances[nx][ny] = distances[cx][cy] + 1
                queue.append((nx, ny))
    return distances


def all_paths(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Every path from node 1 to node n, following edges in the order given."""
    if n < 1:
        raise ValueError("the graph must have at least one node")
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for source, target in edges:
        if not (1 <= source <= n and 1 <= target <= n):
            raise ValueError(f"edge ({source}, {target}) names a node outside 1..{n}")
        graph[source].append(target)

    paths: list[list[int]] = []
    path = [1]

    def visit(node: int) -> None:
        if node == n:
            paths.append(list(path))
            return
        for nxt in graph[node]:
            if nxt in path:
                continue
            path.append(nxt)
            visit(nxt)
            path.pop()

    visit(1)
    return paths


def _is_land(cell: Any) -> bool:
    return cell == 1 or cell == "1"


def _check_grid(grid: Grid) -> tuple[int, int]:
    height = len(grid)
    width = len(grid[0]) if height else 0
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    return height, width


def _neighbours(x: int, y: int, height: int, width: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _NEIGHBOURS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < height and 0 <= ny < width:
            yield nx, ny


def _flood_dfs(grid: Grid, visited: list[list[bool]], x: int, y: int) -> int:
    height, width = len(grid), len(grid[0])
    visited[x][y] = True
    stack = [(x, y)]
    area = 0
    while stack:
        cx, cy = stack.pop()
        area += 1
        for nx, ny in _neighbours(cx, cy, height, width):
            if not visited[nx][ny] and _is_land(grid[nx][ny]):
                visited[nx][ny] = True
                stack.append((nx, ny))
    return area


def _flood_bfs(grid: Grid, visited: list[list[bool]], x: int, y: int) -> int:
    height, width = len(grid), len(grid[0])
    visited[x][y] = True
    queue = deque([(x, y)])
    area = 0
    while queue:
        cx, cy = queue.popleft()
        area += 1
        for nx, ny in _neighbours(cx, cy, height, width):
            if not visited[nx][ny] and _is_land(grid[nx][ny]):
                visited[nx][ny] = True
                queue.append((nx, ny))
    return area


def _island_areas(grid: Grid, flood) -> list[int]:
    height, width = _check_grid(grid)
    visited = [[False] * width for _ in range(height)]
    areas = []
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if not visited[i][j] and _is_land(cell):
                areas.append(flood(grid, visited, i, j))
    return areas


def count_islands(grid: Grid) -> int:
    """Number of 4-connected groups of land cells (1 or "1"), found depth first."""
    return len(_island_areas(grid, _flood_dfs))


def count_islands_bfs(grid: Grid) -> int:
    """Number of 4-connected groups of land cells, found breadth first."""
    return len(_island_areas(grid, _flood_bfs))


def max_island_area(grid: Grid) -> int:
    """Size of the largest island, found depth first; 0 when there is no land."""
    return max(_island_areas(grid, _flood_dfs), default=0)


def max_island_area_bfs(grid: Grid) -> int:
    """Size of the largest island, found breadth first; 0 when there is no land."""
    return max(_island_areas(grid, _flood_bfs), default=0)


def knight_tours(
    rows: int, cols: int, x: int, y: int, first_only: bool = False
) -> Iterator[list[list[int]]]:
    """Yield knight's tours from square (x, y), zero-based, as boards of step numbers.

    Moves are tried in order of fewest onward moves first. With ``first_only``
    the search stops after the first tour.
    """
    if rows < 1 or cols < 1:
        raise ValueError("board dimensions must be positive")
    if not (0 <= x < rows and 0 <= y < cols):
        raise ValueError(f"start square ({x}, {y}) is off the board")
    total = rows * cols
    board = [[0] * cols for _ in range(rows)]

    def inside(px: int, py: int) -> bool:
        return 0 <= px < rows and 0 <= py < cols

    def onward(px: int, py: int) -> int:
        if not inside(px, py) or board[px][py]:
            return 0
        return sum(
            1
            for dx, dy in KNIGHT_MOVES
            if inside(px + dx, py + dy) and not board[px + dx][py + dy]
        )

    def search(px: int, py: int, step: int) -> Iterator[list[list[int]]]:
        board[px][py] = step
        if step >= total:
            yield [list(row) for row in board]
            board[px][py] = 0
            return
        moves = sorted(KNIGHT_MOVES, key=lambda move: onward(px + move[0], py + move[1]))
        for dx, dy in moves:
            nx, ny = px + dx, py + dy
            if inside(nx, ny) and not board[nx][ny]:
                yield from search(nx, ny, step + 1)
        board[px][py] = 0

    for tour in search(x, y, 1):
        yield tour
        if first_only:
            return
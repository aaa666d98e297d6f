"""Connectivity, spanning-tree and shortest-path queries on small graphs.

Vertices are numbered from 1 to ``n``. Edges are undirected.
"""

import heapq
from collections.abc import Iterable, Sequence

__all__ = [
    "count_components",
    "is_connected",
    "minimum_spanning_weight",
    "shortest_paths",
    "all_pairs_shortest_paths",
]

NO_PATH = -1


def _check_vertex_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"vertex count must be non-negative, got {n}")


def _check_vertex(n: int, vertex: int) -> None:
    if not 1 <= vertex <= n:
        raise ValueError(f"vertex {vertex} is outside 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    _check_vertex_count(n)
    adjacency: dict[int, list[int]] = {vertex: [] for vertex in range(1, n + 1)}
    for u, v in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _weighted_adjacency(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> dict[int, list[tuple[int, int]]]:
    _check_vertex_count(n)
    adjacency: dict[int, list[tuple[int, int]]] = {vertex: [] for vertex in range(1, n + 1)}
    for u, v, weight in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    return adjacency


def _reachable(adjacency: dict[int, list[int]], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        for neighbour in adjacency[stack.pop()]:
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return seen


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of connected components among vertices 1..n.

    Raises:
        ValueError: if an edge names a vertex outside 1..n.
    """
    adjacency = _adjacency(n, edges)
    visited: set[int] = set()
    components = 0
    for vertex in adjacency:
        if vertex not in visited:
            components += 1
            visited |= _reachable(adjacency, vertex)
    return components


def is_connected(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Return whether every vertex 1..n is reachable from vertex 1.

    Edges naming a vertex outside 1..n are ignored. A graph with no
    vertices counts as connected.
    """
    _check_vertex_count(n)
    if n == 0:
        return True
    kept = [(u, v) for u, v in edges if 1 <= u <= n and 1 <= v <= n]
    return len(_reachable(_adjacency(n, kept), 1)) == n


def minimum_spanning_weight(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the total weight of a minimum spanning tree grown from vertex 1.

    If the graph is disconnected, only the component holding vertex 1 is
    spanned.

    Raises:
        ValueError: if an edge names a vertex outside 1..n.
    """
    adjacency = _weighted_adjacency(n, edges)
    if n == 0:
        return 0
    in_tree: set[int] = set()
    frontier = [(0, 1)]
    total = 0
    while frontier and len(in_tree) < n:
        weight, vertex = heapq.heappop(frontier)
        if vertex in in_tree:
            continue
        in_tree.add(vertex)
        total += weight
        for neighbour, edge_weight in adjacency[vertex]:
            if neighbour not in in_tree:
                heapq.heappush(frontier, (edge_weight, neighbour))
    return total


def shortest_paths(
    n: int, edges: Iterable[tuple[int, int, int]], source: int
) -> list[int | None]:
    """Return the shortest distance from ``source`` to each vertex 1..n.

    Element ``i`` of the result belongs to vertex ``i + 1``; it is ``None``
    when that vertex cannot be reached. Weights must be non-negative.

    Raises:
        ValueError: if ``source`` or an edge names a vertex outside 1..n.
    """
    adjacency = _weighted_adjacency(n, edges)
    _check_vertex(n, source)
    distance: dict[int, int] = {source: 0}
    queue = [(0, source)]
    while queue:
        dist, vertex = heapq.heappop(queue)
        if dist > distance[vertex]:
            continue
        for neighbour, weight in adjacency[vertex]:
            candidate = dist + weight
            if neighbour not in distance or candidate < distance[neighbour]:
                distance[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))
    return [distance.get(vertex) for vertex in range(1, n + 1)]


def all_pairs_shortest_paths(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return all-pairs shortest distances for a weight matrix.

    ``-1`` marks a missing edge in the input and an unreachable pair in the
    output. The diagonal is always taken as zero.

    Raises:
        ValueError: if the matrix is not square.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("weight matrix must be square")
    dist: list[list[int | None]] = [
        [0 if i == j else (None if weight == NO_PATH else weight) for j, weight in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    for k in range(size):
        through = dist[k]
        for row in dist:
            to_k = row[k]
            if to_k is None:
                continue
            for j, from_k in enumerate(through):
                if from_k is None:
                    continue
                candidate = to_k + from_k
                if row[j] is None or candidate < row[j]:
                    row[j] = candidate
    return [[NO_PATH if value is None else value for value in row] for row in dist]
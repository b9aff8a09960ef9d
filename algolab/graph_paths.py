"""Shortest paths and topological orders on directed graphs with vertices 0..n-1."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence

Adjacency = Sequence[Sequence[int]]
WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


def _check_source(count: int, source: int) -> None:
    if not 0 <= source < count:
        raise ValueError("source vertex out of range")


def _finish(distances: list[float]) -> list[int]:
    return [-1 if d == math.inf else int(d) for d in distances]


def dijkstra(adjacency: WeightedAdjacency, source: int) -> list[int]:
    """Return shortest distances from source over non-negative weights; -1 if unreachable."""
    _check_source(len(adjacency), source)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = d + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return _finish(dist)


def topo_sort_kahn(adjacency: Adjacency) -> list[int]:
    """Return a topological order by repeatedly removing vertices of in-degree zero.

    Vertices on a cycle are never freed, so for a cyclic graph the order is short.
    """
    indegree = [0] * len(adjacency)
    for neighbours in adjacency:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(vertex for vertex, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def topo_sort_dfs(adjacency: Adjacency) -> list[int]:
    """Return a topological order as the reverse of depth-first finishing order."""
    visited: set[int] = set()
    finished: list[int] = []
    for root in range(len(adjacency)):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished[::-1]


def dag_shortest_paths(adjacency: WeightedAdjacency, source: int) -> list[int]:
    """Return shortest distances in a weighted DAG by relaxing in topological order."""
    _check_source(len(adjacency), source)
    order = topo_sort_kahn([[neighbour for neighbour, _ in edges] for edges in adjacency])
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    for vertex in order:
        if dist[vertex] == math.inf:
            continue
        for neighbour, weight in adjacency[vertex]:
            dist[neighbour] = min(dist[neighbour], dist[vertex] + weight)
    return _finish(dist)


def unit_shortest_paths(adjacency: Adjacency, source: int) -> list[int]:
    """Return edge counts of shortest paths from source; -1 if unreachable."""
    _check_source(len(adjacency), source)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency[node]:
            if dist[neighbour] == math.inf:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return _finish(dist)
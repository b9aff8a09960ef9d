"""Undirected graph construction, traversal and cycle detection.

Traversals built by build_adjacency use vertices numbered from 1, with the
list entry at index 0 left unused. Cycle detection treats every index of the
adjacency list, starting at 0, as a vertex.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Adjacency = Sequence[Sequence[int]]


def build_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return adjacency lists for vertices 1..n of an undirected graph."""
    if n < 0:
        raise ValueError("vertex count must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def format_adjacency(adjacency: Adjacency) -> str:
    """Return one line 'i: neighbours ' per vertex from 1 onwards."""
    return "".join(
        f"{vertex}: " + "".join(f"{neighbour} " for neighbour in neighbours) + "\n"
        for vertex, neighbours in enumerate(adjacency[1:], start=1)
    )


def bfs(adjacency: Adjacency) -> list[int]:
    """Return the breadth-first order of the vertices reachable from vertex 1."""
    if len(adjacency) < 2:
        raise ValueError("graph has no vertex 1")
    visited = {1}
    queue = deque([1])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Adjacency) -> list[int]:
    """Return a depth-first order covering every vertex 1..n, component by component."""
    visited: set[int] = set()
    order: list[int] = []
    for start in range(1, len(adjacency)):
        if start in visited:
            continue
        visited.add(start)
        stack = [start]
        while stack:
            node = stack.pop()
            order.append(node)
            for neighbour in reversed(adjacency[node]):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
    return order


def dfs_recursive(adjacency: Adjacency, start: int) -> list[int]:
    """Return the depth-first preorder of the vertices reachable from start."""
    if not 0 <= start < len(adjacency):
        raise ValueError("start vertex out of range")
    visited = {start}
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(adjacency[neighbour]))
                break
        else:
            stack.pop()
    return order


def _bfs_finds_cycle(adjacency: Adjacency, source: int, visited: set[int]) -> bool:
    visited.add(source)
    queue = deque([(source, -1)])
    while queue:
        node, parent = queue.popleft()
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append((neighbour, node))
            elif neighbour != parent:
                return True
    return False


def has_cycle_bfs(adjacency: Adjacency) -> bool:
    """Return True when the undirected graph holds a cycle, using breadth-first search."""
    visited: set[int] = set()
    return any(
        vertex not in visited and _bfs_finds_cycle(adjacency, vertex, visited)
        for vertex in range(len(adjacency))
    )


def has_cycle_dfs(adjacency: Adjacency) -> bool:
    """Return True when the undirected graph holds a cycle, using depth-first search."""
    visited: set[int] = set()
    for root in range(len(adjacency)):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, -1, iter(adjacency[root]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append((neighbour, node, iter(adjacency[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False
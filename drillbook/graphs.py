"""Graph and tree exercises on vertices numbered 1..n."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto
from typing import Iterable

Edge = tuple[int, int]


class _State(Enum):
    UNSEEN = auto()
    ACTIVE = auto()
    DONE = auto()


def _adjacency(n: int, edges: Iterable[Edge], *, directed: bool = False) -> list[list[int]]:
    """Build adjacency lists indexed by vertex; index 0 is unused."""
    if n < 0:
        raise ValueError("the number of vertices cannot be negative")
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} is outside 1..{n}")
        graph[u].append(v)
        if not directed:
            graph[v].append(u)
    return graph


def _bfs_distances(graph: list[list[int]], start: int) -> dict[int, int]:
    """Return the edge distance from ``start`` to every reachable vertex."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for child in graph[current]:
            if child not in distances:
                distances[child] = distances[current] + 1
                queue.append(child)
    return distances


def _tree_adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    edge_list = list(edges)
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    if len(edge_list) != n - 1:
        raise ValueError(f"a tree on {n} vertices has {n - 1} edges, got {len(edge_list)}")
    graph = _adjacency(n, edge_list)
    if len(_bfs_distances(graph, 1)) != n:
        raise ValueError("the edges do not form a connected tree")
    return graph


def count_connected_components(n: int, edges: Iterable[Edge]) -> int:
    """Return the number of connected components of an undirected graph."""
    graph = _adjacency(n, edges)
    seen: set[int] = set()
    components = 0
    for root in range(1, n + 1):
        if root in seen:
            continue
        components += 1
        seen.add(root)
        stack = [root]
        while stack:
            for neighbour in graph[stack.pop()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    return components


def has_cycle_undirected(n: int, edges: Iterable[Edge]) -> bool:
    """Return whether the component of vertex 1 contains a cycle.

    A neighbour that is already visited and is not the parent closes a cycle;
    repeated edges to the parent therefore do not count as one.
    """
    graph = _adjacency(n, edges)
    if n < 1:
        return False
    visited = {1}
    stack: list[tuple[int, int]] = [(1, 0)]
    while stack:
        vertex, parent = stack.pop()
        for neighbour in graph[vertex]:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append((neighbour, vertex))
            elif neighbour != parent:
                return True
    return False


def has_cycle_directed(n: int, edges: Iterable[Edge]) -> bool:
    """Return whether a directed graph contains a cycle."""
    graph = _adjacency(n, edges, directed=True)
    state = [_State.UNSEEN] * (n + 1)
    for root in range(1, n + 1):
        if state[root] is not _State.UNSEEN:
            continue
        state[root] = _State.ACTIVE
        stack = [(root, iter(graph[root]))]
        while stack:
            vertex, children = stack[-1]
            child = next(children, None)
            if child is None:
                state[vertex] = _State.DONE
                stack.pop()
            elif state[child] is _State.ACTIVE:
                return True
            elif state[child] is _State.UNSEEN:
                state[child] = _State.ACTIVE
                stack.append((child, iter(graph[child])))
    return False


def shortest_path_length(n: int, edges: Iterable[Edge]) -> int | None:
    """Return the fewest edges from vertex 1 to vertex ``n``, or None if unreachable."""
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    graph = _adjacency(n, edges)
    return _bfs_distances(graph, 1).get(n)


def tree_diameter(n: int, edges: Iterable[Edge]) -> int:
    """Return the number of edges on the longest path of a tree."""
    graph = _tree_adjacency(n, edges)
    from_root = _bfs_distances(graph, 1)
    far_end = max(from_root, key=from_root.__getitem__)
    return max(_bfs_distances(graph, far_end).values())


def tree_depths(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return the depth of vertices 1..n in a tree rooted at vertex 1."""
    graph = _tree_adjacency(n, edges)
    distances = _bfs_distances(graph, 1)
    return [distances[vertex] for vertex in range(1, n + 1)]


def subtree_sizes(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return the subtree size of vertices 1..n in a tree rooted at vertex 1."""
    graph = _tree_adjacency(n, edges)
    parent = {1: 0}
    order = [1]
    for vertex in order:
        for child in graph[vertex]:
            if child not in parent:
                parent[child] = vertex
                order.append(child)
    sizes = [1] * (n + 1)
    for vertex in reversed(order[1:]):
        sizes[parent[vertex]] += sizes[vertex]
    return sizes[1:]
"""Depth-first and breadth-first traversals of small undirected graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Callable, Iterable, Sequence


def _preorder(start: int, neighbours: Callable[[int], Iterable[int]]) -> list[int]:
    """Visit order of a recursive depth-first search, computed without recursion."""
    order = [start]
    visited = {start}
    stack = [iter(neighbours(start))]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(neighbours(nxt)))
                break
        else:
            stack.pop()
    return order


def _level_order(start: int, neighbours: Callable[[int], Iterable[int]]) -> list[int]:
    order = [start]
    visited = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in neighbours(node):
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                queue.append(nxt)
    return order


def _numbered_neighbours(
    node_count: int, edges: Iterable[tuple[int, int]]
) -> Callable[[int], list[int]]:
    """Neighbour lookup for nodes numbered 1..node_count, smallest number first."""
    links: defaultdict[int, set[int]] = defaultdict(set)
    for a, b in edges:
        links[a].add(b)
        links[b].add(a)

    def neighbours(node: int) -> list[int]:
        return sorted(n for n in links.get(node, ()) if 1 <= n <= node_count)

    return neighbours


def infected_count(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return how many computers other than computer 1 are reachable from it."""
    return len(_preorder(1, _numbered_neighbours(node_count, edges))) - 1


def dfs_order(node_count: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Depth-first visit order from ``start``, trying smaller node numbers first."""
    return _preorder(start, _numbered_neighbours(node_count, edges))


def bfs_order(node_count: int, edges: Iterable[tuple[int, int]], start: int) -> list[int]:
    """Breadth-first visit order from ``start``, trying smaller node numbers first."""
    return _level_order(start, _numbered_neighbours(node_count, edges))


def adjacency_dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first visit order over an adjacency list, neighbours in listed order."""
    return _preorder(start, lambda node: graph[node])


def adjacency_bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first visit order over an adjacency list, neighbours in listed order."""
    return _level_order(start, lambda node: graph[node])


def return_distances(
    n: int,
    roads: Iterable[Sequence[int]],
    sources: Iterable[int],
    destination: int,
) -> list[int]:
    """Return the fewest roads from each source to ``destination``, -1 where unreachable.

    ``n`` is the number of regions; roads are undirected pairs of region numbers.
    """
    links: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in roads:
        links[a].append(b)
        links[b].append(a)

    distance = {destination: 0}
    queue = deque([destination])
    while queue:
        node = queue.popleft()
        for nxt in links[node]:
            if nxt not in distance:
                distance[nxt] = distance[node] + 1
                queue.append(nxt)
    return [distance.get(source, -1) for source in sources]
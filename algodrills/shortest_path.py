"""Cheapest network layouts: paid cable runs with free cables, and minimum bridges."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable, Sequence


def _fits_within(
    graph: dict[int, list[tuple[int, int]]],
    target: int,
    limit: int,
    free_count: int,
) -> bool:
    """Whether node ``target`` is reachable from 1 using at most ``free_count`` cables above ``limit``."""
    best = {1: 0}
    heap = [(0, 1)]
    while heap:
        used, node = heapq.heappop(heap)
        if used > best.get(node, math.inf):
            continue
        for nxt, price in graph[node]:
            candidate = used + (price > limit)
            if candidate < best.get(nxt, math.inf):
                best[nxt] = candidate
                heapq.heappush(heap, (candidate, nxt))
    return best.get(target, math.inf) <= free_count


def min_install_cost(n: int, cables: Iterable[Sequence[int]], free_count: int) -> int:
    """Return the lowest price of the dearest paid cable linking node 1 to node ``n``.

    ``cables`` holds ``(u, v, price)`` triples; up to ``free_count`` cables on the path
    are free. Returns -1 when node ``n`` cannot be reached.
    """
    graph: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    highest = 0
    for u, v, price in cables:
        graph[u].append((v, price))
        graph[v].append((u, price))
        highest = max(highest, price)

    answer = -1
    low, high = 0, highest
    while low <= high:
        mid = (low + high) // 2
        if _fits_within(graph, n, mid, free_count):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def min_bridge_cost(n: int, costs: Iterable[Sequence[int]]) -> int:
    """Return the total cost of the cheapest bridges joining islands ``0..n-1``.

    ``costs`` holds ``(a, b, cost)`` triples.
    """
    parent = list(range(n))

    def root(node: int) -> int:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    total = 0
    for a, b, cost in sorted(costs, key=lambda bridge: bridge[2]):
        start, end = root(a), root(b)
        if start != end:
            total += cost
            parent[end] = start
    return total
"""Short demonstrations of containers, sorting and graph representations."""

from __future__ import annotations

import argparse
import heapq
import random
import string
from collections import deque
from collections.abc import Sequence

_SORT_SAMPLE = (9, 3, 5, 4, 1, 10, 8, 6, 7, 2)


def container_demo() -> str:
    """Store one labelled pair in each common container and show it back."""
    lines = []

    pair = (1, "pair")
    lines.append(f"{pair[0]}. {pair[1]}")

    vector = [(2, ". vector")]
    lines.append(f"{vector[0][0]}{vector[-1][1]}")

    queue = deque([(3, ". queue")])
    lines.append(f"{queue[0][0]}{queue[-1][1]}")
    queue.popleft()

    double_ended: deque[tuple[int, str]] = deque()
    double_ended.appendleft((4, ". dequeue"))
    lines.append(f"{double_ended[0][0]}{double_ended[-1][1]}")
    double_ended.pop()

    # Smallest magnitude first, ties broken by the smaller number.
    heap: list[tuple[int, int, str]] = []
    heapq.heappush(heap, (abs(5), 5, ". priority_queue"))
    _, number, label = heap[0]
    lines.append(f"{number}{label}")

    stack = [(6, ". stack")]
    lines.append(f"{stack[-1][0]}{stack[-1][1]}")
    stack.pop()

    unique = {(7, ". set")}
    lines.extend(f"{number}{label}" for number, label in sorted(unique))

    mapping = {8: ". map"}
    lines.extend(f"{key}{mapping[key]}" for key in sorted(mapping))

    return "\n".join(lines) + "\n"


def sort_demo() -> str:
    """Sort a fixed sample descending, then ascending, one line each."""
    descending = sorted(_SORT_SAMPLE, reverse=True)
    ascending = sorted(descending)
    return "".join(
        "".join(f"{value} " for value in row) + "\n" for row in (descending, ascending)
    )


def random_matrix(size: int, rng: random.Random | None = None) -> list[list[int]]:
    """Build a random weighted adjacency matrix with weights 0..5 and a zero diagonal.

    A weight is mirrored from the already chosen opposite entry unless that entry is
    zero, in which case a fresh weight is drawn.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if rng is None:
        rng = random.Random()
    matrix = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(size):
            if i == j:
                continue
            if matrix[i][j] == matrix[j][i]:
                matrix[i][j] = rng.randrange(6)
            else:
                matrix[i][j] = matrix[j][i]
    return matrix


def graph_representations(
    matrix: Sequence[Sequence[int]],
) -> tuple[list[list[int]], list[list[tuple[int, int]]]]:
    """Return the adjacency lists and weighted adjacency lists of a weight matrix.

    An edge exists where the weight is positive.
    """
    weighted = [
        [(j, weight) for j, weight in enumerate(row) if weight > 0] for row in matrix
    ]
    adjacency = [[j for j, _ in row] for row in weighted]
    return adjacency, weighted


def _letter(index: int) -> str:
    return string.ascii_uppercase[index]


def _format_graph(matrix: Sequence[Sequence[int]]) -> str:
    adjacency, weighted = graph_representations(matrix)
    lines = ["1. 인접 행렬"]
    lines += [
        f"[{_letter(i)}] " + "".join(f"{weight} " for weight in row)
        for i, row in enumerate(matrix)
    ]
    lines += ["", "2. 인접 리스트"]
    lines += [
        f"[{_letter(i)}] " + "".join(f"{_letter(j)} " for j in row)
        for i, row in enumerate(adjacency)
    ]
    lines += ["", "3. 가중치 인접 리스트"]
    lines += [
        f"[{_letter(i)}] " + "".join(f"{_letter(j)}({w}) " for j, w in row)
        for i, row in enumerate(weighted)
    ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen demonstration."""
    parser = argparse.ArgumentParser(description="Container, sorting and graph demos.")
    parser.add_argument(
        "demo", nargs="?", choices=("containers", "sort", "graph", "all"), default="all"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random graph")
    parser.add_argument("--size", type=int, default=5, help="number of graph vertices")
    args = parser.parse_args(argv)
    if not 0 <= args.size <= len(string.ascii_uppercase):
        parser.error("size must be between 0 and 26")

    if args.demo in ("containers", "all"):
        print(container_demo(), end="")
    if args.demo in ("sort", "all"):
        print(sort_demo(), end="")
    if args.demo in ("graph", "all"):
        matrix = random_matrix(args.size, random.Random(args.seed))
        print(_format_graph(matrix), end="")
    return 0
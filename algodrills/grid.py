"""Grid walks: spreading ripeness through a box and finding an escape route in a maze."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

RIPE = 1
UNRIPE = 0
EMPTY = -1

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def ripening_days(grid: Sequence[Sequence[int]]) -> int:
    """Return how many days it takes every unripe cell to ripen, or -1 if some never do.

    Cells hold ``1`` (ripe), ``0`` (unripe) or ``-1`` (empty). Each day ripeness spreads
    to the four neighbouring cells. An empty grid gives -1.
    """
    rows = [list(row) for row in grid]
    height = len(rows)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")

    days = [[0] * width for _ in rows]
    queue = deque(
        (y, x) for y, row in enumerate(rows) for x, cell in enumerate(row) if cell == RIPE
    )
    while queue:
        y, x = queue.popleft()
        for dy, dx in _STEPS:
            ny, nx = y + dy, x + dx
            if 0 <= ny < height and 0 <= nx < width:
                if rows[ny][nx] == UNRIPE and not days[ny][nx]:
                    days[ny][nx] = days[y][x] + 1
                    queue.append((ny, nx))

    for row, day_row in zip(rows, days):
        if any(cell == UNRIPE and day == 0 for cell, day in zip(row, day_row)):
            return -1
    return max((day for day_row in days for day in day_row), default=-1)


def _distance(x: int, y: int, r: int, c: int) -> int:
    return abs(x - r) + abs(y - c)


def escape_route(n: int, m: int, y: int, x: int, c: int, r: int, k: int) -> str:
    """Return the alphabetically first route of exactly ``k`` moves to the exit.

    The maze has ``n`` rows and ``m`` columns, both counted from 1. The walk starts in
    row ``y``, column ``x`` and ends in row ``c``, column ``r``. Moves are written as
    ``d``, ``l``, ``r`` and ``u``; ``"impossible"`` is returned when no route exists.
    """
    moves: list[str] = []
    while k > 0:
        k -= 1
        if y < n and _distance(x, y + 1, r, c) <= k:
            moves.append("d")
            y += 1
        elif x > 1 and _distance(x - 1, y, r, c) <= k:
            moves.append("l")
            x -= 1
        elif x < m and _distance(x + 1, y, r, c) <= k:
            moves.append("r")
            x += 1
        elif y > 1 and _distance(x, y - 1, r, c) <= k:
            moves.append("u")
            y -= 1
        elif k == 0:
            return "impossible"
    return "".join(moves)
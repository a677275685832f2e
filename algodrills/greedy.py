"""Greedy exercises: supervisors, book runs, cards, coins, meetings, sums and segments."""

from __future__ import annotations

import bisect
import itertools
import re
from collections import deque
from collections.abc import Iterable


def supervisor_count(rooms: Iterable[int], chief: int, assistant: int) -> int:
    """Return the fewest supervisors needed for the exam rooms.

    Every room gets one chief supervisor watching ``chief`` candidates; the rest are
    covered by assistants who watch ``assistant`` candidates each.
    """
    if chief <= 0 or assistant <= 0:
        raise ValueError("supervisors must watch at least one candidate")
    total = 0
    for candidates in rooms:
        total += 1
        left = candidates - chief
        if left > 0:
            total += -(-left // assistant)
    return total


def book_walk(positions: Iterable[int], capacity: int) -> int:
    """Return the shortest walk that shelves every book, starting at 0.

    At most ``capacity`` books are carried at once and the walk need not return to 0
    after the last trip.
    """
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    books = sorted(positions)
    if not books:
        raise ValueError("at least one book position is required")
    split = bisect.bisect_left(books, 0)
    negatives, positives = books[:split], books[split:]
    walk = sum(-2 * place for place in negatives[::capacity])
    walk += sum(2 * place for place in positives[::-1][::capacity])
    return walk - max(abs(books[0]), abs(books[-1]))


def card_string(text: str) -> str:
    """Lay the cards down one by one, each at the front or the back, smallest string first."""
    if not text:
        return ""
    cards = deque(text[0])
    for card in text[1:]:
        if cards[0] >= card:
            cards.appendleft(card)
        else:
            cards.append(card)
    return "".join(cards)


def coin_count(coins: Iterable[int], amount: int) -> int:
    """Return how many coins make up ``amount`` when the largest coin is always taken first."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    total = 0
    for coin in sorted(coins, reverse=True):
        if coin <= 0:
            raise ValueError("coin values must be positive")
        used, amount = divmod(amount, coin)
        total += used
    return total


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Return the most ``(start, end)`` meetings that one room can hold without overlap."""
    room_free_at = 0
    held = 0
    for start, end in sorted(meetings, key=lambda meeting: (meeting[1], meeting[0])):
        if room_free_at <= start:
            room_free_at = end
            held += 1
    return held


_OPERATOR = re.compile(r"([+-])")


def min_expression(expression: str) -> int:
    """Return the smallest value of a ``+``/``-`` expression once brackets are placed freely.

    Every number after the first minus sign is subtracted.
    """
    parts = _OPERATOR.split(expression)
    numbers = parts[0::2]
    for number in numbers:
        if not (number.isascii() and number.isdigit()):
            raise ValueError(f"malformed expression: {expression!r}")
    total = int(numbers[0])
    minus = False
    for operator, number in zip(parts[1::2], numbers[1:]):
        if operator == "-":
            minus = True
        total += -int(number) if minus else int(number)
    return total


def atm_wait(times: Iterable[int]) -> int:
    """Return the smallest total of waiting plus service times at a single ATM."""
    return sum(itertools.accumulate(sorted(times)))


def covered_length(segments: Iterable[tuple[int, int]]) -> int:
    """Return the total length covered by the union of the given segments."""
    spans = sorted((min(a, b), max(a, b)) for a, b in segments)
    if not spans:
        return 0
    total = 0
    start, end = spans[0]
    for left, right in spans[1:]:
        if end > left:
            end = max(end, right)
        else:
            total += end - start
            start, end = left, right
    return total + end - start
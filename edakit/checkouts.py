"""Which supermarket checkout a newcomer is sent to."""

from __future__ import annotations

from typing import Iterable

from edakit.priority_queue import PriorityQueue


def assigned_checkout(n: int, times: Iterable[int]) -> int:
    """Return the checkout (1-based) for the client arriving after ``times``.

    ``n`` checkouts are open and the clients already waiting need the given
    seconds each. Every client goes to the checkout that frees first, ties
    going to the lowest number.
    """
    if n < 1:
        raise ValueError("there must be at least one open checkout")
    waiting = list(times)
    if len(waiting) < n:
        return len(waiting) + 1
    queue = PriorityQueue(
        (seconds, number) for number, seconds in enumerate(waiting[:n], start=1)
    )
    for seconds in waiting[n:]:
        busy_until, number = queue.pop()
        queue.push((busy_until + seconds, number))
    return queue.top()[1]


def run(text: str) -> str:
    """Solve each ``n c`` case with ``c`` durations until ``0 0``."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        n = int(token)
        clients = int(next(tokens))
        if n == 0 and clients == 0:
            break
        times = [int(next(tokens)) for _ in range(clients)]
        out.append(f"{assigned_checkout(n, times)}\n")
    return "".join(out)
"""Detect overlapping tasks, single or periodic, within a time horizon."""

from __future__ import annotations

from typing import Iterable

from edakit.priority_queue import PriorityQueue

_Task = tuple[int, int, int]


def _ends_first(a: _Task, b: _Task) -> bool:
    return a[1] < b[1]


def has_conflict(
    single: Iterable[tuple[int, int]],
    periodic: Iterable[tuple[int, int, int]],
    horizon: int,
) -> bool:
    """Whether two tasks overlap before ``horizon``.

    ``single`` holds ``(start, end)`` pairs; ``periodic`` holds
    ``(start, end, period)`` triples that repeat every ``period``.
    Tasks are examined by increasing end time; the search stops as soon as
    a periodic task's next occurrence falls at or past the horizon.
    """
    queue: PriorityQueue[_Task] = PriorityQueue(before=_ends_first)
    for start, end in single:
        if start < horizon:
            queue.push((start, end, 0))
    for start, end, period in periodic:
        if start < horizon:
            queue.push((start, end, period))
    while queue:
        start, end, period = queue.pop()
        if not queue:
            break
        next_start = queue.top()[0]
        if end > next_start and start <= next_start:
            return True
        if period > 0:
            start += period
            end += period
            if start >= horizon:
                return False
            queue.push((start, end, period))
    return False


def run(text: str) -> str:
    """Answer SI/NO for each ``n m t`` case until the input ends."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        n = int(token)
        m = int(next(tokens))
        horizon = int(next(tokens))
        single = [(int(next(tokens)), int(next(tokens))) for _ in range(n)]
        periodic = [
            (int(next(tokens)), int(next(tokens)), int(next(tokens)))
            for _ in range(m)
        ]
        out.append("SI\n" if has_conflict(single, periodic, horizon) else "NO\n")
    return "".join(out)
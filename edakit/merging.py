"""Minimum total effort of repeatedly merging the two smallest values."""

from __future__ import annotations

from typing import Iterable

from edakit.priority_queue import PriorityQueue


def total_effort(values: Iterable[int]) -> int:
    """Merge the two smallest values until one is left; return the summed cost."""
    queue = PriorityQueue(values)
    effort = 0
    while len(queue) > 1:
        merged = queue.pop() + queue.pop()
        effort += merged
        if queue:
            queue.push(merged)
    return effort


def run(text: str) -> str:
    """Solve each ``n v1 .. vn`` case until a case with ``n == 0``."""
    tokens = iter(text.split())
    lines = []
    for token in tokens:
        count = int(token)
        if count == 0:
            break
        values = [int(next(tokens)) for _ in range(count)]
        lines.append(f"{total_effort(values)}\n")
    return "".join(lines)
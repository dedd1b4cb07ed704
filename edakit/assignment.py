"""Assign one job to each official so the total time is as small as possible."""

from __future__ import annotations

import heapq
import math
from itertools import count
from typing import Sequence


def min_assignment_time(times: Sequence[Sequence[int]]) -> int:
    """Least total time when official ``i`` doing job ``j`` takes ``times[i][j]``.

    Each official gets exactly one job and each job goes to exactly one
    official. Solved by branch and bound; the optimistic estimate adds, for
    every official still unassigned, the fastest time that official has.
    """
    rows = [list(row) for row in times]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("the time table must be square")
    if n == 0:
        return 0
    remaining = [0] * (n + 1)
    for i in reversed(range(n)):
        remaining[i] = remaining[i + 1] + min(rows[i])

    tie = count()
    heap: list[tuple[float, int, int, float, frozenset[int]]] = [
        (remaining[0], next(tie), 0, 0, frozenset())
    ]
    best: float = math.inf
    while heap and heap[0][0] < best:
        _, _, k, elapsed, used = heapq.heappop(heap)
        for job, cost in enumerate(rows[k]):
            if job in used:
                continue
            total = elapsed + cost
            estimate = total + remaining[k + 1]
            if estimate >= best:
                continue
            if k == n - 1:
                best = total
            else:
                heapq.heappush(heap, (estimate, next(tie), k + 1, total, used | {job}))
    return int(best)


def run(text: str) -> str:
    """Solve each ``N`` case with an ``N`` by ``N`` table until ``N == 0``."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        n = int(token)
        if n == 0:
            break
        table = [[int(next(tokens)) for _ in range(n)] for _ in range(n)]
        out.append(f"{min_assignment_time(table)}\n")
    return "".join(out)
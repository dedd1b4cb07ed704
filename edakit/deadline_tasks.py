"""Choose tasks to run before their deadlines, minimising penalties."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from itertools import count
from typing import Sequence


@dataclass(frozen=True)
class Task:
    """A task lasting ``duration``, due by ``deadline``, costing ``penalty`` if skipped."""

    duration: float
    deadline: float
    penalty: float


def schedule_tasks(tasks: Sequence[Task]) -> tuple[float, list[bool]]:
    """Return the least total penalty and, per task, whether it is done.

    Done tasks run back to back in order of deadline, each finishing in time.
    """
    n = len(tasks)
    if n == 0:
        return 0, []
    order = sorted(range(n), key=lambda i: tasks[i].deadline)
    ordered = [tasks[i] for i in order]

    def estimate(k: int, time: float, cost: float) -> float:
        return cost + sum(
            task.penalty for task in ordered[k + 1 :] if time + task.duration > task.deadline
        )

    tie = count()
    heap = [(estimate(-1, 0, 0), next(tie), -1, 0, 0, ())]
    best_cost = math.inf
    best_sol: tuple[bool, ...] = ()

    def offer(bound: float, k: int, time: float, cost: float, sol: tuple) -> None:
        nonlocal best_cost, best_sol
        if bound < best_cost:
            if k == n - 1:
                best_cost, best_sol = cost, sol
            else:
                heapq.heappush(heap, (bound, next(tie), k, time, cost, sol))

    while heap and heap[0][0] < best_cost:
        _, _, k, time, cost, sol = heapq.heappop(heap)
        k += 1
        task = ordered[k]
        if time + task.duration <= task.deadline:
            done_time = time + task.duration
            offer(estimate(k, done_time, cost), k, done_time, cost, sol + (True,))
        skipped = cost + task.penalty
        offer(estimate(k, time, skipped), k, time, skipped, sol + (False,))
    done = [False] * n
    for position, index in enumerate(order):
        done[index] = best_sol[position]
    return best_cost, done
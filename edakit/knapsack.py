"""0/1 knapsack solved by branch and bound with a fractional bound."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Sequence


@dataclass(frozen=True)
class Item:
    """An object of the given ``weight`` and ``value``."""

    weight: float
    value: float


def knapsack(items: Sequence[Item], capacity: float) -> tuple[float, list[bool]]:
    """Return the best total value and, per item, whether it is packed."""
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
    if any(item.weight <= 0 for item in items):
        raise ValueError("item weights must be positive")
    n = len(items)
    if n == 0:
        return 0, []
    order = sorted(range(n), key=lambda i: items[i].value / items[i].weight, reverse=True)
    ordered = [items[i] for i in order]

    def estimate(k: int, weight: float, value: float) -> float:
        room = capacity - weight
        bound = value
        i = k + 1
        while i < n and ordered[i].weight <= room:
            room -= ordered[i].weight
            bound += ordered[i].value
            i += 1
        if i < n:
            bound += room / ordered[i].weight * ordered[i].value
        return bound

    tie = count()
    heap = [(-estimate(-1, 0, 0), next(tie), -1, 0, 0, ())]
    best_value: float = -1
    best_sol: tuple[bool, ...] = ()
    while heap and -heap[0][0] > best_value:
        neg_bound, _, k, weight, value, sol = heapq.heappop(heap)
        k += 1
        item = ordered[k]
        last = k == n - 1
        if weight + item.weight <= capacity:
            taken = (weight + item.weight, value + item.value, sol + (True,))
            if last:
                if taken[1] > best_value:
                    best_value, best_sol = taken[1], taken[2]
            else:
                heapq.heappush(heap, (neg_bound, next(tie), k, *taken))
        bound = estimate(k, weight, value)
        if bound > best_value:
            if last:
                best_value, best_sol = value, sol + (False,)
            else:
                heapq.heappush(heap, (-bound, next(tie), k, weight, value, sol + (False,)))
    chosen = [False] * n
    for position, index in enumerate(order):
        chosen[index] = best_sol[position]
    return best_value, chosen
"""Food eaten by a cow sharing a row of buckets with a greedy rival."""

from __future__ import annotations

from typing import Sequence


def max_food(buckets: Sequence[int]) -> int:
    """Most food our cow can eat when picking first and playing optimally.

    Cows alternately take a bucket from either end of the row. The rival
    always takes the fuller end, the right one on a tie.
    """
    n = len(buckets)
    # best[i][k]: our best total on buckets[i:k] when it is our turn.
    best = [[0] * (n + 1) for _ in range(n + 1)]

    def after_rival(i: int, k: int) -> int:
        if i >= k:
            return 0
        if buckets[i] > buckets[k - 1]:
            return best[i + 1][k]
        return best[i][k - 1]

    for length in range(1, n + 1):
        for i in range(n - length + 1):
            k = i + length
            best[i][k] = max(
                buckets[i] + after_rival(i + 1, k),
                buckets[k - 1] + after_rival(i, k - 1),
            )
    return best[0][n]


def run(text: str) -> str:
    """Solve each ``n`` bucket case until a case with ``n == 0``."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        count = int(token)
        if count == 0:
            break
        buckets = [int(next(tokens)) for _ in range(count)]
        out.append(f"{max_food(buckets)}\n")
    return "".join(out)
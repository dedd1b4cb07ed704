"""Longest common subsequence of two strings."""

from __future__ import annotations


def longest_common_subsequence(x: str, y: str) -> str:
    """Return one longest common subsequence of ``x`` and ``y``.

    Ties are broken by advancing in ``x`` whenever that keeps the length.
    """
    n, m = len(x), len(y)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in reversed(range(n)):
        row, below = table[i], table[i + 1]
        for j in reversed(range(m)):
            if x[i] == y[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    common: list[str] = []
    i = j = 0
    while i < n and j < m:
        if x[i] == y[j]:
            common.append(x[i])
            i += 1
            j += 1
        elif table[i][j] == table[i + 1][j]:
            i += 1
        else:
            j += 1
    return "".join(common)


def run(text: str) -> str:
    """Print a longest common subsequence for each pair of words."""
    tokens = iter(text.split())
    out = []
    for first in tokens:
        try:
            second = next(tokens)
        except StopIteration:
            break
        out.append(f"{longest_common_subsequence(first, second)}\n")
    return "".join(out)
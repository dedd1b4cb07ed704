"""Pay an exact price with the fewest coins from a limited supply."""

from __future__ import annotations

from typing import Optional, Sequence


def min_coins(
    values: Sequence[int], amounts: Sequence[int], price: int
) -> Optional[int]:
    """Fewest coins summing to ``price``, or None if it cannot be paid.

    ``values[i]`` is a coin's face value and ``amounts[i]`` how many are available.
    """
    if len(values) != len(amounts):
        raise ValueError("values and amounts must have the same length")
    if price < 0:
        raise ValueError("price cannot be negative")
    if any(value <= 0 for value in values):
        raise ValueError("coin values must be positive")
    unreachable = price + 1 + sum(amounts)
    best = [0] + [unreachable] * price
    for value, amount in zip(values, amounts):
        for j in range(price, value - 1, -1):
            limit = min(amount, j // value)
            best[j] = min(best[j - t * value] + t for t in range(limit + 1))
    return None if best[price] >= unreachable else best[price]


def run(text: str) -> str:
    """Solve each case (N, N values, N amounts, price) until the input ends."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        count = int(token)
        values = [int(next(tokens)) for _ in range(count)]
        amounts = [int(next(tokens)) for _ in range(count)]
        price = int(next(tokens))
        result = min_coins(values, amounts, price)
        out.append("NO\n" if result is None else f"SI {result}\n")
    return "".join(out)
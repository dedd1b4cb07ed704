"""Can a word over {a, b, c} be parenthesised to yield a given letter?"""

from __future__ import annotations

_TABLE = {
    ("a", "a"): "b",
    ("a", "b"): "b",
    ("a", "c"): "a",
    ("b", "a"): "c",
    ("b", "b"): "b",
    ("b", "c"): "a",
    ("c", "a"): "a",
    ("c", "b"): "c",
    ("c", "c"): "c",
}


def multiply(x: str, y: str) -> str:
    """Product of two letters under the non-associative operation."""
    try:
        return _TABLE[x, y]
    except KeyError:
        raise ValueError(f"letters must be a, b or c, not {x!r} and {y!r}") from None


def can_produce(word: str, target: str = "a") -> bool:
    """Whether some parenthesisation of ``word`` evaluates to ``target``."""
    n = len(word)
    if n == 0:
        return False
    reachable: list[list[frozenset[str]]] = [[frozenset()] * n for _ in range(n)]
    for i, letter in enumerate(word):
        reachable[i][i] = frozenset(letter) & frozenset("abc")
    for span in range(1, n):
        for i in range(n - span):
            j = i + span
            results: set[str] = set()
            for k in range(i, j):
                for left in reachable[i][k]:
                    for right in reachable[k + 1][j]:
                        results.add(_TABLE[left, right])
            reachable[i][j] = frozenset(results)
    return target in reachable[0][n - 1]


def run(text: str) -> str:
    """Answer SI/NO for each word, asking whether it can produce ``a``."""
    return "".join("SI\n" if can_produce(word) else "NO\n" for word in text.split())
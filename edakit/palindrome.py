"""Palindromes hidden in, and built around, a string."""

from __future__ import annotations


def longest_palindrome(text: str) -> tuple[int, str]:
    """Return the length and one longest palindromic subsequence of ``text``."""
    n = len(text)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        table[i][i] = 1
        for j in range(i + 1, n):
            if text[i] == text[j]:
                table[i][j] = table[i + 1][j - 1] + 2
            else:
                table[i][j] = max(table[i + 1][j], table[i][j - 1])
    left: list[str] = []
    middle = ""
    i, j = 0, n - 1
    while i <= j:
        if i == j:
            middle = text[i]
            break
        if text[i] == text[j]:
            left.append(text[i])
            i += 1
            j -= 1
        elif table[i][j] == table[i + 1][j]:
            i += 1
        else:
            j -= 1
    half = "".join(left)
    return (table[0][n - 1] if n else 0), half + middle + half[::-1]


def complete_palindrome(text: str) -> tuple[int, str]:
    """Return the fewest insertions making ``text`` a palindrome, and the result."""
    n = len(text)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(i + 1, n):
            if text[i] == text[j]:
                table[i][j] = table[i + 1][j - 1]
            else:
                table[i][j] = 1 + min(table[i + 1][j], table[i][j - 1])
    left: list[str] = []
    right: list[str] = []
    middle = ""
    i, j = 0, n - 1
    while i <= j:
        if i == j:
            middle = text[i]
            break
        if text[i] == text[j]:
            left.append(text[i])
            right.append(text[j])
            i += 1
            j -= 1
        elif table[i][j] == table[i + 1][j] + 1:
            left.append(text[i])
            right.append(text[i])
            i += 1
        else:
            left.append(text[j])
            right.append(text[j])
            j -= 1
    result = "".join(left) + middle + "".join(reversed(right))
    return (table[0][n - 1] if n else 0), result


def run(text: str) -> str:
    """For each word print the insertions needed and the completed palindrome."""
    out = []
    for word in text.split():
        insertions, palindrome = complete_palindrome(word)
        out.append(f"{insertions} {palindrome}\n")
    return "".join(out)
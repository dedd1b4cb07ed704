"""Record songs on a two-sided cassette to maximise the total score."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Sequence


@dataclass(frozen=True)
class Song:
    """A song lasting ``duration`` and worth ``score`` if recorded."""

    duration: int
    score: int


def max_recording(songs: Sequence[Song], side: int) -> int:
    """Greatest total score of songs fitting whole on two sides of length ``side``.

    Branch and bound: each song goes on side one, side two or is left out.
    The optimistic bound fills the free time of both sides fractionally by
    score density; a first-fit completion gives the pessimistic bound.
    """
    if side < 0:
        raise ValueError("side length cannot be negative")
    if any(song.duration <= 0 for song in songs):
        raise ValueError("song durations must be positive")
    ordered = sorted(songs, key=lambda s: s.score / s.duration, reverse=True)
    n = len(ordered)
    if n == 0:
        return 0

    def optimistic(k: int, first: int, second: int, score: int) -> float:
        room = 2 * side - first - second
        bound: float = score
        for song in ordered[k:]:
            if song.duration <= room:
                room -= song.duration
                bound += song.score
            else:
                bound += room / song.duration * song.score
                break
        return bound

    def pessimistic(k: int, first: int, second: int, score: int) -> int:
        for song in ordered[k:]:
            if first + song.duration <= side:
                first += song.duration
                score += song.score
            elif second + song.duration <= side:
                second += song.duration
                score += song.score
        return score

    best = pessimistic(0, 0, 0, 0)
    tie = count()
    heap: list[tuple[float, int, int, int, int, int]] = [
        (-optimistic(0, 0, 0, 0), next(tie), 0, 0, 0, 0)
    ]
    while heap and -heap[0][0] > best:
        _, _, k, first, second, score = heapq.heappop(heap)
        song = ordered[k]
        children = []
        if first + song.duration <= side:
            children.append((first + song.duration, second, score + song.score))
        if first != second and second + song.duration <= side:
            children.append((first, second + song.duration, score + song.score))
        children.append((first, second, score))
        for child_first, child_second, child_score in children:
            if k == n - 1:
                best = max(best, child_score)
                continue
            bound = optimistic(k + 1, child_first, child_second, child_score)
            if bound > best:
                heapq.heappush(
                    heap,
                    (-bound, next(tie), k + 1, child_first, child_second, child_score),
                )
                best = max(
                    best, pessimistic(k + 1, child_first, child_second, child_score)
                )
    return best


def run(text: str) -> str:
    """Solve each ``N`` case (side length, ``N`` songs) until ``N == 0``."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        n = int(token)
        if n == 0:
            break
        side = int(next(tokens))
        songs = [Song(int(next(tokens)), int(next(tokens))) for _ in range(n)]
        out.append(f"{max_recording(songs, side)}\n")
    return "".join(out)
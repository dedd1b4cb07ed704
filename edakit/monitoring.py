"""Order of periodic reports sent by registered users."""

from __future__ import annotations

from typing import Iterable

from edakit.priority_queue import PriorityQueue


def schedule(users: Iterable[tuple[int, int]], k: int) -> list[int]:
    """Return the ids of the first ``k`` reports.

    ``users`` holds ``(id, period)`` pairs; a user first reports at ``period``
    and every ``period`` afterwards. Simultaneous reports go by ascending id.
    """
    queue = PriorityQueue((period, user_id, period) for user_id, period in users)
    sent = []
    for _ in range(k):
        moment, user_id, period = queue.pop()
        sent.append(user_id)
        queue.push((moment + period, user_id, period))
    return sent


def run(text: str) -> str:
    """Solve each case (``n``, ``n`` id/period pairs, ``k``) until ``n == 0``."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        count = int(token)
        if count == 0:
            break
        users = [(int(next(tokens)), int(next(tokens))) for _ in range(count)]
        k = int(next(tokens))
        out.extend(f"{user_id}\n" for user_id in schedule(users, k))
        out.append("---\n")
    return "".join(out)
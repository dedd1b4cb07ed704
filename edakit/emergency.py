"""Emergency-room queue: most severe first, then by arrival."""

from __future__ import annotations

from itertools import count
from typing import Iterable, Sequence

from edakit.priority_queue import PriorityQueue


class EmergencyQueue:
    """Patients are attended by decreasing severity, ties by arrival order."""

    def __init__(self) -> None:
        self._queue: PriorityQueue[tuple[int, int, str]] = PriorityQueue()
        self._arrivals = count()

    def admit(self, name: str, severity: int) -> None:
        """Register a patient."""
        self._queue.push((-severity, next(self._arrivals), name))

    def first(self) -> str:
        """Name of the next patient to be attended."""
        return self._queue.top()[2]

    def attend(self) -> str:
        """Remove the next patient and return their name."""
        return self._queue.pop()[2]


def process_events(events: Iterable[Sequence]) -> list[str]:
    """Apply ``("I", name, severity)`` and ``("A",)`` events; return attended names."""
    queue = EmergencyQueue()
    attended = []
    for event in events:
        kind = event[0]
        if kind == "I":
            queue.admit(event[1], int(event[2]))
        elif kind == "A":
            attended.append(queue.attend())
        else:
            raise ValueError(f"unknown event {kind!r}")
    return attended


def run(text: str) -> str:
    """Solve each case of ``n`` events until a case with ``n == 0``."""
    tokens = iter(text.split())
    out = []
    for token in tokens:
        total = int(token)
        if total == 0:
            break
        events = []
        for _ in range(total):
            kind = next(tokens)
            if kind == "I":
                events.append((kind, next(tokens), int(next(tokens))))
            else:
                events.append((kind,))
        out.extend(f"{name}\n" for name in process_events(events))
        out.append("---\n")
    return "".join(out)
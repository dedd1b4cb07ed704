"""Binary-heap priority queues ordered by a configurable ``before`` relation."""

from __future__ import annotations

import operator
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when reading or removing from an empty priority queue."""


class PriorityQueue(Generic[T]):
    """A priority queue where ``before(a, b)`` means ``a`` leaves before ``b``.

    With the default ordering the smallest element is served first.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        before: Optional[Callable[[T, T], bool]] = None,
    ) -> None:
        self._before: Callable[[T, T], bool] = (
            before if before is not None else operator.lt
        )
        self._heap: list[T] = list(items)
        for index in reversed(range(len(self._heap) // 2)):
            self._sink(index)

    def push(self, elem: T) -> None:
        """Insert ``elem``."""
        self._heap.append(elem)
        self._float(len(self._heap) - 1)

    def top(self) -> T:
        """Return the element with the highest priority."""
        if not self._heap:
            raise EmptyQueueError("an empty queue has no top")
        return self._heap[0]

    def pop(self) -> T:
        """Remove and return the element with the highest priority."""
        if not self._heap:
            raise EmptyQueueError("cannot remove from an empty queue")
        last = self._heap.pop()
        if not self._heap:
            return last
        first = self._heap[0]
        self._heap[0] = last
        self._sink(0)
        return first

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_complete(self) -> bool:
        """Whether the heap shape is a perfect binary tree (every level full)."""
        size = len(self._heap)
        return size & (size + 1) == 0

    def _float(self, index: int) -> None:
        heap = self._heap
        elem = heap[index]
        while index > 0:
            parent = (index - 1) // 2
            if not self._before(elem, heap[parent]):
                break
            heap[index] = heap[parent]
            index = parent
        heap[index] = elem

    def _sink(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        elem = heap[index]
        child = 2 * index + 1
        while child < size:
            if child + 1 < size and self._before(heap[child + 1], heap[child]):
                child += 1
            if not self._before(heap[child], elem):
                break
            heap[index] = heap[child]
            index = child
            child = 2 * index + 1
        heap[index] = elem

    def __repr__(self) -> str:
        return f"PriorityQueue({self._heap!r})"
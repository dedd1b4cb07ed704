"""Integers extended with a saturating +infinity."""

from __future__ import annotations

from functools import total_ordering
from typing import Union

_INF = 1_000_000_000


@total_ordering
class IntInf:
    """An integer below 10**9, or +infinity; sums saturate at infinity."""

    __slots__ = ("_num",)

    INF_VALUE = _INF

    def __init__(self, value: int = 0) -> None:
        self._num = int(value)

    @property
    def value(self) -> int:
        return self._num

    @property
    def is_infinite(self) -> bool:
        return self._num == _INF

    @staticmethod
    def _coerce(other: object) -> "IntInf":
        if isinstance(other, IntInf):
            return other
        if isinstance(other, int):
            return IntInf(other)
        return NotImplemented  # type: ignore[return-value]

    def __add__(self, other: Union["IntInf", int]) -> "IntInf":
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if (
            self._num == _INF
            or other._num == _INF
            or self._num >= _INF - other._num
        ):
            return IntInf(_INF)
        return IntInf(self._num + other._num)

    __radd__ = __add__

    def __eq__(self, other: object) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self._num == other._num

    def __lt__(self, other: Union["IntInf", int]) -> bool:
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if self._num == _INF:
            return False
        if other._num == _INF:
            return True
        return self._num < other._num

    def __hash__(self) -> int:
        return hash(self._num)

    def __str__(self) -> str:
        return "+Inf" if self._num == _INF else str(self._num)

    def __repr__(self) -> str:
        return f"IntInf({self})"


INFINITY = IntInf(_INF)
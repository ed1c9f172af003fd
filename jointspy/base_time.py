"""Time value used to stamp joint samples.

Time is stored as an integer number of microseconds, so addition is exact and
``Time()`` is the zero element.
"""

from __future__ import annotations

import functools
import numbers
import time as _time


@functools.total_ordering
class Time():
    __slots__ = ("_microseconds",)

    def __init__(self, microseconds: int = 0) -> None:
        object.__setattr__(self, "_microseconds", int(microseconds))

    def __setattr__(self, name, value):
        raise AttributeError("Time is immutable")

    @classmethod
    def from_seconds(cls, seconds: float) -> "Time":
        return cls(round(seconds * 1_000_000))

    @classmethod
    def from_milliseconds(cls, milliseconds: float) -> "Time":
        return cls(round(milliseconds * 1_000))

    @classmethod
    def from_microseconds(cls, microseconds: int) -> "Time":
        return cls(microseconds)

    @classmethod
    def now(cls) -> "Time":
        return cls(_time.time_ns() // 1_000)

    def to_seconds(self) -> float:
        return self._microseconds / 1_000_000

    def to_milliseconds(self) -> float:
        return self._microseconds / 1_000

    def to_microseconds(self) -> int:
        return self._microseconds

    def is_null(self) -> bool:
        return self._microseconds == 0

    def __add__(self, other: "Time") -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self._microseconds + other._microseconds)

    def __radd__(self, other):
        # lets the builtin sum() start from 0
        if isinstance(other, int) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: "Time") -> "Time":
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self._microseconds - other._microseconds)

    def __mul__(self, factor: numbers.Real) -> "Time":
        if isinstance(factor, Time) or not isinstance(factor, numbers.Real):
            return NotImplemented
        return Time(round(self._microseconds * factor))

    __rmul__ = __mul__

    def __truediv__(self, divisor: numbers.Real) -> "Time":
        if isinstance(divisor, Time) or not isinstance(divisor, numbers.Real):
            return NotImplemented
        return Time(round(self._microseconds / divisor))

    def __neg__(self) -> "Time":
        return Time(-self._microseconds)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._microseconds == other._microseconds

    def __lt__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._microseconds < other._microseconds

    def __hash__(self) -> int:
        return hash(self._microseconds)

    def __repr__(self) -> str:
        return f"Time({self._microseconds})"

    def __reduce__(self):
        return (Time, (self._microseconds,))

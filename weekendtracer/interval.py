"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Interval:
    """The interval [min, max]; the default is empty."""

    min: float = math.inf
    max: float = -math.inf

    EMPTY: ClassVar[Interval]
    UNIVERSE: ClassVar[Interval]

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> Interval:
        """The interval widened by ``delta`` in total, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __add__(self, displacement: float) -> Interval:
        if not isinstance(displacement, (int, float)):
            return NotImplemented
        return Interval(self.min + displacement, self.max + displacement)

    __radd__ = __add__


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)


def enclose(a: Interval, b: Interval) -> Interval:
    """The tightest interval enclosing both ``a`` and ``b``."""
    return Interval(
        a.min if a.min <= b.min else b.min,
        a.max if a.max >= b.max else b.max,
    )
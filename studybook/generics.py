"""Generic helpers: the largest item and two-dimensional points."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def largest(items: Iterable[Any]) -> Any:
    """The largest item; the first of equal maxima. Raises ValueError when empty."""
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("largest of an empty sequence") from None
    for item in iterator:
        if item > best:
            best = item
    return best


@dataclass(frozen=True)
class MixedPoint(Generic[T, U]):
    x: T
    y: U


@dataclass(frozen=True)
class Point(Generic[T]):
    x: T
    y: T

    def distance_from_origin(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def mixup(self, other: Point[U]) -> MixedPoint[T, U]:
        """A point with this point's x and the other point's y."""
        return MixedPoint(self.x, other.y)
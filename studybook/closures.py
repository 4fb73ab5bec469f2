"""Functions that take, call and build closures."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def apply_function(f: Callable[[Any], T], x: Any) -> T:
    """Call f with x and return its result."""
    return f(x)


def call_once(f: Callable[[], T]) -> T:
    """Call f exactly once and return its result."""
    return f()


def call_twice(f: Callable[[], T]) -> tuple[T, T]:
    """Call f two times in a row and return both results."""
    first = f()
    second = f()
    return first, second


def create_multiplier(factor: int) -> Callable[[int], int]:
    """A function that multiplies its argument by factor."""

    def multiply(x: int) -> int:
        return x * factor

    return multiply


def make_accumulator(start: int) -> Callable[[int], int]:
    """A function that adds its argument to a running total and returns the total."""
    total = start

    def add(amount: int) -> int:
        nonlocal total
        total += amount
        return total

    return add


def make_contains(values: Iterable[Any]) -> Callable[[Any], bool]:
    """A membership test over a private copy of the given values."""
    owned = list(values)

    def contains(needle: Any) -> bool:
        return needle in owned

    return contains
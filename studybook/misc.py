"""Greetings, list building, option matching and splitting sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def say_hello() -> str:
    return "你好！"


def make_list(*args: T) -> list[T]:
    """A list of the arguments in order."""
    return list(args)


def match_option(x: int | None, y: int) -> str:
    """Describe x; it is an error for x to be None."""
    match x:
        case 50:
            return "Got 50"
        case int(n) if n == y:
            return f"匹配, n = {n}"
        case int(n):
            return f"Got a number: {n}"
        case None:
            raise ValueError("不应该发生！")
    raise TypeError(f"expected an int or None, got {x!r}")


def split_at(values: Sequence[Any], mid: int) -> tuple[list[Any], list[Any]]:
    """The items before mid and the items from mid on; mid must lie within the sequence."""
    if not 0 <= mid <= len(values):
        raise ValueError(f"split point {mid} out of range for length {len(values)}")
    items = list(values)
    return items[:mid], items[mid:]
"""Matching numbers, letters, tuples and points."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def describe_number(n: int) -> str:
    match n:
        case 1:
            return "一"
        case 2:
            return "二"
        case 3:
            return "三"
        case int() if 4 <= n <= 10:
            return "四到十之间"
        case other:
            return f"其他数字: {other}"


def classify_letter(c: str) -> str:
    """Early (a-j) or late (k-z) lowercase letter, or something else."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if "a" <= c <= "j":
        return "早期字母"
    if "k" <= c <= "z":
        return "后期字母"
    return "其他字符"


def parity(n: int) -> str:
    """Odd or even for numbers from one to ten; out of range otherwise."""
    match n:
        case 1 | 3 | 5 | 7 | 9:
            return "奇数"
        case 2 | 4 | 6 | 8 | 10:
            return "偶数"
        case _:
            return "超出范围"


def describe_tuple(values: Sequence[Any]) -> str:
    """Describe a three-item sequence by its first or second item."""
    items = tuple(values)
    if len(items) != 3:
        raise ValueError(f"expected three items, got {len(items)}")
    match items:
        case (1, y, z):
            return f"第一个元素是1，其余是 {y} 和 {z}"
        case (x, 2, z):
            return f"第二个元素是2，其余是 {x} 和 {z}"
        case _:
            return "其他情况"


def locate_point(x: int, y: int) -> str:
    """Say whether the point lies on the y axis, the x axis or elsewhere."""
    match (x, y):
        case (0, y):
            return f"在y轴上，y = {y}"
        case (x, 0):
            return f"在x轴上，x = {x}"
        case (x, y):
            return f"在其他位置: ({x}, {y})"


def drain_stack(stack: list[T]) -> list[T]:
    """Pop every item off the stack, returning them in the order popped."""
    popped: list[T] = []
    while stack:
        popped.append(stack.pop())
    return popped
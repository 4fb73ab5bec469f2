"""Spreadsheet cells of different kinds and simple list access."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class IntCell:
    value: int


@dataclass(frozen=True)
class FloatCell:
    value: float


@dataclass(frozen=True)
class TextCell:
    value: str


def _display_float(value: float) -> str:
    """Plain decimal notation: no exponent, no trailing '.0'."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def describe_cell(cell: IntCell | FloatCell | TextCell) -> str:
    match cell:
        case IntCell(value=value):
            return f"整数: {value}"
        case FloatCell(value=value):
            return f"浮点数: {_display_float(value)}"
        case TextCell(value=value):
            return f"文本: {value}"
    raise TypeError(f"not a cell: {cell!r}")


def get_or_none(values: Sequence[T], index: int) -> T | None:
    """The item at a non-negative index, or None when there is none."""
    if 0 <= index < len(values):
        return values[index]
    return None


def add_to_each(values: Sequence[int], amount: int) -> list[int]:
    """A new list with amount added to every value."""
    return [value + amount for value in values]
"""Linked lists built from cons cells, with shared and mutable values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Cell:
    """A mutable value that can be shared between lists."""

    value: Any

    def __str__(self) -> str:
        return f"{self.value}(可变)"


@dataclass(frozen=True)
class Cons:
    """One node of a list; a tail of None ends the list."""

    value: Any
    tail: Cons | None = None


def create_list(*args: Any) -> Cons | None:
    """A list holding the arguments in order, or None when there are none."""
    node: Cons | None = None
    for value in reversed(args):
        node = Cons(value, node)
    return node


def list_to_string(node: Cons | None) -> str:
    """Render as "a -> b -> Nil"."""
    parts = []
    while node is not None:
        parts.append(str(node.value))
        node = node.tail
    parts.append("Nil")
    return " -> ".join(parts)
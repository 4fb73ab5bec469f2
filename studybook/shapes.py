"""Rectangles, users and colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class Rectangle:
    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height

    def can_hold(self, other: Rectangle) -> bool:
        """True when the other rectangle fits strictly inside this one."""
        return self.width > other.width and self.height > other.height

    @classmethod
    def square(cls, size: int) -> Rectangle:
        return cls(size, size)

    def perimeter(self) -> int:
        return 2 * (self.width + self.height)


@dataclass
class User:
    username: str
    email: str
    sign_in_count: int = 1
    active: bool = True


class Color(NamedTuple):
    red: int
    green: int
    blue: int


def build_user(email: str, username: str) -> User:
    """A new active user who has signed in once."""
    return User(username=username, email=email, sign_in_count=1, active=True)
"""Operator overloading and methods that share a name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def outline(self) -> str:
        """The display form framed in a box of asterisks."""
        text = str(self)
        width = len(text.encode("utf-8"))
        border = "*" * (width + 4)
        padding = "*" + " " * (width + 2) + "*"
        return "\n".join([border, padding, f"* {text} *", padding, border])


@dataclass(frozen=True)
class Meters:
    value: int


@dataclass(frozen=True)
class Millimeters:
    value: int

    def __add__(self, other: object) -> Millimeters:
        if not isinstance(other, Meters):
            return NotImplemented
        return Millimeters(self.value + other.value * 1000)


class Human:
    """Someone who can fly in three different ways."""

    def fly(self) -> str:
        return "*挥舞双臂*"

    def fly_as_pilot(self) -> str:
        return "这里是机长说话..."

    def fly_as_wizard(self) -> str:
        return "起飞咯！"


class Dog:
    @classmethod
    def baby_name(cls) -> str:
        return "小狗"

    @classmethod
    def animal_baby_name(cls) -> str:
        return "幼犬"
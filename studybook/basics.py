"""Greetings, grades, divisibility and simple counting loops."""

from __future__ import annotations


def hello(name: str = "World") -> str:
    """A greeting addressed to name."""
    return f"Hello, {name}!"


def another_function(x: int) -> int:
    """The number after x."""
    return x + 1


def divisibility_message(number: int) -> str:
    """Name the first of 4, 3 and 2 that divides the number."""
    if number % 4 == 0:
        return "数字可以被 4 整除"
    if number % 3 == 0:
        return "数字可以被 3 整除"
    if number % 2 == 0:
        return "数字可以被 2 整除"
    return "数字不能被 4、3 或 2 整除"


def grade_for(score: int) -> str:
    """Letter grade: A from 90, B from 80, C from 70, D from 60, otherwise F."""
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def loop_until(limit: int) -> int:
    """Count up from one until limit is reached, then return twice the count."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1: {limit}")
    counter = 0
    while True:
        counter += 1
        if counter == limit:
            return counter * 2


def countdown(start: int) -> list[int]:
    """The numbers from start down to one."""
    if start < 0:
        raise ValueError(f"countdown start must not be negative: {start}")
    return list(range(start, 0, -1))


def even_sum(start: int, end: int) -> int:
    """Sum of the even numbers from start to end inclusive."""
    return sum(n for n in range(start, end + 1) if n % 2 == 0)
"""Seating guests at a restaurant."""

from __future__ import annotations


def add_to_waitlist() -> str:
    return "将客人添加到等候名单..."


def seat_at_table() -> str:
    return "为客人安排座位..."


def eat_at_restaurant() -> list[str]:
    """Welcome a guest, put them on the waitlist, then seat them."""
    return ["欢迎光临我们的餐厅！", add_to_waitlist(), seat_at_table()]
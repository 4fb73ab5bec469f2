"""String helpers: first words, longest strings and excerpts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def first_word(s: str) -> str:
    """Everything before the first space, or the whole string."""
    return s.partition(" ")[0]


def _byte_length(s: str) -> int:
    return len(s.encode("utf-8"))


def longest(x: str, y: str) -> str:
    """The string with more UTF-8 bytes; the second one on a tie."""
    return x if _byte_length(x) > _byte_length(y) else y


def calculate_length(s: str) -> int:
    """Length of the string in UTF-8 bytes."""
    return _byte_length(s)


def change(s: str) -> str:
    return s + ", world"


def first_sentence(text: str) -> str:
    """Text up to the first ASCII full stop."""
    return text.split(".", 1)[0]


@dataclass(frozen=True)
class ImportantExcerpt:
    part: str

    def announce_and_return_part(self, announcement: str) -> str:
        print(f"请注意: {announcement}")
        return self.part

    def level(self) -> int:
        return 3


def longest_with_an_announcement(x: str, y: str, ann: Any) -> str:
    """Print the announcement, then return the longer string."""
    print(f"公告！{ann}")
    return longest(x, y)
"""Counting words, pairing teams with scores and looking up reviews."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import TypeVar

K = TypeVar("K")
V = TypeVar("V")


def word_counts(text: str) -> dict[str, int]:
    """How often each whitespace-separated word occurs, in order of first appearance."""
    return dict(Counter(text.split()))


def zip_scores(teams: Iterable[K], scores: Iterable[V]) -> dict[K, V]:
    """Pair each team with its score; extra items on either side are dropped."""
    return dict(zip(teams, scores))


def describe_review(reviews: Mapping[str, str], book: str) -> str:
    """A line giving the book's review, or saying that none was found."""
    review = reviews.get(book)
    if review is None:
        return f"没有找到《{book}》的评价"
    return f"《{book}》的评价: {review}"
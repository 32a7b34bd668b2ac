"""Comparator-driven ordering."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List, TypeVar

from .comparators import Comparator

T = TypeVar("T")


def rank_by_comparator(sequence: Iterable[T], prefers: Comparator) -> List[T]:
    """Return the items ordered with the most preferred first.

    The sort is stable, so equivalent items keep their input order and the
    head of the ranking matches :func:`reduce_by_comparator`.
    """

    def _cmp(left: T, right: T) -> int:
        if prefers(right, left):
            return -1
        if prefers(left, right):
            return 1
        return 0

    return sorted(sequence, key=cmp_to_key(_cmp))


def top_n(sequence: Iterable[T], prefers: Comparator, n: int) -> List[T]:
    """Return the *n* most preferred items."""

    if n <= 0:
        return []
    return rank_by_comparator(sequence, prefers)[:n]


__all__ = ["rank_by_comparator", "top_n"]

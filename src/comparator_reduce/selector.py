"""Selection utilities."""

from __future__ import annotations

from typing import Iterable, Tuple, TypeVar

from .comparators import Comparator
from .schemas import Scored

T = TypeVar("T")


class EmptyInputError(ValueError):
    """Raised when a reduction is asked to pick from an empty sequence."""


def reduce_with_index(sequence: Iterable[T], prefers: Comparator) -> Tuple[int, T]:
    """Reduce *sequence* to its preferred element and that element's position.

    ``prefers(running, contender)`` returns ``True`` when *contender* should
    replace the currently held element. Elements are visited once, left to
    right, so on ties the earliest element is kept.
    """

    items = iter(sequence)
    try:
        running = next(items)
    except StopIteration:
        raise EmptyInputError("No items provided") from None

    running_index = 0
    for index, item in enumerate(items, start=1):
        if prefers(running, item):
            running = item
            running_index = index
    return running_index, running


def reduce_by_comparator(sequence: Iterable[T], prefers: Comparator) -> T:
    """Return the element of *sequence* selected by *prefers*."""

    return reduce_with_index(sequence, prefers)[1]


def reduce_or_default(sequence: Iterable[T], prefers: Comparator, default: T) -> T:
    """Like :func:`reduce_by_comparator` but return *default* for empty input."""

    try:
        return reduce_by_comparator(sequence, prefers)
    except EmptyInputError:
        return default


def select_best(scored: Iterable[Scored]) -> Scored:
    """Return the record with the highest score."""

    return reduce_by_comparator(scored, lambda current, other: other.score > current.score)


__all__ = [
    "EmptyInputError",
    "reduce_by_comparator",
    "reduce_or_default",
    "reduce_with_index",
    "select_best",
]

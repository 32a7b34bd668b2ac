"""Ready-made comparators for :func:`reduce_by_comparator`.

Every comparator follows the same contract: called as ``prefers(running,
contender)`` it answers whether *contender* should replace *running*.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

Comparator = Callable[[Any, Any], bool]


def compare_min(number1: Any, number2: Any) -> bool:
    """Prefer the smaller value."""

    return number1 > number2


def compare_max(number1: Any, number2: Any) -> bool:
    """Prefer the larger value."""

    return number1 < number2


def by_key(key: Callable[[Any], Any], *, largest: bool = False) -> Comparator:
    """Build a comparator that compares ``key(item)`` instead of the items."""

    if largest:
        return lambda current, other: key(current) < key(other)
    return lambda current, other: key(current) > key(other)


def reverse(prefers: Comparator) -> Comparator:
    """Swap the arguments of *prefers*, turning a min-selector into a max-selector."""

    return lambda current, other: prefers(other, current)


def _length(item: Any) -> int:
    if hasattr(item, "__len__"):
        return len(item)
    return len(str(item))


COMPARATORS: Dict[str, Comparator] = {
    "min": compare_min,
    "max": compare_max,
    "shortest": by_key(_length),
    "longest": by_key(_length, largest=True),
}


def get_comparator(name: str) -> Comparator:
    """Look up a registered comparator by case-insensitive name."""

    try:
        return COMPARATORS[name.strip().lower()]
    except KeyError:
        available = ", ".join(sorted(COMPARATORS))
        raise KeyError(f"Unknown comparator {name!r}; choose one of: {available}") from None


__all__ = [
    "COMPARATORS",
    "Comparator",
    "by_key",
    "compare_max",
    "compare_min",
    "get_comparator",
    "reverse",
]

from __future__ import annotations

from comparator_reduce.comparators import by_key, compare_max, compare_min
from comparator_reduce.ranking import rank_by_comparator, top_n
from comparator_reduce.selector import reduce_by_comparator


def test_rank_orders_preferred_first() -> None:
    names = ["Chris", "Alex", "Ewa", "Barry", "Daniella"]
    assert rank_by_comparator(names, compare_max) == ["Ewa", "Daniella", "Chris", "Barry", "Alex"]


def test_rank_is_stable_for_equivalent_items() -> None:
    words = ["bb", "a", "cc", "d"]
    assert rank_by_comparator(words, by_key(len)) == ["a", "d", "bb", "cc"]


def test_rank_head_matches_reduction() -> None:
    first, second = (1, "first"), (1, "second")
    items = [(4, "x"), first, (9, "y"), second]
    prefers = by_key(lambda pair: pair[0])
    assert rank_by_comparator(items, prefers)[0] is reduce_by_comparator(items, prefers)
    assert reduce_by_comparator(items, prefers) is first


def test_top_n() -> None:
    assert top_n([12, 2, 3, 4], compare_min, 2) == [2, 3]
    assert top_n([12, 2, 3, 4], compare_min, 0) == []
    assert top_n([], compare_min, 3) == []

"""Top-level package for comparator_reduce."""

from .comparators import COMPARATORS, by_key, compare_max, compare_min, get_comparator, reverse
from .ranking import rank_by_comparator, top_n
from .schemas import ReductionRecord, Scored
from .selector import (
    EmptyInputError,
    reduce_by_comparator,
    reduce_or_default,
    reduce_with_index,
    select_best,
)

__all__ = [
    "COMPARATORS",
    "EmptyInputError",
    "ReductionRecord",
    "Scored",
    "by_key",
    "compare_max",
    "compare_min",
    "get_comparator",
    "rank_by_comparator",
    "reduce_by_comparator",
    "reduce_or_default",
    "reduce_with_index",
    "reverse",
    "select_best",
    "top_n",
]

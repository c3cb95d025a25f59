"""
Sequence operations public API.

Re-export every operation so callers can write:
    from seqalgo.ops import partial_sum, rotate, search
"""

from .aggregate import (
    accumulate,
    count,
    deaccumulate,
    inner_product,
    multiply_all,
    partial_sum,
    partial_sum_n,
)
from .ordering import (
    MinMax,
    MismatchResult,
    SearchResult,
    SortedUntil,
    array_max,
    array_min,
    is_decreasing,
    is_equal,
    is_increasing,
    is_not_equal,
    is_sorted,
    is_sorted_until,
    is_strictly_decreasing,
    is_strictly_increasing,
    min_max,
    mismatch,
    search,
)
from .ownership import copy_into, drop, move, swap, take
from .permute import (
    biggest_array,
    is_permutation,
    lexicographical_compare,
    next_permutation,
    prev_permutation,
    sample,
    smallest_array,
)
from .sorting import (
    nth_element,
    partial_sort_ascending,
    partial_sort_descending,
    sort_ascending,
    sort_descending,
    stable_sort_ascending,
    stable_sort_descending,
)
from .transform import (
    clamp,
    clamp_n,
    cubed,
    erase_all,
    fill,
    fill_n,
    iota,
    replace,
    rotate,
    shrink_to_fit,
    squared,
)

__all__ = [
    # ordering
    "MinMax",
    "SortedUntil",
    "SearchResult",
    "MismatchResult",
    "array_max",
    "array_min",
    "min_max",
    "is_sorted",
    "is_sorted_until",
    "is_increasing",
    "is_decreasing",
    "is_strictly_increasing",
    "is_strictly_decreasing",
    "search",
    "mismatch",
    "is_equal",
    "is_not_equal",
    # aggregate
    "accumulate",
    "deaccumulate",
    "multiply_all",
    "partial_sum",
    "partial_sum_n",
    "inner_product",
    "count",
    # transform
    "squared",
    "cubed",
    "clamp",
    "clamp_n",
    "fill",
    "fill_n",
    "iota",
    "replace",
    "rotate",
    "erase_all",
    "shrink_to_fit",
    # permute
    "next_permutation",
    "prev_permutation",
    "is_permutation",
    "sample",
    "lexicographical_compare",
    "biggest_array",
    "smallest_array",
    # sorting
    "stable_sort_ascending",
    "stable_sort_descending",
    "sort_ascending",
    "sort_descending",
    "partial_sort_ascending",
    "partial_sort_descending",
    "nth_element",
    # ownership
    "copy_into",
    "swap",
    "move",
    "take",
    "drop",
]

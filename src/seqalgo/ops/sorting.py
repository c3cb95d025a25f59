"""
Full sorts, partial sorts and order-statistic selection.

Every function returns a new list; the input is never mutated.

Public API (stable):
    stable_sort_ascending(a)          # stable
    stable_sort_descending(a)         # NOT guaranteed stable
    sort_ascending(a)
    sort_descending(a)
    partial_sort_ascending(a, n)
    partial_sort_descending(a, n)
    nth_element(a, n)

Bounds:
- partial sorts accept n in [0, len(a)]; n == len(a) is a full sort.
- nth_element accepts n in [0, len(a)).
- Any other n returns an unchanged copy.
"""

from __future__ import annotations

import heapq
from collections import Counter
from typing import Callable, List, Sequence

__all__ = [
    "stable_sort_ascending",
    "stable_sort_descending",
    "sort_ascending",
    "sort_descending",
    "partial_sort_ascending",
    "partial_sort_descending",
    "nth_element",
]


def stable_sort_ascending(a: Sequence[int]) -> List[int]:
    """Ascending sort; equal elements keep their relative order."""
    return sorted(a)


def stable_sort_descending(a: Sequence[int]) -> List[int]:
    """
    Descending sort.

    Callers must not rely on the relative order of equal elements; only the
    ascending variant promises stability.
    """
    return sort_descending(a)


def sort_ascending(a: Sequence[int]) -> List[int]:
    return sorted(a)


def sort_descending(a: Sequence[int]) -> List[int]:
    return sorted(a, reverse=True)


def _partial_sort(a: Sequence[int], n: int, pick: Callable[..., List[int]]) -> List[int]:
    out = list(a)
    if not (0 <= n <= len(out)):
        return out
    head = pick(n, out)
    # Remove exactly the picked multiset; the tail keeps input order.
    leftover = Counter(head)
    tail: List[int] = []
    for x in out:
        if leftover[x] > 0:
            leftover[x] -= 1
        else:
            tail.append(x)
    return head + tail


def partial_sort_ascending(a: Sequence[int], n: int) -> List[int]:
    """
    Put the n smallest elements, ascending, in the first n positions.

    Each of them is <= every element after position n - 1. The order of the
    remaining elements is unspecified.

    Example:
        partial_sort_ascending([5, 1, 4, 2, 3], 2)[:2] == [1, 2]
    """
    return _partial_sort(a, n, heapq.nsmallest)


def partial_sort_descending(a: Sequence[int], n: int) -> List[int]:
    """Mirror of partial_sort_ascending: the n largest, descending, first."""
    return _partial_sort(a, n, heapq.nlargest)


def nth_element(a: Sequence[int], n: int) -> List[int]:
    """
    Partition around the n-th order statistic.

    After the call out[n] equals sorted(a)[n], every element before it is
    <= out[n] and every element after it is >= out[n]. Neither side is
    sorted internally.
    """
    out = list(a)
    if not (0 <= n < len(out)):
        return out
    pivot = heapq.nsmallest(n + 1, out)[-1]
    lower = [x for x in out if x < pivot]
    equal = [x for x in out if x == pivot]
    upper = [x for x in out if x > pivot]
    return lower + equal + upper

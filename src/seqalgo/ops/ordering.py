"""
Ordering and search queries over integer sequences.

Public API (stable):
    array_max(a) -> int                    # -1 on empty input
    array_min(a) -> int                    # -1 on empty input
    min_max(a, *, observer=None) -> MinMax # (0, 0) + warning on empty input
    is_sorted(a) -> bool
    is_sorted_until(a) -> SortedUntil
    is_increasing / is_decreasing / is_strictly_increasing / is_strictly_decreasing
    search(a, b) -> SearchResult
    mismatch(a, b) -> MismatchResult
    is_equal(a, b) / is_not_equal(a, b)

Conventions:
- Inputs are read-only; nothing here mutates or keeps a reference to them.
- Scalar queries use -1 as the "not applicable" sentinel. This is ambiguous
  with a real -1 element; callers that care must check `len(a)` first.
- Flagged queries return NamedTuples so the flag and the position/value are
  separate fields; they still compare equal to plain tuples.
"""

from __future__ import annotations

import operator
from typing import Callable, NamedTuple, Optional, Sequence

from seqalgo.diagnostics import Observer, report

__all__ = [
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
]


class MinMax(NamedTuple):
    min: int
    max: int


class SortedUntil(NamedTuple):
    is_sorted: bool
    index: int


class SearchResult(NamedTuple):
    found: bool
    index: int


class MismatchResult(NamedTuple):
    is_mismatch: bool
    index: int


# ------------------------- extremes ------------------------- #


def array_max(a: Sequence[int]) -> int:
    """Return the largest element, or -1 if `a` is empty."""
    return max(a) if len(a) > 0 else -1


def array_min(a: Sequence[int]) -> int:
    """Return the smallest element, or -1 if `a` is empty."""
    return min(a) if len(a) > 0 else -1


def min_max(a: Sequence[int], *, observer: Optional[Observer] = None) -> MinMax:
    """
    Return both extremes of `a`.

    On empty input this reports a warning and returns MinMax(0, 0) rather
    than failing.
    """
    if len(a) == 0:
        report(observer, "min_max", f"sequence must have at least 1 element, got len={len(a)}", length=0)
        return MinMax(0, 0)
    return MinMax(min(a), max(a))


# ------------------------- sortedness ------------------------- #


def _first_violation(a: Sequence[int], ok: Callable[[int, int], bool]) -> Optional[int]:
    # Index i of the first adjacent pair (a[i], a[i+1]) for which ok() fails.
    for i in range(len(a) - 1):
        if not ok(a[i], a[i + 1]):
            return i
    return None


def is_sorted(a: Sequence[int]) -> bool:
    """Return True iff a[i] <= a[i+1] for all i."""
    return _first_violation(a, operator.le) is None


def is_sorted_until(a: Sequence[int]) -> SortedUntil:
    """
    Return (is_sorted, index) where `index` is the first position whose
    element is smaller than its predecessor, or len(a) if `a` is sorted.

    Example:
        is_sorted_until([1, 2, 5, 3, 4]) == SortedUntil(False, 3)
    """
    i = _first_violation(a, operator.le)
    if i is None:
        return SortedUntil(True, len(a))
    return SortedUntil(False, i + 1)


def is_increasing(a: Sequence[int]) -> bool:
    return _first_violation(a, operator.le) is None


def is_decreasing(a: Sequence[int]) -> bool:
    return _first_violation(a, operator.ge) is None


def is_strictly_increasing(a: Sequence[int]) -> bool:
    return _first_violation(a, operator.lt) is None


def is_strictly_decreasing(a: Sequence[int]) -> bool:
    return _first_violation(a, operator.gt) is None


# ------------------------- searching ------------------------- #


def search(a: Sequence[int], b: Sequence[int]) -> SearchResult:
    """
    Locate the first contiguous occurrence of `b` inside `a`.

    Returns SearchResult(True, start) when found and SearchResult(False, -1)
    otherwise. An empty `b` matches at index 0, including when `a` is empty.

    Example:
        search([1, 2, 3], [3]) == SearchResult(True, 2)
    """
    m = len(b)
    if m == 0:
        return SearchResult(True, 0)
    first = b[0]
    for start in range(len(a) - m + 1):
        if a[start] != first:
            continue
        if all(a[start + k] == b[k] for k in range(1, m)):
            return SearchResult(True, start)
    return SearchResult(False, -1)


def mismatch(a: Sequence[int], b: Sequence[int]) -> MismatchResult:
    """
    Return the first index where `a` and `b` differ.

    Only positions below min(len(a), len(b)) are compared, so a sequence is
    never indexed past its end. If every compared position agrees the result
    is MismatchResult(False, -1), even when the lengths differ.
    """
    for i in range(min(len(a), len(b))):
        if a[i] != b[i]:
            return MismatchResult(True, i)
    return MismatchResult(False, -1)


def is_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return True iff `a` and `b` have the same length and elements."""
    return len(a) == len(b) and all(x == y for x, y in zip(a, b))


def is_not_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    return not is_equal(a, b)

"""
Elementwise transforms and in-place mutation helpers.

Two families live here and must not be confused:

Value-returning (input untouched, a fresh list is returned):
    squared(a), cubed(a)
    clamp(a, lo, hi), clamp_n(a, lo, hi, n)
    fill(a, value), fill_n(a, value, n)
    iota(a, start)
    replace(a, old, new)
    rotate(a, amount, *, observer=None)

In-place (the given list is modified and returned as the same object):
    erase_all(a, value)
    shrink_to_fit(a)

Bounded variants (`*_n`) act on the first clamp(n, 0, len(a)) elements only;
an out-of-range `n` is clamped, never an error.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence, TypeVar

from seqalgo.diagnostics import Observer, report
from seqalgo.ops._common import clamp_count, clamp_value

__all__ = [
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
]

_M = TypeVar("_M", bound=MutableSequence[int])


# ------------------------- value-returning ------------------------- #


def squared(a: Sequence[int]) -> List[int]:
    return [x * x for x in a]


def cubed(a: Sequence[int]) -> List[int]:
    return [x * x * x for x in a]


def clamp(a: Sequence[int], lo: int, hi: int) -> List[int]:
    """Clamp every element into [lo, hi] inclusive."""
    return [clamp_value(x, lo, hi) for x in a]


def clamp_n(a: Sequence[int], lo: int, hi: int, n: int) -> List[int]:
    """Clamp only the first n elements into [lo, hi]; copy the rest."""
    n = clamp_count(n, len(a))
    return [clamp_value(x, lo, hi) for x in a[:n]] + list(a[n:])


def fill(a: Sequence[int], value: int) -> List[int]:
    return [value] * len(a)


def fill_n(a: Sequence[int], value: int, n: int) -> List[int]:
    n = clamp_count(n, len(a))
    return [value] * n + list(a[n:])


def iota(a: Sequence[int], start: int) -> List[int]:
    """
    Overwrite every position with start, start + 1, ...; length is kept.

    Example:
        iota([9, 9, 9], 4) == [4, 5, 6]
    """
    return list(range(start, start + len(a)))


def replace(a: Sequence[int], old: int, new: int) -> List[int]:
    return [new if x == old else x for x in a]


def rotate(a: Sequence[int], amount: int, *, observer: Optional[Observer] = None) -> List[int]:
    """
    Rotate left by `amount` positions.

    The shift is reduced modulo len(a) and a negative remainder is moved into
    [0, len(a)) by adding len(a), so every call is a left rotation:
        rotate([1, 2, 3, 4, 5], 2)  == [3, 4, 5, 1, 2]
        rotate([1, 2, 3, 4, 5], -1) == [5, 1, 2, 3, 4]   # left by 4

    rotate(rotate(a, k), -k % len(a)) == a for every integer k.

    Empty input is returned as [] with a warning.
    """
    length = len(a)
    if length == 0:
        report(observer, "rotate", f"sequence must have at least 1 element, got len={length}", length=0)
        return []
    k = int(amount) % length
    return list(a[k:]) + list(a[:k])


# ------------------------- in-place ------------------------- #


def erase_all(a: _M, value: int) -> _M:
    """
    Remove every element equal to `value` from `a` in place.

    Remaining elements keep their relative order; `a` itself is returned.
    """
    a[:] = [x for x in a if x != value]
    return shrink_to_fit(a)


def shrink_to_fit(a: _M) -> _M:
    """
    Release spare backing capacity of `a` without touching its contents.

    Only lists carry spare capacity; their backing array is released and
    reallocated for the current length. Other mutable sequences are
    returned as they are.
    """
    if isinstance(a, list):
        items = list(a)
        del a[:]
        a.extend(items)
    return a

"""
Folds and running totals over integer sequences.

Public API (stable):
    accumulate(a) -> int                           # sum; -1 on empty input
    deaccumulate(a) -> int                         # ((0 - a0) - a1) - ...
    multiply_all(a) -> int                         # product; 1 on empty input
    partial_sum(a) -> list[int]
    partial_sum_n(a, n=1) -> list[int]
    inner_product(a, b, start=0, *, observer=None) -> int
    count(a, value) -> int                         # -1 on empty input

Empty-input results differ per operation on purpose:
    accumulate   -> -1   (sentinel, "no sequence to sum")
    count        -> -1   (sentinel, distinct from "zero hits")
    deaccumulate ->  0   (seed of the fold)
    multiply_all ->  1   (seed of the fold)
"""

from __future__ import annotations

import itertools
import operator
from functools import reduce
from typing import List, Optional, Sequence

from seqalgo.diagnostics import Observer, report
from seqalgo.ops._common import clamp_count

__all__ = [
    "accumulate",
    "deaccumulate",
    "multiply_all",
    "partial_sum",
    "partial_sum_n",
    "inner_product",
    "count",
]


def accumulate(a: Sequence[int]) -> int:
    """Sum of `a` folded left from 0, or -1 when `a` is empty."""
    if len(a) == 0:
        return -1
    return reduce(operator.add, a, 0)


def deaccumulate(a: Sequence[int]) -> int:
    """
    Left fold with subtraction, seeded with 0.

    The fold runs strictly left to right: deaccumulate([5, 2]) == (0 - 5) - 2.
    """
    return reduce(operator.sub, a, 0)


def multiply_all(a: Sequence[int]) -> int:
    """Product of all elements; the empty product is 1."""
    return reduce(operator.mul, a, 1)


def partial_sum(a: Sequence[int]) -> List[int]:
    """
    Running totals of `a`.

    Example:
        partial_sum([1, 2, 3, 4]) == [1, 3, 6, 10]
    """
    return list(itertools.accumulate(a))


def partial_sum_n(a: Sequence[int], n: int = 1) -> List[int]:
    """
    Running totals over the first clamp(n, 0, len(a)) positions only.

    Elements past that window are copied through unchanged.

    Example:
        partial_sum_n([1, 2, 3], 2) == [1, 3, 3]
    """
    n = clamp_count(n, len(a))
    return list(itertools.accumulate(a[:n])) + list(a[n:])


def inner_product(
    a: Sequence[int],
    b: Sequence[int],
    start: int = 0,
    *,
    observer: Optional[Observer] = None,
) -> int:
    """
    Return start + sum(a[i] * b[i]).

    Both sequences must be non-empty and of equal length; otherwise a warning
    is reported and -1 is returned.
    """
    if len(a) != len(b) or len(a) == 0:
        report(
            observer,
            "inner_product",
            f"sequences must be non-empty and of equal length, got len(a)={len(a)}, len(b)={len(b)}",
            len_a=len(a),
            len_b=len(b),
        )
        return -1
    return reduce(operator.add, map(operator.mul, a, b), start)


def count(a: Sequence[int], value: int) -> int:
    """Occurrences of `value` in `a`, or -1 when `a` is empty."""
    if len(a) == 0:
        return -1
    return sum(1 for x in a if x == value)

"""
Property helpers for validating operation results.

These checks are used by the tests and by the benchmark runner's optional
sanity validation. They deliberately avoid calling into `seqalgo.ops` so they
can judge its output independently.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    permutation_counter_diff(a, b) -> dict[int, int]
    is_partially_sorted(a, out, n, *, descending=False) -> bool
    is_partitioned_at(a, out, n) -> bool
    is_ordered_subsequence(sub, seq) -> bool
    assert_no_mutation(before, after) -> None

Notes
-----
- Stability cannot be observed on bare integers (equal keys are
  indistinguishable). Tests that need it tag values with tie-breaker ids.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "permutation_counter_diff",
    "is_partially_sorted",
    "is_partitioned_at",
    "is_ordered_subsequence",
    "assert_no_mutation",
]


def is_nondecreasing(xs: Sequence[int]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[int]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Return value -> (count in a - count in b) for every value whose
    multiplicity differs. An empty dict means `a` and `b` are permutations.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_partially_sorted(a: Sequence[int], out: Sequence[int], n: int, *, descending: bool = False) -> bool:
    """
    Check a partial-sort result: `out` is a permutation of `a`, its first n
    elements are the n smallest (largest, if descending) of `a` in order,
    and none of them is greater (less) than any later element.
    """
    if permutation_counter_diff(a, out):
        return False
    expected = sorted(a, reverse=descending)[:n]
    if list(out[:n]) != expected:
        return False
    if n == 0 or n >= len(out):
        return True
    boundary = out[n - 1]
    rest = out[n:]
    return all(boundary >= x for x in rest) if descending else all(boundary <= x for x in rest)


def is_partitioned_at(a: Sequence[int], out: Sequence[int], n: int) -> bool:
    """
    Check an nth-element result: `out` is a permutation of `a`, out[n] is
    the n-th smallest value, and it splits `out` into <= / >= halves.
    """
    if permutation_counter_diff(a, out):
        return False
    pivot = out[n]
    if pivot != sorted(a)[n]:
        return False
    return all(x <= pivot for x in out[:n]) and all(x >= pivot for x in out[n + 1:])


def is_ordered_subsequence(sub: Sequence[int], seq: Sequence[int]) -> bool:
    """
    Return True iff `sub` can be obtained from `seq` by deleting elements,
    i.e. every element of `sub` appears in `seq` in the same relative order
    and no position of `seq` is used twice.
    """
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def assert_no_mutation(before: Sequence[int], after: Sequence[int]) -> None:
    """
    Assert that two sequences are exactly equal (element-wise), used to ensure
    an operation did not mutate its input in place.

    Raises AssertionError with a concise message if they differ.
    """
    if len(before) != len(after):
        raise AssertionError(f"Input mutated: length changed from {len(before)} to {len(after)}")
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x}, after={y}")

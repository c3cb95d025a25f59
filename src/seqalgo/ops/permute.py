"""
Permutations, random sampling and whole-sequence comparison.

Public API (stable):
    next_permutation(a, *, observer=None) -> list[int]
    prev_permutation(a, *, observer=None) -> list[int]
    is_permutation(a, b) -> bool
    sample(a, n, *, rng=None) -> list[int]
    lexicographical_compare(a, b) -> bool
    biggest_array(a, b) / smallest_array(a, b)

Notes
-----
- next/prev_permutation work on a copy and wrap around: the successor of the
  last permutation (descending order) is the first one (ascending order),
  and vice versa.
- For len(a) <= 1 the permutation functions report a warning even though
  nothing went wrong. Hosts that capture diagnostics should expect it.
- `sample` takes a caller-owned numpy Generator, the same way the dataset
  generators do. Without one it draws from a freshly OS-seeded Generator, so
  results are not reproducible across calls.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence, TypeVar

import numpy as np

from seqalgo.diagnostics import Observer, report
from seqalgo.ops._common import clamp_count

__all__ = [
    "next_permutation",
    "prev_permutation",
    "is_permutation",
    "sample",
    "lexicographical_compare",
    "biggest_array",
    "smallest_array",
]

_S = TypeVar("_S", bound=Sequence[int])


# ------------------------- permutations ------------------------- #


def _step_permutation(xs: List[int], forward: bool) -> None:
    """
    Advance `xs` in place to its lexicographic successor (forward=True) or
    predecessor (forward=False), wrapping at the boundary.
    """
    n = len(xs)
    # Longest non-increasing (forward) / non-decreasing (backward) suffix.
    i = n - 2
    if forward:
        while i >= 0 and xs[i] >= xs[i + 1]:
            i -= 1
    else:
        while i >= 0 and xs[i] <= xs[i + 1]:
            i -= 1

    if i >= 0:
        j = n - 1
        if forward:
            while xs[j] <= xs[i]:
                j -= 1
        else:
            while xs[j] >= xs[i]:
                j -= 1
        xs[i], xs[j] = xs[j], xs[i]

    # i == -1 means we were at the boundary: reversing everything wraps around.
    xs[i + 1:] = xs[i + 1:][::-1]


def next_permutation(a: Sequence[int], *, observer: Optional[Observer] = None) -> List[int]:
    """
    Return the next lexicographic permutation of `a`.

    Example:
        next_permutation([1, 2, 3]) == [1, 3, 2]
        next_permutation([3, 2, 1]) == [1, 2, 3]
    """
    out = list(a)
    if len(out) > 1:
        _step_permutation(out, forward=True)
    else:
        report(observer, "next_permutation", f"sequence must have more than 1 element, got len={len(out)}", length=len(out))
    return out


def prev_permutation(a: Sequence[int], *, observer: Optional[Observer] = None) -> List[int]:
    """Return the previous lexicographic permutation of `a`."""
    out = list(a)
    if len(out) > 1:
        _step_permutation(out, forward=False)
    else:
        report(observer, "prev_permutation", f"sequence must have more than 1 element, got len={len(out)}", length=len(out))
    return out


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of values.
    """
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


# ------------------------- sampling ------------------------- #


def sample(a: Sequence[int], n: int, *, rng: Optional[np.random.Generator] = None) -> List[int]:
    """
    Draw clamp(n, 0, len(a)) elements of `a` without replacement.

    Single pass selection sampling: position i is kept with probability
    (still_needed / still_available), so every subset of the requested size
    is equally likely and the kept elements come out in input order.

    Parameters
    ----------
    a : sequence of int
        Population. Not mutated.
    n : int
        Requested sample size; clamped into [0, len(a)].
    rng : numpy.random.Generator, optional
        Source of randomness owned by the caller. Pass a seeded Generator
        for reproducible draws.

    Returns
    -------
    list[int]
        The selected elements, in the order they appear in `a`.
    """
    total = len(a)
    needed = clamp_count(n, total)
    if needed == 0:
        return []
    if rng is None:
        rng = np.random.default_rng()

    out: List[int] = []
    for i, x in enumerate(a):
        remaining = total - i
        if rng.random() * remaining < needed:
            out.append(x)
            needed -= 1
            if needed == 0:
                break
    return out


# ------------------------- comparison ------------------------- #


def lexicographical_compare(a: Sequence[int], b: Sequence[int]) -> bool:
    """
    Return True iff `a` orders strictly before `b`.

    Elements are compared pairwise; if one sequence is a proper prefix of
    the other, the shorter one is less.
    """
    for x, y in zip(a, b):
        if x < y:
            return True
        if y < x:
            return False
    return len(a) < len(b)


def biggest_array(a: _S, b: _S) -> _S:
    """
    Return whichever of `a`, `b` has the larger element sum.

    `a` wins only when its sum is strictly greater, so equal sums return `b`.
    The chosen argument itself is returned, not a copy.
    """
    return a if sum(a) > sum(b) else b


def smallest_array(a: _S, b: _S) -> _S:
    """
    Return whichever of `a`, `b` has the smaller element sum.

    `b` wins only when `a`'s sum is strictly greater, so equal sums return `a`.
    The chosen argument itself is returned, not a copy.
    """
    return b if sum(a) > sum(b) else a

"""
Reference oracles for the sequence operations.

Each oracle is the most direct Python rendering of an operation's contract,
built on builtins (`sorted`, `sum`, slicing, list comparison) rather than on
`seqalgo.ops`, so the two can be compared:
- Correct for integers, deterministic and portable.
- Never mutate their inputs; always return new objects.

Public API (stable):
    ORACLES: dict[str, Callable]
    oracle_result(name, *args, **kwargs) -> Any
    equals_oracle(name, args, out, **kwargs) -> bool
    check_result(name, args, out, **kwargs) -> bool | None

Conventions:
- Oracles exist only for operations with a single correct answer. Partial
  sorts, nth_element and sample are judged by `check_result` through the
  property helpers instead; in-place operations are not covered.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Optional, Sequence

from seqalgo.validate.properties import (
    is_ordered_subsequence,
    is_partially_sorted,
    is_partitioned_at,
)

__all__ = ["ORACLES", "oracle_result", "equals_oracle", "check_result"]


def _bound(n: int, length: int) -> int:
    return max(0, min(n, length))


def _search(a: Sequence[int], b: Sequence[int]):
    m = len(b)
    if m == 0:
        return (True, 0)
    hits = [i for i in range(len(a) - m + 1) if list(a[i:i + m]) == list(b)]
    return (True, hits[0]) if hits else (False, -1)


def _mismatch(a: Sequence[int], b: Sequence[int]):
    diffs = [i for i, (x, y) in enumerate(zip(a, b)) if x != y]
    return (True, diffs[0]) if diffs else (False, -1)


def _sorted_until(a: Sequence[int]):
    bad = [i for i in range(1, len(a)) if a[i] < a[i - 1]]
    return (False, bad[0]) if bad else (True, len(a))


def _clamp(x: int, lo: int, hi: int) -> int:
    # Reference clamp; for lo > hi it yields lo below lo and hi otherwise.
    return lo if x < lo else (x if x < hi else hi)


def _rotate(a: Sequence[int], amount: int):
    if not a:
        return []
    k = amount % len(a)
    return list(a[k:]) + list(a[:k])


ORACLES: Dict[str, Callable[..., Any]] = {
    # ordering
    "array_max": lambda a: max(a) if a else -1,
    "array_min": lambda a: min(a) if a else -1,
    "min_max": lambda a: (min(a), max(a)) if a else (0, 0),
    "is_sorted": lambda a: list(a) == sorted(a),
    "is_sorted_until": _sorted_until,
    "is_increasing": lambda a: list(a) == sorted(a),
    "is_decreasing": lambda a: list(a) == sorted(a, reverse=True),
    "is_strictly_increasing": lambda a: list(a) == sorted(set(a)),
    "is_strictly_decreasing": lambda a: list(a) == sorted(set(a), reverse=True),
    "search": _search,
    "mismatch": _mismatch,
    "is_equal": lambda a, b: list(a) == list(b),
    "is_not_equal": lambda a, b: list(a) != list(b),
    # aggregate
    "accumulate": lambda a: sum(a) if a else -1,
    "deaccumulate": lambda a: -sum(a),
    "multiply_all": lambda a: math.prod(a),
    "partial_sum": lambda a: [sum(a[: i + 1]) for i in range(len(a))],
    "partial_sum_n": lambda a, n=1: [sum(a[: i + 1]) for i in range(_bound(n, len(a)))] + list(a[_bound(n, len(a)):]),
    "inner_product": lambda a, b, start=0: (
        start + sum(x * y for x, y in zip(a, b)) if len(a) == len(b) and a else -1
    ),
    "count": lambda a, value: list(a).count(value) if a else -1,
    # transform
    "squared": lambda a: [x ** 2 for x in a],
    "cubed": lambda a: [x ** 3 for x in a],
    "clamp": lambda a, lo, hi: [_clamp(x, lo, hi) for x in a],
    "clamp_n": lambda a, lo, hi, n: [_clamp(x, lo, hi) for x in a[: _bound(n, len(a))]] + list(a[_bound(n, len(a)):]),
    "fill": lambda a, value: [value for _ in a],
    "fill_n": lambda a, value, n: [value] * _bound(n, len(a)) + list(a[_bound(n, len(a)):]),
    "iota": lambda a, start: [start + i for i in range(len(a))],
    "replace": lambda a, old, new: [new if x == old else x for x in a],
    "rotate": _rotate,
    # permute
    "is_permutation": lambda a, b: sorted(a) == sorted(b),
    "lexicographical_compare": lambda a, b: list(a) < list(b),
    "biggest_array": lambda a, b: a if sum(a) > sum(b) else b,
    "smallest_array": lambda a, b: b if sum(a) > sum(b) else a,
    # sorting
    "stable_sort_ascending": lambda a: sorted(a),
    "stable_sort_descending": lambda a: sorted(a, reverse=True),
    "sort_ascending": lambda a: sorted(a),
    "sort_descending": lambda a: sorted(a, reverse=True),
    # ownership
    "take": lambda a, n: list(a[: _bound(n, len(a))]),
    "drop": lambda a, n: list(a[_bound(n, len(a)):]),
}


def oracle_result(name: str, *args: Any, **kwargs: Any) -> Any:
    """Return the reference answer for operation `name` on the given args."""
    if name not in ORACLES:
        raise KeyError(f"No oracle for operation {name!r}")
    return ORACLES[name](*args, **kwargs)


def equals_oracle(name: str, args: Sequence[Any], out: Any, **kwargs: Any) -> bool:
    """True iff `out` exactly equals the oracle's answer for `args`."""
    return out == oracle_result(name, *args, **kwargs)


def check_result(name: str, args: Sequence[Any], out: Any, **kwargs: Any) -> Optional[bool]:
    """
    Judge `out` for operation `name`.

    Uses the exact oracle when there is one, otherwise a property check.
    Returns None when the operation cannot be judged from its output alone
    (in-place operations, permutation steppers).
    """
    if name in ORACLES:
        return equals_oracle(name, args, out, **kwargs)

    a = list(args[0])
    n = args[1] if len(args) > 1 else kwargs.get("n", 0)
    if name in ("partial_sort_ascending", "partial_sort_descending"):
        if not 0 <= n <= len(a):
            return out == a
        return is_partially_sorted(a, out, n, descending=name.endswith("descending"))
    if name == "nth_element":
        if not 0 <= n < len(a):
            return out == a
        return is_partitioned_at(a, out, n)
    if name == "sample":
        return len(out) == _bound(n, len(a)) and is_ordered_subsequence(out, a)
    return None

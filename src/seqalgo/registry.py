"""
Name -> operation table.

Every operation in `seqalgo.ops` is registered here with enough metadata for
generic callers (the SequenceLibrary facade, the benchmark runner) to invoke
it without special-casing:

    arity          number of leading sequence arguments (1 or 2)
    mutating       True if the call modifies its sequence arguments in place
    takes_observer accepts an `observer=` keyword for diagnostics
    takes_rng      accepts an `rng=` keyword (numpy Generator)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from seqalgo import ops

__all__ = ["OperationSpec", "OPERATIONS", "GROUPS", "get_operation", "mutating_operations"]


@dataclass(frozen=True)
class OperationSpec:
    name: str
    fn: Callable[..., Any]
    group: str
    arity: int = 1
    mutating: bool = False
    takes_observer: bool = False
    takes_rng: bool = False


def _spec(fn: Callable[..., Any], group: str, **kw: Any) -> OperationSpec:
    return OperationSpec(name=fn.__name__, fn=fn, group=group, **kw)


_SPECS: List[OperationSpec] = [
    # ordering & search
    _spec(ops.array_max, "ordering"),
    _spec(ops.array_min, "ordering"),
    _spec(ops.min_max, "ordering", takes_observer=True),
    _spec(ops.is_sorted, "ordering"),
    _spec(ops.is_sorted_until, "ordering"),
    _spec(ops.is_increasing, "ordering"),
    _spec(ops.is_decreasing, "ordering"),
    _spec(ops.is_strictly_increasing, "ordering"),
    _spec(ops.is_strictly_decreasing, "ordering"),
    _spec(ops.search, "ordering", arity=2),
    _spec(ops.mismatch, "ordering", arity=2),
    _spec(ops.is_equal, "ordering", arity=2),
    _spec(ops.is_not_equal, "ordering", arity=2),
    # aggregation
    _spec(ops.accumulate, "aggregate"),
    _spec(ops.deaccumulate, "aggregate"),
    _spec(ops.multiply_all, "aggregate"),
    _spec(ops.partial_sum, "aggregate"),
    _spec(ops.partial_sum_n, "aggregate"),
    _spec(ops.inner_product, "aggregate", arity=2, takes_observer=True),
    _spec(ops.count, "aggregate"),
    # transformation & mutation
    _spec(ops.squared, "transform"),
    _spec(ops.cubed, "transform"),
    _spec(ops.clamp, "transform"),
    _spec(ops.clamp_n, "transform"),
    _spec(ops.fill, "transform"),
    _spec(ops.fill_n, "transform"),
    _spec(ops.iota, "transform"),
    _spec(ops.replace, "transform"),
    _spec(ops.rotate, "transform", takes_observer=True),
    _spec(ops.erase_all, "transform", mutating=True),
    _spec(ops.shrink_to_fit, "transform", mutating=True),
    # permutation, sampling & comparison
    _spec(ops.next_permutation, "permute", takes_observer=True),
    _spec(ops.prev_permutation, "permute", takes_observer=True),
    _spec(ops.is_permutation, "permute", arity=2),
    _spec(ops.sample, "permute", takes_rng=True),
    _spec(ops.lexicographical_compare, "permute", arity=2),
    _spec(ops.biggest_array, "permute", arity=2),
    _spec(ops.smallest_array, "permute", arity=2),
    # sorting & selection
    _spec(ops.stable_sort_ascending, "sorting"),
    _spec(ops.stable_sort_descending, "sorting"),
    _spec(ops.sort_ascending, "sorting"),
    _spec(ops.sort_descending, "sorting"),
    _spec(ops.partial_sort_ascending, "sorting"),
    _spec(ops.partial_sort_descending, "sorting"),
    _spec(ops.nth_element, "sorting"),
    # ownership
    _spec(ops.copy_into, "ownership", arity=2, mutating=True, takes_observer=True),
    _spec(ops.swap, "ownership", arity=2, mutating=True),
    _spec(ops.move, "ownership", arity=2, mutating=True),
    _spec(ops.take, "ownership"),
    _spec(ops.drop, "ownership"),
]

OPERATIONS: Dict[str, OperationSpec] = {s.name: s for s in _SPECS}

GROUPS = ("ordering", "aggregate", "transform", "permute", "sorting", "ownership")


def get_operation(name: str) -> OperationSpec:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operation: {name!r}. Known: {sorted(OPERATIONS)}") from None


def mutating_operations() -> List[str]:
    return [s.name for s in _SPECS if s.mutating]

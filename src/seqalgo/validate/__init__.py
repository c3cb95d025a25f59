"""
Validation utilities public API.

Re-exports:
    - Oracles:
        ORACLES
        oracle_result
        equals_oracle
        check_result

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        permutation_counter_diff
        is_partially_sorted
        is_partitioned_at
        is_ordered_subsequence
        assert_no_mutation
"""

from .oracle import ORACLES, check_result, equals_oracle, oracle_result
from .properties import (
    assert_no_mutation,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_ordered_subsequence,
    is_partially_sorted,
    is_partitioned_at,
    permutation_counter_diff,
)

__all__ = [
    "ORACLES",
    "oracle_result",
    "equals_oracle",
    "check_result",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "permutation_counter_diff",
    "is_partially_sorted",
    "is_partitioned_at",
    "is_ordered_subsequence",
    "assert_no_mutation",
]

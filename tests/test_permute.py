"""Permutation stepping, sampling and whole-sequence comparison."""

from __future__ import annotations

import itertools
from typing import List

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

from seqalgo.ops import (
    biggest_array,
    is_permutation,
    lexicographical_compare,
    next_permutation,
    prev_permutation,
    sample,
    smallest_array,
    sort_ascending,
)
from seqalgo.validate import is_ordered_subsequence


# ------------------------- next/prev permutation ------------------------- #


def test_next_permutation_walks_lexicographic_order() -> None:
    perms = [list(p) for p in itertools.permutations([1, 2, 3])]
    for cur, nxt in zip(perms, perms[1:]):
        assert next_permutation(cur) == nxt
        assert prev_permutation(nxt) == cur


def test_permutations_wrap_at_boundary() -> None:
    assert next_permutation([3, 2, 1]) == [1, 2, 3]
    assert prev_permutation([1, 2, 3]) == [3, 2, 1]


def test_next_permutation_with_duplicates() -> None:
    assert next_permutation([1, 1, 2]) == [1, 2, 1]
    assert next_permutation([1, 2, 1]) == [2, 1, 1]
    assert prev_permutation([2, 1, 1]) == [1, 2, 1]


def test_next_permutation_does_not_mutate_input() -> None:
    a = [1, 2, 3]
    out = next_permutation(a)
    assert a == [1, 2, 3]
    assert out is not a


@pytest.mark.parametrize("a", [[], [4]])
def test_trivial_permutations_return_copy_and_report(a: List[int], observer) -> None:
    assert next_permutation(a, observer=observer) == a
    assert prev_permutation(a, observer=observer) == a
    assert observer.operations() == ["next_permutation", "prev_permutation"]


def test_nontrivial_permutations_are_silent(observer) -> None:
    assert next_permutation([1, 2], observer=observer) == [2, 1]
    assert prev_permutation([2, 1], observer=observer) == [1, 2]
    assert len(observer) == 0


@settings(deadline=None, max_examples=150)
@given(st.lists(st.integers(0, 5), min_size=2, max_size=8))
def test_property_next_then_prev_round_trip(a: List[int]) -> None:
    nxt = next_permutation(a)
    assert is_permutation(a, nxt)
    assert prev_permutation(nxt) == a
    assert next_permutation(prev_permutation(a)) == a


# ------------------------- is_permutation ------------------------- #


def test_is_permutation() -> None:
    assert is_permutation([1, 2, 2, 3], [2, 3, 1, 2])
    assert not is_permutation([1, 2, 2], [1, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert is_permutation([], [])


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(-50, 50), max_size=60))
def test_property_sorted_is_permutation(a: List[int]) -> None:
    assert is_permutation(a, sort_ascending(a))


# ------------------------- sample ------------------------- #


def test_sample_scenario() -> None:
    a = [1, 2, 3, 4, 5]
    out = sample(a, 2)
    assert len(out) == 2
    assert len(set(out)) == 2
    assert set(out) <= set(a)
    assert is_ordered_subsequence(out, a)


@pytest.mark.parametrize("n,expected_len", [(-1, 0), (0, 0), (3, 3), (5, 5), (50, 5)])
def test_sample_clamps_count(n: int, expected_len: int) -> None:
    a = [10, 20, 30, 40, 50]
    out = sample(a, n, rng=np.random.default_rng(1))
    assert len(out) == expected_len
    assert is_ordered_subsequence(out, a)


def test_sample_full_population_returns_everything_in_order() -> None:
    a = [5, 3, 9, 1]
    assert sample(a, 4) == a


def test_sample_empty_population() -> None:
    assert sample([], 3) == []


def test_sample_reproducible_with_seeded_generator() -> None:
    a = list(range(100))
    first = sample(a, 10, rng=np.random.default_rng(1234))
    second = sample(a, 10, rng=np.random.default_rng(1234))
    assert first == second


def test_sample_covers_every_element_eventually() -> None:
    rng = np.random.default_rng(99)
    seen = set()
    for _ in range(200):
        seen.update(sample([1, 2, 3, 4, 5], 2, rng=rng))
    assert seen == {1, 2, 3, 4, 5}


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(-100, 100), max_size=50), st.integers(-5, 60), st.integers(0, 2**32 - 1))
def test_property_sample_is_ordered_subsequence(a: List[int], n: int, seed: int) -> None:
    out = sample(a, n, rng=np.random.default_rng(seed))
    assert len(out) == max(0, min(n, len(a)))
    assert is_ordered_subsequence(out, a)


# ------------------------- comparison ------------------------- #


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ([1, 2, 3], [1, 2, 4], True),
        ([1, 2, 4], [1, 2, 3], False),
        ([1, 2], [1, 2, 3], True),
        ([1, 2, 3], [1, 2], False),
        ([1, 2], [1, 2], False),
        ([], [0], True),
        ([], [], False),
    ],
)
def test_lexicographical_compare(a: List[int], b: List[int], expected: bool) -> None:
    assert lexicographical_compare(a, b) is expected


def test_biggest_and_smallest_by_sum() -> None:
    a, b = [10], [1, 2, 3]
    assert biggest_array(a, b) is a
    assert smallest_array(a, b) is b


def test_biggest_and_smallest_tie_break() -> None:
    a, b = [1, 2], [3]
    assert biggest_array(a, b) is b
    assert smallest_array(a, b) is a


def test_biggest_compares_sums_not_lengths() -> None:
    a, b = [100], [1, 1, 1, 1]
    assert biggest_array(a, b) is a
    assert biggest_array(b, a) is a

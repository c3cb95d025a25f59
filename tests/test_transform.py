"""Elementwise transforms, rotation and the in-place erase/shrink helpers."""

from __future__ import annotations

import sys
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from seqalgo.ops import (
    clamp,
    clamp_n,
    cubed,
    erase_all,
    fill,
    fill_n,
    iota,
    replace,
    rotate,
    shrink_to_fit,
    squared,
)
from seqalgo.validate import assert_no_mutation, oracle_result


def test_squared_and_cubed() -> None:
    assert squared([1, -2, 3]) == [1, 4, 9]
    assert cubed([1, -2, 3]) == [1, -8, 27]
    assert squared([]) == []


def test_clamp() -> None:
    a = [-5, 0, 5, 10, 15]
    assert clamp(a, 0, 10) == [0, 0, 5, 10, 10]
    assert_no_mutation([-5, 0, 5, 10, 15], a)


@pytest.mark.parametrize(
    "n,expected",
    [(0, [-5, 20, 5]), (2, [0, 10, 5]), (3, [0, 10, 5]), (50, [0, 10, 5]), (-1, [-5, 20, 5])],
)
def test_clamp_n(n: int, expected: List[int]) -> None:
    assert clamp_n([-5, 20, 5], 0, 10, n) == expected


def test_fill_and_fill_n() -> None:
    assert fill([1, 2, 3], 7) == [7, 7, 7]
    assert fill_n([1, 2, 3], 7, 2) == [7, 7, 3]
    assert fill_n([1, 2, 3], 7, 10) == [7, 7, 7]
    assert fill_n([1, 2, 3], 7, -4) == [1, 2, 3]


def test_iota_keeps_length() -> None:
    assert iota([9, 9, 9], 4) == [4, 5, 6]
    assert iota([], 4) == []
    assert iota([0, 0], -1) == [-1, 0]


def test_replace() -> None:
    assert replace([1, 2, 1, 3], 1, 9) == [9, 2, 9, 3]
    assert replace([1, 2], 5, 9) == [1, 2]


def test_rotate_left() -> None:
    assert rotate([1, 2, 3, 4, 5], 2) == [3, 4, 5, 1, 2]
    assert rotate([1, 2, 3, 4, 5], 5) == [1, 2, 3, 4, 5]
    assert rotate([1, 2, 3, 4, 5], 7) == [3, 4, 5, 1, 2]


def test_rotate_negative_amount_normalises_into_range() -> None:
    # -1 mod 5 -> 4, i.e. a left rotation by 4.
    assert rotate([1, 2, 3, 4, 5], -1) == [5, 1, 2, 3, 4]
    assert rotate([1, 2, 3, 4, 5], -6) == [5, 1, 2, 3, 4]


def test_rotate_empty_reports_and_returns_empty(observer) -> None:
    assert rotate([], 3, observer=observer) == []
    assert observer.operations() == ["rotate"]


def test_rotate_nonempty_is_silent(observer) -> None:
    rotate([1, 2], 1, observer=observer)
    assert len(observer) == 0


@settings(deadline=None, max_examples=150)
@given(st.lists(st.integers(-100, 100), min_size=1, max_size=50), st.integers(-1000, 1000))
def test_property_rotate_round_trip(a: List[int], k: int) -> None:
    once = rotate(a, k)
    assert once == oracle_result("rotate", a, k)
    assert rotate(once, -k % len(a)) == a


def test_erase_all_mutates_in_place_and_returns_same_list() -> None:
    a = [1, 2, 1, 3, 1]
    out = erase_all(a, 1)
    assert out is a
    assert a == [2, 3]


def test_erase_all_no_hits() -> None:
    a = [4, 5]
    assert erase_all(a, 9) == [4, 5]
    assert erase_all([], 9) == []


def test_shrink_to_fit_keeps_contents() -> None:
    a = list(range(100))
    del a[10:]
    out = shrink_to_fit(a)
    assert out is a
    assert a == list(range(10))


def test_shrink_to_fit_releases_spare_capacity() -> None:
    a: List[int] = []
    for i in range(1000):
        a.append(i)
    del a[600:]  # under half removed: the list keeps its allocation
    before = sys.getsizeof(a)
    assert shrink_to_fit(a) is a
    assert sys.getsizeof(a) < before
    assert a == list(range(600))


def test_erase_all_releases_spare_capacity() -> None:
    a: List[int] = []
    for i in range(1000):
        a.append(-1 if i % 10 == 0 else i)
    before = sys.getsizeof(a)
    assert erase_all(a, -1) is a
    assert sys.getsizeof(a) < before
    assert a == [i for i in range(1000) if i % 10 != 0]


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(-20, 20), max_size=40), st.integers(-20, 20), st.integers(-20, 20), st.integers(-5, 50))
def test_property_value_transforms_match_oracle(a: List[int], x: int, y: int, n: int) -> None:
    lo, hi = min(x, y), max(x, y)
    before = list(a)
    assert clamp(a, lo, hi) == oracle_result("clamp", a, lo, hi)
    assert clamp_n(a, lo, hi, n) == oracle_result("clamp_n", a, lo, hi, n)
    assert fill_n(a, x, n) == oracle_result("fill_n", a, x, n)
    assert replace(a, x, y) == oracle_result("replace", a, x, y)
    assert squared(a) == oracle_result("squared", a)
    assert cubed(a) == oracle_result("cubed", a)
    assert_no_mutation(before, a)

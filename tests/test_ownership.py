"""Copy/swap/move between sequences and take/drop slicing."""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from seqalgo.ops import copy_into, drop, move, swap, take


def test_copy_into_equal_lengths(observer) -> None:
    src, dest = [1, 2, 3], [0, 0, 0]
    assert copy_into(src, dest, observer=observer) is True
    assert dest == [1, 2, 3]
    assert dest is not src
    assert len(observer) == 0


def test_copy_into_length_mismatch_leaves_dest(observer) -> None:
    src, dest = [1, 2, 3], [9, 9]
    assert copy_into(src, dest, observer=observer) is False
    assert dest == [9, 9]
    assert observer.operations() == ["copy_into"]
    assert observer.diagnostics[0].context == {"len_src": 3, "len_dest": 2}


def test_copy_into_does_not_alias() -> None:
    src, dest = [1, 2], [0, 0]
    copy_into(src, dest)
    src[0] = 42
    assert dest == [1, 2]


def test_swap_exchanges_contents() -> None:
    a, b = [1, 2, 3], [9]
    assert swap(a, b) is True
    assert a == [9]
    assert b == [1, 2, 3]


def test_swap_with_itself_is_harmless() -> None:
    a = [1, 2]
    swap(a, a)
    assert a == [1, 2]


def test_move_empties_source() -> None:
    src, dest = [1, 2, 3], [7, 7, 7, 7, 7]
    assert move(src, dest) is True
    assert dest == [1, 2, 3]
    assert src == []
    assert len(src) == 0


@pytest.mark.parametrize(
    "n,head,tail",
    [(-2, [], [1, 2, 3]), (0, [], [1, 2, 3]), (2, [1, 2], [3]), (3, [1, 2, 3], []), (10, [1, 2, 3], [])],
)
def test_take_and_drop(n: int, head: List[int], tail: List[int]) -> None:
    a = [1, 2, 3]
    assert take(a, n) == head
    assert drop(a, n) == tail
    assert a == [1, 2, 3]


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(), max_size=40), st.integers(-50, 50))
def test_property_take_drop_partition(a: List[int], n: int) -> None:
    head, tail = take(a, n), drop(a, n)
    assert head + tail == a
    assert len(head) == max(0, min(n, len(a)))

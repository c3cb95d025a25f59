"""Diagnostics channel, operation registry and the SequenceLibrary facade."""

from __future__ import annotations

import logging

import numpy as np
import pytest

import seqalgo
from seqalgo import OPERATIONS, CollectingObserver, Diagnostic, SequenceLibrary, report
from seqalgo.registry import GROUPS, get_operation, mutating_operations


# ------------------------- diagnostics ------------------------- #


def test_report_delivers_to_observer_only(caplog) -> None:
    seen = []
    with caplog.at_level(logging.WARNING, logger="seqalgo"):
        diag = report(seen.append, "rotate", "empty", length=0)
    assert seen == [diag]
    assert diag == Diagnostic("rotate", "empty", logging.WARNING, {"length": 0})
    assert not caplog.records


def test_report_without_observer_logs_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="seqalgo"):
        report(None, "copy_into", "length mismatch")
    assert [r.getMessage() for r in caplog.records] == ["copy_into: length mismatch"]
    assert caplog.records[0].levelno == logging.WARNING


def test_diagnostics_are_hashable() -> None:
    a = Diagnostic("inner_product", "length mismatch", context={"len_a": 2, "len_b": 3})
    b = Diagnostic("inner_product", "length mismatch", context={"len_a": 2, "len_b": 3})
    assert hash(a) == hash(b)
    assert {a, b} == {a}
    assert a in {b}


def test_collecting_observer_clear() -> None:
    obs = CollectingObserver()
    obs(Diagnostic("a", "x"))
    obs(Diagnostic("b", "y"))
    assert obs.operations() == ["a", "b"]
    obs.clear()
    assert len(obs) == 0


def test_diagnostics_do_not_change_results() -> None:
    loud = CollectingObserver()
    assert seqalgo.rotate([], 1, observer=loud) == seqalgo.rotate([], 1, observer=lambda d: None)
    assert seqalgo.min_max([], observer=loud) == (0, 0)


def test_observer_exceptions_propagate() -> None:
    def boom(diag: Diagnostic) -> None:
        raise RuntimeError(diag.operation)

    with pytest.raises(RuntimeError, match="min_max"):
        seqalgo.min_max([], observer=boom)


# ------------------------- registry ------------------------- #


def test_every_exported_operation_is_registered() -> None:
    for name in seqalgo.ops.__all__:
        if name[0].isupper():
            continue
        assert name in OPERATIONS, name
        assert OPERATIONS[name].fn is getattr(seqalgo.ops, name)


def test_registry_groups_and_flags() -> None:
    assert {s.group for s in OPERATIONS.values()} == set(GROUPS)
    assert set(mutating_operations()) == {"erase_all", "shrink_to_fit", "copy_into", "swap", "move"}
    assert get_operation("sample").takes_rng
    assert get_operation("search").arity == 2


def test_get_operation_unknown() -> None:
    with pytest.raises(KeyError, match="Unknown operation"):
        get_operation("bogo_sort")


# ------------------------- facade ------------------------- #


def test_library_binds_observer() -> None:
    obs = CollectingObserver()
    lib = SequenceLibrary(observer=obs)
    assert lib.rotate([], 2) == []
    assert lib.copy_into([1], [1, 2]) is False
    assert lib.next_permutation([1]) == [1]
    assert obs.operations() == ["rotate", "copy_into", "next_permutation"]


def test_library_binds_rng() -> None:
    a = list(range(50))
    first = SequenceLibrary(rng=np.random.default_rng(5)).sample(a, 7)
    second = SequenceLibrary(rng=np.random.default_rng(5)).sample(a, 7)
    assert first == second


def test_library_plain_operations_pass_through() -> None:
    lib = SequenceLibrary()
    assert lib.partial_sum([1, 2, 3, 4]) == [1, 3, 6, 10]
    assert lib.search([1, 2, 3], [3]) == (True, 2)
    assert lib.bind("take") is seqalgo.take


def test_library_unknown_attribute() -> None:
    lib = SequenceLibrary()
    with pytest.raises(AttributeError):
        lib.not_an_operation
    assert "rotate" in dir(lib)
    assert lib.operations() == sorted(OPERATIONS)

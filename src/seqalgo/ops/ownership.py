"""
Copy, exchange and transfer of whole sequences, plus prefix/suffix slicing.

In-place (mutate their list arguments, return a success flag):
    copy_into(src, dest, *, observer=None) -> bool
    swap(a, b) -> bool
    move(src, dest) -> bool

Value-returning:
    take(a, n) -> list[int]     # first clamp(n, 0, len(a)) elements
    drop(a, n) -> list[int]     # everything from clamp(n, 0, len(a)) on

The in-place functions need exclusive access to their arguments for the
duration of the call; no locking is done here.
"""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence

from seqalgo.diagnostics import Observer, report
from seqalgo.ops._common import clamp_count

__all__ = ["copy_into", "swap", "move", "take", "drop"]


def copy_into(
    src: Sequence[int],
    dest: MutableSequence[int],
    *,
    observer: Optional[Observer] = None,
) -> bool:
    """
    Overwrite `dest` with the contents of `src` if the lengths match.

    On a length mismatch a warning is reported, `dest` is left untouched and
    False is returned.
    """
    if len(src) != len(dest):
        report(
            observer,
            "copy_into",
            f"sequences must be of equal length, got len(src)={len(src)}, len(dest)={len(dest)}",
            len_src=len(src),
            len_dest=len(dest),
        )
        return False
    dest[:] = list(src)
    return True


def swap(a: MutableSequence[int], b: MutableSequence[int]) -> bool:
    """Exchange the full contents of `a` and `b`. Always succeeds."""
    a[:], b[:] = list(b), list(a)
    return True


def move(src: MutableSequence[int], dest: MutableSequence[int]) -> bool:
    """
    Transfer the contents of `src` into `dest` and empty `src`.

    Whatever `dest` held before is discarded; len(src) == 0 afterwards.
    """
    dest[:] = list(src)
    del src[:]
    return True


def take(a: Sequence[int], n: int) -> List[int]:
    return list(a[: clamp_count(n, len(a))])


def drop(a: Sequence[int], n: int) -> List[int]:
    return list(a[clamp_count(n, len(a)):])

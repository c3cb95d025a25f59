"""Small helpers shared by the operation modules."""

from __future__ import annotations


def clamp_count(n: int, length: int) -> int:
    """Clamp a caller-supplied count or index into [0, length]."""
    return max(0, min(int(n), length))


def clamp_value(x: int, lo: int, hi: int) -> int:
    # Same evaluation order as the reference clamp: lo wins if lo > hi and x < lo.
    return lo if x < lo else (x if x < hi else hi)

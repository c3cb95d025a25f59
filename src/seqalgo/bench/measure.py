"""
Timing harness for sequence operations.

One sample is exactly one call `op_fn(*seqs, **kwargs)` timed with a monotonic
high-resolution clock. Copying inputs, GC control and warmup all happen
outside the timed block.

Public API (stable):
    time_op_call(...) -> dict

Returned dict schema:
    {
        "op": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
        "last_output": Any,                 # result of the final successful call
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional, Sequence

__all__ = ["time_op_call"]


def _fresh(seqs: Sequence[List[int]], copy: bool) -> List[List[int]]:
    return [list(s) for s in seqs] if copy else list(seqs)


def time_op_call(
    *,
    op_name: str,
    op_fn: Callable[..., Any],
    seqs: Sequence[List[int]],
    kwargs: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool,
) -> Dict[str, Any]:
    """
    Time repeated calls to `op_fn(*seqs, **kwargs)`.

    Parameters
    ----------
    op_name : str
        Registry name of the operation (for records).
    op_fn : Callable
        The operation. Observer/RNG keywords, if any, are already in `kwargs`.
    seqs : list of list[int]
        Sequence arguments, in call order.
    kwargs : dict | None
        Extra keyword arguments passed through unchanged.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; the
        previous GC state is restored afterwards.
    timeout_seconds : float
        If one sample exceeds this, status becomes "timeout" and sampling stops.
    defensive_copy : bool
        If True, every call gets fresh copies of `seqs`. Required for
        in-place operations, otherwise later samples see mutated input.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")
    kwargs = dict(kwargs or {})

    result: Dict[str, Any] = {
        "op": op_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "last_output": None,
    }

    if warmup and repeats > 0:
        try:
            op_fn(*_fresh(seqs, defensive_copy), **kwargs)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    gc_was_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            args = _fresh(seqs, defensive_copy)
            try:
                t0 = time.perf_counter_ns()
                out = op_fn(*args, **kwargs)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            result["last_output"] = out
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result

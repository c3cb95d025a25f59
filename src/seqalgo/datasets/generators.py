"""
Integer sequence generators for tests and operation benchmarks.

Supported distributions (spec["dist"]):
- "random":        uniform over an inclusive params["range"] == [lo, hi] (required).
- "small_range":   uniform over a small inclusive domain; params["range"], or
                   params["min_val"] / params["max_val"] (default [0, 255]).
- "few_uniques":   at most params["k"] distinct values drawn from an optional
                   inclusive params["range"] (default [0, 2**32 - 1]), then
                   repeated at random positions.
- "nearly_sorted": [0, 1, ..., n-1] degraded by ceil(swap_frac * n) random
                   index swaps; params["swap_frac"] in [0.0, 1.0], default 0.05.
- "sorted":        [0, 1, ..., n-1].
- "reversed":      [n-1, ..., 1, 0].

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

The caller owns the RNG; the deterministic dists ignore it. Output is always a
plain `list[int]` so the operations never see NumPy types.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_Params = Dict[str, Any]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers following `spec`.

    Parameters
    ----------
    n : int
        Length of the sequence, >= 0.
    spec : dict
        {"dist": <name>, "params": {...}} as described in the module docstring.
    rng : numpy.random.Generator
        Seeded upstream by the caller.

    Raises
    ------
    ValueError
        On a negative/non-int `n`, an unknown dist or malformed params.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in _GENERATORS:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    # Parse params even for n == 0 so bad configs fail early.
    return _GENERATORS[dist](int(n), params, rng)


# ------------------------- generators ------------------------- #


def _gen_random(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _inclusive_range(params["range"], "random")
    return _uniform(n, lo, hi, rng)


def _gen_small_range(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _inclusive_range(params["range"], "small_range")
    else:
        lo_raw, hi_raw = params.get("min_val", 0), params.get("max_val", 255)
        if not (_is_int_like(lo_raw) and _is_int_like(hi_raw)):
            raise ValueError("small_range.params.min_val/max_val must be integers")
        lo, hi = int(lo_raw), int(hi_raw)
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    return _uniform(n, lo, hi, rng)


def _gen_few_uniques(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _inclusive_range(params.get("range", (0, 2**32 - 1)), "few_uniques")
    if n == 0:
        return []

    want = min(k, n, hi - lo + 1)
    # Draw through `rng` (not random.sample) so the whole dataset follows the seed.
    pool: List[int] = []
    seen = set()
    while len(pool) < want:
        for v in rng.integers(lo, hi + 1, size=2 * (want - len(pool)), dtype=np.int64).tolist():
            if v not in seen:
                seen.add(v)
                pool.append(v)
                if len(pool) == want:
                    break
    picks = rng.integers(0, want, size=n)
    return [pool[int(i)] for i in picks]


def _gen_nearly_sorted(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    raw = params.get("swap_frac", 0.05)
    try:
        frac = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {raw!r}") from e
    if not 0.0 <= frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {frac}")

    out = list(range(n))
    swaps = math.ceil(frac * n)
    if n == 0 or swaps == 0:
        return out
    idx = rng.integers(0, n, size=(swaps, 2))
    for i, j in idx.tolist():
        out[i], out[j] = out[j], out[i]
    return out


def _gen_sorted(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _gen_reversed(n: int, params: _Params, rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


_GENERATORS: Dict[str, Callable[[int, _Params, np.random.Generator], List[int]]] = {
    "random": _gen_random,
    "small_range": _gen_small_range,
    "few_uniques": _gen_few_uniques,
    "nearly_sorted": _gen_nearly_sorted,
    "sorted": _gen_sorted,
    "reversed": _gen_reversed,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _uniform(n: int, lo: int, hi: int, rng: np.random.Generator) -> List[int]:
    if n == 0:
        return []
    # Generator.integers is half-open; hi + 1 makes the bound inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _inclusive_range(raw: Any, dist: str) -> Tuple[int, int]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = raw
    if not (_is_int_like(lo_raw) and _is_int_like(hi_raw)):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)

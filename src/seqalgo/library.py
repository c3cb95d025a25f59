"""
SequenceLibrary: the operation table with a bound observer and RNG.

    lib = SequenceLibrary(observer=CollectingObserver(), rng=np.random.default_rng(7))
    lib.rotate([], 3)           # warning goes to the observer, not the log
    lib.sample([1, 2, 3], 2)    # draws from the bound Generator

Operations that take neither an observer nor an RNG are exposed unchanged.
The instance keeps no other state; calls are independent of each other.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, List, Optional

import numpy as np

from seqalgo.diagnostics import Observer
from seqalgo.registry import OPERATIONS, get_operation

__all__ = ["SequenceLibrary"]


class SequenceLibrary:
    def __init__(
        self,
        observer: Optional[Observer] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.observer = observer
        self.rng = rng

    def bind(self, name: str) -> Callable[..., Any]:
        """Return operation `name` with this instance's observer/RNG injected."""
        spec = get_operation(name)
        kwargs = {}
        if spec.takes_observer:
            kwargs["observer"] = self.observer
        if spec.takes_rng:
            kwargs["rng"] = self.rng
        if not kwargs:
            return spec.fn
        return functools.partial(spec.fn, **kwargs)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_") or name not in OPERATIONS:
            raise AttributeError(f"{type(self).__name__!s} has no operation {name!r}")
        return self.bind(name)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(OPERATIONS))

    def operations(self) -> List[str]:
        return sorted(OPERATIONS)

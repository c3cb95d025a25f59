"""
Advisory diagnostic channel for the sequence operations.

A few operations report edge cases (empty input, mismatched lengths, trivially
short permutations) without changing what they return. Those reports go to an
observer supplied by the caller; when no observer is given they are logged on
the ``"seqalgo"`` logger.

Public API (stable):
    Diagnostic
    Observer                       # Callable[[Diagnostic], None]
    report(observer, operation, message, **context) -> Diagnostic
    CollectingObserver
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

__all__ = ["Diagnostic", "Observer", "report", "CollectingObserver", "LOGGER_NAME"]

LOGGER_NAME = "seqalgo"

_log = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class Diagnostic:
    operation: str
    message: str
    level: int = logging.WARNING
    context: Dict[str, Any] = field(default_factory=dict, hash=False)

    def format(self) -> str:
        return f"{self.operation}: {self.message}"


Observer = Callable[[Diagnostic], None]


def report(
    observer: Optional[Observer],
    operation: str,
    message: str,
    *,
    level: int = logging.WARNING,
    **context: Any,
) -> Diagnostic:
    """
    Deliver one diagnostic to `observer`, or to the module logger if None.

    Returns the Diagnostic so callers (and tests) can inspect what was sent.
    """
    diag = Diagnostic(operation=operation, message=message, level=level, context=dict(context))
    if observer is None:
        _log.log(level, diag.format(), extra={"seqalgo_context": diag.context})
    else:
        observer(diag)
    return diag


class CollectingObserver:
    """Observer that keeps every diagnostic it receives, in arrival order."""

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def __call__(self, diag: Diagnostic) -> None:
        self.diagnostics.append(diag)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def operations(self) -> List[str]:
        return [d.operation for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()

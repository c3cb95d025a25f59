"""
seqalgo: general-purpose operations over finite integer sequences.

Re-exports the operation library, the diagnostic channel and the
SequenceLibrary facade so callers can write:
    from seqalgo import partial_sum, SequenceLibrary, CollectingObserver
"""

from .diagnostics import CollectingObserver, Diagnostic, Observer, report
from .library import SequenceLibrary
from .ops import *  # noqa: F401,F403
from .ops import __all__ as _ops_all
from .registry import OPERATIONS, get_operation, mutating_operations

__version__ = "0.1.0"

__all__ = [
    "CollectingObserver",
    "Diagnostic",
    "Observer",
    "report",
    "SequenceLibrary",
    "OPERATIONS",
    "get_operation",
    "mutating_operations",
    *_ops_all,
]

"""
Benchmark tooling public API.

    from seqalgo.bench import time_op_call, run_experiment
"""

from .measure import time_op_call
from .runner import run_experiment

__all__ = ["time_op_call", "run_experiment"]

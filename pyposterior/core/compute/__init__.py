"""
Shared compute infrastructure for PyPosterior.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    distributions: Random variate generators with explicit parameterizations
    fanout: Distribution of independent draws over worker threads
    linalg: Cholesky factorisation and symmetric matrix packing
"""

from pyposterior.core.compute.timing import Timer
from pyposterior.core.compute.fanout import run_blocks

__all__ = [
    # Timing
    "Timer",
    # Fan-out
    "run_blocks",
]

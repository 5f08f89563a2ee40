"""
Multivariate-normal backends.

Available backends:
    CPUMVNBackend: Per-draw loop with optional worker fan-out
    CPUBatchedMVNBackend: All draws as stacked array operations
"""

from pyposterior.mvn.backends.cpu import CPUMVNBackend, CPUBatchedMVNBackend

__all__ = [
    "CPUMVNBackend",
    "CPUBatchedMVNBackend",
]

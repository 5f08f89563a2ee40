"""
Regression backends.

Available backends:
    CPUGibbsBackend: Per-draw loop with optional worker fan-out
    CPUBatchedGibbsBackend: All draws as stacked array operations
"""

from pyposterior.regression.backends.cpu import CPUGibbsBackend, CPUBatchedGibbsBackend

__all__ = [
    "CPUGibbsBackend",
    "CPUBatchedGibbsBackend",
]

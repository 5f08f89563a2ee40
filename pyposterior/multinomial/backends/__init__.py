"""
Multinomial backends.

Available backends:
    CPUDirichletBackend: Per-draw loop with optional worker fan-out
    CPUBatchedDirichletBackend: All draws in one Dirichlet call
"""

from pyposterior.multinomial.backends.cpu import CPUDirichletBackend, CPUBatchedDirichletBackend

__all__ = [
    "CPUDirichletBackend",
    "CPUBatchedDirichletBackend",
]

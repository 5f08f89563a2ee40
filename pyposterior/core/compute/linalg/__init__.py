"""
Linear algebra kernels for PyPosterior.

All functions follow these conventions:
    - Computation uses NumPy/SciPy (LAPACK under the hood)
    - Errors are raised immediately with clear messages

Submodules:
    cholesky: Upper and stacked lower Cholesky factors, SPD inverse
    packing: Half-vectorization of symmetric matrices
"""

from pyposterior.core.compute.linalg.cholesky import (
    cholesky_lower_stack,
    cholesky_upper,
    inverse_spd,
)
from pyposterior.core.compute.linalg.packing import (
    half_vectorize,
    symmetric_matrix,
    packed_length,
    dimension_from_packed,
    vech_indices,
)

__all__ = [
    # Cholesky
    "cholesky_upper",
    "cholesky_lower_stack",
    "inverse_spd",
    # Packing
    "half_vectorize",
    "symmetric_matrix",
    "packed_length",
    "dimension_from_packed",
    "vech_indices",
]

"""
Half-vectorization of symmetric matrices.

Packing order is the column-major lower triangle (``vech``): column 0 from
the diagonal down, then column 1 from the diagonal down, and so on. For a
3 x 3 matrix the packed vector is

    [a00, a10, a20, a11, a21, a22]

which, because the matrix is symmetric, is the same as reading the upper
triangle row by row. Both functions accept stacked inputs, so a
(size, d, d) array of covariance draws packs to (size, d(d+1)/2) and back.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import DimensionError


@lru_cache(maxsize=None)
def vech_indices(d: int) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
    """(row, col) indices of the lower triangle in packing order."""
    r, c = np.triu_indices(d)
    return c, r


def packed_length(d: int) -> int:
    """Number of unique entries in a d x d symmetric matrix."""
    return d * (d + 1) // 2


def dimension_from_packed(k: int) -> int:
    """
    Recover d from a packed length k = d(d+1)/2.

    Raises:
        DimensionError: If k is not a triangular number
    """
    d = (math.isqrt(8 * k + 1) - 1) // 2
    if k < 1 or packed_length(d) != k:
        raise DimensionError(
            f"packed length {k} is not d(d+1)/2 for any positive integer d"
        )
    return d


def half_vectorize(A: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Pack the lower triangle of a symmetric matrix (or a stack of them).

    Args:
        A: Array of shape (..., d, d)

    Returns:
        Array of shape (..., d(d+1)/2)

    Raises:
        DimensionError: If the trailing two axes are not square
    """
    A = np.asarray(A, dtype=np.float64)
    if A.ndim < 2 or A.shape[-1] != A.shape[-2]:
        raise DimensionError(
            f"half_vectorize: expected (..., d, d) array, got shape {A.shape}"
        )
    rows, cols = vech_indices(A.shape[-1])
    return A[..., rows, cols]


def symmetric_matrix(v: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Unpack a half-vectorized matrix (or a stack of them).

    Inverse of half_vectorize: ``symmetric_matrix(half_vectorize(A))``
    reproduces any symmetric A exactly.

    Args:
        v: Array of shape (..., d(d+1)/2)

    Returns:
        Symmetric array of shape (..., d, d)

    Raises:
        DimensionError: If the trailing length is not triangular
    """
    v = np.asarray(v, dtype=np.float64)
    if v.ndim < 1:
        raise DimensionError("symmetric_matrix: expected at least a 1D array")
    d = dimension_from_packed(v.shape[-1])
    rows, cols = vech_indices(d)
    out = np.empty(v.shape[:-1] + (d, d), dtype=np.float64)
    out[..., rows, cols] = v
    out[..., cols, rows] = v
    return out

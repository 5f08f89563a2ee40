"""
Cholesky-based factorisation and inversion of symmetric positive definite
matrices.

Convention: ``cholesky_upper(A)`` returns the upper triangular U with
``U' U = A``. Samplers use ``U' z`` to turn a standard normal vector z
into a draw with covariance A.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import linalg as sla

from pyposterior.core.exceptions import NotPositiveDefiniteError


def cholesky_upper(
    A: NDArray[np.floating[Any]],
    name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Upper Cholesky factor U with U'U = A.

    Args:
        A: Symmetric positive definite matrix (p x p)
        name: Matrix description for error messages

    Returns:
        Upper triangular factor (p x p)

    Raises:
        NotPositiveDefiniteError: If A is not positive definite
    """
    try:
        return sla.cholesky(A, lower=False, check_finite=False)
    except np.linalg.LinAlgError as e:
        min_eig = float(np.min(np.linalg.eigvalsh(A)))
        raise NotPositiveDefiniteError(
            f"{name} is not positive definite (min eigenvalue {min_eig:.3e})",
            matrix_name=name,
            min_eigenvalue=min_eig,
        ) from e


def inverse_spd(
    A: NDArray[np.floating[Any]],
    name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Inverse of a symmetric positive definite matrix via its Cholesky factor.

    The result is symmetrised to remove round-off asymmetry so that it can
    be factorised again.

    Raises:
        NotPositiveDefiniteError: If A is not positive definite
    """
    U = cholesky_upper(A, name)
    p = A.shape[0]
    inv = sla.cho_solve((U, False), np.eye(p), check_finite=False)
    return (inv + inv.T) / 2.0


def cholesky_lower_stack(
    A: NDArray[np.floating[Any]],
    name: str = 'matrix',
) -> NDArray[np.floating[Any]]:
    """
    Lower Cholesky factors L_i with L_i L_i' = A_i for a (size, d, d) stack.

    Raises:
        NotPositiveDefiniteError: If any matrix in the stack is not
            positive definite
    """
    try:
        return np.linalg.cholesky(A)
    except np.linalg.LinAlgError as e:
        min_eig = float(np.min(np.linalg.eigvalsh(A)))
        raise NotPositiveDefiniteError(
            f"{name} is not positive definite (min eigenvalue {min_eig:.3e})",
            matrix_name=name,
            min_eigenvalue=min_eig,
        ) from e

"""
Regression designs.

LinearModelFit holds a fitted linear model exactly as the caller produced
it: design matrix, response, point-estimate coefficients and residuals.
PyPosterior does not fit models; it only samples around a fit.

GibbsDesign bundles a fit with the sampling options (size, random stream,
worker count). It is the only thing a backend sees.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import DimensionError, SingularDesignMatrixError, ValidationError
from pyposterior.core.random import SeedLike, resolve_rng
from pyposterior.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_positive_int,
)


@dataclass(frozen=True)
class LinearModelFit:
    """
    A fitted linear model y = X b + e.

    Immutable after construction. Build with from_arrays(), which
    validates shapes; the sampler checks the degrees of freedom.

    Attributes:
        X: Design matrix (n x p)
        y: Response (n,)
        coefficients: Point-estimate coefficients (p,)
        residuals: Residuals (n,)
    """
    X: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        coefficients: ArrayLike,
        residuals: ArrayLike | None = None,
    ) -> LinearModelFit:
        """
        Build a fit from arrays.

        Args:
            X: Design matrix (n x p); a 1D array is treated as one column
            y: Response (n,) or (n, 1)
            coefficients: Point estimates (p,)
            residuals: Residuals (n,). If None, computed as y - X @ coefficients.

        Raises:
            ValidationError: Non-numeric or non-finite input
            DimensionError: Inconsistent shapes
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')
        beta = check_array(coefficients, 'coefficients')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()
        beta = np.atleast_1d(beta)

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_1d(beta, 'coefficients')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')
        check_finite(beta, 'coefficients')
        check_consistent_length(X_arr, y_arr, names=('X', 'y'))

        if beta.shape[0] != X_arr.shape[1]:
            raise DimensionError(
                f"coefficients: expected length {X_arr.shape[1]} (columns of X), "
                f"got {beta.shape[0]}"
            )

        if residuals is None:
            resid = y_arr - X_arr @ beta
        else:
            resid = check_array(residuals, 'residuals')
            if resid.ndim == 2 and resid.shape[1] == 1:
                resid = resid.ravel()
            check_1d(resid, 'residuals')
            check_finite(resid, 'residuals')
            check_consistent_length(X_arr, resid, names=('X', 'residuals'))

        return cls(
            X=X_arr.astype(np.float64),
            y=y_arr.astype(np.float64),
            coefficients=beta.astype(np.float64),
            residuals=resid.astype(np.float64),
        )

    @property
    def n(self) -> int:
        """Number of observations."""
        return self.X.shape[0]

    @property
    def p(self) -> int:
        """Number of coefficients."""
        return self.X.shape[1]

    @property
    def df_residual(self) -> int:
        """Residual degrees of freedom n - p."""
        return self.n - self.p

    @property
    def rss(self) -> float:
        """Residual sum of squares e'e."""
        return float(self.residuals @ self.residuals)

    def XtX(self) -> NDArray[np.floating[Any]]:
        """Compute X'X."""
        return self.X.T @ self.X


@dataclass(frozen=True)
class GibbsDesign:
    """
    Frozen design for sampling linear-model parameters.

    Attributes:
        fit: The fitted model
        size: Number of draws
        rng: Random stream for this call
        n_workers: Number of worker threads for the draw loop
    """
    fit: LinearModelFit
    size: int
    rng: np.random.Generator
    n_workers: int

    @classmethod
    def for_model_params(
        cls,
        size: int,
        fit: LinearModelFit,
        *,
        seed: SeedLike = None,
        n_workers: int = 1,
    ) -> GibbsDesign:
        """
        Create a Gibbs design with validation.

        Raises:
            ValidationError: size or n_workers < 1, fit of the wrong type,
                or a zero or subnormal residual sum of squares
            SingularDesignMatrixError: n <= p
        """
        size = check_positive_int(size, 'size')
        n_workers = check_positive_int(n_workers, 'n_workers')

        if not isinstance(fit, LinearModelFit):
            raise ValidationError(
                f"fit: expected LinearModelFit, got {type(fit).__name__}. "
                f"Use LinearModelFit.from_arrays(X, y, coefficients, residuals)."
            )

        if fit.n <= fit.p:
            raise SingularDesignMatrixError(
                f"X: needs more observations than coefficients for a posterior "
                f"variance (n={fit.n}, p={fit.p})",
                matrix_name='X',
                rank=None,
                expected_rank=fit.p,
            )

        if not fit.rss >= np.finfo(np.float64).tiny:
            raise ValidationError(
                f"residuals: residual sum of squares {fit.rss:.3e} is zero or "
                f"subnormal, the variance posterior is degenerate"
            )

        return cls(fit=fit, size=size, rng=resolve_rng(seed), n_workers=n_workers)

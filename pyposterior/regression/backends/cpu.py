"""
CPU backends for sampling linear-model parameters.

Both backends share the posterior constants computed once per call:

    XtXi  = inv(X'X)
    shape = (n - p) / 2
    rate  = e'e / 2
    U0    = upper Cholesky factor of XtXi

and produce, for every draw,

    s2   = InverseGamma(shape, rate) = rate / Gamma(shape, 1)
    beta = b_hat + U' z,   U = chol(s2 * XtXi) = sqrt(s2) * U0,   z ~ N(0, I)

CPUGibbsBackend: explicit loop over draws, optional worker fan-out.
CPUBatchedGibbsBackend: all draws as stacked array operations.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyposterior.core.compute.distributions import sample_inv_gamma, sample_normal
from pyposterior.core.compute.fanout import run_blocks
from pyposterior.core.compute.linalg.cholesky import cholesky_upper, inverse_spd
from pyposterior.core.compute.timing import Timer
from pyposterior.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD
from pyposterior.core.exceptions import NotPositiveDefiniteError, SingularDesignMatrixError
from pyposterior.core.result import Result
from pyposterior.regression.design import GibbsDesign, LinearModelFit
from pyposterior.regression.solution import GibbsParams


@dataclass(frozen=True)
class GibbsConstants:
    """Quantities shared read-only by every draw."""
    coefficients: NDArray[np.floating[Any]]   # b_hat, (p,)
    chol_upper: NDArray[np.floating[Any]]     # U0, (p, p)
    shape: float
    rate: float
    condition_number: float


def gibbs_constants(fit: LinearModelFit) -> GibbsConstants:
    """
    Compute the posterior constants for a fit.

    Raises:
        SingularDesignMatrixError: If X'X is not positive definite
    """
    XtX = fit.XtX()
    try:
        xtx_inv = inverse_spd(XtX, "X'X")
        chol_upper = cholesky_upper(xtx_inv, "inv(X'X)")
    except NotPositiveDefiniteError as e:
        rank = int(np.linalg.matrix_rank(fit.X))
        raise SingularDesignMatrixError(
            f"X'X is singular (rank {rank}, expected {fit.p}); "
            f"the design matrix has collinear columns",
            matrix_name="X'X",
            rank=rank,
            expected_rank=fit.p,
        ) from e

    return GibbsConstants(
        coefficients=fit.coefficients,
        chol_upper=chol_upper,
        shape=(fit.n - fit.p) / 2.0,
        rate=fit.rss / 2.0,
        condition_number=float(np.linalg.cond(XtX)),
    )


def _conditioning_warnings(constants: GibbsConstants) -> list[str]:
    """Warn (and record) when X'X is ill-conditioned."""
    if constants.condition_number <= ILL_CONDITIONED_THRESHOLD:
        return []
    msg = (
        f"X'X is ill-conditioned (condition number "
        f"{constants.condition_number:.3e}); coefficient draws may be inaccurate"
    )
    warnings.warn(msg, RuntimeWarning, stacklevel=4)
    return [msg]


def _info(design: GibbsDesign, constants: GibbsConstants, n_workers: int) -> dict[str, Any]:
    return {
        'n': design.fit.n,
        'p': design.fit.p,
        'size': design.size,
        'shape': constants.shape,
        'rate': constants.rate,
        'df_residual': design.fit.df_residual,
        'condition_number': constants.condition_number,
        'n_workers': n_workers,
    }


class CPUGibbsBackend:
    """
    CPU backend drawing one (variance, coefficients) pair per loop iteration.

    Implements the Backend protocol for GibbsDesign -> GibbsParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gibbs'

    def solve(self, design: GibbsDesign) -> Result[GibbsParams]:
        """Draw design.size parameter pairs and return Result[GibbsParams]."""
        timer = Timer()
        timer.start()

        with timer.section('precompute'):
            constants = gibbs_constants(design.fit)
        warnings_list = _conditioning_warnings(constants)

        size = design.size
        p = design.fit.p
        variances = np.empty(size, dtype=np.float64)
        coefficients = np.empty((size, p), dtype=np.float64)

        def draw_block(rng: np.random.Generator, start: int, stop: int) -> None:
            for i in range(start, stop):
                s2 = sample_inv_gamma(rng, constants.shape, constants.rate)
                z = sample_normal(rng, p)
                U = np.sqrt(s2) * constants.chol_upper
                variances[i] = s2
                coefficients[i] = constants.coefficients + U.T @ z

        with timer.section('draws'):
            n_blocks = run_blocks(draw_block, size, design.rng, design.n_workers)

        timer.stop()

        return Result(
            params=GibbsParams(variances=variances, coefficients=coefficients),
            info=_info(design, constants, n_blocks),
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


class CPUBatchedGibbsBackend:
    """
    CPU backend drawing all parameter pairs at once.

    Consumes the random stream in a different order from CPUGibbsBackend
    (all variances, then all normals), so the two backends give different
    draws for the same seed.
    """

    @property
    def name(self) -> str:
        return 'cpu_gibbs_batched'

    def solve(self, design: GibbsDesign) -> Result[GibbsParams]:
        """Draw design.size parameter pairs and return Result[GibbsParams]."""
        timer = Timer()
        timer.start()

        with timer.section('precompute'):
            constants = gibbs_constants(design.fit)
        warnings_list = _conditioning_warnings(constants)

        size = design.size
        p = design.fit.p
        rng = design.rng

        with timer.section('draws'):
            variances = sample_inv_gamma(rng, constants.shape, constants.rate, size=size)
            Z = sample_normal(rng, (size, p))
            # row i: (sqrt(s2_i) U0' z_i)' = sqrt(s2_i) z_i' U0
            coefficients = (
                constants.coefficients
                + np.sqrt(variances)[:, np.newaxis] * (Z @ constants.chol_upper)
            )

        timer.stop()

        return Result(
            params=GibbsParams(
                variances=np.asarray(variances, dtype=np.float64),
                coefficients=coefficients,
            ),
            info=_info(design, constants, 1),
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

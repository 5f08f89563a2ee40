"""
CPU backends for multivariate-normal parameter sampling.

Shared constants, computed once per call:

    ybar = column means of the data                     (d,)
    S    = sum_i (y_i - ybar)(y_i - ybar)'              (d, d)
    df   = n - 1

Each draw takes

    Sigma ~ InverseWishart(df, scale = inv(S))   i.e. inv(Wishart(df, inv(S)))
    mu    ~ Normal(ybar, Sigma / n)

with mu conditioned on the Sigma of the same draw. Covariances are drawn
from their marginal posterior every time, so draws are independent.

CPUMVNBackend: explicit loop over draws, optional worker fan-out.
CPUBatchedMVNBackend: all draws as stacked array operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyposterior.core.compute.distributions import sample_inv_wishart, sample_mvn, sample_normal
from pyposterior.core.compute.fanout import run_blocks
from pyposterior.core.compute.linalg.cholesky import cholesky_lower_stack, inverse_spd
from pyposterior.core.compute.linalg.packing import half_vectorize, packed_length
from pyposterior.core.compute.timing import Timer
from pyposterior.core.compute.tolerances import SINGULAR_SCATTER_THRESHOLD
from pyposterior.core.exceptions import NotPositiveDefiniteError, SingularScatterMatrixError
from pyposterior.core.result import Result
from pyposterior.mvn.design import MVNDesign
from pyposterior.mvn.solution import MVNParams


@dataclass(frozen=True)
class MVNConstants:
    """Quantities shared read-only by every draw."""
    ybar: NDArray[np.floating[Any]]          # (d,)
    scatter_inv: NDArray[np.floating[Any]]   # inv(S), (d, d)
    df: int
    n: int
    condition_number: float


def _singular_scatter(
    centered: NDArray[np.floating[Any]],
    condition_number: float,
) -> SingularScatterMatrixError:
    d = centered.shape[1]
    rank = int(np.linalg.matrix_rank(centered))
    return SingularScatterMatrixError(
        f"scatter matrix is singular (rank {rank}, expected {d}, condition "
        f"number {condition_number:.3e}); the data have constant or "
        f"collinear columns",
        matrix_name='scatter matrix',
        condition_number=condition_number,
        rank=rank,
        expected_rank=d,
    )


def _condition_number(A: NDArray[np.floating[Any]]) -> float:
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.linalg.cond(A))


def mvn_constants(data: NDArray[np.floating[Any]]) -> MVNConstants:
    """
    Compute the sufficient statistics of the data.

    Raises:
        SingularScatterMatrixError: If S is not positive definite or its
            condition number exceeds SINGULAR_SCATTER_THRESHOLD
            (e.g. a constant or nearly collinear column)
    """
    n, d = data.shape
    ybar = np.mean(data, axis=0)
    centered = data - ybar
    scatter = centered.T @ centered
    try:
        scatter_inv = inverse_spd(scatter, 'scatter matrix')
    except NotPositiveDefiniteError as e:
        raise _singular_scatter(centered, _condition_number(scatter)) from e

    condition_number = _condition_number(scatter)
    if not condition_number <= SINGULAR_SCATTER_THRESHOLD:
        raise _singular_scatter(centered, condition_number)

    return MVNConstants(
        ybar=ybar,
        scatter_inv=scatter_inv,
        df=n - 1,
        n=n,
        condition_number=condition_number,
    )


def _draw_failure(constants: MVNConstants, d: int) -> SingularScatterMatrixError:
    return SingularScatterMatrixError(
        f"a covariance draw is not positive definite (scatter matrix condition "
        f"number {constants.condition_number:.3e}); the data are too close to "
        f"collinear to sample from",
        matrix_name='scatter matrix',
        condition_number=constants.condition_number,
        expected_rank=d,
    )


def _info(design: MVNDesign, constants: MVNConstants, n_workers: int) -> dict[str, Any]:
    return {
        'n': design.n,
        'd': design.d,
        'size': design.size,
        'df': constants.df,
        'ybar': constants.ybar.copy(),
        'condition_number': constants.condition_number,
        'n_workers': n_workers,
    }


class CPUMVNBackend:
    """
    CPU backend drawing one (Sigma, mu) pair per loop iteration.

    Implements the Backend protocol for MVNDesign -> MVNParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_mvn'

    def solve(self, design: MVNDesign) -> Result[MVNParams]:
        """Draw design.size (mu, Sigma) pairs and return Result[MVNParams]."""
        timer = Timer()
        timer.start()

        with timer.section('precompute'):
            constants = mvn_constants(design.data)

        size, d = design.size, design.d
        means = np.empty((size, d), dtype=np.float64)
        sigmas = np.empty((size, packed_length(d)), dtype=np.float64)

        def draw_block(rng: np.random.Generator, start: int, stop: int) -> None:
            for i in range(start, stop):
                sigma = sample_inv_wishart(rng, constants.df, constants.scatter_inv)[0]
                sigmas[i] = half_vectorize(sigma)
                means[i] = sample_mvn(rng, constants.ybar, sigma / constants.n)

        with timer.section('draws'):
            try:
                n_blocks = run_blocks(draw_block, size, design.rng, design.n_workers)
            except NotPositiveDefiniteError as e:
                raise _draw_failure(constants, d) from e

        timer.stop()

        return Result(
            params=MVNParams(means=means, sigmas=sigmas),
            info=_info(design, constants, n_blocks),
            timing=timer.result(),
            backend_name=self.name,
        )


class CPUBatchedMVNBackend:
    """
    CPU backend drawing all covariances, then all means.

    Consumes the random stream in a different order from CPUMVNBackend,
    so the two backends give different draws for the same seed.
    """

    @property
    def name(self) -> str:
        return 'cpu_mvn_batched'

    def solve(self, design: MVNDesign) -> Result[MVNParams]:
        """Draw design.size (mu, Sigma) pairs and return Result[MVNParams]."""
        timer = Timer()
        timer.start()

        with timer.section('precompute'):
            constants = mvn_constants(design.data)

        rng = design.rng
        with timer.section('draws'):
            try:
                sigma_stack = sample_inv_wishart(
                    rng, constants.df, constants.scatter_inv, size=design.size,
                )
                # lower factors L_i with L_i L_i' = Sigma_i / n
                L = cholesky_lower_stack(sigma_stack / constants.n, 'MVN covariance')
            except NotPositiveDefiniteError as e:
                raise _draw_failure(constants, design.d) from e
            Z = sample_normal(rng, (design.size, design.d))
            means = constants.ybar + np.einsum('sij,sj->si', L, Z)
            sigmas = half_vectorize(sigma_stack)

        timer.stop()

        return Result(
            params=MVNParams(means=means, sigmas=sigmas),
            info=_info(design, constants, 1),
            timing=timer.result(),
            backend_name=self.name,
        )

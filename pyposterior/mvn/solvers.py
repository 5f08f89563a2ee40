"""
Solver dispatch for multivariate-normal parameter sampling.

This module provides sample_mvn_params() (public API) and backend selection.
"""

from typing import Literal

from numpy.typing import ArrayLike

from pyposterior.core.exceptions import ValidationError
from pyposterior.core.protocols import Backend
from pyposterior.core.random import SeedLike
from pyposterior.mvn.design import MVNDesign
from pyposterior.mvn.solution import MVNParams, MVNSolution
from pyposterior.mvn.backends.cpu import CPUMVNBackend, CPUBatchedMVNBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_batched']


def sample_mvn_params(
    size: int,
    data: ArrayLike,
    *,
    seed: SeedLike = None,
    backend: BackendChoice = 'auto',
    n_workers: int = 1,
) -> MVNSolution:
    """
    Sample the mean vector and covariance matrix of multivariate normal data.

    Covariances come from the inverse-Wishart posterior with n - 1 degrees
    of freedom and Wishart scale inv(S), S being the scatter matrix about
    the column means. Each mean is then drawn from Normal(ybar, Sigma / n)
    using the covariance of the same draw.

    Args:
        size: Number of draws (>= 1)
        data: Observations, shape (n, d), with n > d + 1
        seed: int, SeedSequence or Generator for the random stream.
            None uses fresh entropy.
        backend: 'auto' / 'cpu' (loop, supports n_workers) or 'cpu_batched'
        n_workers: Worker threads for the 'cpu' backend

    Returns:
        MVNSolution with .means (size, d) and .sigmas (size, d(d+1)/2).
        Covariances are packed column-major lower triangle; use
        .sigma_matrices() or pyposterior.symmetric_matrix to unpack.

    Raises:
        ValidationError: size < 1, non-finite data
        DimensionError: data with zero columns
        SingularScatterMatrixError: n <= d + 1 or collinear data

    Example:
        >>> import numpy as np
        >>> from pyposterior import sample_mvn_params
        >>> y = np.random.default_rng(0).multivariate_normal([0, 0], np.eye(2), 500)
        >>> draws = sample_mvn_params(1000, y, seed=1)
        >>> draws.mean()[:2]       # posterior means of mu
        >>> draws.mean_sigma()     # posterior mean covariance, 2 x 2
    """
    design = MVNDesign.for_mvn_params(size, data, seed=seed, n_workers=n_workers)
    backend_impl = _get_backend(backend, design)
    result = backend_impl.solve(design)
    return MVNSolution(_result=result, _design=design)


def _get_backend(
    choice: BackendChoice,
    design: MVNDesign,
) -> Backend[MVNDesign, MVNParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
        ValidationError: If n_workers > 1 with the batched backend
    """
    if choice in ('auto', 'cpu'):
        return CPUMVNBackend()

    elif choice == 'cpu_batched':
        if design.n_workers > 1:
            raise ValidationError(
                "n_workers: only the 'cpu' backend fans out over workers, "
                f"got n_workers={design.n_workers} with backend='cpu_batched'"
            )
        return CPUBatchedMVNBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")

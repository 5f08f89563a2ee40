"""
Random variate generators with explicit parameterizations.

Thin wrappers over numpy.random.Generator and scipy.stats. They exist so
that every sampler states its parameterization in one place:

    sample_inv_gamma    InverseGamma(shape, rate), mean rate / (shape - 1)
    sample_normal       standard normal vector
    sample_dirichlet    Dirichlet(alpha)
    sample_inv_wishart  inverse of a Wishart(df, scale) draw
    sample_mvn          multivariate normal(mean, covariance)

All functions take the generator as their first argument and never touch
global random state.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pyposterior.core.compute.linalg.cholesky import inverse_spd
from pyposterior.core.exceptions import NotPositiveDefiniteError


def sample_inv_gamma(
    rng: np.random.Generator,
    shape: float,
    rate: float,
    size: int | None = None,
) -> float | NDArray[np.floating[Any]]:
    """
    InverseGamma(shape, rate) draws, i.e. 1 / Gamma(shape, rate).

    Drawn as rate / Gamma(shape, 1), which stays finite and positive for
    rates down to the smallest normal float where 1 / rate would overflow.
    """
    return rate / rng.standard_gamma(shape, size=size)


def sample_normal(
    rng: np.random.Generator,
    shape: int | tuple[int, ...],
) -> NDArray[np.floating[Any]]:
    """Independent N(0, 1) draws."""
    return rng.standard_normal(shape)


def sample_dirichlet(
    rng: np.random.Generator,
    alpha: NDArray[np.floating[Any]],
    size: int | None = None,
) -> NDArray[np.floating[Any]]:
    """Dirichlet(alpha) draws; one simplex row per draw."""
    return rng.dirichlet(alpha, size=size)


def sample_wishart(
    rng: np.random.Generator,
    df: float,
    scale: NDArray[np.floating[Any]],
    size: int = 1,
) -> NDArray[np.floating[Any]]:
    """
    Wishart(df, scale) draws with E[W] = df * scale.

    Returns:
        Array of shape (size, d, d), also for size == 1 and d == 1
    """
    d = scale.shape[0]
    draws = stats.wishart.rvs(df=df, scale=scale, size=size, random_state=rng)
    return np.reshape(draws, (size, d, d))


def sample_inv_wishart(
    rng: np.random.Generator,
    df: float,
    scale: NDArray[np.floating[Any]],
    size: int = 1,
) -> NDArray[np.floating[Any]]:
    """
    Inverse-Wishart draws: the inverse of a Wishart(df, scale) draw.

    ``scale`` is the scale of the Wishart being inverted. For a scatter
    matrix S the posterior covariance is drawn with ``scale = inv(S)``,
    which gives E[Sigma] = S / (df - d - 1).

    Returns:
        Array of shape (size, d, d)
    """
    wisharts = sample_wishart(rng, df, scale, size=size)
    return np.stack([inverse_spd(W, 'Wishart draw') for W in wisharts])


def sample_mvn(
    rng: np.random.Generator,
    mean: NDArray[np.floating[Any]],
    cov: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    One multivariate normal draw of length len(mean).

    Raises:
        NotPositiveDefiniteError: If cov cannot be Cholesky factorised
    """
    try:
        return rng.multivariate_normal(mean, cov, method='cholesky')
    except np.linalg.LinAlgError as e:
        min_eig = float(np.min(np.linalg.eigvalsh(cov)))
        raise NotPositiveDefiniteError(
            f"MVN covariance is not positive definite (min eigenvalue {min_eig:.3e})",
            matrix_name='MVN covariance',
            min_eigenvalue=min_eig,
        ) from e

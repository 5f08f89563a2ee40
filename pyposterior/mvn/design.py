"""
Design for multivariate-normal parameter sampling.

MVNDesign holds the raw n x d data plus the sampling options. The
sufficient statistics (column means, scatter matrix) are computed by the
backend, once per call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import DimensionError, SingularScatterMatrixError
from pyposterior.core.random import SeedLike, resolve_rng
from pyposterior.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_positive_int,
)


@dataclass(frozen=True)
class MVNDesign:
    """
    Frozen design for sampling a multivariate-normal mean and covariance.

    Attributes:
        data: Observations, shape (n, d)
        size: Number of draws
        rng: Random stream for this call
        n_workers: Number of worker threads for the draw loop
    """
    data: NDArray[np.floating[Any]]
    size: int
    rng: np.random.Generator
    n_workers: int

    @classmethod
    def for_mvn_params(
        cls,
        size: int,
        data: ArrayLike,
        *,
        seed: SeedLike = None,
        n_workers: int = 1,
    ) -> MVNDesign:
        """
        Create an MVN design with validation.

        A 1D data array is treated as n observations of one variable.

        Raises:
            ValidationError: size or n_workers < 1, non-finite data
            DimensionError: data not 2D or with zero columns
            SingularScatterMatrixError: n <= d + 1
        """
        size = check_positive_int(size, 'size')
        n_workers = check_positive_int(n_workers, 'n_workers')

        data_arr = check_array(data, 'data')
        if data_arr.ndim == 1:
            data_arr = data_arr.reshape(-1, 1)
        check_2d(data_arr, 'data')

        n, d = data_arr.shape
        if d < 1:
            raise DimensionError("data: needs at least one column")
        check_finite(data_arr, 'data')

        if n <= d + 1:
            raise SingularScatterMatrixError(
                f"data: {n} observations are too few for a {d}-dimensional "
                f"covariance posterior (need n > d + 1 = {d + 1})",
                matrix_name='scatter matrix',
                rank=max(n - 1, 0),
                expected_rank=d,
            )

        return cls(
            data=data_arr.astype(np.float64),
            size=size,
            rng=resolve_rng(seed),
            n_workers=n_workers,
        )

    @property
    def n(self) -> int:
        """Number of observations."""
        return self.data.shape[0]

    @property
    def d(self) -> int:
        """Number of variables."""
        return self.data.shape[1]

"""
Design for multinomial proportion sampling.

DirichletDesign holds the observed category counts and the posterior
concentration derived from them under a uniform Dirichlet(1, ..., 1) prior.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import DimensionError
from pyposterior.core.random import SeedLike, resolve_rng
from pyposterior.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_nonnegative_integers,
    check_positive_int,
)


@dataclass(frozen=True)
class DirichletDesign:
    """
    Frozen design for sampling multinomial proportions.

    Attributes:
        counts: Observed counts per category, shape (k,)
        alpha: Posterior concentration counts + 1, shape (k,)
        size: Number of draws
        rng: Random stream for this call
        n_workers: Number of worker threads for the draw loop
    """
    counts: NDArray[np.floating[Any]]
    alpha: NDArray[np.floating[Any]]
    size: int
    rng: np.random.Generator
    n_workers: int

    @classmethod
    def for_multinomial_params(
        cls,
        size: int,
        counts: ArrayLike,
        *,
        seed: SeedLike = None,
        n_workers: int = 1,
    ) -> DirichletDesign:
        """
        Create a Dirichlet design with validation.

        An all-zero count vector is allowed; the posterior is then the
        uniform prior itself.

        Raises:
            ValidationError: size or n_workers < 1, negative or fractional counts
            DimensionError: counts not 1D or empty
        """
        size = check_positive_int(size, 'size')
        n_workers = check_positive_int(n_workers, 'n_workers')

        counts_arr = check_array(counts, 'counts')
        check_1d(counts_arr, 'counts')
        if counts_arr.shape[0] < 1:
            raise DimensionError("counts: needs at least one category")
        check_finite(counts_arr, 'counts')
        check_nonnegative_integers(counts_arr, 'counts')

        counts_arr = counts_arr.astype(np.float64)
        return cls(
            counts=counts_arr,
            alpha=counts_arr + 1.0,
            size=size,
            rng=resolve_rng(seed),
            n_workers=n_workers,
        )

    @property
    def k(self) -> int:
        """Number of categories."""
        return self.counts.shape[0]

    @property
    def total(self) -> int:
        """Total number of observations."""
        return int(self.counts.sum())

"""
Solution wrappers for multivariate-normal parameter draws.

Covariance draws are stored packed, one row per draw, in the column-major
lower-triangle order of pyposterior.core.compute.linalg.packing. For d = 2
a row is [s11, s21, s22].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyposterior.core.compute.linalg.packing import (
    dimension_from_packed,
    symmetric_matrix,
    vech_indices,
)
from pyposterior.core.result import Result
from pyposterior.core.summary import DrawSummaryMixin, format_table

if TYPE_CHECKING:
    from pyposterior.mvn.design import MVNDesign


@dataclass(frozen=True)
class MVNParams:
    """
    Draw payload for multivariate-normal parameters.

    means[i] was drawn conditional on the covariance packed in sigmas[i].
    """
    means: NDArray[np.floating[Any]]     # shape (size, d)
    sigmas: NDArray[np.floating[Any]]    # shape (size, d(d+1)/2)


@dataclass
class MVNSolution(DrawSummaryMixin):
    """
    User-facing posterior draws of a mean vector and covariance matrix.

    The summary methods work on the (size, d + d(d+1)/2) matrix of means
    followed by packed covariances.
    """
    _result: Result[MVNParams]
    _design: 'MVNDesign'

    @property
    def means(self) -> NDArray[np.floating[Any]]:
        """Mean vector draws, shape (size, d)."""
        return self._result.params.means

    @property
    def sigmas(self) -> NDArray[np.floating[Any]]:
        """Packed covariance draws, shape (size, d(d+1)/2)."""
        return self._result.params.sigmas

    @property
    def size(self) -> int:
        return self.means.shape[0]

    @property
    def d(self) -> int:
        return self.means.shape[1]

    def sigma_matrices(self) -> NDArray[np.floating[Any]]:
        """Unpacked covariance draws, shape (size, d, d)."""
        return symmetric_matrix(self.sigmas)

    def mean_sigma(self) -> NDArray[np.floating[Any]]:
        """Posterior mean covariance matrix, shape (d, d)."""
        return symmetric_matrix(np.mean(self.sigmas, axis=0))

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def _draw_matrix(self) -> NDArray[np.floating[Any]]:
        return np.column_stack([self.means, self.sigmas])

    def _labels(self) -> list[str]:
        d = dimension_from_packed(self.sigmas.shape[1])
        rows, cols = vech_indices(d)
        return (
            [f"mu{j}" for j in range(d)]
            + [f"s[{r},{c}]" for r, c in zip(rows, cols)]
        )

    def summary(self, level: float = 0.95) -> str:
        """Posterior summary table of means and packed covariances."""
        lines = ["\nMULTIVARIATE NORMAL POSTERIOR (INVERSE-WISHART)\n"]
        lines.append(
            f"Draws: {self.size}   n = {self.info['n']}   d = {self.d}   "
            f"df = {self.info['df']}"
        )
        lines.append("")
        lines.extend(format_table("Parameters", self._labels(), self._draw_matrix(), level))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MVNSolution(size={self.size}, d={self.d}, "
            f"backend={self.backend_name!r})"
        )

"""
Regression solution types.

Contains the draw payload and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyposterior.core.result import Result
from pyposterior.core.summary import DrawSummaryMixin, format_table

if TYPE_CHECKING:
    from pyposterior.regression.design import GibbsDesign


@dataclass(frozen=True)
class GibbsParams:
    """
    Draw payload for linear-model parameters.

    Row i of coefficients was drawn conditional on variances[i]; the two
    arrays are index aligned and must not be shuffled independently.
    """
    variances: NDArray[np.floating[Any]]      # shape (size,)
    coefficients: NDArray[np.floating[Any]]   # shape (size, p)


@dataclass
class GibbsSolution(DrawSummaryMixin):
    """
    User-facing posterior draws of (coefficients, error variance).

    The summary methods (mean, sd, quantiles, credible_interval) work on
    the (size, p + 1) matrix whose first p columns are the coefficients
    and whose last column is the variance.
    """
    _result: Result[GibbsParams]
    _design: 'GibbsDesign'

    # --- Draws ---

    @property
    def variances(self) -> NDArray[np.floating[Any]]:
        """Error variance draws, shape (size,)."""
        return self._result.params.variances

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficient draws, shape (size, p)."""
        return self._result.params.coefficients

    @property
    def size(self) -> int:
        return self.variances.shape[0]

    @property
    def p(self) -> int:
        return self.coefficients.shape[1]

    # --- Metadata ---

    @property
    def point_estimate(self) -> NDArray[np.floating[Any]]:
        """Coefficients of the fit the draws are centred on."""
        return self._design.fit.coefficients

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

    # --- Summaries ---

    def _draw_matrix(self) -> NDArray[np.floating[Any]]:
        return np.column_stack([self.coefficients, self.variances])

    def _labels(self) -> list[str]:
        return [f"b{j}" for j in range(self.p)] + ["sigma2"]

    def summary(self, level: float = 0.95) -> str:
        """
        Posterior summary table.

        Produces:
            LINEAR MODEL POSTERIOR (GIBBS)

            Draws: 5000   n = 100   p = 3

            Parameters :
                         mean           sd         2.5%        97.5%
                  b0      1.0032     0.010115      0.98311       1.0229
              sigma2    0.010212    0.0014721    0.0077523     0.013533
        """
        lines = ["\nLINEAR MODEL POSTERIOR (GIBBS)\n"]
        lines.append(
            f"Draws: {self.size}   n = {self.info['n']}   p = {self.p}"
        )
        lines.append("")
        lines.extend(format_table("Parameters", self._labels(), self._draw_matrix(), level))
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GibbsSolution(size={self.size}, p={self.p}, "
            f"backend={self.backend_name!r})"
        )

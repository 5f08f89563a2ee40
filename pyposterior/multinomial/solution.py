"""
Solution wrappers for multinomial proportion draws.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyposterior.core.exceptions import ValidationError
from pyposterior.core.result import Result
from pyposterior.core.summary import DrawSummaryMixin, format_table

if TYPE_CHECKING:
    from pyposterior.multinomial.design import DirichletDesign


@dataclass(frozen=True)
class DirichletParams:
    """Draw payload: one simplex row per draw."""
    proportions: NDArray[np.floating[Any]]    # shape (size, k)


@dataclass
class DirichletSolution(DrawSummaryMixin):
    """
    User-facing posterior draws of multinomial proportions.

    Every row of proportions is non-negative and sums to one.
    """
    _result: Result[DirichletParams]
    _design: 'DirichletDesign'

    @property
    def proportions(self) -> NDArray[np.floating[Any]]:
        """Proportion draws, shape (size, k)."""
        return self._result.params.proportions

    @property
    def size(self) -> int:
        return self.proportions.shape[0]

    @property
    def k(self) -> int:
        return self.proportions.shape[1]

    @property
    def counts(self) -> NDArray[np.floating[Any]]:
        """Observed counts the posterior was built from."""
        return self._design.counts

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

    def difference(self, i: int, j: int) -> NDArray[np.floating[Any]]:
        """
        Draws of theta_i - theta_j, shape (size,).

        Useful for questions like "how much ahead is category i of j".
        """
        for name, idx in (('i', i), ('j', j)):
            if not -self.k <= idx < self.k:
                raise ValidationError(
                    f"{name}: category index {idx} out of range for k={self.k}"
                )
        return self.proportions[:, i] - self.proportions[:, j]

    def _draw_matrix(self) -> NDArray[np.floating[Any]]:
        return self.proportions

    def _labels(self) -> list[str]:
        return [f"theta{j}" for j in range(self.k)]

    def summary(self, level: float = 0.95) -> str:
        """Posterior summary table of the proportions."""
        lines = ["\nMULTINOMIAL PROPORTIONS POSTERIOR (DIRICHLET)\n"]
        lines.append(
            f"Draws: {self.size}   categories = {self.k}   "
            f"observations = {self.info['total']}"
        )
        lines.append("")
        lines.extend(format_table("Proportions", self._labels(), self.proportions, level))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DirichletSolution(size={self.size}, k={self.k}, "
            f"backend={self.backend_name!r})"
        )

"""
Column-wise posterior summaries shared by the solution classes.

Draws are always stored as (size, k) matrices, one row per draw, so every
summary reduces over axis 0.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyposterior.core.exceptions import ValidationError


def column_quantiles(
    draws: NDArray[np.floating[Any]],
    probs: ArrayLike,
) -> NDArray[np.floating[Any]]:
    """
    Per-column quantiles of a draw matrix.

    Args:
        draws: (size, k) draws
        probs: Probabilities in [0, 1]

    Returns:
        (k, len(probs)) array
    """
    probs_arr = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    if np.any((probs_arr < 0) | (probs_arr > 1)):
        raise ValidationError(f"probs: must lie in [0, 1], got {probs_arr.tolist()}")
    return np.quantile(draws, probs_arr, axis=0).T


def credible_interval(
    draws: NDArray[np.floating[Any]],
    level: float = 0.95,
) -> NDArray[np.floating[Any]]:
    """Equal-tailed credible intervals, shape (k, 2)."""
    if not 0 < level < 1:
        raise ValidationError(f"level: must lie in (0, 1), got {level}")
    tail = (1.0 - level) / 2.0
    return column_quantiles(draws, [tail, 1.0 - tail])


def column_sd(draws: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Per-column sample standard deviation (ddof=1); NaN for a single draw."""
    if draws.shape[0] < 2:
        return np.full(draws.shape[1], np.nan)
    return np.std(draws, axis=0, ddof=1)


def format_table(
    title: str,
    labels: Sequence[str],
    draws: NDArray[np.floating[Any]],
    level: float = 0.95,
) -> list[str]:
    """
    Rows of a mean / sd / interval table for the columns of draws.

        Coefficients :
                  mean          sd        2.5%       97.5%
        b0     1.00321     0.01012     0.98311     1.02290
    """
    ci = credible_interval(draws, level)
    lo = f"{100 * (1 - level) / 2:g}%"
    hi = f"{100 * (1 + level) / 2:g}%"
    mean = np.mean(draws, axis=0)
    sd = column_sd(draws)

    lines = [f"{title} :"]
    lines.append(f"{'':>8s} {'mean':>12s} {'sd':>12s} {lo:>12s} {hi:>12s}")
    for i, label in enumerate(labels):
        lines.append(
            f"{label:>8s} {mean[i]:12.5g} {sd[i]:12.5g} "
            f"{ci[i, 0]:12.5g} {ci[i, 1]:12.5g}"
        )
    return lines


class DrawSummaryMixin(ABC):
    """
    mean / sd / quantiles / credible_interval over a solution's draw matrix.

    Subclasses provide ``_draw_matrix()`` returning (size, k) draws and
    ``_labels()`` returning k column labels.
    """

    @abstractmethod
    def _draw_matrix(self) -> NDArray[np.floating[Any]]:
        ...

    @abstractmethod
    def _labels(self) -> list[str]:
        ...

    def mean(self) -> NDArray[np.floating[Any]]:
        """Posterior mean of each column, shape (k,)."""
        return np.mean(self._draw_matrix(), axis=0)

    def sd(self) -> NDArray[np.floating[Any]]:
        """Posterior standard deviation of each column, shape (k,)."""
        return column_sd(self._draw_matrix())

    def quantiles(self, probs: ArrayLike = (0.025, 0.5, 0.975)) -> NDArray[np.floating[Any]]:
        """Posterior quantiles of each column, shape (k, len(probs))."""
        return column_quantiles(self._draw_matrix(), probs)

    def credible_interval(self, level: float = 0.95) -> NDArray[np.floating[Any]]:
        """Equal-tailed credible intervals, shape (k, 2)."""
        return credible_interval(self._draw_matrix(), level)

"""
Posterior sampling for linear-model parameters.

Public API:
    sample_model_params(size, fit, ...) -> GibbsSolution

Example:
    >>> from pyposterior.regression import LinearModelFit, sample_model_params
    >>> fit = LinearModelFit.from_arrays(X, y, b_hat)
    >>> draws = sample_model_params(5000, fit, seed=42)
    >>> print(draws.summary())
"""

from pyposterior.regression.design import LinearModelFit, GibbsDesign
from pyposterior.regression.solution import GibbsSolution, GibbsParams
from pyposterior.regression.solvers import sample_model_params

__all__ = [
    "sample_model_params",
    "LinearModelFit",
    "GibbsDesign",
    "GibbsSolution",
    "GibbsParams",
]

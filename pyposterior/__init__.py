"""
PyPosterior: conjugate Bayesian posterior samplers for Python.

Three samplers, each returning a fixed number of independent draws:

    regression:  coefficients and error variance of a fitted linear model
    multinomial: category proportions from counts (Dirichlet posterior)
    mvn:         mean vector and covariance of multivariate normal data
"""

__version__ = "0.1.0"

from pyposterior import regression
from pyposterior import multinomial
from pyposterior import mvn

from pyposterior.regression import LinearModelFit, sample_model_params
from pyposterior.multinomial import sample_multinomial_params, sample_proportions
from pyposterior.mvn import sample_mvn_params
from pyposterior.core.compute.linalg.packing import half_vectorize, symmetric_matrix

__all__ = [
    "__version__",
    "regression",
    "multinomial",
    "mvn",
    "LinearModelFit",
    "sample_model_params",
    "sample_multinomial_params",
    "sample_proportions",
    "sample_mvn_params",
    "half_vectorize",
    "symmetric_matrix",
]

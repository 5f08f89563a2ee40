"""
Posterior sampling for multivariate-normal means and covariances.

Public API:
    sample_mvn_params(size, data, ...) -> MVNSolution
"""

from pyposterior.mvn.design import MVNDesign
from pyposterior.mvn.solution import MVNSolution, MVNParams
from pyposterior.mvn.solvers import sample_mvn_params

__all__ = [
    "sample_mvn_params",
    "MVNDesign",
    "MVNSolution",
    "MVNParams",
]

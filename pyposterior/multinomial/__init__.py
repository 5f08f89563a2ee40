"""
Posterior sampling for multinomial proportions.

Public API:
    sample_multinomial_params(size, counts, ...) -> DirichletSolution
    sample_proportions(...)  retired name, always raises RenamedFunctionError
"""

from pyposterior.multinomial.design import DirichletDesign
from pyposterior.multinomial.solution import DirichletSolution, DirichletParams
from pyposterior.multinomial.solvers import sample_multinomial_params, sample_proportions

__all__ = [
    "sample_multinomial_params",
    "sample_proportions",
    "DirichletDesign",
    "DirichletSolution",
    "DirichletParams",
]

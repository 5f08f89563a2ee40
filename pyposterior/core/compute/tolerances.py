"""
Numerical thresholds shared by the samplers.

At cond(X'X) = 1e12 the inverse used for the coefficient covariance keeps
only about four significant digits in float64; draws are still produced
but the result carries a warning.

At cond(S) = 1e14 the smallest eigenvalue of a scatter matrix keeps about
two significant digits. Covariance draws built from such a matrix are not
reliably positive definite, so the data are rejected as singular.
"""

ILL_CONDITIONED_THRESHOLD = 1e12

SINGULAR_SCATTER_THRESHOLD = 1e14

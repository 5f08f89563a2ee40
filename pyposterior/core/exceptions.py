"""
Exception hierarchy for PyPosterior.

All exceptions inherit from PyPosteriorError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyPosteriorError(Exception):
    """Base exception for all PyPosterior errors."""
    pass


class ValidationError(PyPosteriorError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: a sample
    size below one, negative counts, non-numeric data, and so on.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class NumericalError(PyPosteriorError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the matrix
    is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(n, p))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class SingularDesignMatrixError(SingularMatrixError):
    """
    The design matrix of a linear model cannot support posterior sampling.

    Raised when there are no residual degrees of freedom (n <= p) or
    when X'X is not invertible.
    """
    pass


class SingularScatterMatrixError(SingularMatrixError):
    """
    The scatter matrix of multivariate data is not invertible.

    Raised when there are too few observations for the dimension
    (n <= d + 1) or when the centered data are collinear.
    """
    pass


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when an operation requires a positive definite matrix
    (e.g., Cholesky decomposition) but the matrix fails this requirement.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_eigenvalue: Minimum eigenvalue, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_eigenvalue: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.min_eigenvalue = min_eigenvalue


class RenamedFunctionError(PyPosteriorError):
    """
    A public function was renamed and its old name no longer works.

    The old name is kept only so that callers get a pointer to the
    replacement instead of an AttributeError.

    Attributes:
        old_name: The retired function name
        new_name: The function to call instead
    """

    def __init__(self, old_name: str, new_name: str):
        super().__init__(f"{old_name} has been renamed {new_name}")
        self.old_name = old_name
        self.new_name = new_name

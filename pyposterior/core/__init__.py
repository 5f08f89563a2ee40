"""
Core infrastructure for PyPosterior.

This module provides shared abstractions and utilities used by all
domain-specific samplers (regression, multinomial, mvn).

Key components:
    result: Generic Result[P] envelope
    protocols: Backend protocol
    exceptions: Exception hierarchy
    validation: Input validators
    random: Explicit random stream handling
    compute: Timing, random variates, fan-out, linear algebra kernels
"""

from pyposterior.core.result import Result
from pyposterior.core.protocols import Backend
from pyposterior.core.random import SeedLike, resolve_rng
from pyposterior.core.exceptions import (
    PyPosteriorError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    SingularDesignMatrixError,
    SingularScatterMatrixError,
    NotPositiveDefiniteError,
    RenamedFunctionError,
)

__all__ = [
    # Result
    "Result",
    # Protocols
    "Backend",
    # Random streams
    "SeedLike",
    "resolve_rng",
    # Exceptions
    "PyPosteriorError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "SingularDesignMatrixError",
    "SingularScatterMatrixError",
    "NotPositiveDefiniteError",
    "RenamedFunctionError",
]

"""
Generic result container for all PyPosterior computations.

The Result class provides a standardized envelope that every sampler
uses. This enables shared tooling for timing, reproducibility and
warnings while allowing domains to define their own draw payloads.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sizes, shared constants)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for posterior sampling.

    Type Parameters:
        P: The domain-specific draw payload type

    Attributes:
        params: Domain-specific draws (variances, coefficients, means, ...)
        info: Structured metadata (sizes, shared constants, worker count)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=GibbsParams(variances=s2, coefficients=beta),
        ...     info={'n': 100, 'p': 3, 'size': 1000},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_gibbs'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

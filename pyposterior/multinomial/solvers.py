"""
Solver dispatch for multinomial proportion sampling.

This module provides sample_multinomial_params() (public API), backend
selection, and the guard for the retired sample_proportions name.
"""

from typing import Literal, NoReturn

from numpy.typing import ArrayLike

from pyposterior.core.exceptions import RenamedFunctionError, ValidationError
from pyposterior.core.protocols import Backend
from pyposterior.core.random import SeedLike
from pyposterior.multinomial.design import DirichletDesign
from pyposterior.multinomial.solution import DirichletParams, DirichletSolution
from pyposterior.multinomial.backends.cpu import CPUDirichletBackend, CPUBatchedDirichletBackend


BackendChoice = Literal['auto', 'cpu', 'cpu_batched']


def sample_multinomial_params(
    size: int,
    counts: ArrayLike,
    *,
    seed: SeedLike = None,
    backend: BackendChoice = 'auto',
    n_workers: int = 1,
) -> DirichletSolution:
    """
    Sample multinomial proportion parameters.

    The counts are assumed multinomial. With a uniform Dirichlet(1, ..., 1)
    prior on the proportion vector theta, the posterior is
    Dirichlet(counts + 1), and this function returns independent draws
    from it.

    Args:
        size: Number of draws (>= 1)
        counts: Non-negative integer counts, one per category
        seed: int, SeedSequence or Generator for the random stream.
            None uses fresh entropy.
        backend: 'auto' / 'cpu' (loop, supports n_workers) or 'cpu_batched'
        n_workers: Worker threads for the 'cpu' backend

    Returns:
        DirichletSolution with .proportions of shape (size, k)

    Raises:
        ValidationError: size < 1, negative or fractional counts
        DimensionError: counts not 1D or empty

    Example:
        >>> from pyposterior import sample_multinomial_params
        >>> props = sample_multinomial_params(1000, [727, 583, 137], seed=0)
        >>> props.mean()[0]                    # ~ 0.5024
        >>> props.difference(0, 1).mean()      # lead of candidate 0 over 1
    """
    design = DirichletDesign.for_multinomial_params(
        size, counts, seed=seed, n_workers=n_workers,
    )
    backend_impl = _get_backend(backend, design)
    result = backend_impl.solve(design)
    return DirichletSolution(_result=result, _design=design)


def sample_proportions(*args, **kwargs) -> NoReturn:
    """
    sample_proportions has been renamed sample_multinomial_params.

    Always raises; it never forwards to the new function.

    Raises:
        RenamedFunctionError: on every call
    """
    raise RenamedFunctionError('sample_proportions', 'sample_multinomial_params')


def _get_backend(
    choice: BackendChoice,
    design: DirichletDesign,
) -> Backend[DirichletDesign, DirichletParams]:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
        ValidationError: If n_workers > 1 with the batched backend
    """
    if choice in ('auto', 'cpu'):
        return CPUDirichletBackend()

    elif choice == 'cpu_batched':
        if design.n_workers > 1:
            raise ValidationError(
                "n_workers: only the 'cpu' backend fans out over workers, "
                f"got n_workers={design.n_workers} with backend='cpu_batched'"
            )
        return CPUBatchedDirichletBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")

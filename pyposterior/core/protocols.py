"""
Core protocols for PyPosterior.

These define structural interfaces that the domain backends satisfy. We use
Protocol (structural typing) rather than ABC (nominal typing) so that a
backend is any object with a name and a solve() method.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pyposterior.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for sampling backends.

    Each backend takes a domain-specific design and produces a
    domain-specific draw payload. Backends are stateless: the sample
    size, random stream and worker count all travel in the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The draw payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{sampler}[_batched]'
        Examples: 'cpu_gibbs', 'cpu_dirichlet_batched', 'cpu_mvn'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Draw design.size samples.

        Raises:
            NumericalError: If a matrix needed by the draws is singular
                or not positive definite
        """
        ...

"""
CPU backends for multinomial proportions.

The posterior under a uniform Dirichlet prior and a multinomial likelihood
is Dirichlet(counts + 1); both backends draw from it directly.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pyposterior.core.compute.distributions import sample_dirichlet
from pyposterior.core.compute.fanout import run_blocks
from pyposterior.core.compute.timing import Timer
from pyposterior.core.result import Result
from pyposterior.multinomial.design import DirichletDesign
from pyposterior.multinomial.solution import DirichletParams


def _info(design: DirichletDesign, n_workers: int) -> dict[str, Any]:
    return {
        'k': design.k,
        'total': design.total,
        'size': design.size,
        'alpha': design.alpha.copy(),
        'n_workers': n_workers,
    }


class CPUDirichletBackend:
    """CPU backend drawing one simplex row per loop iteration."""

    @property
    def name(self) -> str:
        return 'cpu_dirichlet'

    def solve(self, design: DirichletDesign) -> Result[DirichletParams]:
        timer = Timer()
        timer.start()

        proportions = np.empty((design.size, design.k), dtype=np.float64)
        alpha = design.alpha

        def draw_block(rng: np.random.Generator, start: int, stop: int) -> None:
            for i in range(start, stop):
                proportions[i] = sample_dirichlet(rng, alpha)

        with timer.section('draws'):
            n_blocks = run_blocks(draw_block, design.size, design.rng, design.n_workers)

        timer.stop()

        return Result(
            params=DirichletParams(proportions=proportions),
            info=_info(design, n_blocks),
            timing=timer.result(),
            backend_name=self.name,
        )


class CPUBatchedDirichletBackend:
    """CPU backend drawing all simplex rows in one call."""

    @property
    def name(self) -> str:
        return 'cpu_dirichlet_batched'

    def solve(self, design: DirichletDesign) -> Result[DirichletParams]:
        timer = Timer()
        timer.start()

        with timer.section('draws'):
            proportions = sample_dirichlet(design.rng, design.alpha, size=design.size)

        timer.stop()

        return Result(
            params=DirichletParams(proportions=proportions),
            info=_info(design, 1),
            timing=timer.result(),
            backend_name=self.name,
        )

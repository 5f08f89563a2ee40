"""
Random stream handling.

Every sampler receives its random stream explicitly. There is no module
level generator: a call either brings its own ``numpy.random.Generator``,
a seed from which one is built, or gets a fresh unseeded generator that
lives only for that call.

Worker fan-out uses ``Generator.spawn`` so that each block of draws owns
an independent child stream.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from pyposterior.core.exceptions import ValidationError

SeedLike = Union[int, np.random.SeedSequence, np.random.Generator, None]


def resolve_rng(seed: SeedLike) -> np.random.Generator:
    """
    Turn a seed argument into a Generator.

    Args:
        seed: An int or SeedSequence (a new PCG64 generator is built from it),
            an existing Generator (used as-is, so its state advances), or None
            (fresh OS entropy).

    Returns:
        numpy.random.Generator

    Raises:
        ValidationError: If seed is of an unsupported type. The legacy
            ``numpy.random.RandomState`` is rejected because it cannot spawn
            child streams.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is None or isinstance(seed, np.random.SeedSequence):
        return np.random.default_rng(seed)
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        if seed < 0:
            raise ValidationError(f"seed: must be non-negative, got {seed}")
        return np.random.default_rng(int(seed))
    raise ValidationError(
        f"seed: expected int, SeedSequence, Generator or None, "
        f"got {type(seed).__name__}"
    )


def spawn_streams(rng: np.random.Generator, n_streams: int) -> list[np.random.Generator]:
    """Spawn independent child generators, one per worker block."""
    return rng.spawn(n_streams)


def partition(size: int, n_blocks: int) -> list[tuple[int, int]]:
    """
    Split range(size) into at most n_blocks contiguous (start, stop) blocks.

    Block sizes differ by at most one; empty blocks are dropped.

    Example:
        >>> partition(10, 3)
        [(0, 4), (4, 7), (7, 10)]
    """
    n_blocks = min(n_blocks, size)
    base, extra = divmod(size, n_blocks)
    blocks = []
    start = 0
    for b in range(n_blocks):
        stop = start + base + (1 if b < extra else 0)
        blocks.append((start, stop))
        start = stop
    return blocks

"""
Distribute independent draws over worker threads.

A draw function fills rows [start, stop) of preallocated output arrays
using its own generator. With one worker the function runs inline on the
call's generator; with more, each contiguous block gets a child stream
spawned from the call's generator and runs on a thread pool. NumPy and
LAPACK release the GIL for the heavy parts of each draw.

Output is a deterministic function of (seed, n_workers): the blocks and
their streams do not depend on scheduling.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable

import numpy as np

from pyposterior.core.random import partition, spawn_streams

DrawBlock = Callable[[np.random.Generator, int, int], None]


def run_blocks(
    draw_block: DrawBlock,
    size: int,
    rng: np.random.Generator,
    n_workers: int = 1,
) -> int:
    """
    Run draw_block over range(size).

    Args:
        draw_block: fn(rng, start, stop) writing rows start..stop-1
        size: Total number of draws
        rng: The call's generator
        n_workers: Number of worker threads (>= 1)

    Returns:
        The number of blocks actually used (min(n_workers, size))
    """
    if n_workers == 1:
        draw_block(rng, 0, size)
        return 1

    blocks = partition(size, n_workers)
    streams = spawn_streams(rng, len(blocks))
    with ThreadPoolExecutor(max_workers=len(blocks)) as pool:
        futures = [
            pool.submit(draw_block, stream, start, stop)
            for stream, (start, stop) in zip(streams, blocks)
        ]
        # result() re-raises the first failure in the caller's thread
        for future in futures:
            future.result()
    return len(blocks)

"""
Tests for seed resolution, stream spawning and block partitioning.
"""

import numpy as np
import pytest

from pyposterior.core.exceptions import ValidationError
from pyposterior.core.random import partition, resolve_rng, spawn_streams


class TestResolveRng:

    def test_int_seed_reproducible(self):
        a = resolve_rng(7).standard_normal(5)
        b = resolve_rng(7).standard_normal(5)
        np.testing.assert_array_equal(a, b)

    def test_numpy_int_seed(self):
        a = resolve_rng(np.int64(7)).standard_normal(3)
        b = resolve_rng(7).standard_normal(3)
        np.testing.assert_array_equal(a, b)

    def test_seed_sequence(self):
        a = resolve_rng(np.random.SeedSequence(11)).standard_normal(3)
        b = resolve_rng(np.random.SeedSequence(11)).standard_normal(3)
        np.testing.assert_array_equal(a, b)

    def test_generator_passed_through(self):
        gen = np.random.default_rng(3)
        assert resolve_rng(gen) is gen

    def test_none_gives_fresh_generator(self):
        rng = resolve_rng(None)
        assert isinstance(rng, np.random.Generator)

    def test_negative_seed(self):
        with pytest.raises(ValidationError, match="non-negative"):
            resolve_rng(-1)

    @pytest.mark.parametrize("seed", [1.5, "42", True, np.random.RandomState(0)])
    def test_bad_type(self, seed):
        with pytest.raises(ValidationError, match="seed"):
            resolve_rng(seed)


class TestSpawnStreams:

    def test_children_differ(self):
        streams = spawn_streams(np.random.default_rng(1), 3)
        assert len(streams) == 3
        draws = [s.standard_normal(4) for s in streams]
        assert not np.allclose(draws[0], draws[1])
        assert not np.allclose(draws[1], draws[2])

    def test_deterministic(self):
        a = [s.standard_normal(2) for s in spawn_streams(np.random.default_rng(1), 2)]
        b = [s.standard_normal(2) for s in spawn_streams(np.random.default_rng(1), 2)]
        np.testing.assert_array_equal(a, b)


class TestPartition:

    def test_example(self):
        assert partition(10, 3) == [(0, 4), (4, 7), (7, 10)]

    def test_single_block(self):
        assert partition(5, 1) == [(0, 5)]

    def test_more_blocks_than_draws(self):
        assert partition(2, 8) == [(0, 1), (1, 2)]

    @pytest.mark.parametrize("size, n_blocks", [(1, 1), (7, 2), (100, 7), (64, 64)])
    def test_covers_range(self, size, n_blocks):
        blocks = partition(size, n_blocks)
        assert blocks[0][0] == 0
        assert blocks[-1][1] == size
        for (_, stop), (start, _) in zip(blocks, blocks[1:]):
            assert stop == start
        lengths = [stop - start for start, stop in blocks]
        assert max(lengths) - min(lengths) <= 1
        assert min(lengths) >= 1

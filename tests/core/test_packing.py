"""
Tests for half-vectorization of symmetric matrices.

Validates the packing order, exact round trips, stacked inputs, and
rejection of malformed shapes.
"""

import numpy as np
import pytest

from pyposterior.core.compute.linalg.packing import (
    dimension_from_packed,
    half_vectorize,
    packed_length,
    symmetric_matrix,
)
from pyposterior.core.exceptions import DimensionError


def _random_symmetric(rng, d):
    A = rng.standard_normal((d, d))
    return A + A.T


class TestOrder:
    """Packing is the column-major lower triangle."""

    def test_three_by_three(self):
        A = np.array([
            [1.0, 2.0, 3.0],
            [2.0, 4.0, 5.0],
            [3.0, 5.0, 6.0],
        ])
        np.testing.assert_array_equal(half_vectorize(A), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])

    def test_two_by_two(self):
        A = np.array([[2.0, 0.5], [0.5, 1.0]])
        np.testing.assert_array_equal(half_vectorize(A), [2.0, 0.5, 1.0])

    def test_reads_lower_triangle(self):
        """Only the lower triangle is read for a non-symmetric input."""
        A = np.array([[1.0, 99.0], [2.0, 3.0]])
        np.testing.assert_array_equal(half_vectorize(A), [1.0, 2.0, 3.0])

    def test_unpack_known_vector(self):
        expected = np.array([
            [1.0, 2.0, 3.0],
            [2.0, 4.0, 5.0],
            [3.0, 5.0, 6.0],
        ])
        np.testing.assert_array_equal(symmetric_matrix([1, 2, 3, 4, 5, 6]), expected)


class TestRoundTrip:
    """symmetric_matrix(half_vectorize(A)) == A exactly."""

    @pytest.mark.parametrize("d", [1, 2, 3, 5, 8])
    def test_symmetric_round_trip(self, rng, d):
        A = _random_symmetric(rng, d)
        np.testing.assert_array_equal(symmetric_matrix(half_vectorize(A)), A)

    def test_packed_round_trip(self, rng):
        v = rng.standard_normal(10)
        np.testing.assert_array_equal(half_vectorize(symmetric_matrix(v)), v)

    def test_stacked_round_trip(self, rng):
        stack = np.stack([_random_symmetric(rng, 4) for _ in range(7)])
        packed = half_vectorize(stack)
        assert packed.shape == (7, 10)
        np.testing.assert_array_equal(symmetric_matrix(packed), stack)


class TestShapes:

    @pytest.mark.parametrize("d, k", [(1, 1), (2, 3), (3, 6), (10, 55)])
    def test_lengths(self, d, k):
        assert packed_length(d) == k
        assert dimension_from_packed(k) == d

    @pytest.mark.parametrize("k", [0, 2, 4, 5, 7])
    def test_non_triangular_length(self, k):
        with pytest.raises(DimensionError):
            dimension_from_packed(k)

    def test_unpack_bad_length(self):
        with pytest.raises(DimensionError):
            symmetric_matrix([1.0, 2.0])

    def test_unpack_scalar(self):
        with pytest.raises(DimensionError):
            symmetric_matrix(3.0)

    def test_pack_non_square(self):
        with pytest.raises(DimensionError):
            half_vectorize(np.zeros((2, 3)))

    def test_pack_vector(self):
        with pytest.raises(DimensionError):
            half_vectorize(np.zeros(3))

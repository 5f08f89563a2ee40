"""
Tests for Cholesky factorisation and SPD inversion.
"""

import numpy as np
import pytest

from pyposterior.core.compute.linalg.cholesky import (
    cholesky_lower_stack,
    cholesky_upper,
    inverse_spd,
)
from pyposterior.core.exceptions import NotPositiveDefiniteError


@pytest.fixture
def spd(rng):
    A = rng.standard_normal((30, 4))
    return A.T @ A


class TestCholeskyUpper:

    def test_factor_reproduces_matrix(self, spd):
        U = cholesky_upper(spd)
        np.testing.assert_allclose(U.T @ U, spd, rtol=1e-12, atol=1e-12)

    def test_upper_triangular(self, spd):
        U = cholesky_upper(spd)
        np.testing.assert_array_equal(np.tril(U, -1), 0.0)

    def test_scaling(self, spd):
        """chol(c A) = sqrt(c) chol(A)."""
        np.testing.assert_allclose(
            cholesky_upper(2.5 * spd), np.sqrt(2.5) * cholesky_upper(spd), rtol=1e-12
        )

    def test_not_positive_definite(self):
        A = np.array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_upper(A, 'test matrix')
        assert exc_info.value.matrix_name == 'test matrix'
        assert exc_info.value.min_eigenvalue == pytest.approx(-1.0)


class TestInverseSPD:

    def test_inverse(self, spd):
        inv = inverse_spd(spd)
        np.testing.assert_allclose(inv @ spd, np.eye(4), atol=1e-10)

    def test_exactly_symmetric(self, spd):
        inv = inverse_spd(spd)
        np.testing.assert_array_equal(inv, inv.T)

    def test_singular(self):
        with pytest.raises(NotPositiveDefiniteError):
            inverse_spd(np.ones((3, 3)))


class TestCholeskyLowerStack:

    def test_factors_reproduce_stack(self, spd):
        stack = np.stack([spd, 2.0 * spd, 0.5 * spd])
        L = cholesky_lower_stack(stack)
        np.testing.assert_allclose(L @ np.swapaxes(L, 1, 2), stack, rtol=1e-12, atol=1e-12)
        np.testing.assert_array_equal(np.triu(L[1], 1), 0.0)

    def test_one_bad_matrix_in_stack(self, spd):
        stack = np.stack([spd, -spd])
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            cholesky_lower_stack(stack, 'draws')
        assert exc_info.value.matrix_name == 'draws'
        assert exc_info.value.min_eigenvalue < 0

"""
Tests for the parameterized random variate wrappers.

Checks first moments against closed forms with generous tolerances.
"""

import numpy as np
import pytest

from pyposterior.core.compute.distributions import (
    sample_dirichlet,
    sample_inv_gamma,
    sample_inv_wishart,
    sample_mvn,
    sample_wishart,
)
from pyposterior.core.exceptions import NotPositiveDefiniteError


class TestInverseGamma:

    def test_rate_parameterization(self, rng):
        """Mean is rate / (shape - 1); variance rate^2 / ((shape - 1)^2 (shape - 2))."""
        draws = sample_inv_gamma(rng, 6.0, 2.0, size=50000)
        assert draws.mean() == pytest.approx(0.4, rel=0.02)
        assert draws.var() == pytest.approx(0.04, rel=0.1)

    def test_scalar_draw(self, rng):
        assert np.ndim(sample_inv_gamma(rng, 2.0, 1.0)) == 0

    def test_tiny_rate_stays_positive(self, rng):
        """Gamma draws with scale 1 / rate overflow here; the inverse must stay positive."""
        draws = sample_inv_gamma(rng, 4.0, 5e-308, size=5000)
        assert np.all(draws > 0)
        assert np.all(np.isfinite(draws))


class TestDirichlet:

    def test_mean(self, rng):
        alpha = np.array([2.0, 3.0, 5.0])
        draws = sample_dirichlet(rng, alpha, size=20000)
        np.testing.assert_allclose(draws.mean(axis=0), alpha / alpha.sum(), atol=0.01)


class TestWishart:

    def test_shape_for_single_draw(self, rng):
        assert sample_wishart(rng, 5, np.eye(3)).shape == (1, 3, 3)

    def test_shape_for_one_dimension(self, rng):
        assert sample_wishart(rng, 5, np.eye(1), size=4).shape == (4, 1, 1)

    def test_mean(self, rng):
        scale = np.array([[1.0, 0.3], [0.3, 0.5]])
        draws = sample_wishart(rng, 10, scale, size=20000)
        np.testing.assert_allclose(draws.mean(axis=0), 10 * scale, rtol=0.03, atol=0.05)

    def test_inverse_mean(self, rng):
        """E[inv(W)] = inv(scale) / (df - d - 1)."""
        S = np.array([[4.0, 1.0], [1.0, 2.0]])
        draws = sample_inv_wishart(rng, 20, np.linalg.inv(S), size=20000)
        np.testing.assert_allclose(draws.mean(axis=0), S / 17, rtol=0.03, atol=0.005)

    def test_inverse_draws_positive_definite(self, rng):
        draws = sample_inv_wishart(rng, 6, np.eye(3), size=50)
        assert np.all(np.linalg.eigvalsh(draws) > 0)


class TestMVN:

    def test_mean(self, rng):
        mean = np.array([1.0, -2.0])
        cov = np.array([[1.0, 0.5], [0.5, 2.0]])
        draws = np.array([sample_mvn(rng, mean, cov) for _ in range(5000)])
        np.testing.assert_allclose(draws.mean(axis=0), mean, atol=0.06)
        np.testing.assert_allclose(np.cov(draws.T), cov, atol=0.1)

    def test_not_positive_definite_covariance(self, rng):
        cov = np.array([[1.0, 2.0], [2.0, 1.0]])
        with pytest.raises(NotPositiveDefiniteError) as exc_info:
            sample_mvn(rng, np.zeros(2), cov)
        assert exc_info.value.min_eigenvalue == pytest.approx(-1.0)

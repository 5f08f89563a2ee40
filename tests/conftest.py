"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyposterior.regression import LinearModelFit


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_regression_data(rng):
    """Simple regression dataset: intercept plus two predictors, noise sd 0.5."""
    n = 200
    X = np.column_stack([np.ones(n), rng.standard_normal((n, 2))])
    beta_true = np.array([1.0, -2.0, 0.5])
    y = X @ beta_true + rng.standard_normal(n) * 0.5
    return X, y, beta_true


@pytest.fixture
def ols_fit(simple_regression_data):
    """LinearModelFit built from the least-squares solution."""
    X, y, _ = simple_regression_data
    b_hat, *_ = np.linalg.lstsq(X, y, rcond=None)
    return LinearModelFit.from_arrays(X, y, b_hat, y - X @ b_hat)


@pytest.fixture
def mvn_data(rng):
    """500 draws from a correlated bivariate normal."""
    mean = np.array([1.0, -1.0])
    cov = np.array([[2.0, 0.6], [0.6, 1.0]])
    return rng.multivariate_normal(mean, cov, size=500), mean, cov

"""
Tests for Result envelope, Timer and the summary helpers.
"""

import dataclasses
import time

import numpy as np
import pytest

from pyposterior.core.compute.timing import Timer
from pyposterior.core.exceptions import ValidationError
from pyposterior.core.result import Result
from pyposterior.core.summary import (
    column_quantiles,
    column_sd,
    credible_interval,
    format_table,
)


class TestResult:

    def test_frozen(self):
        result = Result(params=1, info={}, timing=None, backend_name='cpu')
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.backend_name = 'other'

    def test_default_warnings(self):
        result = Result(params=1, info={}, timing=None, backend_name='cpu')
        assert result.warnings == ()


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('draws'):
            time.sleep(0.001)
        with timer.section('draws'):
            time.sleep(0.001)
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'draws'}
        assert result['draws'] >= 0.002
        assert result['total_seconds'] >= result['draws']

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()


class TestSummaries:

    @pytest.fixture
    def draws(self):
        return np.column_stack([np.arange(101.0), np.arange(101.0) * 2])

    def test_quantiles(self, draws):
        q = column_quantiles(draws, [0.0, 0.5, 1.0])
        assert q.shape == (2, 3)
        np.testing.assert_allclose(q[0], [0.0, 50.0, 100.0])
        np.testing.assert_allclose(q[1], [0.0, 100.0, 200.0])

    def test_quantiles_out_of_range(self, draws):
        with pytest.raises(ValidationError, match="probs"):
            column_quantiles(draws, [0.5, 1.5])

    def test_credible_interval(self, draws):
        ci = credible_interval(draws, 0.9)
        np.testing.assert_allclose(ci[0], [5.0, 95.0])

    @pytest.mark.parametrize("level", [0.0, 1.0, 1.2])
    def test_credible_interval_bad_level(self, draws, level):
        with pytest.raises(ValidationError, match="level"):
            credible_interval(draws, level)

    def test_sd_single_draw(self):
        assert np.all(np.isnan(column_sd(np.ones((1, 3)))))

    def test_format_table(self, draws):
        lines = format_table("Params", ["a", "b"], draws)
        assert lines[0] == "Params :"
        assert "2.5%" in lines[1]
        assert "97.5%" in lines[1]
        assert len(lines) == 4

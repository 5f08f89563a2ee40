"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from pyposterior.core.exceptions import DimensionError, ValidationError
from pyposterior.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_nonnegative_integers,
    check_positive_int,
)


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "X")

    def test_mixed_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array(np.array([1, "a", None], dtype=object), "X")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError):
            check_array([1 + 2j], "X")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="counts"):
            check_array(["x"], "counts")


class TestShapeChecks:

    def test_check_finite(self):
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([1.0, np.nan, np.inf]), "y")

    def test_check_1d(self):
        check_1d(np.zeros(3), "y")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 1)), "y")

    def test_check_2d(self):
        check_2d(np.zeros((3, 1)), "X")
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_consistent_length(self):
        with pytest.raises(DimensionError, match="X=3, y=4"):
            check_consistent_length(np.zeros(3), np.zeros(4), names=("X", "y"))

    def test_consistent_length_name_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("X", "y"))


class TestCheckPositiveInt:

    @pytest.mark.parametrize("value", [1, 10, np.int64(3)])
    def test_accepts(self, value):
        assert check_positive_int(value, "size") == int(value)
        assert type(check_positive_int(value, "size")) is int

    @pytest.mark.parametrize("value", [0, -1])
    def test_rejects_below_one(self, value):
        with pytest.raises(ValidationError, match="must be >= 1"):
            check_positive_int(value, "size")

    @pytest.mark.parametrize("value", [1.0, "3", None, True])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError, match="expected an integer"):
            check_positive_int(value, "size")


class TestCheckNonnegativeIntegers:

    def test_accepts_zeros(self):
        check_nonnegative_integers(np.array([0.0, 0.0]), "counts")

    def test_negative(self):
        with pytest.raises(ValidationError, match=r"entries \[1\] are negative"):
            check_nonnegative_integers(np.array([2.0, -1.0]), "counts")

    def test_fractional(self):
        with pytest.raises(ValidationError, match=r"entries \[0\] are not whole"):
            check_nonnegative_integers(np.array([0.5, 1.0]), "counts")

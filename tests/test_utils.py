import math

import pytest

from plane_math import set_rounding_mode
from plane_math._utils import (
    ClassInstanceMethod,
    RoundingMode,
    arg_type_error,
    arg_value_error_msg,
    divide,
    format_number,
    round_number,
)

from . import reset_config


class TestClassInstanceMethod:
    class Pair:
        def __init__(self, value):
            self.value = value

        @ClassInstanceMethod
        def total(cls, a, b):
            """Sum of both values."""
            return cls, a.value + b.value

        @total.instancemethod
        def total(self, other):
            return self, self.value + other.value

    def test_via_class(self):
        Pair = self.Pair
        assert Pair.total(Pair(1), Pair(2)) == (Pair, 3)

    def test_via_instance(self):
        pair = self.Pair(1)
        assert pair.total(self.Pair(2)) == (pair, 3)

    def test_metadata(self):
        descriptor = vars(self.Pair)["total"]
        assert descriptor.__name__ == "total"
        assert descriptor.__doc__ == "Sum of both values."


class TestErrors:
    def test_type_error(self):
        error = arg_type_error("other", 1.5)
        assert isinstance(error, TypeError)
        assert str(error) == "Invalid type for 'other' (got: float)"

    def test_value_error(self):
        error = arg_value_error_msg("Too short", [1])
        assert isinstance(error, ValueError)
        assert str(error) == "Too short (got: [1])"


@pytest.mark.parametrize(
    "value,string",
    [
        (5, "5"),
        (5.0, "5"),
        (-0.0, "0"),
        (2.5, "2.5"),
        (math.inf, "inf"),
        (math.nan, "nan"),
    ],
)
def test_format_number(value, string):
    assert format_number(value) == string


class TestDivide:
    def test_finite(self):
        assert divide(3, 2) == 1.5

    @pytest.mark.parametrize(
        "numerator,denominator,result",
        [(1, 0, math.inf), (-1, 0, -math.inf), (1, -0.0, -math.inf)],
    )
    def test_by_zero(self, numerator, denominator, result):
        assert divide(numerator, denominator) == result

    @pytest.mark.parametrize("numerator", [0, 0.0, math.nan])
    def test_nan(self, numerator):
        assert math.isnan(divide(numerator, 0))


class TestRoundNumber:
    @pytest.mark.parametrize(
        "value,result",
        [
            (0.5, 1),
            (1.5, 2),
            (2.5, 3),
            (-0.5, 0),
            (-2.5, -2),
            (2.4, 2),
            (0.49999999999999994, 0),
            (-0.49999999999999994, 0),
            (4503599627370497, 4503599627370497),
            (4503599627370497.0, 4503599627370497),
        ],
    )
    @reset_config()
    def test_half_up(self, value, result):
        set_rounding_mode(RoundingMode.HALF_UP)
        assert round_number(value) == result

    @pytest.mark.parametrize(
        "value,result",
        [(0.5, 0), (1.5, 2), (2.5, 2), (-0.5, 0), (-2.5, -2), (2.6, 3)],
    )
    @reset_config()
    def test_half_even(self, value, result):
        set_rounding_mode(RoundingMode.HALF_EVEN)
        assert round_number(value) == result

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinite(self, value):
        assert round_number(value) == value

    def test_nan(self):
        assert math.isnan(round_number(math.nan))

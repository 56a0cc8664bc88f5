import math

import pytest

from py_vecmath.constants import EPSILON
from py_vecmath.exceptions import UnitTypeError
from py_vecmath.float_ops import almost_equal, equal, lerp
from py_vecmath.unit import CM, MM


class TestAlmostEqual:

    @pytest.mark.parametrize(
        "a, b, tol, expected",
        [
            (0.9, 1.0, 0.1000001, True),
            (0.9, 1.0, 0.01, False),
            (1000.0, 1001.0, 0.001, True),
            (1000.0, 1002.0, 0.001, False),
            (0.0, 1e-9, EPSILON, True),
            (-1.0, 1.0, 0.5, False),
            (math.inf, math.inf, 0.0, True),
        ],
    )
    def test_combined_tolerance(self, a, b, tol, expected):
        assert almost_equal(a, b, tol) is expected

    def test_nan_is_never_almost_equal(self):
        assert not almost_equal(math.nan, math.nan, 1.0)
        assert not almost_equal(math.nan, 0.0, 1.0)

    def test_symmetric(self):
        assert almost_equal(1.0, 1.05, 0.05) == almost_equal(1.05, 1.0, 0.05)

    def test_equal_uses_default_epsilon(self):
        assert equal(1.00000001, 1.0)
        assert not equal(1.0000001, 1.0)

    def test_unit_values(self):
        assert almost_equal(MM(1.0), MM(1.05), 0.1)
        assert not almost_equal(MM(1.0), MM(2.0), 0.1)

    def test_mixed_units_raise(self):
        with pytest.raises(UnitTypeError):
            almost_equal(MM(1.0), CM(1.0), 0.1)
        with pytest.raises(UnitTypeError):
            almost_equal(MM(1.0), 1.0, 0.1)


class TestLerp:

    @pytest.mark.parametrize(
        "a, b, t, expected",
        [
            (0.0, 10.0, 0.0, 0.0),
            (0.0, 10.0, 1.0, 10.0),
            (0.0, 10.0, 0.5, 5.0),
            (1.25, 2.0, 0.25, 1.4375),
            (0.0, 10.0, 2.0, 20.0),
        ],
    )
    def test_blend(self, a, b, t, expected):
        assert lerp(a, b, t) == pytest.approx(expected)

    def test_endpoints_exact(self):
        assert lerp(0.1, 0.7, 0.0) == 0.1
        assert lerp(0.1, 0.7, 1.0) == 0.7

    def test_unit_values_keep_unit(self):
        result = lerp(MM(0.0), MM(10.0), 0.5)
        assert isinstance(result, MM)
        assert result.value == pytest.approx(5.0)

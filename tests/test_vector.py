import math

import pytest

from py_vecmath import Vec2, Vec3, Vec4, Ordering
from py_vecmath.unit import MM, CM
from py_vecmath.exceptions import UnitTypeError
from py_vecmath.float_ops import equal


class TestVectorArithmetic:

    def test_add(self):
        assert Vec3(1, 2, 3).add(Vec3(4, 6, 8)) == Vec3(5, 8, 11)
        assert Vec3(-1, -2, -3) + Vec3(4, 6, 8) == Vec3(3, 4, 5)

    def test_sub(self):
        assert Vec3(-1, -2, -3).sub(Vec3(4, 5, 6)) == Vec3(-5, -7, -9)
        assert Vec2(1.0, 1.0) - Vec2(0.5, 2.0) == Vec2(0.5, -1.0)

    def test_mul(self):
        assert Vec4(1, 2, 3, 4).mul(Vec4(2, 2, 2, 2)) == Vec4(2, 4, 6, 8)
        assert Vec2(3, 4) * Vec2(2, 0) == Vec2(6, 0)

    def test_div(self):
        assert Vec3(4, 5, 9) / Vec3(1, 2, 3) == Vec3(4, 2, 3)
        assert Vec3(-7, 7, 1) / Vec3(2, -2, 2) == Vec3(-3, -3, 0)
        assert Vec2(1.0, 3.0) / Vec2(2.0, 4.0) == Vec2(0.5, 0.75)

    def test_float_division_by_zero(self):
        result = Vec3(1.0, -1.0, 0.0) / Vec3(0.0, 0.0, 0.0)
        assert result.x == math.inf
        assert result.y == -math.inf
        assert math.isnan(result.z)

    def test_integer_division_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            _ = Vec2(1, 2) / Vec2(0, 1)

    def test_scalar_broadcast(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert v + 1 == Vec3(2.0, 3.0, 4.0)
        assert v - 1 == Vec3(0.0, 1.0, 2.0)
        assert v * 2 == Vec3(2.0, 4.0, 6.0)
        assert v / 2 == Vec3(0.5, 1.0, 1.5)
        assert Vec2(7, -7) / 2 == Vec2(3, -3)

    def test_reflected_scalar_ops(self):
        v = Vec3(1.0, 2.0, 4.0)
        assert 2 * v == Vec3(2.0, 4.0, 8.0)
        assert 1 + v == Vec3(2.0, 3.0, 5.0)
        assert 10 - v == Vec3(9.0, 8.0, 6.0)
        assert 8 / v == Vec3(8.0, 4.0, 2.0)

    def test_scalar_methods(self):
        v = Vec2(2, 4)
        assert v.add_scalar(1) == Vec2(3, 5)
        assert v.sub_scalar(1) == Vec2(1, 3)
        assert v.mul_scalar(3) == Vec2(6, 12)
        assert v.div_scalar(3) == Vec2(0, 1)

    def test_neg(self):
        assert -Vec3(-1, -2, -3) == Vec3(1, 2, 3)
        assert Vec2(1.0, -0.5).neg() == Vec2(-1.0, 0.5)

    def test_immutable(self):
        v = Vec3(1, 2, 3)
        _ = v + Vec3(1, 1, 1)
        assert v == Vec3(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5  # type: ignore[misc]

    def test_mismatched_sizes(self):
        with pytest.raises(TypeError):
            _ = Vec2(1, 2) + Vec3(1, 2, 3)
        with pytest.raises(TypeError):
            Vec2(1, 2).add(Vec3(1, 2, 3))  # type: ignore[arg-type]

    def test_vector_mul_type_error(self):
        v = Vec3(1.0, 2.0, 3.0)
        with pytest.raises(TypeError):
            _ = v * "x"  # type: ignore[operator]

    def test_plain_tuple_is_not_a_vector(self):
        with pytest.raises(TypeError):
            _ = Vec2(1, 2) - (1, 2)  # type: ignore[operator]


class TestVectorComparison:

    def test_equality_is_exact(self):
        assert Vec2(1.0, 2.0) == Vec2(1.0, 2.0)
        assert Vec2(1.0, 2.0) != Vec2(1.0, 2.0000001)

    def test_nan_never_equal(self):
        v = Vec2(math.nan, 1.0)
        assert v != v

    def test_different_class_not_equal(self):
        assert Vec2(1, 2) != (1, 2)
        assert Vec3(1, 2, 0) != Vec2(1, 2)

    def test_hashable(self):
        assert len({Vec2(1, 2), Vec2(1, 2), Vec2(2, 1)}) == 2

    def test_almost_equal(self):
        a = Vec3(1.0, 1.0, 1.0)
        assert a.almost_equal(Vec3(0.9, 0.9, 0.9), 0.1000001)
        assert not a.almost_equal(Vec3(1.0, 1.0, 0.9), 0.01)
        assert a.almost_equal(Vec3(1.0 + 1e-9, 1.0, 1.0))

    def test_almost_equal_units(self):
        a = Vec3(MM(1.0), MM(5.0), MM(2.0))
        assert a.almost_equal(Vec3(MM(1.0), MM(5.1), MM(1.9)), 0.1)
        with pytest.raises(UnitTypeError):
            a.almost_equal(Vec3(CM(1.0), MM(5.0), MM(2.0)), 0.1)

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (Vec2(1, 1), Vec2(2, 2), Ordering.LESS),
            (Vec2(3, 3), Vec2(2, 2), Ordering.GREATER),
            (Vec2(2, 2), Vec2(2, 2), Ordering.EQUAL),
            (Vec2(1, 2), Vec2(2, 1), None),
            (Vec2(1, 2), Vec2(2, 2), None),
        ],
    )
    def test_partial_cmp(self, a, b, expected):
        assert a.partial_cmp(b) == expected

    @pytest.mark.parametrize("other", [(2, 3), (0, 0), Vec3(2, 3, 4)])
    def test_ordering_rejects_other_tuples(self, other):
        v = Vec2(1, 2)
        with pytest.raises(TypeError):
            _ = v < other
        with pytest.raises(TypeError):
            _ = v >= other
        with pytest.raises(TypeError):
            _ = other > v

    def test_ordering_rejects_numbers(self):
        with pytest.raises(TypeError):
            _ = Vec2(1, 2) < 3  # type: ignore[operator]

    def test_partial_order_operators(self):
        a, b = Vec3(1, 1, 1), Vec3(2, 2, 2)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a <= Vec3(1, 1, 1)
        assert a >= Vec3(1, 1, 1)
        # neither less nor greater
        c, d = Vec2(1, 2), Vec2(2, 1)
        assert not c < d
        assert not c > d
        assert not c <= d
        assert not c >= d

    def test_any_less_any_greater(self):
        a, b = Vec2(1, 3), Vec2(2, 2)
        assert a.any_less(b)
        assert a.any_greater(b)
        assert not Vec2(2, 2).any_less(Vec2(1, 1))
        assert not Vec2(1, 1).any_greater(Vec2(1, 1))

    def test_min_max(self):
        a, b = Vec3(0, 1, 2), Vec3(-1, 0, 3)
        assert a.min(b) == Vec3(-1, 0, 2)
        assert a.max(b) == Vec3(0, 1, 3)


class TestVectorIdentities:

    def test_zero_one(self):
        assert Vec3.zero() == Vec3(0.0, 0.0, 0.0)
        assert Vec4.one() == Vec4(1.0, 1.0, 1.0, 1.0)
        assert Vec2.zero(int) == Vec2(0, 0)
        assert isinstance(Vec2.zero(int).x, int)
        assert Vec2.one(MM) == Vec2(MM(1), MM(1))

    def test_is_zero(self):
        assert Vec3.zero().is_zero()
        assert not Vec3(0.0, 0.0, 1e-12).is_zero()

    def test_is_nan_requires_all_components(self):
        assert Vec2(math.nan, math.nan).is_nan()
        assert not Vec2(math.nan, 1.0).is_nan()
        assert not Vec2(1, 2).is_nan()

    def test_iteration_in_order(self):
        v = Vec4(1, 2, 3, 4)
        assert list(v) == [1, 2, 3, 4]
        assert list(v) == [1, 2, 3, 4]
        x, y, z, w = v
        assert (x, w) == (1, 4)

    def test_str_and_repr(self):
        assert str(Vec3(1, 5, 2)) == "Vec3(1, 5, 2)"
        assert repr(Vec2(1, 5)) == "Vec2(x=1, y=5)"
        assert str(Vec2(MM(1.5), MM(2))) == "Vec2(1.5mm, 2mm)"


class TestVectorGeometry:

    def test_dot(self):
        assert Vec3(1, 2, 3).dot(Vec3(1, 2, 3)) == 14
        assert Vec3(-1, -2, -3).dot(Vec3(4, 5, 6)) == -32
        assert Vec2(1.0, 0.0).dot(Vec2(0.0, 1.0)) == 0.0

    def test_length(self):
        assert Vec3(1.0, 0.0, 0.0).length() == 1.0
        assert Vec2(3.0, 4.0).length() == 5.0
        assert Vec3(1.0, 2.0, 3.0).length() == pytest.approx(3.74165738)
        assert Vec2(3.0, 4.0).length_sq() == 25.0

    def test_length_within_epsilon(self):
        assert equal(Vec2(1.0, 2.0).length(), 2.23606797749979)
        assert Vec2(1.0, 2.0).length() == pytest.approx(2.2360679, abs=1e-7)

    def test_length_of_units(self):
        assert Vec2(MM(3.0), MM(4.0)).length() == MM(5.0)

    def test_normalize(self):
        n = Vec3(-3.0, -3.0, -3.0).normalize()
        assert n is not None
        expected = -1 / math.sqrt(3)
        assert n.x == pytest.approx(expected)
        assert n.y == pytest.approx(expected)
        assert n.z == pytest.approx(expected)
        assert n.length() == pytest.approx(1.0)

    def test_normalize_zero_vector(self):
        assert Vec3(0.0, 0.0, 0.0).normalize() is None
        assert Vec2(0, 0).normalize() is None

    def test_project(self):
        p = Vec2(3.0, 4.0).project(Vec2(1.0, 0.0))
        assert p == Vec2(3.0, 0.0)
        p = Vec3(1.0, 1.0, 0.0).project(Vec3(2.0, 2.0, 2.0))
        assert p.almost_equal(Vec3(2 / 3, 2 / 3, 2 / 3))

    def test_project_onto_zero_float_vector(self):
        p = Vec2(1.0, 1.0).project(Vec2(0.0, 0.0))
        assert math.isnan(p.x) and math.isnan(p.y)

    def test_project_onto_zero_int_vector(self):
        with pytest.raises(ZeroDivisionError):
            Vec2(1, 1).project(Vec2(0, 0))

    def test_lerp(self):
        a, b = Vec2(1.25, 1.25), Vec2(2.0, 2.0)
        assert a.lerp(b, 0.25) == Vec2(1.4375, 1.4375)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b

    @pytest.mark.parametrize("cls", [Vec2, Vec3, Vec4])
    def test_lerp_blends_every_size(self, cls):
        size = len(cls._fields)
        a, b = cls(*[1.25] * size), cls(*[2.0] * size)
        assert a.lerp(b, 0.25) == cls(*[1.4375] * size)
        assert a.lerp(b, 0.0) == a

    @pytest.mark.parametrize("cls", [Vec2, Vec3, Vec4])
    def test_lerp_differs_from_historical_product(self, cls):
        # Older releases computed lerp as self * other.mul_scalar(t): the product of self
        # with the scaled target, not a blend. lerp now returns (1 - t) * self + t * other.
        size = len(cls._fields)
        a, b = cls(*[1.25] * size), cls(*[2.0] * size)
        historical = a * b.mul_scalar(0.25)
        assert historical == cls(*[0.625] * size)
        assert a.lerp(b, 0.25) != historical

    def test_round(self):
        assert Vec3(0.3, 1.5, -2.5).round() == Vec3(0.0, 2.0, -3.0)
        assert Vec2(1, 2).round() == Vec2(1, 2)

    def test_clamp(self):
        assert Vec3(-2, 4, -6).clamp(-1, 2) == Vec3(-1, 2, -1)
        assert Vec2(math.nan, 0.5).clamp(0.0, 1.0) == Vec2(1.0, 0.5)


class TestVectorUnits:

    def test_same_unit_components(self):
        a = Vec3(MM(1.0), MM(2.0), MM(3.0))
        b = Vec3(MM(1.0), MM(1.0), MM(1.0))
        assert a + b == Vec3(MM(2.0), MM(3.0), MM(4.0))
        assert a * 2 == Vec3(MM(2.0), MM(4.0), MM(6.0))

    def test_mixed_units_fail(self):
        with pytest.raises(UnitTypeError):
            _ = Vec2(MM(1.0), MM(1.0)) + Vec2(CM(1.0), CM(1.0))


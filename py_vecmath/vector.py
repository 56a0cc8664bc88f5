"""Fixed-size vector algebra over any scalar type.

`Vec2`, `Vec3` and `Vec4` are immutable NamedTuples sharing one implementation of
component-wise arithmetic, comparison and geometric operations. Components may be
``int``, ``float`` or unit values from `py_vecmath.unit` (e.g. ``Vec3(MM(1.0), MM(5.0), MM(2.0))``).

Key Features:
    - Immutable value types: every operation returns a new vector
    - Component-wise and scalar-broadcast arithmetic with operator overloading
    - Exact equality (``==``) and explicit tolerance-based ``almost_equal``
    - Partial ordering: ``a < b`` only when every component is less
    - Geometry: dot product, length, normalize, project, lerp
    - Generated swizzle accessors (``v.xy``, ``v.zyx``, ...)

Typical Usage:
    ```python
    from py_vecmath import Vec3

    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)

    a + b               # Vec3(x=5.0, y=7.0, z=9.0)
    a * 2               # Vec3(x=2.0, y=4.0, z=6.0)
    a.dot(b)            # 32.0
    a.normalize()       # unit vector, or None for a zero vector
    a.lerp(b, 0.5)      # Vec3(x=2.5, y=3.5, z=4.5)
    b.zyx               # Vec3(x=6.0, y=5.0, z=4.0)
    ```

Division semantics:
    Integer components divide with truncation toward zero; float division by zero follows
    IEEE-754 and yields inf/NaN instead of raising.
"""
from __future__ import annotations

import functools
import operator
from enum import IntEnum
from typing import Any, Callable, Iterable, NamedTuple, Optional, Tuple

from typing_extensions import Self

from py_vecmath.clamp import clamp as clamp_scalar
from py_vecmath.constants import EPSILON
from py_vecmath.float_ops import almost_equal as almost_equal_scalar, lerp as lerp_scalar
from py_vecmath.generics import Number, Scalar, SupportsArithmetic
from py_vecmath.scalar import div, is_nan, is_zero, round_half_away, sqrt
from py_vecmath.swizzle import install_swizzles

__all__ = ('Ordering', 'Vec2', 'Vec3', 'Vec4')


class Ordering(IntEnum):
    """Result of `partial_cmp` for comparable vectors."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class _VectorOps:
    """Operations shared by all vector sizes.

    Mixed into NamedTuple classes, so ``self`` is always a tuple of components.
    """

    __slots__ = ()
    __hash__ = tuple.__hash__

    def _new(self, components: Iterable[Any]) -> Self:
        return self.__class__(*components)

    def _pairs(self, other: Any) -> Iterable[Tuple[Any, Any]]:
        if other.__class__ is not self.__class__:
            raise TypeError(f"{self.__class__.__name__} expected, got {other.__class__.__name__}")
        return zip(self, other)  # type: ignore[call-overload]

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(str(c) for c in self)})"  # type: ignore[attr-defined]

    #region Arithmetic
    def add(self, other: Self) -> Self:
        """Component-wise addition."""
        return self._new(a + b for a, b in self._pairs(other))

    def sub(self, other: Self) -> Self:
        """Component-wise subtraction."""
        return self._new(a - b for a, b in self._pairs(other))

    def mul(self, other: Self) -> Self:
        """Component-wise multiplication."""
        return self._new(a * b for a, b in self._pairs(other))

    def div(self, other: Self) -> Self:
        """Component-wise division.

        Integers truncate toward zero; floats divided by zero give inf/NaN.

        Examples:
            >>> Vec3(4, 5, 9).div(Vec3(1, 2, 3))
            Vec3(x=4, y=2, z=3)
        """
        return self._new(div(a, b) for a, b in self._pairs(other))

    def add_scalar(self, scalar: Scalar) -> Self:
        return self._new(c + scalar for c in self)  # type: ignore[attr-defined]

    def sub_scalar(self, scalar: Scalar) -> Self:
        return self._new(c - scalar for c in self)  # type: ignore[attr-defined]

    def mul_scalar(self, scalar: Scalar) -> Self:
        return self._new(c * scalar for c in self)  # type: ignore[attr-defined]

    def div_scalar(self, scalar: Scalar) -> Self:
        return self._new(div(c, scalar) for c in self)  # type: ignore[attr-defined]

    def neg(self) -> Self:
        """Component-wise negation."""
        return self._new(-c for c in self)  # type: ignore[attr-defined]

    def _binary(self, other: Any, vector_op: Callable[[Self, Self], Self],
                scalar_op: Callable[[Self, Any], Self]) -> Any:
        if isinstance(other, tuple):
            # a tuple subclass falls back to concatenation on NotImplemented
            if other.__class__ is not self.__class__:
                raise TypeError(f"unsupported operand types: {self.__class__.__name__} and {other.__class__.__name__}")
            return vector_op(self, other)  # type: ignore[arg-type]
        if not isinstance(other, (int, float, SupportsArithmetic)):
            return NotImplemented
        return scalar_op(self, other)

    # Operators accept a vector of the same size (component-wise) or a scalar (broadcast)
    def __add__(self, other: Any) -> Self:  # type: ignore[override]
        return self._binary(other, _VectorOps.add, _VectorOps.add_scalar)

    def __radd__(self, other: Any) -> Self:
        return self._binary(other, _VectorOps.add, _VectorOps.add_scalar)

    def __sub__(self, other: Any) -> Self:
        return self._binary(other, _VectorOps.sub, _VectorOps.sub_scalar)

    def __rsub__(self, other: Any) -> Self:
        return self._binary(other, lambda s, o: o.sub(s), lambda s, o: s._new(o - c for c in s))

    def __mul__(self, other: Any) -> Self:  # type: ignore[override]
        return self._binary(other, _VectorOps.mul, _VectorOps.mul_scalar)

    def __rmul__(self, other: Any) -> Self:  # type: ignore[override]
        return self._binary(other, _VectorOps.mul, lambda s, o: s._new(o * c for c in s))

    def __truediv__(self, other: Any) -> Self:
        return self._binary(other, _VectorOps.div, _VectorOps.div_scalar)

    def __rtruediv__(self, other: Any) -> Self:
        return self._binary(other, lambda s, o: o.div(s), lambda s, o: s._new(div(o, c) for c in s))

    def __neg__(self) -> Self:
        return self.neg()
    #endregion Arithmetic

    #region Comparison
    def __eq__(self, other: object) -> bool:
        """Exact component-wise equality; vectors of another class are never equal."""
        if other.__class__ is not self.__class__:
            return False
        return all(a == b for a, b in zip(self, other))  # type: ignore[call-overload]

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def almost_equal(self, other: Self, tol: Number = EPSILON) -> bool:
        """Tell if every component pair is equal within tolerance `tol`.

        See [`float_ops.almost_equal`][py_vecmath.float_ops.almost_equal] for the per-component rule.

        Examples:
            >>> a = Vec3(1.0, 1.0, 1.0)
            >>> a.almost_equal(Vec3(0.9, 0.9, 0.9), 0.1000001)
            True
            >>> a.almost_equal(Vec3(1.0, 1.0, 0.9), 0.01)
            False
        """
        return all(almost_equal_scalar(a, b, tol) for a, b in self._pairs(other))

    def partial_cmp(self, other: Self) -> Optional[Ordering]:
        """Compare two vectors component-wise.

        Returns:
            `Ordering.LESS` if every component is strictly less, `Ordering.GREATER` if every
            component is strictly greater, `Ordering.EQUAL` if the vectors are equal,
            otherwise None (the vectors are unordered).

        Examples:
            >>> Vec2(1, 1).partial_cmp(Vec2(2, 2))
            <Ordering.LESS: -1>
            >>> Vec2(1, 2).partial_cmp(Vec2(2, 1)) is None
            True
        """
        pairs = list(self._pairs(other))
        if all(a < b for a, b in pairs):
            return Ordering.LESS
        if all(a > b for a, b in pairs):
            return Ordering.GREATER
        if self == other:
            return Ordering.EQUAL
        return None

    def _ordered(self, other: Any, *accepted: Ordering) -> Any:
        if other.__class__ is not self.__class__:
            # tuple would answer with its lexicographic order
            if isinstance(other, tuple):
                raise TypeError(f"'<', '>', '<=', '>=' not supported between "
                                f"{self.__class__.__name__} and {other.__class__.__name__}")
            return NotImplemented
        return self.partial_cmp(other) in accepted

    def __lt__(self, other: Any) -> bool:
        return self._ordered(other, Ordering.LESS)

    def __le__(self, other: Any) -> bool:
        return self._ordered(other, Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: Any) -> bool:
        return self._ordered(other, Ordering.GREATER)

    def __ge__(self, other: Any) -> bool:
        return self._ordered(other, Ordering.GREATER, Ordering.EQUAL)

    def any_less(self, other: Self) -> bool:
        """Tell if any component of this vector is less than the matching component of `other`.

        Unlike ``<``, a single component is enough.
        """
        return any(a < b for a, b in self._pairs(other))

    def any_greater(self, other: Self) -> bool:
        """Tell if any component of this vector is greater than the matching component of `other`."""
        return any(a > b for a, b in self._pairs(other))

    def min(self, other: Self) -> Self:
        """Vector of the smaller component of each pair.

        Examples:
            >>> Vec3(0, 1, 2).min(Vec3(-1, 0, 3))
            Vec3(x=-1, y=0, z=2)
        """
        return self._new(a if a < b else b for a, b in self._pairs(other))

    def max(self, other: Self) -> Self:
        """Vector of the larger component of each pair."""
        return self._new(a if a > b else b for a, b in self._pairs(other))
    #endregion Comparison

    #region Identities
    @classmethod
    def zero(cls, scalar: Callable[[int], Any] = float) -> Self:
        """Vector with every component ``scalar(0)``, e.g. ``Vec2.zero(int)``."""
        return cls(*(scalar(0) for _ in cls._fields))  # type: ignore[attr-defined]

    @classmethod
    def one(cls, scalar: Callable[[int], Any] = float) -> Self:
        """Vector with every component ``scalar(1)``."""
        return cls(*(scalar(1) for _ in cls._fields))  # type: ignore[attr-defined]

    def is_zero(self) -> bool:
        return all(is_zero(c) for c in self)  # type: ignore[attr-defined]
    #endregion Identities

    #region Geometry
    def dot(self, other: Self) -> Scalar:
        """Dot product: sum of the pairwise component products.

        Examples:
            >>> Vec3(1, 2, 3).dot(Vec3(1, 2, 3))
            14
        """
        return functools.reduce(operator.add, (a * b for a, b in self._pairs(other)))

    def length_sq(self) -> Scalar:
        """Squared length; prefer it to `length` when only comparing distances."""
        return self.dot(self)

    def length(self) -> Scalar:
        """Euclidean length (magnitude) of the vector.

        Examples:
            >>> from py_vecmath.float_ops import equal
            >>> equal(Vec3(1.0, 2.0, 3.0).length(), 3.74165738)
            True
        """
        return sqrt(self.length_sq())

    def normalize(self) -> Optional[Self]:
        """Vector of length 1 pointing in the same direction.

        Returns:
            The normalized vector, or None if the length is zero (no division is attempted).

        Examples:
            >>> Vec2(3.0, 4.0).normalize()
            Vec2(x=0.6, y=0.8)
            >>> Vec2(0.0, 0.0).normalize() is None
            True
        """
        length = self.length()
        if is_zero(length):
            return None
        return self.div_scalar(length)

    def project(self, onto: Self) -> Self:
        """Projection of this vector onto `onto`.

        Computed as ``onto * (dot(self, onto) / length_sq(onto))``. A zero `onto` is a caller
        error: float vectors come back as NaN, integer vectors raise ZeroDivisionError.
        """
        return onto.mul_scalar(div(self.dot(onto), onto.length_sq()))

    def lerp(self, other: Self, t: Number) -> Self:
        """Component-wise linear interpolation ``(1 - t) * self + t * other``.

        Examples:
            >>> Vec2(1.25, 1.25).lerp(Vec2(2.0, 2.0), 0.25)
            Vec2(x=1.4375, y=1.4375)
        """
        return self._new(lerp_scalar(a, b, t) for a, b in self._pairs(other))

    def round(self) -> Self:
        """Round each component to the nearest integer, half-way cases away from zero.

        Examples:
            >>> Vec3(0.3, 1.5, -2.5).round()
            Vec3(x=0.0, y=2.0, z=-3.0)
        """
        return self._new(round_half_away(c) for c in self)  # type: ignore[attr-defined]

    def clamp(self, min_value: Scalar, max_value: Scalar) -> Self:
        """Clamp each component to [min_value, max_value].

        Examples:
            >>> Vec3(-2, 4, -6).clamp(-1, 2)
            Vec3(x=-1, y=2, z=-1)
        """
        return self._new(clamp_scalar(c, min_value, max_value) for c in self)  # type: ignore[attr-defined]

    def is_nan(self) -> bool:
        """Tell if ALL components are NaN.

        A vector with only some NaN components is not NaN.
        """
        return all(is_nan(c) for c in self)  # type: ignore[attr-defined]
    #endregion Geometry


class _Vec2Fields(NamedTuple):
    x: Scalar
    y: Scalar


class _Vec3Fields(NamedTuple):
    x: Scalar
    y: Scalar
    z: Scalar


class _Vec4Fields(NamedTuple):
    x: Scalar
    y: Scalar
    z: Scalar
    w: Scalar


class Vec2(_VectorOps, _Vec2Fields):
    """Immutable two-component vector.

    Attributes:
        x: First component.
        y: Second component.

    Examples:
        >>> Vec2(1, 2) + Vec2(3, 4)
        Vec2(x=4, y=6)
        >>> print(Vec2(1, 5))
        Vec2(1, 5)
    """

    __slots__ = ()

    def sphere_to_cart(self, radius: Number) -> Vec3:
        """Treat this vector as an (inclination, azimuth) pair and convert to cartesian.

        See [`spherical.sphere_to_cart`][py_vecmath.spherical.sphere_to_cart].
        """
        from py_vecmath.spherical import sphere_to_cart
        return sphere_to_cart(self, radius)


class Vec3(_VectorOps, _Vec3Fields):
    """Immutable three-component vector.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.

    Examples:
        >>> from py_vecmath.unit import MM
        >>> Vec3(MM(1.0), MM(5.0), MM(2.0)).almost_equal(Vec3(MM(1.0), MM(5.1), MM(1.9)), 0.1)
        True
    """

    __slots__ = ()

    def cart_to_sphere(self) -> Tuple[float, Vec2]:
        """Convert this cartesian point to (radius, Vec2(inclination, azimuth)).

        See [`spherical.cart_to_sphere`][py_vecmath.spherical.cart_to_sphere].
        """
        from py_vecmath.spherical import cart_to_sphere
        return cart_to_sphere(self)


class Vec4(_VectorOps, _Vec4Fields):
    """Immutable four-component vector.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        w: Fourth component.
    """

    __slots__ = ()


_VECTOR_TYPES = {2: Vec2, 3: Vec3, 4: Vec4}
for _cls in _VECTOR_TYPES.values():
    install_swizzles(_cls, _VECTOR_TYPES)
del _cls

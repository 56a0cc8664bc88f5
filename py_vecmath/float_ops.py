"""Tolerant floating point comparison and interpolation.

The comparison combines absolute and relative tolerance into a single test, as described at
http://realtimecollisiondetection.net/blog/?p=89 :

    |a - b| <= tol * max(1.0, |a|, |b|)

so the tolerance acts absolutely near zero and relatively for large magnitudes.

Examples:
    >>> almost_equal(0.9, 1.0, 0.1000001)
    True
    >>> equal(1.00000001, 1.0)
    True
    >>> equal(0.9, 1.0)
    False
    >>> lerp(0.0, 10.0, 0.5)
    5.0
"""
from __future__ import annotations

from typing import Any

from py_vecmath.constants import EPSILON
from py_vecmath.exceptions import UnitTypeError
from py_vecmath.generics import Number, SupportsFloatOps

__all__ = (
    'EPSILON',
    'almost_equal',
    'equal',
    'lerp',
)


def _unwrap_pair(a: Any, b: Any) -> tuple[float, float]:
    if isinstance(a, SupportsFloatOps) or isinstance(b, SupportsFloatOps):
        if a.__class__ is not b.__class__:
            raise UnitTypeError(f"Cannot compare {a.__class__.__name__} with {b.__class__.__name__}")
    return float(a), float(b)


def almost_equal(a: Any, b: Any, tol: Number) -> bool:
    """Tell if `a` and `b` are equal within the combined absolute/relative tolerance `tol`.

    Args:
        a: First floating point value (or float-backed unit value).
        b: Second value, of the same kind as `a`.
        tol: Non-negative tolerance.

    Returns:
        True if ``a == b`` exactly or ``|a - b| <= tol * max(1.0, |a|, |b|)``.
    """
    x, y = _unwrap_pair(a, b)
    if x == y:
        return True
    r = max(1.0, abs(x), abs(y))
    return abs(x - y) <= tol * r


def equal(a: Any, b: Any) -> bool:
    """Short-hand for ``almost_equal(a, b, EPSILON)``."""
    return almost_equal(a, b, EPSILON)


def lerp(a: Any, b: Any, t: Number) -> Any:
    """Linear interpolation between `a` and `b`.

    Uses the precise form ``(1 - t) * a + t * b``, so ``lerp(a, b, 0.0) == a`` exactly.
    Values of `t` outside [0, 1] extrapolate.
    """
    return (1 - t) * a + t * b

"""Conversion between spherical and cartesian coordinates.

A spherical direction is a `Vec2` of (inclination, azimuth): inclination is measured from
the +z axis, azimuth from the +x axis in the xy-plane. Components may be plain numbers
(taken as radians) or `Angle` unit values in any unit.

Examples:
    >>> from py_vecmath.unit import Rad
    >>> from py_vecmath.vector import Vec2, Vec3
    >>> sphere_to_cart(Vec2(Rad(1.416), Rad(0.309)), 5.0).almost_equal(
    ...     Vec3(Rad(4.706), Rad(1.502), Rad(0.770)), 0.001)
    True
    >>> radius, sphere = cart_to_sphere(Vec3(0.0, 0.0, 2.0))
    >>> radius, sphere
    (2.0, Vec2(x=0.0, y=0.0))
"""
from __future__ import annotations

import math
from typing import Any, Tuple

from py_vecmath.generics import Number
from py_vecmath.scalar import ieee_cos, ieee_div, ieee_sin, raw
from py_vecmath.unit import Angle, Rad, UnitValue
from py_vecmath.vector import Vec2, Vec3

__all__ = ('sphere_to_cart', 'cart_to_sphere')


def _radians(angle: Any) -> float:
    if isinstance(angle, Angle):
        return angle.cast(float).to_rad().value
    return float(raw(angle))


def sphere_to_cart(sphere: Vec2, radius: Number) -> Vec3:
    """Convert (inclination, azimuth) at distance `radius` to a cartesian point.

    Computes ``(r·sin(i)·cos(a), r·sin(i)·sin(a), r·cos(i))``.
    Non-finite angles give NaN components.

    Args:
        sphere: Vec2 of (inclination, azimuth).
        radius: Distance from the origin.

    Returns:
        Vec3 whose components are wrapped in the unit class of the inclination component,
        or plain floats when the inclination is a plain number.
    """
    inclination = _radians(sphere.x)
    azimuth = _radians(sphere.y)
    components = (radius * ieee_sin(inclination) * ieee_cos(azimuth),
                  radius * ieee_sin(inclination) * ieee_sin(azimuth),
                  radius * ieee_cos(inclination))
    if isinstance(sphere.x, UnitValue):
        units = sphere.x.__class__
        return Vec3(*(units(c) for c in components))
    return Vec3(*components)


def cart_to_sphere(v: Vec3) -> Tuple[float, Vec2]:
    """Convert a cartesian point to (radius, Vec2(inclination, azimuth)).

    ``radius = length(v)``, ``inclination = acos(z / radius)``, ``azimuth = atan2(y, x)``.
    Angles come back in the `Angle` unit of the components, or as plain radians otherwise.
    The origin has no direction: its inclination is NaN.

    Examples:
        >>> from py_vecmath.unit import Deg
        >>> radius, sphere = cart_to_sphere(Vec3(Deg(1.0), Deg(0.0), Deg(0.0)))
        >>> radius, type(sphere.x).__name__, round(sphere.x.value, 6)
        (1.0, 'Deg', 90.0)
    """
    x, y, z = (float(raw(c)) for c in v)
    radius = math.sqrt(x * x + y * y + z * z)
    ratio = ieee_div(z, radius)
    if not math.isnan(ratio):
        ratio = max(-1.0, min(1.0, ratio))
    inclination = math.acos(ratio)
    azimuth = math.atan2(y, x)
    if isinstance(v.x, Angle):
        units = v.x.__class__
        return radius, Vec2(Rad(inclination).convert(units), Rad(azimuth).convert(units))
    return radius, Vec2(inclination, azimuth)

"""Per-scalar numeric helpers shared by vectors, units and tolerance checks.

Each helper accepts a plain ``int``/``float`` or a wrapped scalar implementing
[`SupportsFloatOps`][py_vecmath.generics.SupportsFloatOps] and dispatches accordingly.

Division semantics follow fixed-width machine arithmetic rather than Python's defaults:
    * ``int / int`` truncates toward zero and raises ``ZeroDivisionError`` on a zero divisor.
    * Float division by zero yields ``inf``/``-inf``/``nan`` per IEEE-754 instead of raising.

The ``ieee_*`` functions wrap `math` and return NaN (or a signed infinity) where `math` would
raise ``ValueError`` or ``OverflowError``, e.g. ``ieee_sqrt(-1.0)`` or ``ieee_sin(inf)``.

Examples:
    >>> div(7, 2), div(-7, 2)
    (3, -3)
    >>> div(1.0, 0.0)
    inf
    >>> round_half_away(2.5), round_half_away(-2.5)
    (3.0, -3.0)
    >>> fmin(float('nan'), 1.0)
    1.0
"""
from __future__ import annotations

import functools
import math
from typing import Any, Callable

from py_vecmath.generics import Number, SupportsFloatOps

__all__ = (
    'raw',
    'is_float',
    'is_nan',
    'is_zero',
    'sqrt',
    'ieee_sqrt',
    'ieee_sin',
    'ieee_cos',
    'ieee_tan',
    'ieee_asin',
    'ieee_acos',
    'ieee_pow',
    'signum',
    'recip',
    'round_half_away',
    'trunc_div',
    'trunc_rem',
    'ieee_div',
    'div',
    'rem',
    'fmin',
    'fmax',
    'scale',
)


def raw(value: Any) -> Any:
    """Return the underlying number of a wrapped scalar, or the value itself."""
    if isinstance(value, SupportsFloatOps):
        return value.value
    return value


def is_float(value: Any) -> bool:
    """Tell whether the (underlying) scalar is an IEEE float."""
    return isinstance(raw(value), float)


def is_nan(value: Any) -> bool:
    if isinstance(value, SupportsFloatOps):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def is_zero(value: Any) -> bool:
    if isinstance(value, SupportsFloatOps):
        return value.is_zero()
    return value == 0


def sqrt(value: Any) -> Any:
    if isinstance(value, SupportsFloatOps):
        return value.sqrt()
    return ieee_sqrt(value)


def _nan_on_domain_error(fn: Callable[[float], float]) -> Callable[[float], float]:
    @functools.wraps(fn)
    def wrapper(x: float) -> float:
        try:
            return fn(x)
        except ValueError:
            return math.nan
    return wrapper


# math raises on arguments outside the domain where IEEE-754 returns NaN
ieee_sqrt = _nan_on_domain_error(math.sqrt)
ieee_sin = _nan_on_domain_error(math.sin)
ieee_cos = _nan_on_domain_error(math.cos)
ieee_tan = _nan_on_domain_error(math.tan)
ieee_asin = _nan_on_domain_error(math.asin)
ieee_acos = _nan_on_domain_error(math.acos)


def _is_odd_integer(y: float) -> bool:
    return math.isfinite(y) and y == math.floor(y) and math.fmod(y, 2.0) != 0


def ieee_pow(x: Number, y: Number) -> float:
    """``x ** y`` with IEEE-754 results where `math.pow` raises.

    Examples:
        >>> ieee_pow(-8.0, 1 / 3)
        nan
        >>> ieee_pow(-0.0, -1), ieee_pow(0.0, -2)
        (-inf, inf)
        >>> ieee_pow(-10.0, 1001)
        -inf
    """
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if x < 0 and _is_odd_integer(y) else math.inf
    except ValueError:
        if x == 0:
            return math.copysign(math.inf, x) if _is_odd_integer(y) else math.inf
        return math.nan


def signum(x: Number) -> float:
    """1.0 for positive (including +0.0), -1.0 for negative (including -0.0), NaN for NaN."""
    if math.isnan(x):
        return math.nan
    return math.copysign(1.0, x)


def recip(x: Number) -> float:
    """``1 / x``; zero gives a signed infinity."""
    return ieee_div(1.0, x)

def round_half_away(value: Any) -> Any:
    """Round to the nearest integer, half-way cases away from zero.

    Integers are returned unchanged; non-finite floats are returned as is.
    The sign of zero is preserved (``-0.3`` rounds to ``-0.0``).
    """
    if isinstance(value, SupportsFloatOps):
        return value.map(round_half_away)
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        return value
    t = float(math.trunc(value))
    if abs(value - t) >= 0.5:
        t += math.copysign(1.0, value)
    return math.copysign(t, value)


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def trunc_rem(a: int, b: int) -> int:
    """Integer remainder carrying the sign of the dividend."""
    return a - b * trunc_div(a, b)


def ieee_div(a: Number, b: Number) -> float:
    """Float division that yields inf/nan on a zero divisor instead of raising."""
    try:
        return a / b
    except ZeroDivisionError:
        if math.isnan(a) or a == 0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def div(a: Any, b: Any) -> Any:
    if isinstance(a, SupportsFloatOps) or isinstance(b, SupportsFloatOps):
        return a / b
    if isinstance(a, int) and isinstance(b, int):
        return trunc_div(a, b)
    return ieee_div(a, b)


def rem(a: Any, b: Any) -> Any:
    if isinstance(a, SupportsFloatOps) or isinstance(b, SupportsFloatOps):
        return a % b
    if isinstance(a, int) and isinstance(b, int):
        return trunc_rem(a, b)
    if b == 0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def fmin(a: Any, b: Any) -> Any:
    """IEEE minNum: a NaN operand yields the other operand."""
    if is_nan(a):
        return b
    if is_nan(b):
        return a
    return a if a < b else b


def fmax(a: Any, b: Any) -> Any:
    """IEEE maxNum: a NaN operand yields the other operand."""
    if is_nan(a):
        return b
    if is_nan(b):
        return a
    return a if a > b else b


def scale(value: Number, factor: Number) -> Number:
    """Multiply by a conversion factor, keeping integer values integral.

    An ``int`` multiplied by a ``float`` factor is truncated toward zero.
    """
    if isinstance(value, int) and isinstance(factor, float):
        return int(value * factor)
    return value * factor

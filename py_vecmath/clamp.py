"""Range restriction for ordered scalars.

Examples:
    >>> clamp(1.1, 0.0, 1.0)
    1.0
    >>> clamp(-10, 0, 10)
    0
    >>> clamp(0, 1, 10)
    1
    >>> clamp(float('nan'), 0.0, 1.0)
    1.0
"""
from __future__ import annotations

from py_vecmath.generics import OrderedT
from py_vecmath.logger import logger
from py_vecmath.scalar import fmax, fmin, is_float

__all__ = ('clamp',)


def clamp(value: OrderedT, min_value: OrderedT, max_value: OrderedT) -> OrderedT:
    """Return `value` restricted to the range [min_value, max_value].

    Floating point scalars (and float-backed unit values) are clamped as
    ``fmax(fmin(value, max_value), min_value)`` using IEEE minNum/maxNum, so a NaN
    `value` always resolves to `max_value`. Other scalars use branching comparison.

    Args:
        value: Value to clamp.
        min_value: Lower bound.
        max_value: Upper bound, expected to be ``>= min_value``.

    Returns:
        The clamped value.

    Note:
        Inverted bounds are not an error: a warning is logged and the result of the
        comparison chain is returned unchanged.
    """
    if min_value > max_value:
        logger.warning(f"clamp bounds are inverted: {min_value=} > {max_value=}")
    if is_float(value):
        return fmax(fmin(value, max_value), min_value)
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value

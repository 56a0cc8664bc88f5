"""Swizzle accessor generator.

Installs read-only properties that select and reorder vector components, e.g.
``Vec3(1, 2, 3).zyx == Vec3(3, 2, 1)`` or ``Vec4(1, 2, 3, 4).xxw == Vec3(1, 1, 4)``.

For a vector class with N fields, a property is generated for every combination (with
repetition) of 2..N field names; the result is the vector class of matching size.
"""
from __future__ import annotations

import itertools
import operator
from typing import Any, Callable, Mapping, Sequence

__all__ = ('install_swizzles', 'swizzle_names')


def swizzle_names(fields: Sequence[str], size: int) -> list[str]:
    """All swizzle names of `size` letters over `fields`, in lexicographic field order."""
    return [''.join(combo) for combo in itertools.product(fields, repeat=size)]


def _swizzle_getter(target: type, indices: Sequence[int]) -> Callable[[Any], Any]:
    getter = operator.itemgetter(*indices)

    def fget(self: Any) -> Any:
        return target(*getter(self))

    return fget


def install_swizzles(cls: type, targets: Mapping[int, type]) -> type:
    """Add swizzle properties to the NamedTuple-based vector class `cls`.

    Args:
        cls: Vector class; its ``_fields`` name the components.
        targets: Vector class to build for each result size.

    Returns:
        `cls`, for use as a decorator-like call.
    """
    fields = cls._fields  # type: ignore[attr-defined]
    for size in range(2, len(fields) + 1):
        target = targets[size]
        for indices in itertools.product(range(len(fields)), repeat=size):
            name = ''.join(fields[i] for i in indices)
            setattr(cls, name, property(_swizzle_getter(target, indices),
                                        doc=f"{target.__name__} of components {', '.join(name)}"))
    return cls

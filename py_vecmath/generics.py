"""Scalar capability protocols for py_vecmath.

Every vector and unit operation is generic over its scalar type. Instead of one
monolithic "number" interface, each call site names the smallest capability set
it needs:

    - Comparable: ordering only (used by clamp, min/max, partial ordering).
    - SupportsArithmetic: +, -, *, / and unary negation (used by vector algebra).
    - SupportsFloatOps: IEEE float operations that a plain ``float`` gets from
      the ``math`` module and a wrapped scalar provides as methods
      (used by tolerance checks, length, normalize and spherical conversion).

Plain ``int`` and ``float`` satisfy ``Comparable`` and ``SupportsArithmetic``.
``SupportsFloatOps`` is implemented by unit values (see ``py_vecmath.unit``) so
that helpers in ``py_vecmath.scalar`` can dispatch to them structurally.

Type Variables:
    ScalarT: Generic scalar bound to ``SupportsArithmetic``.
    OrderedT: Generic scalar bound to ``Comparable``.
"""

# Standard library imports
from typing import Any, Callable, TypeVar, Union

# Third-party imports
from typing_extensions import Protocol, Self, TypeAlias, runtime_checkable

__all__ = (
    'Number',
    'Scalar',
    'Comparable',
    'SupportsArithmetic',
    'SupportsFloatOps',
    'ScalarT',
    'OrderedT',
)

Number: TypeAlias = Union[float, int]


@runtime_checkable
class Comparable(Protocol):
    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: Self) -> bool: ...

    def __gt__(self, other: Self) -> bool: ...

    def __le__(self, other: Self) -> bool: ...

    def __ge__(self, other: Self) -> bool: ...


@runtime_checkable
class SupportsArithmetic(Protocol):
    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...


@runtime_checkable
class SupportsFloatOps(Protocol):
    """Float operations provided as methods by wrapped scalars."""

    @property
    def value(self) -> Any: ...

    def __float__(self) -> float: ...

    def map(self, fn: Callable[[Any], Any]) -> Self: ...

    def sqrt(self) -> Self: ...

    def is_nan(self) -> bool: ...

    def is_zero(self) -> bool: ...


Scalar: TypeAlias = Union[Number, SupportsArithmetic]
"""Any vector component: a plain number or a scalar supporting the arithmetic operators"""

ScalarT = TypeVar('ScalarT', bound=SupportsArithmetic)
OrderedT = TypeVar('OrderedT', bound=Comparable)

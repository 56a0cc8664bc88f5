"""Dimension-checked unit values and the conversion graph between them.

This module wraps a single scalar in a unit class that carries its physical dimension.
Unit classes are grouped into dimension families:

    * Length: `MM`, `CM`, `M`, `KM`
    * Angle: `Rad`, `Deg`

A unit value behaves like the scalar it wraps: arithmetic, bitwise and ordering operators
are lifted from the scalar, but only between values of the *same* unit class. Combining
different unit classes fails fast with `UnitTypeError`; interop requires an explicit
conversion. Multiplying or dividing by a plain number scales the value and keeps its unit.

Conversions are looked up in `ConversionGraph`, a fully connected table of direct edges
within each family, so every conversion applies its factor exactly once.

Examples:
    >>> # ----------------- Creation and conversion -----------------
    >>> CM(100.0).to_m()
    M(1.0)
    >>> M(1.0).to_cm().to_m() == M(1.0)
    True
    >>> KM(2).convert(MM)
    MM(2000000)
    >>> print(KM(1.5).to_m())
    1500.0m
    >>> # ----------------------- Arithmetic -----------------------
    >>> MM(5) + MM(7)
    MM(12)
    >>> 3 * CM(2.5)
    CM(7.5)
    >>> MM(1) + CM(1)
    Traceback (most recent call last):
    ...
    py_vecmath.exceptions.UnitTypeError: ...
    >>> # -------------------- Float functions ---------------------
    >>> MM(-4.0).sqrt()
    MM(nan)
    >>> Rad(0.0).cos()
    Rad(1.0)
    >>> CM(3.0).hypot(CM(4.0))
    CM(5.0)
    >>> # ------------------------ Parsing -------------------------
    >>> parse('12.5cm')
    CM(12.5)
    >>> parse(90, Deg)
    Deg(90.0)
"""

# Standard library imports
from __future__ import annotations

import math
import operator
import re
from dataclasses import MISSING, dataclass, fields
from typing import Any, Callable, ClassVar, Dict, Generic, Mapping, NamedTuple, Optional, Tuple, Type, TypeVar, \
    Union

from typing_extensions import Self, TypeAlias

# Local imports
from py_vecmath import constants
from py_vecmath.exceptions import UnitAliasError, UnitConversionError, UnitTypeError
from py_vecmath.generics import Number
from py_vecmath.logger import logger
from py_vecmath.scalar import (div, ieee_acos, ieee_asin, ieee_cos, ieee_pow, ieee_sin, ieee_sqrt, ieee_tan, recip,
                               rem, round_half_away, scale, signum)

__all__ = (
    'UnitProps',
    'UnitValue',
    'Length',
    'Angle',
    'MM',
    'CM',
    'M',
    'KM',
    'Rad',
    'Deg',
    'ConversionEdge',
    'ConversionGraph',
    'UnitAliases',
    'parse_unit',
    'parse',
    'PreferredUnits',
    'UnitTypeError',
    'UnitConversionError',
    'UnitAliasError',
)

_T = TypeVar('_T')
_UnitValueType = TypeVar('_UnitValueType', bound='UnitValue')


class UnitProps(NamedTuple):
    """Display characteristics of a unit class.

    Attributes:
        name: Human-readable name of the unit (e.g., 'millimeter').
        accuracy: Number of decimal places used by ``str()``.
        symbol: Standard symbol for the unit (e.g., 'mm').
    """

    name: str
    accuracy: int
    symbol: str


class UnitValue(Generic[_T]):
    """A single scalar tagged with a unit class.

    Subclasses define `props` and belong to a dimension family (`Length`, `Angle`).
    Instances are immutable.

    Attributes:
        _value: The wrapped scalar (``int``, ``float`` or any scalar supporting the
            operators used on it).
    """

    _value: _T
    __slots__ = ('_value',)
    props: ClassVar[UnitProps]

    def __init__(self, value: _T):
        self._value = value

    @property
    def value(self) -> _T:
        """The wrapped scalar."""
        return self._value

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._value!r})'

    def __str__(self) -> str:
        props = self.props
        return f'{round(self._value, props.accuracy)}{props.symbol}'

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnitValue):
            return NotImplemented
        return other.__class__ is self.__class__ and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __round__(self, ndigits: Optional[int] = None) -> Self:
        if ndigits is None:
            return self.__class__(round_half_away(self._value))
        return self.__class__(round(self._value, ndigits))

    def __trunc__(self) -> Self:
        return self.__class__(math.trunc(self._value))

    def __floor__(self) -> Self:
        return self.__class__(math.floor(self._value))

    def __ceil__(self) -> Self:
        return self.__class__(math.ceil(self._value))

    def _require_same_unit(self, other: UnitValue) -> None:
        if other.__class__ is not self.__class__:
            raise UnitTypeError(f"{self.__class__.__name__} can't be combined with {other.__class__.__name__}, "
                                f"convert one of them explicitly")

    #region Float capabilities
    @classmethod
    def zero(cls, scalar: Callable[[int], Any] = float) -> Self:
        """Zero of this unit, built with the `scalar` constructor."""
        return cls(scalar(0))

    @classmethod
    def one(cls, scalar: Callable[[int], Any] = float) -> Self:
        """One of this unit, built with the `scalar` constructor."""
        return cls(scalar(1))

    def map(self, fn: Callable[[_T], Any]) -> Self:
        """Apply `fn` to the wrapped scalar and re-tag the result with this unit."""
        return self.__class__(fn(self._value))

    def cast(self, scalar: Callable[[_T], Any]) -> Self:
        """Cast the wrapped scalar, e.g. ``MM(1.7).cast(int) == MM(1)``."""
        return self.__class__(scalar(self._value))

    def sqrt(self) -> Self:
        """Square root; negative values give NaN."""
        return self.map(ieee_sqrt)

    def powi(self, n: int) -> Self:
        """Raise the wrapped value to the integer power `n`."""
        if not isinstance(n, int):
            raise TypeError(f"int exponent expected, got {type(n).__name__}")
        return self.map(lambda v: ieee_pow(v, n))

    def mul_add(self, a: Self, b: Self) -> Self:
        """``self * a + b`` in a single call; all three must be the same unit."""
        self._require_same_unit(a)
        self._require_same_unit(b)
        return self.__class__(self._value * a._value + b._value)

    def is_nan(self) -> bool:
        return isinstance(self._value, float) and math.isnan(self._value)

    def is_finite(self) -> bool:
        return math.isfinite(self._value)

    def is_infinite(self) -> bool:
        return math.isinf(self._value)

    def is_zero(self) -> bool:
        return self._value == 0
    #endregion Float capabilities

    def convert(self, units: Type[_UnitValueType]) -> _UnitValueType:
        """Convert this value to another unit class of the same dimension family.

        Args:
            units: Target unit class.

        Returns:
            A new value of class `units`, or `self` when `units` is this value's class.

        Raises:
            TypeError: If `units` is not a unit class.
            UnitConversionError: If `units` belongs to another dimension family.
        """
        if not (isinstance(units, type) and issubclass(units, UnitValue)):
            raise TypeError(f"Unit class expected, got: {type(units).__name__} ({units})")
        if units is self.__class__:
            return self  # type: ignore[return-value]
        try:
            edge = ConversionGraph[(self.__class__, units)]
        except KeyError:
            raise UnitConversionError(f"{self.__class__.__name__} can't be converted to {units.__name__}") from None
        return units(edge.apply(self._value))


def _same_unit_operator(op: Callable[[Any, Any], Any]) -> Callable[[UnitValue, Any], Any]:
    def method(self: UnitValue, other: Any) -> Any:
        if not isinstance(other, UnitValue):
            return NotImplemented
        self._require_same_unit(other)
        return self.__class__(op(self._value, other._value))
    return method


def _scaling_operator(op: Callable[[Any, Any], Any]) -> Callable[[UnitValue, Any], Any]:
    def method(self: UnitValue, other: Any) -> Any:
        if isinstance(other, UnitValue):
            self._require_same_unit(other)
            return self.__class__(op(self._value, other._value))
        if isinstance(other, (int, float)):
            return self.__class__(op(self._value, other))
        return NotImplemented
    return method


def _reflected_scaling_operator(op: Callable[[Any, Any], Any]) -> Callable[[UnitValue, Any], Any]:
    def method(self: UnitValue, other: Any) -> Any:
        if isinstance(other, (int, float)):
            return self.__class__(op(other, self._value))
        return NotImplemented
    return method


def _shift_operator(op: Callable[[Any, int], Any]) -> Callable[[UnitValue, Any], Any]:
    def method(self: UnitValue, bits: Any) -> Any:
        if not isinstance(bits, int):
            return NotImplemented
        return self.__class__(op(self._value, bits))
    return method


def _unary_operator(op: Callable[[Any], Any]) -> Callable[[UnitValue], Any]:
    def method(self: UnitValue) -> Any:
        return self.__class__(op(self._value))
    return method


def _ordering_operator(op: Callable[[Any, Any], bool]) -> Callable[[UnitValue, Any], Any]:
    def method(self: UnitValue, other: Any) -> Any:
        if not isinstance(other, UnitValue):
            return NotImplemented
        self._require_same_unit(other)
        return op(self._value, other._value)
    return method


def _lifted_function(name: str, fn: Callable[[Any], Any]) -> Callable[[UnitValue], Any]:
    def method(self: UnitValue) -> Any:
        return self.__class__(fn(self._value))
    method.__name__ = name
    method.__doc__ = f"{name}() of the wrapped value, re-tagged with this unit."
    return method


def _same_unit_function(name: str, fn: Callable[[Any, Any], Any]) -> Callable[[UnitValue, Any], Any]:
    def method(self: UnitValue, other: UnitValue) -> Any:
        if not isinstance(other, UnitValue):
            raise TypeError(f"{self.__class__.__name__}.{name}() expects a unit value, got {type(other).__name__}")
        self._require_same_unit(other)
        return self.__class__(fn(self._value, other._value))
    method.__name__ = name
    method.__doc__ = f"{name}() of the wrapped values, which must share the unit."
    return method


# Operators lifted from the wrapped scalar
for _name, _op in {'__add__': operator.add, '__sub__': operator.sub, '__mod__': rem,
                   '__and__': operator.and_, '__or__': operator.or_, '__xor__': operator.xor}.items():
    setattr(UnitValue, _name, _same_unit_operator(_op))
for _name, _op in {'__mul__': operator.mul, '__truediv__': div}.items():
    setattr(UnitValue, _name, _scaling_operator(_op))
setattr(UnitValue, '__rmul__', _reflected_scaling_operator(operator.mul))
for _name, _op in {'__lshift__': operator.lshift, '__rshift__': operator.rshift}.items():
    setattr(UnitValue, _name, _shift_operator(_op))
for _name, _op in {'__neg__': operator.neg, '__pos__': operator.pos,
                   '__abs__': operator.abs, '__invert__': operator.invert}.items():
    setattr(UnitValue, _name, _unary_operator(_op))
for _name, _op in {'__lt__': operator.lt, '__le__': operator.le,
                   '__gt__': operator.gt, '__ge__': operator.ge}.items():
    setattr(UnitValue, _name, _ordering_operator(_op))
del _name, _op

# Float functions lifted from the wrapped scalar. Trigonometry works on the wrapped number
# as is, so convert angles with `to_rad()` first
for _name, _fn in {'sin': ieee_sin, 'cos': ieee_cos, 'tan': ieee_tan, 'asin': ieee_asin,
                   'acos': ieee_acos, 'atan': math.atan, 'signum': signum, 'recip': recip}.items():
    setattr(UnitValue, _name, _lifted_function(_name, _fn))
for _name, _fn in {'powf': ieee_pow, 'atan2': math.atan2, 'hypot': math.hypot}.items():
    setattr(UnitValue, _name, _same_unit_function(_name, _fn))
del _name, _fn


class Length(UnitValue[_T]):
    """Length dimension family: `MM`, `CM`, `M`, `KM`."""

    __slots__ = ()

    def to_mm(self) -> MM[_T]:
        return self.convert(MM)

    def to_cm(self) -> CM[_T]:
        return self.convert(CM)

    def to_m(self) -> M[_T]:
        return self.convert(M)

    def to_km(self) -> KM[_T]:
        return self.convert(KM)


class MM(Length[_T]):
    """Millimeters (1/10th of a centimeter)."""

    __slots__ = ()
    props = UnitProps('millimeter', 3, 'mm')


class CM(Length[_T]):
    """Centimeters (1/100th of a meter)."""

    __slots__ = ()
    props = UnitProps('centimeter', 3, 'cm')


class M(Length[_T]):
    """Meters, the SI base unit of distance."""

    __slots__ = ()
    props = UnitProps('meter', 1, 'm')


class KM(Length[_T]):
    """Kilometers (1000 meters)."""

    __slots__ = ()
    props = UnitProps('kilometer', 3, 'km')


class Angle(UnitValue[_T]):
    """Plane angle dimension family: `Rad`, `Deg`."""

    __slots__ = ()

    def to_rad(self) -> Rad[_T]:
        return self.convert(Rad)

    def to_deg(self) -> Deg[_T]:
        return self.convert(Deg)


class Rad(Angle[_T]):
    """Radians."""

    __slots__ = ()
    props = UnitProps('radian', 6, 'rad')


class Deg(Angle[_T]):
    """Degrees, 1/360th of a full rotation."""

    __slots__ = ()
    props = UnitProps('degree', 4, '°')


class ConversionEdge(NamedTuple):
    """A directed conversion: multiply by `multiplier` or divide by `divisor`.

    Exactly one of the two is applied. Integer division truncates toward zero; an integer
    multiplied by a float factor is truncated back to an integer.
    """

    multiplier: Number = 1
    divisor: int = 1

    def apply(self, value: Any) -> Any:
        if self.divisor != 1:
            return div(value, self.divisor)
        if isinstance(value, int) and isinstance(self.multiplier, float):
            logger.debug(f"Truncating integer conversion of {value} by {self.multiplier}")
        return scale(value, self.multiplier)


#: Direct edges of the conversion graph. Fully connected within each dimension family.
ConversionGraph: Mapping[Tuple[Type[UnitValue], Type[UnitValue]], ConversionEdge] = {
    (MM, CM): ConversionEdge(divisor=constants.cMillimetersPerCentimeter),
    (MM, M): ConversionEdge(divisor=constants.cMillimetersPerMeter),
    (MM, KM): ConversionEdge(divisor=constants.cMillimetersPerKilometer),
    (CM, MM): ConversionEdge(multiplier=constants.cMillimetersPerCentimeter),
    (CM, M): ConversionEdge(divisor=constants.cCentimetersPerMeter),
    (CM, KM): ConversionEdge(divisor=constants.cCentimetersPerKilometer),
    (M, MM): ConversionEdge(multiplier=constants.cMillimetersPerMeter),
    (M, CM): ConversionEdge(multiplier=constants.cCentimetersPerMeter),
    (M, KM): ConversionEdge(divisor=constants.cMetersPerKilometer),
    (KM, MM): ConversionEdge(multiplier=constants.cMillimetersPerKilometer),
    (KM, CM): ConversionEdge(multiplier=constants.cCentimetersPerKilometer),
    (KM, M): ConversionEdge(multiplier=constants.cMetersPerKilometer),

    (Deg, Rad): ConversionEdge(multiplier=constants.cRadiansPerDegree),
    (Rad, Deg): ConversionEdge(multiplier=constants.cDegreesPerRadian),
}

UnitAliasesType: TypeAlias = Mapping[Tuple[str, ...], Type[UnitValue]]

UnitAliases: UnitAliasesType = {
    ('millimeter', 'millimetre', 'mm'): MM,
    ('centimeter', 'centimetre', 'cm'): CM,
    ('meter', 'metre', 'm'): M,
    ('kilometer', 'kilometre', 'km'): KM,
    ('radian', 'rad'): Rad,
    ('degree', 'deg', '°'): Deg,
}


def _find_unit_by_alias(string_to_find: str, aliases: UnitAliasesType) -> Optional[Type[UnitValue]]:
    for aliases_tuple, units in aliases.items():
        if string_to_find in (each.lower() for each in aliases_tuple):
            return units
    return None


def parse_unit(input_: str) -> Optional[Type[UnitValue]]:
    """Resolve a unit class from an alias string.

    Tries, in order: a `PreferredUnits` attribute name ('length', 'angle'), the unit
    aliases, then a simple plural fallback ('meters', 'degrees').

    Args:
        input_: Unit alias; case and whitespace are ignored.

    Returns:
        The unit class, or None if no match is found.

    Raises:
        TypeError: If input is not a string.

    Examples:
        >>> parse_unit('Millimeters')
        <class 'py_vecmath.unit.MM'>
        >>> parse_unit('oops') is None
        True
    """
    if not isinstance(input_, str):
        raise TypeError(f"String expected, got {type(input_)=}, {input_=}")
    input_ = input_.strip().lower()
    input_ = re.sub(r"\s+", "", input_)
    if input_ in PreferredUnits.__dataclass_fields__:
        return getattr(PreferredUnits, input_)
    if (units := _find_unit_by_alias(input_, UnitAliases)) is not None:
        return units
    if input_.endswith('s'):
        return _find_unit_by_alias(input_[:-1], UnitAliases)
    return None


def parse(input_: Union[str, Number],
          preferred: Optional[Union[Type[UnitValue], str]] = None) -> UnitValue:
    """Parse a value with optional unit specification into a unit value.

    Args:
        input_: A number, a numeric string, or a string with an embedded unit alias
            (e.g. '12.5cm', '-90 deg').
        preferred: Unit class or alias used when `input_` carries no unit.

    Returns:
        The parsed unit value, holding a float.

    Raises:
        TypeError: If input type is not supported.
        UnitAliasError: If the unit alias cannot be parsed.

    Examples:
        >>> parse('2 km')
        KM(2.0)
        >>> parse('45', 'angle')
        Rad(45.0)
    """

    def create_as_preferred(value_: Any) -> UnitValue:
        if isinstance(preferred, type) and issubclass(preferred, UnitValue):
            return preferred(float(value_))
        if isinstance(preferred, str):
            if units_ := parse_unit(preferred):
                return units_(float(value_))
        raise UnitAliasError(f"Unsupported {preferred=} unit alias")

    if isinstance(input_, (float, int)):
        return create_as_preferred(input_)

    if not isinstance(input_, str):
        raise TypeError(f"type, [str, float, int] expected for 'input_', got {type(input_)}")

    input_string = input_.replace(" ", "")
    if match := re.match(r'^-?(?:\d+\.\d*|\.\d+|\d+\.?)$', input_string):
        return create_as_preferred(match.group())

    if match := re.match(r'(^-?(?:\d+\.\d*|\.\d+|\d+\.?))(.*$)', input_string):
        value, alias = match.groups()
        if units := parse_unit(alias):
            return units(float(value))
        raise UnitAliasError(f"Unsupported unit {alias=}")

    raise UnitAliasError(f"Can't parse unit {input_=}")


class PreferredUnitsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{field} = {getattr(cls, field).__name__}'
                         for field in getattr(cls, '__dataclass_fields__'))


@dataclass
class PreferredUnits(metaclass=PreferredUnitsMeta):
    """Default unit classes used when a value is given without units.

    Default Configuration:
        * length: M
        * angle: Rad

    Examples:
        >>> PreferredUnits.set(length='mm', angle=Deg)
        >>> parse(5, 'length')
        MM(5.0)
        >>> PreferredUnits.restore_defaults()
        >>> PreferredUnits.length
        <class 'py_vecmath.unit.M'>
    """

    length: Type[Length] = M
    angle: Type[Angle] = Rad

    @classmethod
    def restore_defaults(cls) -> None:
        """Reset all preferred units to their default values."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)

    @classmethod
    def set(cls, **kwargs: Union[Type[UnitValue], str]) -> None:
        """Set preferred units from keyword arguments.

        Invalid attributes or values are logged as warnings but do not raise exceptions.

        Args:
            **kwargs: Attribute names mapped to unit classes or unit alias strings.
        """
        family: Dict[str, Type[UnitValue]] = {'length': Length, 'angle': Angle}
        for attribute, value in kwargs.items():
            if attribute not in family:
                logger.warning(f"{attribute=} not found in preferred_units")
                continue
            units: Optional[Type[UnitValue]] = None
            if isinstance(value, type) and issubclass(value, UnitValue):
                units = value
            elif isinstance(value, str):
                units = _find_unit_by_alias(value.strip().lower(), UnitAliases)
            if units is None:
                logger.warning(f"{value=} not a unit class")
            elif not issubclass(units, family[attribute]):
                logger.warning(f"{units.__name__} is not a unit of {attribute}")
            else:
                setattr(cls, attribute, units)

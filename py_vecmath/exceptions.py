"""py_vecmath exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── TypeError
│   └── UnitTypeError
│       └── UnitConversionError
└── ValueError
    └── UnitAliasError

Exception Types
---------------

- UnitTypeError: Raised when two unit values of different unit classes are combined
  in a single arithmetic or ordering operation (e.g. ``MM(1) + CM(1)``).
  Cross-unit interop always requires an explicit conversion call.

- UnitConversionError: Raised when a conversion is requested outside of a dimension
  family, e.g. converting a length into an angle.

- UnitAliasError: Raised when a unit alias string cannot be resolved to a unit class,
  or a value string cannot be parsed.

Math preconditions are not exceptions: ``normalize()`` of a zero vector returns ``None``
and float division by zero yields IEEE inf/NaN.
"""

__all__ = (
    'UnitTypeError',
    'UnitConversionError',
    'UnitAliasError',
)


class UnitTypeError(TypeError):
    """Unit type error."""


class UnitConversionError(UnitTypeError):
    """Unit conversion error."""


class UnitAliasError(ValueError):
    """Unit alias error."""

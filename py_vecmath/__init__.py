"""Generic 2/3/4-component vector math with dimension-checked units.

Default units for bare numbers (see `PreferredUnits`) can be set per project in a
``.pyvm.toml`` or ``pyvm.toml`` file, found by walking up from the working directory:

    ```toml
    [pyvm.preferred_units]
    length = "mm"
    angle = "deg"
    ```
"""

import importlib.metadata

__version__ = importlib.metadata.version("py_vecmath")

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Dict, Optional, Type, Union

# Local imports
from .logger import logger as log
from .unit import UnitValue, PreferredUnits

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib

_CONFIG_FILENAMES = ('.pyvm.toml', 'pyvm.toml')


def _find_config(start_dir: str) -> Optional[str]:
    """Return the first config file in `start_dir` or any of its parents, or None."""
    current_dir = os.path.abspath(start_dir)
    while True:
        for name in _CONFIG_FILENAMES:
            candidate = os.path.join(current_dir, name)
            if os.path.isfile(candidate):
                return candidate
        parent_dir = os.path.dirname(current_dir)
        if parent_dir == current_dir:
            return None
        current_dir = parent_dir


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Apply the ``[pyvm.preferred_units]`` table of a TOML config file.

    Args:
        filepath: Config file. If None, it is searched from the working directory,
            then from the package directory; nothing happens when none is found.
        suppress_warnings: Don't warn about a file lacking the expected tables.
    """
    if filepath is None:
        filepath = _find_config(os.getcwd()) or _find_config(os.path.dirname(__file__))
        if filepath is None:
            return

    log.debug(f"Loading preferred units from {filepath}")
    with open(filepath, "rb") as fp:
        config = tomllib.load(fp)

    section = config.get('pyvm')
    if not section:
        if not suppress_warnings:
            log.warning(f"{filepath} has no `pyvm` table")
        return
    preferred_units = section.get('preferred_units')
    if not preferred_units:
        if not suppress_warnings:
            log.warning(f"{filepath} has no `pyvm.preferred_units` table")
        return
    PreferredUnits.set(**preferred_units)


def _basic_config(filename: Optional[str] = None,
                  preferred_units: Optional[Dict[str, Union[Type[UnitValue], str]]] = None,
                  suppress_warnings: bool = False) -> None:
    """Set `PreferredUnits` from a mapping or from a config file.

    Args:
        filename: Config file path; searched for when omitted.
        preferred_units: Attribute name to unit class or alias, e.g. ``{'length': 'mm'}``.
        suppress_warnings: Don't warn about a file lacking the expected tables.

    Raises:
        ValueError: If both `filename` and `preferred_units` are given.
    """
    if filename and preferred_units:
        raise ValueError("Pass either a config filename or preferred_units, not both")
    if preferred_units:
        PreferredUnits.set(**preferred_units)
    else:
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig()

from .clamp import clamp
from .constants import EPSILON
from .exceptions import UnitTypeError, UnitConversionError, UnitAliasError
from .float_ops import almost_equal, equal, lerp
from .generics import Number, Scalar, Comparable, SupportsArithmetic, SupportsFloatOps
from .logger import logger, enable_file_logging, disable_file_logging
from .spherical import sphere_to_cart, cart_to_sphere
from .swizzle import install_swizzles
from .unit import (UnitProps, UnitValue, Length, Angle, MM, CM, M, KM, Rad, Deg,
                   ConversionEdge, ConversionGraph, UnitAliases, parse_unit, parse, PreferredUnits)
from .vector import Ordering, Vec2, Vec3, Vec4

# Public names: everything re-exported above
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__", "__path__",
    # Skip imported modules and typing helpers
    "tomllib", "sys", "os", "importlib", "Dict", "Optional", "Type", "Union",
    # Skip submodules bound by the imports above
    "constants", "exceptions", "float_ops", "generics", "scalar",
    "spherical", "swizzle", "unit", "vector",
    # Internal alias of the library logger
    "log",
}
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
"""Global numeric constants for vector and unit calculations.

Constant Categories:
    - Tolerance: default epsilon for floating point comparisons
    - Length conversion factors: exact integer ratios between length units
    - Angle conversion factors: radian/degree ratios
"""
from math import pi

# Third-party imports
from typing_extensions import Final

# =============================================================================
# Tolerance
# =============================================================================

EPSILON: Final[float] = 1.0e-8
"""Default absolute/relative tolerance used wherever no explicit tolerance is given"""

# =============================================================================
# Length conversion factors
# =============================================================================

cMillimetersPerCentimeter: Final[int] = 10
cMillimetersPerMeter: Final[int] = 1_000
cMillimetersPerKilometer: Final[int] = 1_000_000
cCentimetersPerMeter: Final[int] = 100
cCentimetersPerKilometer: Final[int] = 100_000
cMetersPerKilometer: Final[int] = 1_000

# =============================================================================
# Angle conversion factors
# =============================================================================

cRadiansPerDegree: Final[float] = pi / 180.0
"""pi / 180"""

cDegreesPerRadian: Final[float] = 180.0 / pi
"""180 / pi"""

__all__ = (
    'EPSILON',
    'cMillimetersPerCentimeter',
    'cMillimetersPerMeter',
    'cMillimetersPerKilometer',
    'cCentimetersPerMeter',
    'cCentimetersPerKilometer',
    'cMetersPerKilometer',
    'cRadiansPerDegree',
    'cDegreesPerRadian',
)

"""
Shared utilities (NOT business logic).

Usage:
    from tri_predict.shared import required_power, air_density
    from tri_predict.shared.formatters import format_time
"""
from .formulas import (
    air_density,
    aerodynamic_power,
    rolling_resistance_power,
    gravity_power,
    required_power,
    riegel_time,
)
from .formatters import (
    format_time,
    format_pace,
    format_speed_kmh,
)
from .constants import (
    GRAVITY,
    RaceType,
    WaterType,
    OpenWaterType,
    SwellLevel,
)
from .exceptions import (
    PredictionError,
    InvalidInputError,
    EmptyCourseError,
    IncompleteProfileError,
)

__all__ = [
    # formulas
    "air_density",
    "aerodynamic_power",
    "rolling_resistance_power",
    "gravity_power",
    "required_power",
    "riegel_time",
    # formatters
    "format_time",
    "format_pace",
    "format_speed_kmh",
    # constants
    "GRAVITY",
    "RaceType",
    "WaterType",
    "OpenWaterType",
    "SwellLevel",
    # exceptions
    "PredictionError",
    "InvalidInputError",
    "EmptyCourseError",
    "IncompleteProfileError",
]

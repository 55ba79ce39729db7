"""
Unified constants for physics and race types.

Single source of truth for physical constants and the race-type enum
used across bike and triathlon predictions.
"""

from enum import Enum


# === Physics ===
GRAVITY = 9.80665               # m/s^2 (standard gravity)
RHO_SEA_LEVEL = 1.225           # kg/m^3, reference density at 0 °C
TEMP_REFERENCE_K = 273.15       # Reference temperature for density scaling
ATMOSPHERE_SCALE_HEIGHT_M = 8435.0
SEA_LEVEL_PRESSURE_PA = 101325.0

# Fraction by which water vapour lowers density relative to dry air
# (1 - M_water / M_air)
VAPOUR_DENSITY_FACTOR = 0.378

# Tetens saturation vapour pressure: e_s = 610.78 * 10^(7.5 T / (T + 237.3))
TETENS_OFFSET_C = 237.3


# === Bike defaults ===
DEFAULT_CDA_M2 = 0.30
DEFAULT_CRR = 0.004
DEFAULT_TEMPERATURE_C = 20.0
DEFAULT_DRIVETRAIN_EFFICIENCY = 0.97
DEFAULT_ATHLETE_WEIGHT_KG = 75.0
DEFAULT_BIKE_WEIGHT_KG = 8.0

# Realistic grade range; values outside are accepted but logged
REALISTIC_GRADE_MIN = -0.25
REALISTIC_GRADE_MAX = 0.25


class RaceType(str, Enum):
    """
    Standard triathlon distances.

    Used in:
    - Triathlon wizard input (race selection)
    - Race catalog lookups (distances, transitions, fatigue)
    """
    SPRINT = "sprint"
    OLYMPIC = "olympic"
    HALF = "half"       # 70.3
    FULL = "full"       # Ironman


class WaterType(str, Enum):
    """Swim environment."""
    POOL = "pool"
    OPEN_WATER = "open_water"


class OpenWaterType(str, Enum):
    """Open-water body."""
    SEA = "sea"
    LAKE = "lake"


class SwellLevel(str, Enum):
    """Sea swell during the swim."""
    NONE = "none"
    LIGHT = "light"
    MODERATE = "moderate"

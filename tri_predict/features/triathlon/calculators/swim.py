"""
Swim Time Calculator.

Projects a pool test pace onto the race distance and applies
environment factors (open water, sea, swell, wetsuit).
"""

from types import MappingProxyType
from typing import List, Mapping

from tri_predict.features.triathlon.models import SwimData, LegResult
from tri_predict.shared.constants import WaterType, OpenWaterType, SwellLevel
from tri_predict.shared.exceptions import IncompleteProfileError, InvalidInputError


# =============================================================================
# Swim Environment Factors
# =============================================================================
# Multipliers on projected time (1.0 = pool reference)

WATER_TYPE_FACTORS: Mapping[WaterType, float] = MappingProxyType({
    WaterType.POOL: 1.0,
    WaterType.OPEN_WATER: 1.05,     # Sighting, no walls to push off
})

OPEN_WATER_FACTORS: Mapping[OpenWaterType, float] = MappingProxyType({
    OpenWaterType.LAKE: 1.0,
    OpenWaterType.SEA: 1.03,        # Currents, salt
})

SWELL_FACTORS: Mapping[SwellLevel, float] = MappingProxyType({
    SwellLevel.NONE: 1.0,
    SwellLevel.LIGHT: 1.02,
    SwellLevel.MODERATE: 1.05,
})

WETSUIT_FACTOR = 0.95               # Extra buoyancy


def _percent(factor: float) -> str:
    pct = round((factor - 1) * 100)
    return f"+{pct}%" if pct >= 0 else f"{pct}%"


def swim_pace_per_100m(data: SwimData) -> float:
    """Test pace in seconds per 100m."""
    return data.base_time_s / data.base_distance_m * 100


def calculate_swim_time(data: SwimData, race_distance_m: float) -> LegResult:
    """
    Calculate swim leg time.

    Args:
        data: Test result and environment
        race_distance_m: Swim distance when data.race_distance_m is not set

    Returns:
        LegResult with time and applied factors

    Raises:
        IncompleteProfileError: Missing base test time or distance
        InvalidInputError: Non-positive test or race values
    """
    if data.base_time_s is None or data.base_distance_m is None:
        raise IncompleteProfileError("Swim base test time and distance are required")
    if data.base_time_s <= 0 or data.base_distance_m <= 0:
        raise InvalidInputError("Swim base test time and distance must be > 0")

    distance = data.race_distance_m if data.race_distance_m is not None else race_distance_m
    if distance <= 0:
        raise InvalidInputError(f"Swim distance must be > 0, got {distance}")

    factors: List[str] = []
    time_s = swim_pace_per_100m(data) * distance / 100

    water_type = WaterType(data.water_type)
    if water_type == WaterType.OPEN_WATER:
        factor = WATER_TYPE_FACTORS[water_type]
        time_s *= factor
        factors.append(f"{_percent(factor)} open water")

        if data.open_water_type is not None and OpenWaterType(data.open_water_type) == OpenWaterType.SEA:
            factor = OPEN_WATER_FACTORS[OpenWaterType.SEA]
            time_s *= factor
            factors.append(f"{_percent(factor)} sea")

            swell = SwellLevel(data.swell)
            if swell != SwellLevel.NONE:
                factor = SWELL_FACTORS[swell]
                time_s *= factor
                factors.append(f"{_percent(factor)} {swell.value} swell")

        if data.wetsuit:
            time_s *= WETSUIT_FACTOR
            factors.append(f"{_percent(WETSUIT_FACTOR)} wetsuit")
    else:
        factors.append("Pool (no adjustments)")

    return LegResult(time_s=time_s, factors=factors)

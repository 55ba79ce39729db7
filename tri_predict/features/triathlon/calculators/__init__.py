"""
Triathlon leg calculators.

Components:
- calculate_swim_time: Pace projection with water factors
- calculate_bike_time: Course synthesis + bike race predictor
- calculate_run_time: Riegel projection with zone and fatigue factors
"""

from .swim import (
    calculate_swim_time,
    swim_pace_per_100m,
    WATER_TYPE_FACTORS,
    OPEN_WATER_FACTORS,
    SWELL_FACTORS,
    WETSUIT_FACTOR,
)
from .bike import calculate_bike_time, build_bike_inputs, synthesize_course
from .run import calculate_run_time, RUN_ZONE_PACE_FACTORS, RIEGEL_EXPONENT, RunZone

__all__ = [
    # Swim
    "calculate_swim_time",
    "swim_pace_per_100m",
    "WATER_TYPE_FACTORS",
    "OPEN_WATER_FACTORS",
    "SWELL_FACTORS",
    "WETSUIT_FACTOR",
    # Bike
    "calculate_bike_time",
    "build_bike_inputs",
    "synthesize_course",
    # Run
    "calculate_run_time",
    "RUN_ZONE_PACE_FACTORS",
    "RIEGEL_EXPONENT",
    "RunZone",
]

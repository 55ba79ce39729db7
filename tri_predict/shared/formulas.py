"""
Mathematical formulas for race time calculations.

These formulas are used by different calculators across the application.
Centralizing them here eliminates duplication and ensures consistency.
"""

import math

from tri_predict.shared.constants import (
    GRAVITY,
    RHO_SEA_LEVEL,
    TEMP_REFERENCE_K,
    ATMOSPHERE_SCALE_HEIGHT_M,
    SEA_LEVEL_PRESSURE_PA,
    VAPOUR_DENSITY_FACTOR,
    TETENS_OFFSET_C,
)


def air_density(
    temperature_c: float,
    altitude_m: float = 0.0,
    relative_humidity: float = 0.0
) -> float:
    """
    Estimate air density from temperature, altitude and humidity.

    Formula: rho = 1.225 * (273.15 / T) * exp(-h / 8435) * (1 - 0.378 * e / p)

    Args:
        temperature_c: Air temperature in °C
        altitude_m: Altitude above sea level in meters
        relative_humidity: Relative humidity as fraction (0.6 = 60%)

    Returns:
        Density in kg/m^3

    Notes:
        - Dry air (humidity 0) reduces to the temperature/altitude model
        - Vapour pressure e uses the Tetens saturation formula
        - Humid air is lighter than dry air at the same pressure
    """
    temp_kelvin = temperature_c + TEMP_REFERENCE_K
    altitude_factor = math.exp(-altitude_m / ATMOSPHERE_SCALE_HEIGHT_M)
    rho = RHO_SEA_LEVEL * (TEMP_REFERENCE_K / temp_kelvin) * altitude_factor

    if relative_humidity > 0:
        saturation_pa = 610.78 * 10 ** (7.5 * temperature_c / (temperature_c + TETENS_OFFSET_C))
        vapour_pa = relative_humidity * saturation_pa
        pressure_pa = SEA_LEVEL_PRESSURE_PA * altitude_factor
        rho *= 1 - VAPOUR_DENSITY_FACTOR * vapour_pa / pressure_pa

    return rho


def aerodynamic_power(
    velocity_ms: float,
    air_density_kg_m3: float,
    cda_m2: float,
    headwind_ms: float = 0.0
) -> float:
    """
    Power spent against air drag.

    Formula: P = 0.5 * rho * CdA * (v + w) * |v + w| * v

    Drag acts on apparent airspeed (v + w) but the rider only pays for it
    over ground speed v. A tailwind stronger than v pushes the rider, so
    the result turns negative.
    """
    airspeed = velocity_ms + headwind_ms
    return 0.5 * air_density_kg_m3 * cda_m2 * airspeed * abs(airspeed) * velocity_ms


def rolling_resistance_power(velocity_ms: float, mass_kg: float, crr: float) -> float:
    """
    Power spent against tyre rolling resistance.

    Formula: P = Crr * m * g * v
    """
    return crr * mass_kg * GRAVITY * velocity_ms


def gravity_power(velocity_ms: float, mass_kg: float, grade: float) -> float:
    """
    Power spent lifting the rider (negative on descents).

    Formula: P = m * g * grade * v

    Args:
        grade: Slope as decimal (0.05 = 5% uphill)
    """
    return mass_kg * GRAVITY * grade * velocity_ms


def required_power(
    velocity_ms: float,
    mass_kg: float,
    grade: float,
    air_density_kg_m3: float,
    cda_m2: float,
    crr: float,
    headwind_ms: float = 0.0
) -> float:
    """
    Total power needed to hold a steady velocity.

    Sum of aerodynamic, rolling and gravity components. Strictly increasing
    in velocity once drag dominates, which the velocity solver relies on.
    """
    return (
        aerodynamic_power(velocity_ms, air_density_kg_m3, cda_m2, headwind_ms)
        + rolling_resistance_power(velocity_ms, mass_kg, crr)
        + gravity_power(velocity_ms, mass_kg, grade)
    )


def riegel_time(base_time_s: float, base_distance: float, target_distance: float,
                exponent: float = 1.06) -> float:
    """
    Project a race time to another distance using Riegel's formula (1977).

    Formula: T2 = T1 * (D2 / D1) ^ 1.06

    Distances only need to share a unit.
    """
    return base_time_s * (target_distance / base_distance) ** exponent

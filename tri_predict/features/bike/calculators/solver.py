"""
Velocity Solver.

Finds the steady-state velocity at which a rider's power exactly balances
aerodynamic drag, rolling resistance and gravity on one homogeneous
segment.

The required-power curve P(v) starts at 0 for v = 0 and grows without
bound (drag ~ v^3), so f(v) = P(v) - power is negative at 0 and positive
for large v. Bisection on [0, v_max] therefore always brackets the root;
v_max is doubled until f(v_max) >= 0.

References:
- Martin et al. (1998) - Validation of a mathematical model for road
  cycling power. J Appl Biomech 14:276-291
"""

from dataclasses import dataclass
import logging
import math

from tri_predict.features.bike.models import (
    AthleteProfile,
    EnvironmentConditions,
    DEFAULT_CONDITIONS,
)
from tri_predict.shared.constants import TEMP_REFERENCE_K, TETENS_OFFSET_C
from tri_predict.shared.exceptions import InvalidInputError
from tri_predict.shared.formulas import required_power

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverConfig:
    """Iteration and tolerance budget for the velocity solver."""
    max_iterations: int = 100
    tolerance_w: float = 1e-4           # |f(v)| accepted as converged
    velocity_tolerance: float = 1e-6    # Bracket width accepted as converged
    initial_v_max: float = 30.0         # m/s (108 km/h)
    max_bracket_expansions: int = 20
    min_velocity: float = 0.1           # m/s, floor on returned velocity

    @classmethod
    def from_settings(cls, settings) -> "SolverConfig":
        """Build the budget from application settings."""
        return cls(
            max_iterations=settings.solver_max_iterations,
            tolerance_w=settings.solver_tolerance_w,
            velocity_tolerance=settings.solver_velocity_tolerance,
            initial_v_max=settings.solver_initial_v_max,
            min_velocity=settings.solver_min_velocity,
        )


DEFAULT_SOLVER_CONFIG = SolverConfig()


@dataclass(frozen=True)
class VelocitySolution:
    """Solver outcome with convergence diagnostics."""
    velocity_ms: float
    residual_w: float       # required_power(v) - power at the returned v
    iterations: int
    converged: bool


def _validate_climate(conditions: EnvironmentConditions) -> None:
    temperature = conditions.temperature_c
    humidity = conditions.relative_humidity
    if not math.isfinite(temperature) or temperature <= -TEMP_REFERENCE_K:
        raise InvalidInputError(
            f"Temperature must be above absolute zero (-273.15 °C), got {temperature}"
        )
    if not math.isfinite(conditions.altitude_m):
        raise InvalidInputError(f"Altitude must be finite, got {conditions.altitude_m}")
    if not 0 <= humidity <= 1:
        raise InvalidInputError(f"Relative humidity must be in [0, 1], got {humidity}")
    # Tetens vapour pressure is undefined at and below -237.3 °C
    if humidity > 0 and temperature <= -TETENS_OFFSET_C:
        raise InvalidInputError(
            f"Temperature must be above -{TETENS_OFFSET_C} °C with humidity, got {temperature}"
        )


def validate_inputs(
    power: float,
    profile: AthleteProfile,
    grade: float,
    conditions: EnvironmentConditions
) -> float:
    """
    Check solver inputs before any iteration.

    Returns:
        Effective air density (kg/m^3)

    Raises:
        InvalidInputError: On non-positive power/mass/CdA/density,
            negative Crr, non-finite grade/wind, or a climate the
            density estimate cannot handle
    """
    if not math.isfinite(power) or power <= 0:
        raise InvalidInputError(f"Power must be > 0, got {power}")
    if not math.isfinite(profile.mass_kg) or profile.mass_kg <= 0:
        raise InvalidInputError(f"Mass must be > 0, got {profile.mass_kg}")
    if not math.isfinite(profile.cda_m2) or profile.cda_m2 <= 0:
        raise InvalidInputError(f"CdA must be > 0, got {profile.cda_m2}")
    if not math.isfinite(profile.crr) or profile.crr < 0:
        raise InvalidInputError(f"Crr must be >= 0, got {profile.crr}")
    if not math.isfinite(grade):
        raise InvalidInputError(f"Grade must be finite, got {grade}")
    if not math.isfinite(conditions.headwind_ms):
        raise InvalidInputError(f"Wind must be finite, got {conditions.headwind_ms}")
    if conditions.air_density is None:
        _validate_climate(conditions)

    rho = conditions.effective_air_density
    if not math.isfinite(rho) or rho <= 0:
        raise InvalidInputError(f"Air density must be > 0, got {rho}")
    return rho


def solve_velocity_detailed(
    power: float,
    profile: AthleteProfile,
    grade: float,
    conditions: EnvironmentConditions = DEFAULT_CONDITIONS,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> VelocitySolution:
    """
    Solve required_power(v) = power by bisection.

    Args:
        power: Power delivered to the wheel (W)
        profile: Mass, CdA and Crr
        grade: Slope as decimal (positive = uphill)
        conditions: Air density and wind
        config: Iteration/tolerance budget

    Returns:
        VelocitySolution. Hitting the iteration cap returns the best
        estimate with converged=False instead of raising.
    """
    rho = validate_inputs(power, profile, grade, conditions)

    def f(v: float) -> float:
        return required_power(
            v, profile.mass_kg, grade, rho,
            profile.cda_m2, profile.crr, conditions.headwind_ms
        ) - power

    lo = 0.0
    hi = config.initial_v_max
    expansions = 0
    while f(hi) < 0 and expansions < config.max_bracket_expansions:
        lo = hi
        hi *= 2
        expansions += 1

    iterations = 0
    mid = (lo + hi) / 2
    residual = f(mid)
    converged = False

    while iterations < config.max_iterations:
        iterations += 1
        mid = (lo + hi) / 2
        residual = f(mid)

        if abs(residual) < config.tolerance_w or (hi - lo) < config.velocity_tolerance:
            converged = True
            break

        if residual < 0:
            # Not enough resistance yet: go faster
            lo = mid
        else:
            hi = mid

    if not converged:
        logger.warning(
            "Velocity solver hit iteration cap (%d): v=%.6f m/s, residual=%.3g W",
            config.max_iterations, mid, residual
        )

    velocity = mid
    if velocity < config.min_velocity:
        velocity = config.min_velocity
        residual = f(velocity)

    return VelocitySolution(
        velocity_ms=velocity,
        residual_w=residual,
        iterations=iterations,
        converged=converged,
    )


def solve_velocity(
    power: float,
    profile: AthleteProfile,
    grade: float,
    conditions: EnvironmentConditions = DEFAULT_CONDITIONS,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> float:
    """
    Steady-state velocity (m/s) for the given power on a constant grade.

    See solve_velocity_detailed for arguments.
    """
    return solve_velocity_detailed(power, profile, grade, conditions, config).velocity_ms

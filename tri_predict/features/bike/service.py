"""
Bike Race Service

Walks an ordered course, solves each segment with the velocity solver
and aggregates distance and time into a BikeRacePrediction.

This is the main entry point for bike leg predictions.
"""

import logging
from typing import List, Optional, Sequence

from tri_predict.features.bike.calculators.solver import (
    SolverConfig,
    DEFAULT_SOLVER_CONFIG,
    solve_velocity,
)
from tri_predict.features.bike.models import (
    AthleteProfile,
    EnvironmentConditions,
    RaceSegment,
    SegmentResult,
    BikeRacePrediction,
    CourseStats,
    DEFAULT_CONDITIONS,
)
from tri_predict.shared.constants import REALISTIC_GRADE_MIN, REALISTIC_GRADE_MAX
from tri_predict.shared.exceptions import EmptyCourseError, InvalidInputError
from tri_predict.shared.formulas import required_power

logger = logging.getLogger(__name__)


def calculate_course_stats(segments: Sequence[RaceSegment]) -> CourseStats:
    """
    Total distance and elevation gain (climbs only) of a course.
    """
    total_distance = 0.0
    total_gain = 0.0

    for segment in segments:
        total_distance += segment.distance_m
        if segment.elevation_change_m > 0:
            total_gain += segment.elevation_change_m

    return CourseStats(
        total_distance_m=total_distance,
        total_elevation_gain_m=total_gain,
    )


def validate_course(segments: Optional[Sequence[RaceSegment]]) -> bool:
    """True if the course has at least one segment and all distances are > 0."""
    if not segments:
        return False
    return all(s.distance_m > 0 for s in segments)


def _solve_segment(
    index: int,
    segment: RaceSegment,
    profile: AthleteProfile,
    race_conditions: EnvironmentConditions,
    config: SolverConfig
) -> SegmentResult:
    conditions = segment.conditions or race_conditions

    if not segment.distance_m > 0:
        raise InvalidInputError(
            f"Distance must be > 0, got {segment.distance_m}", segment_index=index
        )
    efficiency = conditions.drivetrain_efficiency
    if not 0 < efficiency <= 1:
        raise InvalidInputError(
            f"Drivetrain efficiency must be in (0, 1], got {efficiency}",
            segment_index=index
        )
    if not REALISTIC_GRADE_MIN <= segment.grade <= REALISTIC_GRADE_MAX:
        logger.debug(f"Segment {index}: unusual grade {segment.grade:.3f}")

    wheel_power = profile.power_w * efficiency
    try:
        velocity = solve_velocity(wheel_power, profile, segment.grade, conditions, config)
    except InvalidInputError as e:
        raise InvalidInputError(str(e), segment_index=index) from e

    power = required_power(
        velocity,
        profile.mass_kg,
        segment.grade,
        conditions.effective_air_density,
        profile.cda_m2,
        profile.crr,
        conditions.headwind_ms,
    )

    return SegmentResult(
        index=index,
        distance_m=segment.distance_m,
        grade=segment.grade,
        velocity_ms=velocity,
        time_s=segment.distance_m / velocity,
        power_w=power,
    )


def predict_race_time(
    segments: Sequence[RaceSegment],
    profile: AthleteProfile,
    conditions: EnvironmentConditions = DEFAULT_CONDITIONS,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> BikeRacePrediction:
    """
    Predict bike leg time over an ordered course.

    Args:
        segments: Ordered course segments
        profile: Athlete mass, sustained power, CdA, Crr
        conditions: Race-wide conditions (segments may override)
        config: Solver budget

    Returns:
        BikeRacePrediction with totals and per-segment results

    Raises:
        EmptyCourseError: No segments
        InvalidInputError: Any segment fails; segment_index tells which
    """
    if not segments:
        raise EmptyCourseError("Course must have at least one segment")

    results: List[SegmentResult] = []
    total_time = 0.0
    total_distance = 0.0
    total_energy = 0.0  # Joules

    for i, segment in enumerate(segments):
        result = _solve_segment(i, segment, profile, conditions, config)
        results.append(result)
        total_time += result.time_s
        total_distance += result.distance_m
        total_energy += result.power_w * result.time_s

    stats = calculate_course_stats(segments)

    logger.debug(
        f"Bike prediction: {len(results)} segments, {total_distance:.0f}m "
        f"in {total_time:.1f}s"
    )

    return BikeRacePrediction(
        total_time_s=total_time,
        total_distance_m=total_distance,
        average_speed_ms=total_distance / total_time,
        average_power_w=total_energy / total_time,
        total_elevation_gain_m=stats.total_elevation_gain_m,
        segments=results,
    )


class BikeRacePredictor:
    """
    Bike leg predictor bound to one athlete and race-wide conditions.

    Example usage:
        predictor = BikeRacePredictor(
            AthleteProfile(mass_kg=83, power_w=220),
            EnvironmentConditions(temperature_c=28, headwind_ms=2),
        )
        prediction = predictor.predict([RaceSegment(40000, 0.0)])
    """

    def __init__(
        self,
        profile: AthleteProfile,
        conditions: EnvironmentConditions = DEFAULT_CONDITIONS,
        config: SolverConfig = DEFAULT_SOLVER_CONFIG,
    ):
        self.profile = profile
        self.conditions = conditions
        self.config = config

    def predict(self, segments: Sequence[RaceSegment]) -> BikeRacePrediction:
        """Predict time over a course."""
        return predict_race_time(segments, self.profile, self.conditions, self.config)

    def velocity_at_grade(self, grade: float) -> float:
        """Steady velocity (m/s) on a constant grade under race conditions."""
        wheel_power = self.profile.power_w * self.conditions.drivetrain_efficiency
        return solve_velocity(wheel_power, self.profile, grade, self.conditions, self.config)

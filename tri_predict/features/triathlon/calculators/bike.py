"""
Bike leg for triathlon predictions.

Resolves the wizard's bike inputs into a course and an athlete profile,
then delegates to the bike race predictor.
"""

import logging
from typing import List, Tuple

from tri_predict.features.bike.calculators.solver import SolverConfig, DEFAULT_SOLVER_CONFIG
from tri_predict.features.bike.models import (
    AthleteProfile,
    EnvironmentConditions,
    RaceSegment,
    BikeRacePrediction,
)
from tri_predict.features.bike.service import predict_race_time
from tri_predict.features.triathlon.models import BikeData, LegResult
from tri_predict.shared.constants import DEFAULT_CDA_M2
from tri_predict.shared.exceptions import IncompleteProfileError, InvalidInputError

logger = logging.getLogger(__name__)


# Rolling course model: share of distance, grade multiplier of the mean climb
ROLLING_COURSE_PROFILE = (
    (0.5, 0.0),     # Flat
    (0.3, 2.0),     # Climbs at twice the mean grade
    (0.2, -1.0),    # Descents
)


def synthesize_course(distance_m: float, elevation_gain_m: float = 0.0) -> List[RaceSegment]:
    """
    Default course when no segment list is supplied.

    Args:
        distance_m: Bike distance
        elevation_gain_m: Total climbing; 0 gives one flat segment

    Returns:
        Ordered list of segments covering distance_m
    """
    if distance_m <= 0:
        raise InvalidInputError(f"Bike distance must be > 0, got {distance_m}")
    if elevation_gain_m <= 0:
        return [RaceSegment(distance_m=distance_m, grade=0.0)]

    mean_grade = elevation_gain_m / distance_m
    return [
        RaceSegment(distance_m=distance_m * share, grade=mean_grade * multiplier)
        for share, multiplier in ROLLING_COURSE_PROFILE
    ]


def build_bike_inputs(
    data: BikeData,
    race_distance_m: float
) -> Tuple[AthleteProfile, EnvironmentConditions, List[RaceSegment]]:
    """
    Turn wizard bike data into solver inputs.

    Raises:
        IncompleteProfileError: FTP missing
        InvalidInputError: FTP share out of (0, 100]
    """
    if data.ftp_w is None:
        raise IncompleteProfileError("Bike FTP is required")
    if not 0 < data.ftp_percentage <= 100:
        raise InvalidInputError(
            f"FTP percentage must be in (0, 100], got {data.ftp_percentage}"
        )

    profile = AthleteProfile.from_ftp(
        ftp_w=data.ftp_w,
        ftp_percentage=data.ftp_percentage,
        athlete_weight_kg=data.athlete_weight_kg,
        bike_weight_kg=data.bike_weight_kg,
        cda_m2=data.cda_m2,
        crr=data.crr,
    )
    conditions = EnvironmentConditions(
        temperature_c=data.temperature_c,
        altitude_m=data.altitude_m,
        headwind_ms=data.headwind_ms,
    )

    if data.segments is not None:
        segments = list(data.segments)
    else:
        distance = data.distance_m if data.distance_m is not None else race_distance_m
        segments = synthesize_course(distance, data.elevation_gain_m)
        logger.debug(f"Synthesized {len(segments)}-segment course over {distance:.0f}m")

    return profile, conditions, segments


def calculate_bike_time(
    data: BikeData,
    race_distance_m: float,
    config: SolverConfig = DEFAULT_SOLVER_CONFIG
) -> Tuple[LegResult, BikeRacePrediction]:
    """
    Calculate bike leg time.

    Args:
        data: Wizard bike inputs
        race_distance_m: Bike distance when neither segments nor
            data.distance_m are given

    Returns:
        (LegResult, full BikeRacePrediction)
    """
    profile, conditions, segments = build_bike_inputs(data, race_distance_m)
    prediction = predict_race_time(segments, profile, conditions, config)

    factors = [
        f"{data.ftp_percentage:g}% of FTP ({round(profile.power_w)}W)",
        f"Elevation gain: {round(prediction.total_elevation_gain_m)}m",
    ]
    if data.cda_m2 is not None and data.cda_m2 != DEFAULT_CDA_M2:
        factors.append(f"CdA: {data.cda_m2}")
    if data.headwind_ms:
        sign = "+" if data.headwind_ms > 0 else ""
        factors.append(f"Wind: {sign}{data.headwind_ms} m/s")

    return LegResult(time_s=prediction.total_time_s, factors=factors), prediction

"""
Bike leg prediction module.

Usage:
    from tri_predict.features.bike import predict_race_time, AthleteProfile, RaceSegment
    from tri_predict.features.bike.calculators import solve_velocity

Components:
- solve_velocity: Power-balance velocity solver
- predict_race_time: Segment aggregator
- BikeRacePredictor: Predictor bound to one athlete
"""

from .models import (
    AthleteProfile,
    EnvironmentConditions,
    RaceSegment,
    SegmentResult,
    SegmentType,
    BikeRacePrediction,
    CourseStats,
    DEFAULT_CONDITIONS,
)
from .schemas import BikePredictRequest, BikePredictionResponse
from .service import (
    BikeRacePredictor,
    predict_race_time,
    calculate_course_stats,
    validate_course,
)

__all__ = [
    # Models
    "AthleteProfile",
    "EnvironmentConditions",
    "RaceSegment",
    "SegmentResult",
    "SegmentType",
    "BikeRacePrediction",
    "CourseStats",
    "DEFAULT_CONDITIONS",
    # Schemas
    "BikePredictRequest",
    "BikePredictionResponse",
    # Service
    "BikeRacePredictor",
    "predict_race_time",
    "calculate_course_stats",
    "validate_course",
]

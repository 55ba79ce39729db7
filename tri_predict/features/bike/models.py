"""
Core types for bike leg prediction.

Immutable dataclasses only. Inputs are supplied once per prediction
request and results are never mutated after creation.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from tri_predict.shared.constants import (
    DEFAULT_CDA_M2,
    DEFAULT_CRR,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_DRIVETRAIN_EFFICIENCY,
)
from tri_predict.shared.formulas import air_density


class SegmentType(str, Enum):
    """Type of course segment."""
    ASCENT = "ascent"
    DESCENT = "descent"
    FLAT = "flat"


# Grades within +/- this fraction count as flat
FLAT_GRADE_THRESHOLD = 0.01


@dataclass(frozen=True)
class AthleteProfile:
    """
    Physical and performance attributes used by the velocity solver.

    mass_kg is rider and bike combined.
    """
    mass_kg: float
    power_w: float
    cda_m2: float = DEFAULT_CDA_M2
    crr: float = DEFAULT_CRR

    @classmethod
    def from_ftp(
        cls,
        ftp_w: float,
        ftp_percentage: float,
        athlete_weight_kg: float,
        bike_weight_kg: float,
        cda_m2: Optional[float] = None,
        crr: Optional[float] = None,
    ) -> "AthleteProfile":
        """
        Build a profile from FTP and the share of it held in the race.

        Args:
            ftp_w: Functional threshold power in watts
            ftp_percentage: Percent of FTP to sustain (0-100]
            athlete_weight_kg: Rider weight
            bike_weight_kg: Bike weight
        """
        return cls(
            mass_kg=athlete_weight_kg + bike_weight_kg,
            power_w=ftp_w * ftp_percentage / 100,
            cda_m2=DEFAULT_CDA_M2 if cda_m2 is None else cda_m2,
            crr=DEFAULT_CRR if crr is None else crr,
        )


@dataclass(frozen=True)
class EnvironmentConditions:
    """
    Ambient factors affecting drag.

    Wind is a scalar component along the direction of travel:
    positive = headwind, negative = tailwind. air_density, when given,
    overrides the temperature/altitude/humidity estimate.
    """
    temperature_c: float = DEFAULT_TEMPERATURE_C
    altitude_m: float = 0.0
    relative_humidity: float = 0.0
    air_density: Optional[float] = None
    headwind_ms: float = 0.0
    drivetrain_efficiency: float = DEFAULT_DRIVETRAIN_EFFICIENCY

    @property
    def effective_air_density(self) -> float:
        """Air density in kg/m^3."""
        if self.air_density is not None:
            return self.air_density
        return air_density(self.temperature_c, self.altitude_m, self.relative_humidity)


DEFAULT_CONDITIONS = EnvironmentConditions()


@dataclass(frozen=True)
class RaceSegment:
    """
    One homogeneous stretch of course.

    grade is a signed fraction (0.05 = 5% uphill). conditions overrides
    the race-wide conditions for this segment only.
    """
    distance_m: float
    grade: float = 0.0
    conditions: Optional[EnvironmentConditions] = None

    @property
    def elevation_change_m(self) -> float:
        """Net elevation change (positive = up, negative = down)."""
        return self.distance_m * self.grade

    @property
    def segment_type(self) -> SegmentType:
        if self.grade > FLAT_GRADE_THRESHOLD:
            return SegmentType.ASCENT
        if self.grade < -FLAT_GRADE_THRESHOLD:
            return SegmentType.DESCENT
        return SegmentType.FLAT


@dataclass(frozen=True)
class SegmentResult:
    """Solved steady state for one segment."""
    index: int
    distance_m: float
    grade: float
    velocity_ms: float
    time_s: float
    power_w: float  # Resistive power at velocity_ms

    @property
    def velocity_kmh(self) -> float:
        return self.velocity_ms * 3.6


@dataclass(frozen=True)
class BikeRacePrediction:
    """Complete bike leg prediction with per-segment telemetry."""
    total_time_s: float
    total_distance_m: float
    average_speed_ms: float
    average_power_w: float
    total_elevation_gain_m: float
    segments: List[SegmentResult] = field(default_factory=list)

    @property
    def average_speed_kmh(self) -> float:
        return self.average_speed_ms * 3.6

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "total_time_s": round(self.total_time_s, 2),
            "total_distance_m": round(self.total_distance_m, 1),
            "average_speed_ms": round(self.average_speed_ms, 3),
            "average_speed_kmh": round(self.average_speed_kmh, 2),
            "average_power_w": round(self.average_power_w, 1),
            "total_elevation_gain_m": round(self.total_elevation_gain_m, 0),
            "segments": [
                {
                    "index": s.index,
                    "distance_m": round(s.distance_m, 1),
                    "grade": s.grade,
                    "velocity_ms": round(s.velocity_ms, 3),
                    "velocity_kmh": round(s.velocity_kmh, 2),
                    "time_s": round(s.time_s, 2),
                    "power_w": round(s.power_w, 1),
                }
                for s in self.segments
            ],
        }


@dataclass(frozen=True)
class CourseStats:
    """Distance and climbing of a course."""
    total_distance_m: float
    total_elevation_gain_m: float

"""
Bike prediction schemas.

Pydantic schemas for API request/response serialization.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from tri_predict.shared.constants import (
    DEFAULT_CDA_M2,
    DEFAULT_CRR,
    DEFAULT_TEMPERATURE_C,
    DEFAULT_DRIVETRAIN_EFFICIENCY,
)
from tri_predict.features.bike.models import (
    AthleteProfile,
    EnvironmentConditions,
    RaceSegment,
)


class AthleteProfileSchema(BaseModel):
    """Rider + bike physical parameters."""
    mass_kg: float = Field(..., description="Rider + bike mass")
    power_w: float = Field(..., description="Sustained power")
    cda_m2: float = DEFAULT_CDA_M2
    crr: float = DEFAULT_CRR

    def to_model(self) -> AthleteProfile:
        return AthleteProfile(
            mass_kg=self.mass_kg,
            power_w=self.power_w,
            cda_m2=self.cda_m2,
            crr=self.crr,
        )


class ConditionsSchema(BaseModel):
    """Environment conditions."""
    temperature_c: float = Field(default=DEFAULT_TEMPERATURE_C, gt=-273.15)
    altitude_m: float = 0.0
    relative_humidity: float = Field(default=0.0, ge=0, le=1)
    air_density: Optional[float] = Field(default=None, description="Overrides estimate")
    headwind_ms: float = Field(default=0.0, description="Positive = headwind")
    drivetrain_efficiency: float = DEFAULT_DRIVETRAIN_EFFICIENCY

    def to_model(self) -> EnvironmentConditions:
        return EnvironmentConditions(
            temperature_c=self.temperature_c,
            altitude_m=self.altitude_m,
            relative_humidity=self.relative_humidity,
            air_density=self.air_density,
            headwind_ms=self.headwind_ms,
            drivetrain_efficiency=self.drivetrain_efficiency,
        )


class RaceSegmentSchema(BaseModel):
    """One course segment."""
    distance_m: float
    grade: float = Field(default=0.0, description="Decimal slope, 0.05 = 5%")
    conditions: Optional[ConditionsSchema] = None

    def to_model(self) -> RaceSegment:
        return RaceSegment(
            distance_m=self.distance_m,
            grade=self.grade,
            conditions=self.conditions.to_model() if self.conditions else None,
        )


class BikePredictRequest(BaseModel):
    """Request for bike leg prediction."""
    athlete: AthleteProfileSchema
    segments: List[RaceSegmentSchema]
    conditions: ConditionsSchema = Field(default_factory=ConditionsSchema)


class SegmentResultSchema(BaseModel):
    """Single segment result."""
    index: int
    distance_m: float
    grade: float
    velocity_ms: float
    velocity_kmh: float
    time_s: float
    power_w: float


class BikePredictionResponse(BaseModel):
    """Bike leg prediction result."""
    total_time_s: float
    total_time_formatted: str
    total_distance_m: float
    average_speed_ms: float
    average_speed_kmh: float
    average_speed_formatted: str
    average_power_w: float
    total_elevation_gain_m: float
    segments: List[SegmentResultSchema]

"""
Triathlon prediction schemas.

Pydantic schemas for API request/response serialization.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from tri_predict.features.bike.schemas import RaceSegmentSchema
from tri_predict.features.triathlon.models import (
    SwimData,
    BikeData,
    RunData,
    TriathlonWizardData,
)
from tri_predict.shared.constants import (
    RaceType,
    WaterType,
    OpenWaterType,
    SwellLevel,
    DEFAULT_ATHLETE_WEIGHT_KG,
    DEFAULT_BIKE_WEIGHT_KG,
    DEFAULT_TEMPERATURE_C,
)


class SwimInput(BaseModel):
    """Swim test and environment."""
    base_time_s: Optional[float] = None
    base_distance_m: Optional[float] = None
    race_distance_m: Optional[float] = None
    water_type: WaterType = WaterType.POOL
    open_water_type: Optional[OpenWaterType] = None
    swell: SwellLevel = SwellLevel.NONE
    wetsuit: bool = False

    def to_model(self) -> SwimData:
        return SwimData(**self.model_dump())


class BikeInput(BaseModel):
    """Bike power and course."""
    ftp_w: Optional[float] = None
    ftp_percentage: float = Field(default=100.0, gt=0, le=100)
    athlete_weight_kg: float = DEFAULT_ATHLETE_WEIGHT_KG
    bike_weight_kg: float = DEFAULT_BIKE_WEIGHT_KG
    cda_m2: Optional[float] = None
    crr: Optional[float] = None
    headwind_ms: float = 0.0
    temperature_c: float = Field(default=DEFAULT_TEMPERATURE_C, gt=-273.15)
    altitude_m: float = 0.0
    distance_m: Optional[float] = None
    elevation_gain_m: float = Field(default=0.0, ge=0)
    segments: Optional[List[RaceSegmentSchema]] = None

    def to_model(self) -> BikeData:
        fields = self.model_dump(exclude={"segments"})
        segments = None
        if self.segments is not None:
            segments = tuple(s.to_model() for s in self.segments)
        return BikeData(**fields, segments=segments)


class RunInput(BaseModel):
    """Run test and target zone."""
    base_time_s: Optional[float] = None
    base_distance_m: Optional[float] = None
    race_distance_m: Optional[float] = None
    run_zone: int = Field(default=4, ge=1, le=5)

    def to_model(self) -> RunData:
        return RunData(**self.model_dump())


class TriathlonPredictRequest(BaseModel):
    """Request for full triathlon prediction."""
    race_type: RaceType = RaceType.OLYMPIC
    swim: Optional[SwimInput] = None
    bike: Optional[BikeInput] = None
    run: Optional[RunInput] = None
    t1_s: Optional[float] = Field(default=None, ge=0)
    t2_s: Optional[float] = Field(default=None, ge=0)

    def to_model(self) -> TriathlonWizardData:
        return TriathlonWizardData(
            swim=self.swim.to_model() if self.swim else None,
            bike=self.bike.to_model() if self.bike else None,
            run=self.run.to_model() if self.run else None,
            race_type=self.race_type,
            t1_s=self.t1_s,
            t2_s=self.t2_s,
        )


class LegResultSchema(BaseModel):
    """One discipline result."""
    time_s: float
    time_formatted: str
    factors: List[str]


class TriathlonPredictionResponse(BaseModel):
    """Full triathlon prediction."""
    race_type: RaceType
    race_type_label: str
    total_time_s: float
    total_time_formatted: str
    swim: LegResultSchema
    t1_s: float
    t1_formatted: str
    bike: LegResultSchema
    t2_s: float
    t2_formatted: str
    run: LegResultSchema


class RaceTypeInfo(BaseModel):
    """Catalog entry for one race type."""
    race_type: RaceType
    label: str
    swim_m: float
    bike_m: float
    run_m: float
    t1_s: float
    t2_s: float

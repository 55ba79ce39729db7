"""
Triathlon wizard inputs and prediction results.

Swim and run are pace-based (a recent test time over a known distance);
bike is power-based and reuses the bike leg predictor.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tri_predict.features.bike.models import BikeRacePrediction, RaceSegment
from tri_predict.shared.constants import (
    RaceType,
    WaterType,
    OpenWaterType,
    SwellLevel,
    DEFAULT_ATHLETE_WEIGHT_KG,
    DEFAULT_BIKE_WEIGHT_KG,
    DEFAULT_TEMPERATURE_C,
)


@dataclass(frozen=True)
class SwimData:
    """Swim test result and race environment."""
    base_time_s: Optional[float] = None
    base_distance_m: Optional[float] = None
    race_distance_m: Optional[float] = None     # None = race standard
    water_type: WaterType = WaterType.POOL
    open_water_type: Optional[OpenWaterType] = None
    swell: SwellLevel = SwellLevel.NONE
    wetsuit: bool = False


@dataclass(frozen=True)
class BikeData:
    """
    Bike inputs from the wizard.

    Course resolution: explicit segments win; otherwise distance_m (or the
    race standard) is modeled flat, or as a rolling course when
    elevation_gain_m is given.
    """
    ftp_w: Optional[float] = None
    ftp_percentage: float = 100.0
    athlete_weight_kg: float = DEFAULT_ATHLETE_WEIGHT_KG
    bike_weight_kg: float = DEFAULT_BIKE_WEIGHT_KG
    cda_m2: Optional[float] = None
    crr: Optional[float] = None
    headwind_ms: float = 0.0
    temperature_c: float = DEFAULT_TEMPERATURE_C
    altitude_m: float = 0.0
    distance_m: Optional[float] = None
    elevation_gain_m: float = 0.0
    segments: Optional[Tuple[RaceSegment, ...]] = None


@dataclass(frozen=True)
class RunData:
    """Run test result and target intensity."""
    base_time_s: Optional[float] = None
    base_distance_m: Optional[float] = None
    race_distance_m: Optional[float] = None     # None = race standard
    run_zone: int = 4                           # 4 = threshold


@dataclass(frozen=True)
class TriathlonWizardData:
    """All wizard inputs for one prediction."""
    swim: Optional[SwimData] = None
    bike: Optional[BikeData] = None
    run: Optional[RunData] = None
    race_type: RaceType = RaceType.OLYMPIC
    t1_s: Optional[float] = None    # None = race-type default
    t2_s: Optional[float] = None


@dataclass(frozen=True)
class LegResult:
    """Predicted time of one discipline plus the adjustments applied."""
    time_s: float
    factors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class TriathlonPrediction:
    """Full race prediction."""
    race_type: RaceType
    race_type_label: str
    swim: LegResult
    t1_s: float
    bike: LegResult
    t2_s: float
    run: LegResult
    total_time_s: float
    bike_prediction: Optional[BikeRacePrediction] = None

"""
Triathlon prediction module.

Usage:
    from tri_predict.features.triathlon import calculate_triathlon_prediction, TriathlonWizardData
    from tri_predict.features.triathlon.calculators import calculate_run_time

Components:
- calculate_triathlon_prediction: Main prediction entry point
- RACE_TYPES: Standard distances, transitions and fatigue per race type
"""

from .models import (
    SwimData,
    BikeData,
    RunData,
    TriathlonWizardData,
    LegResult,
    TriathlonPrediction,
)
from .races import (
    RACE_TYPES,
    RaceDistances,
    RaceTypeSpec,
    get_race_spec,
    get_race_type_name,
    get_race_distances,
)
from .schemas import TriathlonPredictRequest, TriathlonPredictionResponse
from .service import calculate_triathlon_prediction

__all__ = [
    # Models
    "SwimData",
    "BikeData",
    "RunData",
    "TriathlonWizardData",
    "LegResult",
    "TriathlonPrediction",
    # Race catalog
    "RACE_TYPES",
    "RaceDistances",
    "RaceTypeSpec",
    "get_race_spec",
    "get_race_type_name",
    "get_race_distances",
    # Schemas
    "TriathlonPredictRequest",
    "TriathlonPredictionResponse",
    # Service
    "calculate_triathlon_prediction",
]
